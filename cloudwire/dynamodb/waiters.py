"""DynamoDB waiters, polling DescribeTable."""

from __future__ import annotations

from cloudwire.base.exceptions import HttpException, ResourceNotFoundError
from cloudwire.base.response import Response
from cloudwire.base.waiter import Waiter
from cloudwire.dynamodb.enums import TableStatus


class TableExistsWaiter(Waiter):
    """Succeeds once the table is ``ACTIVE``; a missing table keeps it pending."""

    wait_delay = 20.0
    wait_max_attempts = 25

    def _extract_state(self, response: Response, exception: HttpException | None) -> str:
        if isinstance(exception, ResourceNotFoundError):
            return self.STATE_PENDING
        if exception is not None:
            raise exception
        table = response.to_json().get("Table") or {}
        if table.get("TableStatus") == TableStatus.ACTIVE.value:
            return self.STATE_SUCCESS
        return self.STATE_PENDING


class TableNotExistsWaiter(Waiter):
    """Succeeds once DescribeTable answers ``ResourceNotFoundException``."""

    wait_delay = 20.0
    wait_max_attempts = 25

    def _extract_state(self, response: Response, exception: HttpException | None) -> str:
        if isinstance(exception, ResourceNotFoundError):
            return self.STATE_SUCCESS
        if exception is not None:
            raise exception
        return self.STATE_PENDING
