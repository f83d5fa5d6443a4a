"""SQS waiters, polling GetQueueUrl."""

from __future__ import annotations

from cloudwire.base.exceptions import HttpException, QueueNotFoundError
from cloudwire.base.response import Response
from cloudwire.base.waiter import Waiter


class QueueExistsWaiter(Waiter):
    """Succeeds once the queue URL resolves; a missing queue keeps it pending."""

    wait_delay = 5.0
    wait_max_attempts = 40

    def _extract_state(self, response: Response, exception: HttpException | None) -> str:
        if isinstance(exception, QueueNotFoundError):
            return self.STATE_PENDING
        if exception is not None:
            raise exception
        return self.STATE_SUCCESS
