"""Polling helpers that wait until a resource reaches a given state."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, ClassVar

from cloudwire.base.exceptions import HttpException, WaiterFailure
from cloudwire.base.logger import cw_logger
from cloudwire.base.response import Response
from cloudwire.base.shape import Input

if TYPE_CHECKING:
    from cloudwire.base.client import AbstractApi


class Waiter:
    """Base waiter.

    Subclasses implement :meth:`_extract_state`, mapping the current
    response (or the service error it produced) to one of the three states.
    """

    STATE_SUCCESS = "success"
    STATE_FAILURE = "failure"
    STATE_PENDING = "pending"

    wait_delay: ClassVar[float] = 5.0
    wait_max_attempts: ClassVar[int] = 20

    def __init__(self, response: Response, client: AbstractApi, input: Input) -> None:
        self._response = response
        self._client = client
        self._input = input
        self._state: str | None = None

    def _extract_state(self, response: Response, exception: HttpException | None) -> str:
        raise NotImplementedError

    def _resolve_state(self) -> str:
        if self._state is None:
            exception: HttpException | None = None
            try:
                self._response.resolve()
            except HttpException as e:
                exception = e
            self._state = self._extract_state(self._response, exception)
        return self._state

    def is_success(self) -> bool:
        return self._resolve_state() == self.STATE_SUCCESS

    def is_failure(self) -> bool:
        return self._resolve_state() == self.STATE_FAILURE

    def is_pending(self) -> bool:
        return self._resolve_state() == self.STATE_PENDING

    def wait(self, timeout: float | None = None, delay: float | None = None) -> bool:
        """Poll until the waiter succeeds.

        Args:
            timeout: Seconds to wait overall. Defaults to
                ``wait_delay * wait_max_attempts``.
            delay: Seconds between two polls. Defaults to ``wait_delay``.

        Returns:
            True on success, False if the timeout elapsed first.

        Raises:
            WaiterFailure: The resource reached a failure state.
        """
        delay = self.wait_delay if delay is None else delay
        if timeout is None:
            timeout = self.wait_delay * self.wait_max_attempts
        deadline = time.monotonic() + timeout
        while True:
            state = self._resolve_state()
            if state == self.STATE_SUCCESS:
                return True
            if state == self.STATE_FAILURE:
                raise WaiterFailure(
                    f"{type(self).__name__} reached a failure state for {self._response.operation}"
                )
            if time.monotonic() + delay > deadline:
                return False
            cw_logger.debug(
                f"{type(self).__name__} pending, polling again in {delay:.1f}s",
                service=self._client.service,
                operation=self._response.operation,
            )
            time.sleep(delay)
            self._response = self._client._get_response(
                self._input.request(), self._response.operation, self._input.region
            )
            self._state = None
