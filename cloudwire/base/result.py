"""
Lazy operation results and pagination.

A result wraps a :class:`~cloudwire.base.response.Response` and parses it
into its payload shape the first time an accessor needs it. Paginated
results iterate across pages, issuing the follow-up request of page N+1
before handing out the items of page N so both overlap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, ClassVar, Iterable, Iterator

from cloudwire.base import json_protocol, query_protocol
from cloudwire.base.exceptions import InvalidArgument
from cloudwire.base.response import Response
from cloudwire.base.shape import Input, Shape

if TYPE_CHECKING:
    from cloudwire.base.client import AbstractApi


class ResultField:
    """Accessor for one payload member, populating the result on first use.

    Args:
        default_factory: Called for an absent member (``list`` for top-level
            collections so callers can iterate without a None check).
    """

    def __init__(self, default_factory: Callable[[], Any] | None = None) -> None:
        self.default_factory = default_factory
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Result | None, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        obj._initialize()
        value = getattr(obj._data, self.name)
        if value is None and self.default_factory is not None:
            return self.default_factory()
        return value


class Result:
    """Base result; also the result of operations without a response payload."""

    _shape: ClassVar[type[Shape] | None] = None

    def __init__(
        self,
        response: Response,
        client: AbstractApi | None = None,
        input: Input | None = None,
    ) -> None:
        self._response = response
        self._client = client
        self._input = input
        self._data: Any = None
        self._initialized = False
        self._prefetches: dict[int, Result] = {}

    def _initialize(self) -> None:
        if self._initialized:
            return
        self._response.resolve()
        if self._shape is not None:
            self._data = self._populate_result(self._response)
        self._initialized = True

    def _populate_result(self, response: Response) -> Shape:
        raise NotImplementedError

    def resolve(self, timeout: float | None = None) -> bool:
        """Wait for the response; see :meth:`Response.resolve`."""
        if not self._response.resolve(timeout):
            return False
        self._initialize()
        return True

    def info(self) -> dict[str, Any]:
        """Status code, headers and request id of the response."""
        self._response.resolve()
        return self._response.info()

    def cancel(self) -> None:
        """Abandon this call and any page requested ahead of it."""
        for prefetch in list(self._prefetches.values()):
            prefetch.cancel()
        self._prefetches.clear()
        self._response.cancel()

    def to_dict(self) -> dict[str, Any]:
        """Payload of the current page keyed by wire names."""
        self._initialize()
        if self._data is None:
            return {}
        return self._data.model_dump(by_alias=True, exclude_none=True, mode="json")

    # --- Pagination ---

    def _register_prefetch(self, result: Result) -> None:
        self._prefetches[id(result)] = result

    def _unregister_prefetch(self, result: Result) -> None:
        self._prefetches.pop(id(result), None)

    def _paginate(
        self,
        items: Callable[[Any], Iterable[Any]],
        next_input: Callable[[Any], Input | None],
        operation: str,
    ) -> Iterator[Any]:
        """Iterate the items of this page and every following one.

        Args:
            items: Items of a populated page (reads ``page._data``).
            next_input: Input of the following page, or None on the last one.
            operation: Client method fetching a page.
        """
        if self._client is None:
            raise InvalidArgument("missing client injected in paginated result")
        if self._input is None:
            raise InvalidArgument("missing last request injected in paginated result")
        fetch = getattr(self._client, operation)
        prefetch = self._client.config.prefetch_pages
        page: Result = self
        next_page: Result | None = None
        try:
            while True:
                page._initialize()
                following = next_input(page._data)
                if following is not None and prefetch:
                    next_page = fetch(following)
                    self._register_prefetch(next_page)

                yield from items(page._data)

                if following is None:
                    break
                if next_page is None:
                    next_page = fetch(following)
                else:
                    self._unregister_prefetch(next_page)
                page, next_page = next_page, None
        finally:
            if next_page is not None:
                self._unregister_prefetch(next_page)
                next_page.cancel()


class QueryResult(Result):
    """Result of a query protocol operation (``<{Action}Result>`` payload)."""

    _wrapper: ClassVar[str] = ""

    def _populate_result(self, response: Response) -> Shape:
        return query_protocol.parse_result(response.content, self._wrapper, self._shape)


class JsonResult(Result):
    """Result of a JSON protocol operation."""

    def _populate_result(self, response: Response) -> Shape:
        return json_protocol.parse_result(response.content, self._shape)
