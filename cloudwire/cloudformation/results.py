"""CloudFormation operation results."""

from __future__ import annotations

from datetime import datetime
from typing import Iterator

from cloudwire.base.result import QueryResult, ResultField
from cloudwire.base.shape import Shape, member
from cloudwire.cloudformation.value_objects import Stack, StackEvent


class CreateStackOutput(QueryResult):
    """The output for a CreateStack action."""

    class _Payload(Shape):
        stack_id: str | None = member("StackId")

    _shape = _Payload
    _wrapper = "CreateStackResult"

    stack_id = ResultField()


class DescribeStacksOutput(QueryResult):
    """The output for a DescribeStacks action.

    Iterating the result yields every :class:`Stack`, following ``NextToken``
    across pages.
    """

    class _Payload(Shape):
        stacks: list[Stack] | None = member("Stacks")
        next_token: str | None = member("NextToken")

    _shape = _Payload
    _wrapper = "DescribeStacksResult"

    next_token = ResultField()

    def __iter__(self) -> Iterator[Stack]:
        return self.get_stacks()

    def get_stacks(self, current_page_only: bool = False) -> Iterator[Stack]:
        """Iterate the stacks.

        Args:
            current_page_only: When True, iterates over items of the current
                page. Otherwise also fetch items in the next pages.
        """
        if current_page_only:
            self._initialize()
            yield from self._data.stacks or []
            return
        yield from self._paginate(
            lambda page: page.stacks or [],
            lambda page: (
                self._input.model_copy(update={"next_token": page.next_token})
                if page.next_token
                else None
            ),
            "describe_stacks",
        )


class DescribeStackEventsOutput(QueryResult):
    """The output for a DescribeStackEvents action, newest event first."""

    class _Payload(Shape):
        stack_events: list[StackEvent] | None = member("StackEvents")
        next_token: str | None = member("NextToken")

    _shape = _Payload
    _wrapper = "DescribeStackEventsResult"

    next_token = ResultField()

    def __iter__(self) -> Iterator[StackEvent]:
        return self.get_stack_events()

    def get_stack_events(self, current_page_only: bool = False) -> Iterator[StackEvent]:
        if current_page_only:
            self._initialize()
            yield from self._data.stack_events or []
            return
        yield from self._paginate(
            lambda page: page.stack_events or [],
            lambda page: (
                self._input.model_copy(update={"next_token": page.next_token})
                if page.next_token
                else None
            ),
            "describe_stack_events",
        )


class DescribeStackDriftDetectionStatusOutput(QueryResult):
    class _Payload(Shape):
        stack_id: str | None = member("StackId")
        stack_drift_detection_id: str | None = member("StackDriftDetectionId")
        stack_drift_status: str | None = member("StackDriftStatus")
        detection_status: str | None = member("DetectionStatus")
        detection_status_reason: str | None = member("DetectionStatusReason")
        drifted_stack_resource_count: int | None = member("DriftedStackResourceCount")
        timestamp: datetime | None = member("Timestamp")

    _shape = _Payload
    _wrapper = "DescribeStackDriftDetectionStatusResult"

    stack_id = ResultField()
    stack_drift_detection_id = ResultField()
    stack_drift_status = ResultField()
    detection_status = ResultField()
    detection_status_reason = ResultField()
    drifted_stack_resource_count = ResultField()
    timestamp = ResultField()
