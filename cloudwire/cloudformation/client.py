"""AWS CloudFormation client."""

from __future__ import annotations

from typing import Any

from cloudwire.base.client import QueryApi
from cloudwire.base.exceptions import (
    InsufficientCapabilitiesError,
    InvalidOperationError,
    LimitExceededError,
    StackAlreadyExistsError,
    TokenAlreadyExistsError,
)
from cloudwire.base.result import Result
from cloudwire.cloudformation.inputs import (
    CreateStackInput,
    DeleteStackInput,
    DescribeStackDriftDetectionStatusInput,
    DescribeStackEventsInput,
    DescribeStacksInput,
)
from cloudwire.cloudformation.results import (
    CreateStackOutput,
    DescribeStackDriftDetectionStatusOutput,
    DescribeStackEventsOutput,
    DescribeStacksOutput,
)


class CloudFormationClient(QueryApi):
    """CloudFormation bindings.

    Every operation accepts an input instance, a dict keyed by wire names, or
    keyword arguments, and returns a lazy result::

        client = CloudFormationClient({"region_name": "eu-west-1"})
        for stack in client.describe_stacks():
            print(stack.stack_name, stack.stack_status)
    """

    service = "cloudformation"
    endpoint_prefix = "cloudformation"
    _ERROR_MAP = {
        "AlreadyExistsException": StackAlreadyExistsError,
        "InsufficientCapabilitiesException": InsufficientCapabilitiesError,
        "TokenAlreadyExistsException": TokenAlreadyExistsError,
        "LimitExceededException": LimitExceededError,
        "InvalidOperationException": InvalidOperationError,
    }

    def create_stack(self, input: Any = None, /, **kwargs: Any) -> CreateStackOutput:
        """Create a stack from a template.

        Raises:
            StackAlreadyExistsError: A stack with this name exists.
            InsufficientCapabilitiesError: IAM resources were not acknowledged.
        """
        return self._call(CreateStackInput.create(input, **kwargs), CreateStackOutput)

    def delete_stack(self, input: Any = None, /, **kwargs: Any) -> Result:
        """Delete a stack. Deleting a missing stack is not an error."""
        return self._call(DeleteStackInput.create(input, **kwargs), Result)

    def describe_stacks(self, input: Any = None, /, **kwargs: Any) -> DescribeStacksOutput:
        """Describe one stack, or all stacks of the account (paginated)."""
        return self._call(DescribeStacksInput.create(input, **kwargs), DescribeStacksOutput)

    def describe_stack_events(
        self, input: Any = None, /, **kwargs: Any
    ) -> DescribeStackEventsOutput:
        return self._call(
            DescribeStackEventsInput.create(input, **kwargs), DescribeStackEventsOutput
        )

    def describe_stack_drift_detection_status(
        self, input: Any = None, /, **kwargs: Any
    ) -> DescribeStackDriftDetectionStatusOutput:
        return self._call(
            DescribeStackDriftDetectionStatusInput.create(input, **kwargs),
            DescribeStackDriftDetectionStatusOutput,
        )
