"""AWS CloudFormation bindings."""

from .client import CloudFormationClient
from .inputs import (
    CreateStackInput,
    DeleteStackInput,
    DescribeStackDriftDetectionStatusInput,
    DescribeStackEventsInput,
    DescribeStacksInput,
)
from .results import (
    CreateStackOutput,
    DescribeStackDriftDetectionStatusOutput,
    DescribeStackEventsOutput,
    DescribeStacksOutput,
)
from .value_objects import (
    Output,
    Parameter,
    RollbackConfiguration,
    RollbackTrigger,
    Stack,
    StackDriftInformation,
    StackEvent,
    Tag,
)

__all__ = [
    "CloudFormationClient",
    "CreateStackInput",
    "DeleteStackInput",
    "DescribeStackDriftDetectionStatusInput",
    "DescribeStackEventsInput",
    "DescribeStacksInput",
    "CreateStackOutput",
    "DescribeStackDriftDetectionStatusOutput",
    "DescribeStackEventsOutput",
    "DescribeStacksOutput",
    "Output",
    "Parameter",
    "RollbackConfiguration",
    "RollbackTrigger",
    "Stack",
    "StackDriftInformation",
    "StackEvent",
    "Tag",
]
