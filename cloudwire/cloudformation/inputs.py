"""CloudFormation operation inputs (query protocol, API version 2010-05-15)."""

from __future__ import annotations

from typing import ClassVar

from cloudwire.base.query_protocol import QueryInput
from cloudwire.base.shape import member
from cloudwire.cloudformation.value_objects import Parameter, RollbackConfiguration, Tag


class CloudFormationInput(QueryInput):
    version: ClassVar[str] = "2010-05-15"


class CreateStackInput(CloudFormationInput):
    """The input for CreateStack action."""

    action: ClassVar[str] = "CreateStack"

    stack_name: str | None = member("StackName", required=True)
    template_body: str | None = member("TemplateBody")
    template_url: str | None = member("TemplateURL")
    parameters: list[Parameter] | None = member("Parameters")
    disable_rollback: bool | None = member("DisableRollback")
    rollback_configuration: RollbackConfiguration | None = member("RollbackConfiguration")
    timeout_in_minutes: int | None = member("TimeoutInMinutes")
    notification_arns: list[str] | None = member("NotificationARNs")
    capabilities: list[str] | None = member("Capabilities")
    resource_types: list[str] | None = member("ResourceTypes")
    role_arn: str | None = member("RoleARN")
    on_failure: str | None = member("OnFailure")
    stack_policy_body: str | None = member("StackPolicyBody")
    stack_policy_url: str | None = member("StackPolicyURL")
    tags: list[Tag] | None = member("Tags")
    client_request_token: str | None = member("ClientRequestToken")
    enable_termination_protection: bool | None = member("EnableTerminationProtection")
    retain_except_on_create: bool | None = member("RetainExceptOnCreate")


class DeleteStackInput(CloudFormationInput):
    """The input for DeleteStack action."""

    action: ClassVar[str] = "DeleteStack"

    stack_name: str | None = member("StackName", required=True)
    retain_resources: list[str] | None = member("RetainResources")
    role_arn: str | None = member("RoleARN")
    client_request_token: str | None = member("ClientRequestToken")
    deletion_mode: str | None = member("DeletionMode")


class DescribeStacksInput(CloudFormationInput):
    """The input for DescribeStacks action.

    Without a stack name, every stack of the account (deleted ones included
    for 90 days) is described.
    """

    action: ClassVar[str] = "DescribeStacks"

    stack_name: str | None = member("StackName")
    next_token: str | None = member("NextToken")


class DescribeStackEventsInput(CloudFormationInput):
    """The input for DescribeStackEvents action."""

    action: ClassVar[str] = "DescribeStackEvents"

    stack_name: str | None = member("StackName")
    next_token: str | None = member("NextToken")


class DescribeStackDriftDetectionStatusInput(CloudFormationInput):
    action: ClassVar[str] = "DescribeStackDriftDetectionStatus"

    stack_drift_detection_id: str | None = member("StackDriftDetectionId", required=True)
