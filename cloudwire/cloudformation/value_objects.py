"""CloudFormation records shared by inputs and results."""

from __future__ import annotations

from datetime import datetime

from cloudwire.base.shape import Shape, member


class Parameter(Shape):
    parameter_key: str | None = member("ParameterKey")
    parameter_value: str | None = member("ParameterValue")
    use_previous_value: bool | None = member("UsePreviousValue")
    resolved_value: str | None = member("ResolvedValue")


class Tag(Shape):
    key: str | None = member("Key", required=True)
    value: str | None = member("Value", required=True)


class Output(Shape):
    output_key: str | None = member("OutputKey")
    output_value: str | None = member("OutputValue")
    description: str | None = member("Description")
    export_name: str | None = member("ExportName")


class RollbackTrigger(Shape):
    """A CloudWatch alarm monitored during stack creation and updates."""

    arn: str | None = member("Arn", required=True)
    type: str | None = member("Type", required=True)


class RollbackConfiguration(Shape):
    rollback_triggers: list[RollbackTrigger] | None = member("RollbackTriggers")
    monitoring_time_in_minutes: int | None = member("MonitoringTimeInMinutes")


class StackDriftInformation(Shape):
    stack_drift_status: str | None = member("StackDriftStatus", required=True)
    last_check_timestamp: datetime | None = member("LastCheckTimestamp")


class Stack(Shape):
    """The Stack data type."""

    stack_id: str | None = member("StackId")
    stack_name: str | None = member("StackName", required=True)
    change_set_id: str | None = member("ChangeSetId")
    description: str | None = member("Description")
    parameters: list[Parameter] | None = member("Parameters")
    creation_time: datetime | None = member("CreationTime", required=True)
    deletion_time: datetime | None = member("DeletionTime")
    last_updated_time: datetime | None = member("LastUpdatedTime")
    rollback_configuration: RollbackConfiguration | None = member("RollbackConfiguration")
    stack_status: str | None = member("StackStatus", required=True)
    stack_status_reason: str | None = member("StackStatusReason")
    disable_rollback: bool | None = member("DisableRollback")
    notification_arns: list[str] | None = member("NotificationARNs")
    timeout_in_minutes: int | None = member("TimeoutInMinutes")
    capabilities: list[str] | None = member("Capabilities")
    outputs: list[Output] | None = member("Outputs")
    role_arn: str | None = member("RoleARN")
    tags: list[Tag] | None = member("Tags")
    enable_termination_protection: bool | None = member("EnableTerminationProtection")
    parent_id: str | None = member("ParentId")
    root_id: str | None = member("RootId")
    drift_information: StackDriftInformation | None = member("DriftInformation")
    retain_except_on_create: bool | None = member("RetainExceptOnCreate")
    deletion_mode: str | None = member("DeletionMode")
    detailed_status: str | None = member("DetailedStatus")


class StackEvent(Shape):
    stack_id: str | None = member("StackId", required=True)
    event_id: str | None = member("EventId", required=True)
    stack_name: str | None = member("StackName", required=True)
    logical_resource_id: str | None = member("LogicalResourceId")
    physical_resource_id: str | None = member("PhysicalResourceId")
    resource_type: str | None = member("ResourceType")
    timestamp: datetime | None = member("Timestamp", required=True)
    resource_status: str | None = member("ResourceStatus")
    resource_status_reason: str | None = member("ResourceStatusReason")
    resource_properties: str | None = member("ResourceProperties")
    client_request_token: str | None = member("ClientRequestToken")
    hook_type: str | None = member("HookType")
    hook_status: str | None = member("HookStatus")
    hook_status_reason: str | None = member("HookStatusReason")
    hook_invocation_point: str | None = member("HookInvocationPoint")
    hook_failure_mode: str | None = member("HookFailureMode")
    detailed_status: str | None = member("DetailedStatus")
