"""DynamoDB operation inputs (JSON 1.0 protocol, API version 2012-08-10)."""

from __future__ import annotations

from typing import ClassVar

from cloudwire.base.json_protocol import JsonInput
from cloudwire.base.shape import member
from cloudwire.dynamodb.value_objects import (
    AttributeDefinition,
    AttributeValue,
    GlobalSecondaryIndex,
    GlobalSecondaryIndexUpdate,
    KeysAndAttributes,
    KeySchemaElement,
    LocalSecondaryIndex,
    OnDemandThroughput,
    ProvisionedThroughput,
    SSESpecification,
    StreamSpecification,
    Tag,
    TimeToLiveSpecification,
    TransactWriteItem,
    WriteRequest,
)


class DynamoDbInput(JsonInput):
    target_prefix: ClassVar[str] = "DynamoDB_20120810"


# ── Tables ────────────────────────────────────────────────────────────
class CreateTableInput(DynamoDbInput):
    """Represents the input of a CreateTable operation."""

    action: ClassVar[str] = "CreateTable"

    attribute_definitions: list[AttributeDefinition] | None = member(
        "AttributeDefinitions", required=True
    )
    table_name: str | None = member("TableName", required=True)
    key_schema: list[KeySchemaElement] | None = member("KeySchema", required=True)
    local_secondary_indexes: list[LocalSecondaryIndex] | None = member("LocalSecondaryIndexes")
    global_secondary_indexes: list[GlobalSecondaryIndex] | None = member(
        "GlobalSecondaryIndexes"
    )
    billing_mode: str | None = member("BillingMode")
    provisioned_throughput: ProvisionedThroughput | None = member("ProvisionedThroughput")
    stream_specification: StreamSpecification | None = member("StreamSpecification")
    sse_specification: SSESpecification | None = member("SSESpecification")
    tags: list[Tag] | None = member("Tags")
    table_class: str | None = member("TableClass")
    deletion_protection_enabled: bool | None = member("DeletionProtectionEnabled")
    on_demand_throughput: OnDemandThroughput | None = member("OnDemandThroughput")


class DeleteTableInput(DynamoDbInput):
    action: ClassVar[str] = "DeleteTable"

    table_name: str | None = member("TableName", required=True)


class DescribeTableInput(DynamoDbInput):
    action: ClassVar[str] = "DescribeTable"

    table_name: str | None = member("TableName", required=True)


class ListTablesInput(DynamoDbInput):
    action: ClassVar[str] = "ListTables"

    exclusive_start_table_name: str | None = member("ExclusiveStartTableName")
    limit: int | None = member("Limit")


class UpdateTableInput(DynamoDbInput):
    """Represents the input of an UpdateTable operation."""

    action: ClassVar[str] = "UpdateTable"

    attribute_definitions: list[AttributeDefinition] | None = member("AttributeDefinitions")
    table_name: str | None = member("TableName", required=True)
    billing_mode: str | None = member("BillingMode")
    provisioned_throughput: ProvisionedThroughput | None = member("ProvisionedThroughput")
    global_secondary_index_updates: list[GlobalSecondaryIndexUpdate] | None = member(
        "GlobalSecondaryIndexUpdates"
    )
    stream_specification: StreamSpecification | None = member("StreamSpecification")
    sse_specification: SSESpecification | None = member("SSESpecification")
    table_class: str | None = member("TableClass")
    deletion_protection_enabled: bool | None = member("DeletionProtectionEnabled")
    on_demand_throughput: OnDemandThroughput | None = member("OnDemandThroughput")


class UpdateTimeToLiveInput(DynamoDbInput):
    action: ClassVar[str] = "UpdateTimeToLive"

    table_name: str | None = member("TableName", required=True)
    time_to_live_specification: TimeToLiveSpecification | None = member(
        "TimeToLiveSpecification", required=True
    )


# ── Items ─────────────────────────────────────────────────────────────
class GetItemInput(DynamoDbInput):
    """Represents the input of a GetItem operation."""

    action: ClassVar[str] = "GetItem"

    table_name: str | None = member("TableName", required=True)
    key: dict[str, AttributeValue] | None = member("Key", required=True)
    attributes_to_get: list[str] | None = member("AttributesToGet")
    consistent_read: bool | None = member("ConsistentRead")
    return_consumed_capacity: str | None = member("ReturnConsumedCapacity")
    projection_expression: str | None = member("ProjectionExpression")
    expression_attribute_names: dict[str, str] | None = member("ExpressionAttributeNames")


class PutItemInput(DynamoDbInput):
    """Represents the input of a PutItem operation."""

    action: ClassVar[str] = "PutItem"

    table_name: str | None = member("TableName", required=True)
    item: dict[str, AttributeValue] | None = member("Item", required=True)
    return_values: str | None = member("ReturnValues")
    return_consumed_capacity: str | None = member("ReturnConsumedCapacity")
    return_item_collection_metrics: str | None = member("ReturnItemCollectionMetrics")
    condition_expression: str | None = member("ConditionExpression")
    expression_attribute_names: dict[str, str] | None = member("ExpressionAttributeNames")
    expression_attribute_values: dict[str, AttributeValue] | None = member(
        "ExpressionAttributeValues"
    )
    return_values_on_condition_check_failure: str | None = member(
        "ReturnValuesOnConditionCheckFailure"
    )


class UpdateItemInput(DynamoDbInput):
    """Represents the input of an UpdateItem operation."""

    action: ClassVar[str] = "UpdateItem"

    table_name: str | None = member("TableName", required=True)
    key: dict[str, AttributeValue] | None = member("Key", required=True)
    return_values: str | None = member("ReturnValues")
    return_consumed_capacity: str | None = member("ReturnConsumedCapacity")
    return_item_collection_metrics: str | None = member("ReturnItemCollectionMetrics")
    update_expression: str | None = member("UpdateExpression")
    condition_expression: str | None = member("ConditionExpression")
    expression_attribute_names: dict[str, str] | None = member("ExpressionAttributeNames")
    expression_attribute_values: dict[str, AttributeValue] | None = member(
        "ExpressionAttributeValues"
    )
    return_values_on_condition_check_failure: str | None = member(
        "ReturnValuesOnConditionCheckFailure"
    )


class DeleteItemInput(DynamoDbInput):
    """Represents the input of a DeleteItem operation."""

    action: ClassVar[str] = "DeleteItem"

    table_name: str | None = member("TableName", required=True)
    key: dict[str, AttributeValue] | None = member("Key", required=True)
    return_values: str | None = member("ReturnValues")
    return_consumed_capacity: str | None = member("ReturnConsumedCapacity")
    return_item_collection_metrics: str | None = member("ReturnItemCollectionMetrics")
    condition_expression: str | None = member("ConditionExpression")
    expression_attribute_names: dict[str, str] | None = member("ExpressionAttributeNames")
    expression_attribute_values: dict[str, AttributeValue] | None = member(
        "ExpressionAttributeValues"
    )
    return_values_on_condition_check_failure: str | None = member(
        "ReturnValuesOnConditionCheckFailure"
    )


class BatchGetItemInput(DynamoDbInput):
    """Represents the input of a BatchGetItem operation (up to 100 items)."""

    action: ClassVar[str] = "BatchGetItem"

    request_items: dict[str, KeysAndAttributes] | None = member("RequestItems", required=True)
    return_consumed_capacity: str | None = member("ReturnConsumedCapacity")


class BatchWriteItemInput(DynamoDbInput):
    """Represents the input of a BatchWriteItem operation (up to 25 requests)."""

    action: ClassVar[str] = "BatchWriteItem"

    request_items: dict[str, list[WriteRequest]] | None = member("RequestItems", required=True)
    return_consumed_capacity: str | None = member("ReturnConsumedCapacity")
    return_item_collection_metrics: str | None = member("ReturnItemCollectionMetrics")


class TransactWriteItemsInput(DynamoDbInput):
    action: ClassVar[str] = "TransactWriteItems"

    transact_items: list[TransactWriteItem] | None = member("TransactItems", required=True)
    return_consumed_capacity: str | None = member("ReturnConsumedCapacity")
    return_item_collection_metrics: str | None = member("ReturnItemCollectionMetrics")
    client_request_token: str | None = member("ClientRequestToken")


# ── Reads over many items ─────────────────────────────────────────────
class QueryInput(DynamoDbInput):
    """Represents the input of a Query operation."""

    action: ClassVar[str] = "Query"

    table_name: str | None = member("TableName", required=True)
    index_name: str | None = member("IndexName")
    select: str | None = member("Select")
    attributes_to_get: list[str] | None = member("AttributesToGet")
    limit: int | None = member("Limit")
    consistent_read: bool | None = member("ConsistentRead")
    scan_index_forward: bool | None = member("ScanIndexForward")
    exclusive_start_key: dict[str, AttributeValue] | None = member("ExclusiveStartKey")
    return_consumed_capacity: str | None = member("ReturnConsumedCapacity")
    projection_expression: str | None = member("ProjectionExpression")
    filter_expression: str | None = member("FilterExpression")
    key_condition_expression: str | None = member("KeyConditionExpression")
    expression_attribute_names: dict[str, str] | None = member("ExpressionAttributeNames")
    expression_attribute_values: dict[str, AttributeValue] | None = member(
        "ExpressionAttributeValues"
    )


class ScanInput(DynamoDbInput):
    """Represents the input of a Scan operation."""

    action: ClassVar[str] = "Scan"

    table_name: str | None = member("TableName", required=True)
    index_name: str | None = member("IndexName")
    attributes_to_get: list[str] | None = member("AttributesToGet")
    limit: int | None = member("Limit")
    select: str | None = member("Select")
    exclusive_start_key: dict[str, AttributeValue] | None = member("ExclusiveStartKey")
    return_consumed_capacity: str | None = member("ReturnConsumedCapacity")
    total_segments: int | None = member("TotalSegments")
    segment: int | None = member("Segment")
    projection_expression: str | None = member("ProjectionExpression")
    filter_expression: str | None = member("FilterExpression")
    expression_attribute_names: dict[str, str] | None = member("ExpressionAttributeNames")
    expression_attribute_values: dict[str, AttributeValue] | None = member(
        "ExpressionAttributeValues"
    )
    consistent_read: bool | None = member("ConsistentRead")


class ExecuteStatementInput(DynamoDbInput):
    """PartiQL statement with positional ``?`` parameters."""

    action: ClassVar[str] = "ExecuteStatement"

    statement: str | None = member("Statement", required=True)
    parameters: list[AttributeValue] | None = member("Parameters")
    consistent_read: bool | None = member("ConsistentRead")
    next_token: str | None = member("NextToken")
    return_consumed_capacity: str | None = member("ReturnConsumedCapacity")
    limit: int | None = member("Limit")
    return_values_on_condition_check_failure: str | None = member(
        "ReturnValuesOnConditionCheckFailure"
    )
