"""DynamoDB records shared by inputs and results."""

from __future__ import annotations

from datetime import datetime

from cloudwire.base.shape import Shape, member


class AttributeValue(Shape):
    """Represents the data for an attribute.

    Exactly one member is set. Numbers travel as strings to keep their
    precision; binary values are raw bytes (base64 on the wire)::

        AttributeValue(S="Amazon DynamoDB")
        AttributeValue(L=[{"S": "a"}, {"N": "1"}])
    """

    s: str | None = member("S")
    n: str | None = member("N")
    b: bytes | None = member("B")
    ss: list[str] | None = member("SS")
    ns: list[str] | None = member("NS")
    bs: list[bytes] | None = member("BS")
    m: dict[str, AttributeValue] | None = member("M")
    l: list[AttributeValue] | None = member("L")  # noqa: E741
    null: bool | None = member("NULL")
    bool_: bool | None = member("BOOL")


AttributeValue.model_rebuild()


class AttributeDefinition(Shape):
    attribute_name: str | None = member("AttributeName", required=True)
    attribute_type: str | None = member("AttributeType", required=True)


class KeySchemaElement(Shape):
    attribute_name: str | None = member("AttributeName", required=True)
    key_type: str | None = member("KeyType", required=True)


class Projection(Shape):
    projection_type: str | None = member("ProjectionType")
    non_key_attributes: list[str] | None = member("NonKeyAttributes")


class ProvisionedThroughput(Shape):
    read_capacity_units: int | None = member("ReadCapacityUnits", required=True)
    write_capacity_units: int | None = member("WriteCapacityUnits", required=True)


class OnDemandThroughput(Shape):
    max_read_request_units: int | None = member("MaxReadRequestUnits")
    max_write_request_units: int | None = member("MaxWriteRequestUnits")


class LocalSecondaryIndex(Shape):
    index_name: str | None = member("IndexName", required=True)
    key_schema: list[KeySchemaElement] | None = member("KeySchema", required=True)
    projection: Projection | None = member("Projection", required=True)


class GlobalSecondaryIndex(Shape):
    index_name: str | None = member("IndexName", required=True)
    key_schema: list[KeySchemaElement] | None = member("KeySchema", required=True)
    projection: Projection | None = member("Projection", required=True)
    provisioned_throughput: ProvisionedThroughput | None = member("ProvisionedThroughput")
    on_demand_throughput: OnDemandThroughput | None = member("OnDemandThroughput")


class StreamSpecification(Shape):
    stream_enabled: bool | None = member("StreamEnabled", required=True)
    stream_view_type: str | None = member("StreamViewType")


class SSESpecification(Shape):
    enabled: bool | None = member("Enabled")
    sse_type: str | None = member("SSEType")
    kms_master_key_id: str | None = member("KMSMasterKeyId")


class Tag(Shape):
    key: str | None = member("Key", required=True)
    value: str | None = member("Value", required=True)


class TimeToLiveSpecification(Shape):
    enabled: bool | None = member("Enabled", required=True)
    attribute_name: str | None = member("AttributeName", required=True)


# ── Item access ───────────────────────────────────────────────────────
class KeysAndAttributes(Shape):
    """Keys (and projection) to read from one table in a BatchGetItem."""

    keys: list[dict[str, AttributeValue]] | None = member("Keys", required=True)
    attributes_to_get: list[str] | None = member("AttributesToGet")
    consistent_read: bool | None = member("ConsistentRead")
    projection_expression: str | None = member("ProjectionExpression")
    expression_attribute_names: dict[str, str] | None = member("ExpressionAttributeNames")


class PutRequest(Shape):
    item: dict[str, AttributeValue] | None = member("Item", required=True)


class DeleteRequest(Shape):
    key: dict[str, AttributeValue] | None = member("Key", required=True)


class WriteRequest(Shape):
    """One put or delete of a BatchWriteItem; exactly one member is set."""

    put_request: PutRequest | None = member("PutRequest")
    delete_request: DeleteRequest | None = member("DeleteRequest")


class ConditionCheck(Shape):
    key: dict[str, AttributeValue] | None = member("Key", required=True)
    table_name: str | None = member("TableName", required=True)
    condition_expression: str | None = member("ConditionExpression", required=True)
    expression_attribute_names: dict[str, str] | None = member("ExpressionAttributeNames")
    expression_attribute_values: dict[str, AttributeValue] | None = member(
        "ExpressionAttributeValues"
    )
    return_values_on_condition_check_failure: str | None = member(
        "ReturnValuesOnConditionCheckFailure"
    )


class Put(Shape):
    item: dict[str, AttributeValue] | None = member("Item", required=True)
    table_name: str | None = member("TableName", required=True)
    condition_expression: str | None = member("ConditionExpression")
    expression_attribute_names: dict[str, str] | None = member("ExpressionAttributeNames")
    expression_attribute_values: dict[str, AttributeValue] | None = member(
        "ExpressionAttributeValues"
    )
    return_values_on_condition_check_failure: str | None = member(
        "ReturnValuesOnConditionCheckFailure"
    )


class Delete(Shape):
    key: dict[str, AttributeValue] | None = member("Key", required=True)
    table_name: str | None = member("TableName", required=True)
    condition_expression: str | None = member("ConditionExpression")
    expression_attribute_names: dict[str, str] | None = member("ExpressionAttributeNames")
    expression_attribute_values: dict[str, AttributeValue] | None = member(
        "ExpressionAttributeValues"
    )
    return_values_on_condition_check_failure: str | None = member(
        "ReturnValuesOnConditionCheckFailure"
    )


class Update(Shape):
    key: dict[str, AttributeValue] | None = member("Key", required=True)
    update_expression: str | None = member("UpdateExpression", required=True)
    table_name: str | None = member("TableName", required=True)
    condition_expression: str | None = member("ConditionExpression")
    expression_attribute_names: dict[str, str] | None = member("ExpressionAttributeNames")
    expression_attribute_values: dict[str, AttributeValue] | None = member(
        "ExpressionAttributeValues"
    )
    return_values_on_condition_check_failure: str | None = member(
        "ReturnValuesOnConditionCheckFailure"
    )


class TransactWriteItem(Shape):
    condition_check: ConditionCheck | None = member("ConditionCheck")
    put: Put | None = member("Put")
    delete: Delete | None = member("Delete")
    update: Update | None = member("Update")


# ── Capacity & metrics ────────────────────────────────────────────────
class Capacity(Shape):
    read_capacity_units: float | None = member("ReadCapacityUnits")
    write_capacity_units: float | None = member("WriteCapacityUnits")
    capacity_units: float | None = member("CapacityUnits")


class ConsumedCapacity(Shape):
    table_name: str | None = member("TableName")
    capacity_units: float | None = member("CapacityUnits")
    read_capacity_units: float | None = member("ReadCapacityUnits")
    write_capacity_units: float | None = member("WriteCapacityUnits")
    table: Capacity | None = member("Table")
    local_secondary_indexes: dict[str, Capacity] | None = member("LocalSecondaryIndexes")
    global_secondary_indexes: dict[str, Capacity] | None = member("GlobalSecondaryIndexes")


class ItemCollectionMetrics(Shape):
    item_collection_key: dict[str, AttributeValue] | None = member("ItemCollectionKey")
    size_estimate_range_gb: list[float] | None = member("SizeEstimateRangeGB")


# ── Table description ─────────────────────────────────────────────────
class ProvisionedThroughputDescription(Shape):
    last_increase_date_time: datetime | None = member("LastIncreaseDateTime")
    last_decrease_date_time: datetime | None = member("LastDecreaseDateTime")
    number_of_decreases_today: int | None = member("NumberOfDecreasesToday")
    read_capacity_units: int | None = member("ReadCapacityUnits")
    write_capacity_units: int | None = member("WriteCapacityUnits")


class BillingModeSummary(Shape):
    billing_mode: str | None = member("BillingMode")
    last_update_to_pay_per_request_date_time: datetime | None = member(
        "LastUpdateToPayPerRequestDateTime"
    )


class LocalSecondaryIndexDescription(Shape):
    index_name: str | None = member("IndexName")
    key_schema: list[KeySchemaElement] | None = member("KeySchema")
    projection: Projection | None = member("Projection")
    index_size_bytes: int | None = member("IndexSizeBytes")
    item_count: int | None = member("ItemCount")
    index_arn: str | None = member("IndexArn")


class GlobalSecondaryIndexDescription(Shape):
    index_name: str | None = member("IndexName")
    key_schema: list[KeySchemaElement] | None = member("KeySchema")
    projection: Projection | None = member("Projection")
    index_status: str | None = member("IndexStatus")
    backfilling: bool | None = member("Backfilling")
    provisioned_throughput: ProvisionedThroughputDescription | None = member(
        "ProvisionedThroughput"
    )
    index_size_bytes: int | None = member("IndexSizeBytes")
    item_count: int | None = member("ItemCount")
    index_arn: str | None = member("IndexArn")
    on_demand_throughput: OnDemandThroughput | None = member("OnDemandThroughput")


class SSEDescription(Shape):
    status: str | None = member("Status")
    sse_type: str | None = member("SSEType")
    kms_master_key_arn: str | None = member("KMSMasterKeyArn")
    inaccessible_encryption_date_time: datetime | None = member(
        "InaccessibleEncryptionDateTime"
    )


class TableClassSummary(Shape):
    table_class: str | None = member("TableClass")
    last_update_date_time: datetime | None = member("LastUpdateDateTime")


class TableDescription(Shape):
    """Represents the properties of a table."""

    attribute_definitions: list[AttributeDefinition] | None = member("AttributeDefinitions")
    table_name: str | None = member("TableName")
    key_schema: list[KeySchemaElement] | None = member("KeySchema")
    table_status: str | None = member("TableStatus")
    creation_date_time: datetime | None = member("CreationDateTime")
    provisioned_throughput: ProvisionedThroughputDescription | None = member(
        "ProvisionedThroughput"
    )
    table_size_bytes: int | None = member("TableSizeBytes")
    item_count: int | None = member("ItemCount")
    table_arn: str | None = member("TableArn")
    table_id: str | None = member("TableId")
    billing_mode_summary: BillingModeSummary | None = member("BillingModeSummary")
    local_secondary_indexes: list[LocalSecondaryIndexDescription] | None = member(
        "LocalSecondaryIndexes"
    )
    global_secondary_indexes: list[GlobalSecondaryIndexDescription] | None = member(
        "GlobalSecondaryIndexes"
    )
    stream_specification: StreamSpecification | None = member("StreamSpecification")
    latest_stream_label: str | None = member("LatestStreamLabel")
    latest_stream_arn: str | None = member("LatestStreamArn")
    global_table_version: str | None = member("GlobalTableVersion")
    sse_description: SSEDescription | None = member("SSEDescription")
    table_class_summary: TableClassSummary | None = member("TableClassSummary")
    deletion_protection_enabled: bool | None = member("DeletionProtectionEnabled")
    on_demand_throughput: OnDemandThroughput | None = member("OnDemandThroughput")


# ── Global secondary index updates ────────────────────────────────────
class CreateGlobalSecondaryIndexAction(Shape):
    index_name: str | None = member("IndexName", required=True)
    key_schema: list[KeySchemaElement] | None = member("KeySchema", required=True)
    projection: Projection | None = member("Projection", required=True)
    provisioned_throughput: ProvisionedThroughput | None = member("ProvisionedThroughput")
    on_demand_throughput: OnDemandThroughput | None = member("OnDemandThroughput")


class UpdateGlobalSecondaryIndexAction(Shape):
    index_name: str | None = member("IndexName", required=True)
    provisioned_throughput: ProvisionedThroughput | None = member("ProvisionedThroughput")
    on_demand_throughput: OnDemandThroughput | None = member("OnDemandThroughput")


class DeleteGlobalSecondaryIndexAction(Shape):
    index_name: str | None = member("IndexName", required=True)


class GlobalSecondaryIndexUpdate(Shape):
    update: UpdateGlobalSecondaryIndexAction | None = member("Update")
    create: CreateGlobalSecondaryIndexAction | None = member("Create")
    delete: DeleteGlobalSecondaryIndexAction | None = member("Delete")
