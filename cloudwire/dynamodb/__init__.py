"""Amazon DynamoDB bindings."""

from .client import DynamoDbClient
from .inputs import (
    BatchGetItemInput,
    BatchWriteItemInput,
    CreateTableInput,
    DeleteItemInput,
    DeleteTableInput,
    DescribeTableInput,
    ExecuteStatementInput,
    GetItemInput,
    ListTablesInput,
    PutItemInput,
    QueryInput,
    ScanInput,
    TransactWriteItemsInput,
    UpdateItemInput,
    UpdateTableInput,
    UpdateTimeToLiveInput,
)
from .results import (
    BatchGetItemOutput,
    BatchWriteItemOutput,
    CreateTableOutput,
    DeleteItemOutput,
    DeleteTableOutput,
    DescribeTableOutput,
    ExecuteStatementOutput,
    GetItemOutput,
    ListTablesOutput,
    PutItemOutput,
    QueryOutput,
    ScanOutput,
    TransactWriteItemsOutput,
    UpdateItemOutput,
    UpdateTableOutput,
    UpdateTimeToLiveOutput,
)
from .value_objects import (
    AttributeDefinition,
    AttributeValue,
    GlobalSecondaryIndex,
    KeySchemaElement,
    KeysAndAttributes,
    LocalSecondaryIndex,
    Projection,
    ProvisionedThroughput,
    TableDescription,
    TransactWriteItem,
    WriteRequest,
)
from .waiters import TableExistsWaiter, TableNotExistsWaiter

__all__ = [
    "DynamoDbClient",
    "BatchGetItemInput",
    "BatchWriteItemInput",
    "CreateTableInput",
    "DeleteItemInput",
    "DeleteTableInput",
    "DescribeTableInput",
    "ExecuteStatementInput",
    "GetItemInput",
    "ListTablesInput",
    "PutItemInput",
    "QueryInput",
    "ScanInput",
    "TransactWriteItemsInput",
    "UpdateItemInput",
    "UpdateTableInput",
    "UpdateTimeToLiveInput",
    "BatchGetItemOutput",
    "BatchWriteItemOutput",
    "CreateTableOutput",
    "DeleteItemOutput",
    "DeleteTableOutput",
    "DescribeTableOutput",
    "ExecuteStatementOutput",
    "GetItemOutput",
    "ListTablesOutput",
    "PutItemOutput",
    "QueryOutput",
    "ScanOutput",
    "TransactWriteItemsOutput",
    "UpdateItemOutput",
    "UpdateTableOutput",
    "UpdateTimeToLiveOutput",
    "AttributeDefinition",
    "AttributeValue",
    "GlobalSecondaryIndex",
    "KeySchemaElement",
    "KeysAndAttributes",
    "LocalSecondaryIndex",
    "Projection",
    "ProvisionedThroughput",
    "TableDescription",
    "TransactWriteItem",
    "WriteRequest",
    "TableExistsWaiter",
    "TableNotExistsWaiter",
]
