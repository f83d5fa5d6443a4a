"""Amazon DynamoDB client."""

from __future__ import annotations

from typing import Any

from cloudwire.base.client import JsonApi
from cloudwire.base.exceptions import (
    ConditionalCheckFailedError,
    ItemCollectionSizeLimitExceededError,
    LimitExceededError,
    ProvisionedThroughputExceededError,
    ResourceInUseError,
    ResourceNotFoundError,
    TransactionCanceledError,
)
from cloudwire.dynamodb.inputs import (
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
from cloudwire.dynamodb.results import (
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
from cloudwire.dynamodb.waiters import TableExistsWaiter, TableNotExistsWaiter


class DynamoDbClient(JsonApi):
    """DynamoDB bindings.

    Items are maps of attribute name to :class:`AttributeValue`; plain dicts
    in wire format are accepted everywhere::

        client = DynamoDbClient({"region_name": "eu-west-1"})
        client.put_item(TableName="users", Item={"id": {"S": "42"}}).resolve()
        for item in client.query(
            TableName="users",
            KeyConditionExpression="id = :id",
            ExpressionAttributeValues={":id": {"S": "42"}},
        ):
            print(item)
    """

    service = "dynamodb"
    endpoint_prefix = "dynamodb"
    _ERROR_MAP = {
        "ResourceNotFoundException": ResourceNotFoundError,
        "ResourceInUseException": ResourceInUseError,
        "ConditionalCheckFailedException": ConditionalCheckFailedError,
        "TransactionCanceledException": TransactionCanceledError,
        "ProvisionedThroughputExceededException": ProvisionedThroughputExceededError,
        "RequestLimitExceeded": ProvisionedThroughputExceededError,
        "ItemCollectionSizeLimitExceededException": ItemCollectionSizeLimitExceededError,
        "LimitExceededException": LimitExceededError,
    }

    # ── Tables ────────────────────────────────────────────────────────
    def create_table(self, input: Any = None, /, **kwargs: Any) -> CreateTableOutput:
        """Create a table. The table is ``CREATING`` until :meth:`table_exists` succeeds.

        Raises:
            ResourceInUseError: The table already exists.
            LimitExceededError: Too many tables are being created at once.
        """
        return self._call(CreateTableInput.create(input, **kwargs), CreateTableOutput)

    def delete_table(self, input: Any = None, /, **kwargs: Any) -> DeleteTableOutput:
        return self._call(DeleteTableInput.create(input, **kwargs), DeleteTableOutput)

    def describe_table(self, input: Any = None, /, **kwargs: Any) -> DescribeTableOutput:
        """Raises ResourceNotFoundError when the table does not exist."""
        return self._call(DescribeTableInput.create(input, **kwargs), DescribeTableOutput)

    def list_tables(self, input: Any = None, /, **kwargs: Any) -> ListTablesOutput:
        """List table names (paginated)."""
        return self._call(ListTablesInput.create(input, **kwargs), ListTablesOutput)

    def update_table(self, input: Any = None, /, **kwargs: Any) -> UpdateTableOutput:
        return self._call(UpdateTableInput.create(input, **kwargs), UpdateTableOutput)

    def update_time_to_live(
        self, input: Any = None, /, **kwargs: Any
    ) -> UpdateTimeToLiveOutput:
        return self._call(UpdateTimeToLiveInput.create(input, **kwargs), UpdateTimeToLiveOutput)

    # ── Items ─────────────────────────────────────────────────────────
    def get_item(self, input: Any = None, /, **kwargs: Any) -> GetItemOutput:
        return self._call(GetItemInput.create(input, **kwargs), GetItemOutput)

    def put_item(self, input: Any = None, /, **kwargs: Any) -> PutItemOutput:
        """Create or replace an item.

        Raises:
            ConditionalCheckFailedError: ``ConditionExpression`` evaluated to false.
        """
        return self._call(PutItemInput.create(input, **kwargs), PutItemOutput)

    def update_item(self, input: Any = None, /, **kwargs: Any) -> UpdateItemOutput:
        return self._call(UpdateItemInput.create(input, **kwargs), UpdateItemOutput)

    def delete_item(self, input: Any = None, /, **kwargs: Any) -> DeleteItemOutput:
        return self._call(DeleteItemInput.create(input, **kwargs), DeleteItemOutput)

    def batch_get_item(self, input: Any = None, /, **kwargs: Any) -> BatchGetItemOutput:
        """Read up to 100 items from one or more tables.

        Keys left unread are returned in ``unprocessed_keys``; callers resend them.
        """
        return self._call(BatchGetItemInput.create(input, **kwargs), BatchGetItemOutput)

    def batch_write_item(self, input: Any = None, /, **kwargs: Any) -> BatchWriteItemOutput:
        return self._call(BatchWriteItemInput.create(input, **kwargs), BatchWriteItemOutput)

    def transact_write_items(
        self, input: Any = None, /, **kwargs: Any
    ) -> TransactWriteItemsOutput:
        """Apply up to 100 writes atomically.

        Raises:
            TransactionCanceledError: A condition failed or an item was contended;
                ``details["CancellationReasons"]`` lists the reason per action.
        """
        return self._call(
            TransactWriteItemsInput.create(input, **kwargs), TransactWriteItemsOutput
        )

    # ── Reads over many items ─────────────────────────────────────────
    def query(self, input: Any = None, /, **kwargs: Any) -> QueryOutput:
        """Find items by primary key (paginated)."""
        return self._call(QueryInput.create(input, **kwargs), QueryOutput)

    def scan(self, input: Any = None, /, **kwargs: Any) -> ScanOutput:
        """Read every item of a table or index (paginated)."""
        return self._call(ScanInput.create(input, **kwargs), ScanOutput)

    def execute_statement(
        self, input: Any = None, /, **kwargs: Any
    ) -> ExecuteStatementOutput:
        """Run a PartiQL statement (paginated)."""
        return self._call(ExecuteStatementInput.create(input, **kwargs), ExecuteStatementOutput)

    # ── Waiters ───────────────────────────────────────────────────────
    def table_exists(self, input: Any = None, /, **kwargs: Any) -> TableExistsWaiter:
        """Waiter that succeeds once the table is ``ACTIVE``::

            client.table_exists(TableName="users").wait(timeout=300)
        """
        return self._call(DescribeTableInput.create(input, **kwargs), TableExistsWaiter)

    def table_not_exists(self, input: Any = None, /, **kwargs: Any) -> TableNotExistsWaiter:
        return self._call(DescribeTableInput.create(input, **kwargs), TableNotExistsWaiter)
