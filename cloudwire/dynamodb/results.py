"""DynamoDB operation results."""

from __future__ import annotations

from typing import Iterator

from cloudwire.base.result import JsonResult, ResultField
from cloudwire.base.shape import Shape, member
from cloudwire.dynamodb.value_objects import (
    AttributeValue,
    ConsumedCapacity,
    ItemCollectionMetrics,
    KeysAndAttributes,
    TableDescription,
    TimeToLiveSpecification,
    WriteRequest,
)

Item = dict[str, AttributeValue]


# ── Tables ────────────────────────────────────────────────────────────
class CreateTableOutput(JsonResult):
    class _Payload(Shape):
        table_description: TableDescription | None = member("TableDescription")

    _shape = _Payload

    table_description = ResultField()


class DeleteTableOutput(JsonResult):
    class _Payload(Shape):
        table_description: TableDescription | None = member("TableDescription")

    _shape = _Payload

    table_description = ResultField()


class DescribeTableOutput(JsonResult):
    """Represents the output of a DescribeTable operation."""

    class _Payload(Shape):
        table: TableDescription | None = member("Table")

    _shape = _Payload

    table = ResultField()


class UpdateTableOutput(JsonResult):
    class _Payload(Shape):
        table_description: TableDescription | None = member("TableDescription")

    _shape = _Payload

    table_description = ResultField()


class UpdateTimeToLiveOutput(JsonResult):
    class _Payload(Shape):
        time_to_live_specification: TimeToLiveSpecification | None = member(
            "TimeToLiveSpecification"
        )

    _shape = _Payload

    time_to_live_specification = ResultField()


class ListTablesOutput(JsonResult):
    """Represents the output of a ListTables operation.

    Iterating the result yields every table name, following
    ``LastEvaluatedTableName`` across pages.
    """

    class _Payload(Shape):
        table_names: list[str] | None = member("TableNames")
        last_evaluated_table_name: str | None = member("LastEvaluatedTableName")

    _shape = _Payload

    last_evaluated_table_name = ResultField()

    def __iter__(self) -> Iterator[str]:
        return self.get_table_names()

    def get_table_names(self, current_page_only: bool = False) -> Iterator[str]:
        if current_page_only:
            self._initialize()
            yield from self._data.table_names or []
            return
        yield from self._paginate(
            lambda page: page.table_names or [],
            lambda page: (
                self._input.model_copy(
                    update={"exclusive_start_table_name": page.last_evaluated_table_name}
                )
                if page.last_evaluated_table_name
                else None
            ),
            "list_tables",
        )


# ── Items ─────────────────────────────────────────────────────────────
class GetItemOutput(JsonResult):
    """Represents the output of a GetItem operation.

    ``item`` is None when no item matches the key.
    """

    class _Payload(Shape):
        item: dict[str, AttributeValue] | None = member("Item")
        consumed_capacity: ConsumedCapacity | None = member("ConsumedCapacity")

    _shape = _Payload

    item = ResultField()
    consumed_capacity = ResultField()


class _WriteItemPayload(Shape):
    attributes: dict[str, AttributeValue] | None = member("Attributes")
    consumed_capacity: ConsumedCapacity | None = member("ConsumedCapacity")
    item_collection_metrics: ItemCollectionMetrics | None = member("ItemCollectionMetrics")


class PutItemOutput(JsonResult):
    """Represents the output of a PutItem operation.

    ``attributes`` holds the old item when ``ReturnValues=ALL_OLD``.
    """

    _shape = _WriteItemPayload

    attributes = ResultField(dict)
    consumed_capacity = ResultField()
    item_collection_metrics = ResultField()


class UpdateItemOutput(JsonResult):
    _shape = _WriteItemPayload

    attributes = ResultField(dict)
    consumed_capacity = ResultField()
    item_collection_metrics = ResultField()


class DeleteItemOutput(JsonResult):
    _shape = _WriteItemPayload

    attributes = ResultField(dict)
    consumed_capacity = ResultField()
    item_collection_metrics = ResultField()


class BatchGetItemOutput(JsonResult):
    """Represents the output of a BatchGetItem operation.

    ``responses`` maps table names to the items read; keys DynamoDB did not
    get to are returned in ``unprocessed_keys``.
    """

    class _Payload(Shape):
        responses: dict[str, list[dict[str, AttributeValue]]] | None = member("Responses")
        unprocessed_keys: dict[str, KeysAndAttributes] | None = member("UnprocessedKeys")
        consumed_capacity: list[ConsumedCapacity] | None = member("ConsumedCapacity")

    _shape = _Payload

    responses = ResultField(dict)
    unprocessed_keys = ResultField(dict)
    consumed_capacity = ResultField(list)


class BatchWriteItemOutput(JsonResult):
    class _Payload(Shape):
        unprocessed_items: dict[str, list[WriteRequest]] | None = member("UnprocessedItems")
        item_collection_metrics: dict[str, list[ItemCollectionMetrics]] | None = member(
            "ItemCollectionMetrics"
        )
        consumed_capacity: list[ConsumedCapacity] | None = member("ConsumedCapacity")

    _shape = _Payload

    unprocessed_items = ResultField(dict)
    item_collection_metrics = ResultField(dict)
    consumed_capacity = ResultField(list)


class TransactWriteItemsOutput(JsonResult):
    class _Payload(Shape):
        consumed_capacity: list[ConsumedCapacity] | None = member("ConsumedCapacity")
        item_collection_metrics: dict[str, list[ItemCollectionMetrics]] | None = member(
            "ItemCollectionMetrics"
        )

    _shape = _Payload

    consumed_capacity = ResultField(list)
    item_collection_metrics = ResultField(dict)


# ── Reads over many items ─────────────────────────────────────────────
class _ItemPagePayload(Shape):
    items: list[dict[str, AttributeValue]] | None = member("Items")
    count: int | None = member("Count")
    scanned_count: int | None = member("ScannedCount")
    last_evaluated_key: dict[str, AttributeValue] | None = member("LastEvaluatedKey")
    consumed_capacity: ConsumedCapacity | None = member("ConsumedCapacity")


class _ItemPageResult(JsonResult):
    """Page of items continued by ``LastEvaluatedKey``.

    Pagination stops when the key is absent or empty.
    """

    _shape = _ItemPagePayload
    _operation = ""

    count = ResultField()
    scanned_count = ResultField()
    last_evaluated_key = ResultField(dict)
    consumed_capacity = ResultField()

    def __iter__(self) -> Iterator[Item]:
        return self.get_items()

    def get_items(self, current_page_only: bool = False) -> Iterator[Item]:
        """Iterate the items.

        Args:
            current_page_only: When True, iterates over items of the current
                page. Otherwise also fetch items in the next pages.
        """
        if current_page_only:
            self._initialize()
            yield from self._data.items or []
            return
        yield from self._paginate(
            lambda page: page.items or [],
            lambda page: (
                self._input.model_copy(update={"exclusive_start_key": page.last_evaluated_key})
                if page.last_evaluated_key
                else None
            ),
            self._operation,
        )


class QueryOutput(_ItemPageResult):
    """Represents the output of a Query operation."""

    _operation = "query"


class ScanOutput(_ItemPageResult):
    """Represents the output of a Scan operation."""

    _operation = "scan"


class ExecuteStatementOutput(JsonResult):
    """Items returned by a PartiQL statement, continued by ``NextToken``."""

    class _Payload(Shape):
        items: list[dict[str, AttributeValue]] | None = member("Items")
        next_token: str | None = member("NextToken")
        consumed_capacity: ConsumedCapacity | None = member("ConsumedCapacity")
        last_evaluated_key: dict[str, AttributeValue] | None = member("LastEvaluatedKey")

    _shape = _Payload

    next_token = ResultField()
    consumed_capacity = ResultField()
    last_evaluated_key = ResultField(dict)

    def __iter__(self) -> Iterator[Item]:
        return self.get_items()

    def get_items(self, current_page_only: bool = False) -> Iterator[Item]:
        if current_page_only:
            self._initialize()
            yield from self._data.items or []
            return
        yield from self._paginate(
            lambda page: page.items or [],
            lambda page: (
                self._input.model_copy(update={"next_token": page.next_token})
                if page.next_token
                else None
            ),
            "execute_statement",
        )
