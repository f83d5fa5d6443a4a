"""Tests for the DynamoDB client."""

from unittest.mock import patch

import pytest

from cloudwire.base.exceptions import (
    ConditionalCheckFailedError,
    InvalidArgument,
    ProvisionedThroughputExceededError,
    ResourceInUseError,
    ResourceNotFoundError,
    ServerException,
    ThrottlingError,
    TransactionCanceledError,
)
from cloudwire.dynamodb import AttributeValue, DynamoDbClient
from cloudwire.dynamodb.enums import BillingMode, KeyType, ReturnValue, ScalarAttributeType

from conftest import CONFIG, json_body


def _target(request) -> str:
    return request.headers["X-Amz-Target"]


def _error(code: str, message: str = "error") -> dict:
    return {"__type": f"com.amazonaws.dynamodb.v20120810#{code}", "message": message}


@pytest.fixture
def ddb(http):
    client = DynamoDbClient(CONFIG, http_session=http)
    yield client
    client.close()


# --- tables ---

class TestCreateTable:
    def test_success(self, ddb, http):
        http.add_response({"TableDescription": {"TableName": "users", "TableStatus": "CREATING"}})
        result = ddb.create_table(
            TableName="users",
            AttributeDefinitions=[{"AttributeName": "id", "AttributeType": ScalarAttributeType.S}],
            KeySchema=[{"AttributeName": "id", "KeyType": KeyType.HASH}],
            BillingMode=BillingMode.PAY_PER_REQUEST,
        )
        assert result.table_description.table_status == "CREATING"
        assert _target(http.requests[0]) == "DynamoDB_20120810.CreateTable"
        assert json_body(http.requests[0]) == {
            "AttributeDefinitions": [{"AttributeName": "id", "AttributeType": "S"}],
            "TableName": "users",
            "KeySchema": [{"AttributeName": "id", "KeyType": "HASH"}],
            "BillingMode": "PAY_PER_REQUEST",
        }

    def test_missing_key_schema(self, ddb):
        with pytest.raises(InvalidArgument, match='"KeySchema" for "CreateTableInput"'):
            ddb.create_table(TableName="users", AttributeDefinitions=[])

    def test_in_use(self, ddb, http):
        http.add_response(_error("ResourceInUseException", "Table already exists"), status=400)
        with pytest.raises(ResourceInUseError):
            ddb.create_table(TableName="users", AttributeDefinitions=[], KeySchema=[]).resolve()


class TestDescribeTable:
    def test_success(self, ddb, http):
        http.add_response({
            "Table": {
                "TableName": "users",
                "TableStatus": "ACTIVE",
                "CreationDateTime": 1700000000.5,
                "ItemCount": 3,
                "KeySchema": [{"AttributeName": "id", "KeyType": "HASH"}],
                "BillingModeSummary": {"BillingMode": "PAY_PER_REQUEST"},
            }
        })
        table = ddb.describe_table(TableName="users").table
        assert table.item_count == 3
        assert table.creation_date_time.year == 2023
        assert table.key_schema[0].key_type == "HASH"
        assert table.billing_mode_summary.billing_mode == "PAY_PER_REQUEST"

    def test_not_found(self, ddb, http):
        http.add_response(_error("ResourceNotFoundException"), status=400)
        with pytest.raises(ResourceNotFoundError):
            ddb.describe_table(TableName="missing").table


class TestListTables:
    def test_paginates_with_last_evaluated_table_name(self, ddb, http):
        http.add_response({"TableNames": ["a", "b"], "LastEvaluatedTableName": "b"})
        http.add_response({"TableNames": ["c"]})
        assert list(ddb.list_tables(Limit=2)) == ["a", "b", "c"]
        assert json_body(http.requests[0]) == {"Limit": 2}
        assert json_body(http.requests[1]) == {"ExclusiveStartTableName": "b", "Limit": 2}


class TestUpdateTable:
    def test_gsi_updates(self, ddb, http):
        http.add_response({"TableDescription": {"TableName": "users"}})
        ddb.update_table(
            TableName="users",
            GlobalSecondaryIndexUpdates=[{"Delete": {"IndexName": "by-email"}}],
        ).resolve()
        assert json_body(http.requests[0])["GlobalSecondaryIndexUpdates"] == [
            {"Delete": {"IndexName": "by-email"}}
        ]


class TestUpdateTimeToLive:
    def test_success(self, ddb, http):
        http.add_response({"TimeToLiveSpecification": {"Enabled": True, "AttributeName": "ttl"}})
        result = ddb.update_time_to_live(
            TableName="users",
            TimeToLiveSpecification={"Enabled": True, "AttributeName": "ttl"},
        )
        assert result.time_to_live_specification.attribute_name == "ttl"

    def test_requires_specification(self, ddb):
        with pytest.raises(InvalidArgument):
            ddb.update_time_to_live(TableName="users")


class TestDeleteTable:
    def test_success(self, ddb, http):
        http.add_response({"TableDescription": {"TableName": "users", "TableStatus": "DELETING"}})
        assert ddb.delete_table(TableName="users").table_description.table_status == "DELETING"


# --- items ---

class TestGetItem:
    def test_found(self, ddb, http):
        http.add_response({"Item": {"id": {"S": "1"}, "age": {"N": "30"}}})
        item = ddb.get_item(TableName="users", Key={"id": {"S": "1"}}).item
        assert item["age"] == AttributeValue(N="30")
        assert json_body(http.requests[0]) == {"TableName": "users", "Key": {"id": {"S": "1"}}}

    def test_missing_item(self, ddb, http):
        http.add_response({})
        assert ddb.get_item(TableName="users", Key={"id": {"S": "2"}}).item is None


class TestPutItem:
    def test_return_old_values(self, ddb, http):
        http.add_response({"Attributes": {"id": {"S": "1"}, "name": {"S": "old"}}})
        result = ddb.put_item(
            TableName="users",
            Item={"id": {"S": "1"}, "name": {"S": "new"}},
            ReturnValues=ReturnValue.ALL_OLD,
        )
        assert result.attributes["name"].s == "old"
        assert json_body(http.requests[0])["ReturnValues"] == "ALL_OLD"

    def test_no_attributes_returned(self, ddb, http):
        http.add_response({})
        assert ddb.put_item(TableName="users", Item={"id": {"S": "1"}}).attributes == {}

    def test_condition_failed(self, ddb, http):
        http.add_response(_error("ConditionalCheckFailedException"), status=400)
        result = ddb.put_item(
            TableName="users", Item={"id": {"S": "1"}}, ConditionExpression="attribute_not_exists(id)"
        )
        with pytest.raises(ConditionalCheckFailedError):
            result.attributes


class TestUpdateItem:
    def test_success(self, ddb, http):
        http.add_response({"Attributes": {"visits": {"N": "2"}}})
        result = ddb.update_item(
            TableName="users",
            Key={"id": {"S": "1"}},
            UpdateExpression="ADD visits :one",
            ExpressionAttributeValues={":one": {"N": "1"}},
            ReturnValues="UPDATED_NEW",
        )
        assert result.attributes["visits"].n == "2"
        body = json_body(http.requests[0])
        assert body["UpdateExpression"] == "ADD visits :one"
        assert body["ExpressionAttributeValues"] == {":one": {"N": "1"}}


class TestDeleteItem:
    def test_success(self, ddb, http):
        http.add_response({})
        ddb.delete_item(TableName="users", Key={"id": {"S": "1"}}).resolve()
        assert _target(http.requests[0]) == "DynamoDB_20120810.DeleteItem"

    def test_requires_key(self, ddb):
        with pytest.raises(InvalidArgument):
            ddb.delete_item(TableName="users")


class TestBatchGetItem:
    def test_success(self, ddb, http):
        http.add_response({
            "Responses": {"users": [{"id": {"S": "1"}}]},
            "UnprocessedKeys": {"users": {"Keys": [{"id": {"S": "2"}}]}},
        })
        result = ddb.batch_get_item(
            RequestItems={"users": {"Keys": [{"id": {"S": "1"}}, {"id": {"S": "2"}}]}}
        )
        assert result.responses["users"][0]["id"].s == "1"
        assert result.unprocessed_keys["users"].keys[0]["id"].s == "2"
        assert result.consumed_capacity == []


class TestBatchWriteItem:
    def test_success(self, ddb, http):
        http.add_response({"UnprocessedItems": {}})
        result = ddb.batch_write_item(RequestItems={
            "users": [
                {"PutRequest": {"Item": {"id": {"S": "1"}}}},
                {"DeleteRequest": {"Key": {"id": {"S": "2"}}}},
            ]
        })
        assert result.unprocessed_items == {}
        assert json_body(http.requests[0])["RequestItems"]["users"][1] == {
            "DeleteRequest": {"Key": {"id": {"S": "2"}}}
        }

    def test_throughput_exceeded_is_throttling(self, ddb, http):
        http.add_response(_error("ProvisionedThroughputExceededException"), status=400)
        with pytest.raises(ThrottlingError) as exc:
            ddb.batch_write_item(RequestItems={"users": []}).resolve()
        assert isinstance(exc.value, ProvisionedThroughputExceededError)


class TestTransactWriteItems:
    def test_cancelled(self, ddb, http):
        http.add_response(
            {
                "__type": "com.amazonaws.dynamodb.v20120810#TransactionCanceledException",
                "Message": "Transaction cancelled",
                "CancellationReasons": [{"Code": "None"}, {"Code": "ConditionalCheckFailed"}],
            },
            status=400,
        )
        result = ddb.transact_write_items(TransactItems=[
            {"Put": {"TableName": "users", "Item": {"id": {"S": "1"}}}},
            {"ConditionCheck": {
                "TableName": "users",
                "Key": {"id": {"S": "2"}},
                "ConditionExpression": "attribute_exists(id)",
            }},
        ])
        with pytest.raises(TransactionCanceledError) as exc:
            result.resolve()
        assert exc.value.details["CancellationReasons"][1]["Code"] == "ConditionalCheckFailed"

    def test_nested_required_member(self, ddb):
        with pytest.raises(InvalidArgument, match='"TableName" for "Put"'):
            ddb.transact_write_items(TransactItems=[{"Put": {"Item": {"id": {"S": "1"}}}}])


# --- reads over many items ---

class TestQuery:
    def test_paginates_with_last_evaluated_key(self, ddb, http):
        http.add_response({
            "Items": [{"id": {"S": "1"}}],
            "Count": 1,
            "LastEvaluatedKey": {"id": {"S": "1"}},
        })
        http.add_response({"Items": [{"id": {"S": "2"}}], "Count": 1})
        items = list(ddb.query(
            TableName="users",
            KeyConditionExpression="id = :id",
            ExpressionAttributeValues={":id": {"S": "1"}},
        ))
        assert [item["id"].s for item in items] == ["1", "2"]
        assert json_body(http.requests[1])["ExclusiveStartKey"] == {"id": {"S": "1"}}
        assert json_body(http.requests[1])["KeyConditionExpression"] == "id = :id"

    def test_empty_last_evaluated_key_ends_pagination(self, ddb, http):
        http.add_response({"Items": [{"id": {"S": "1"}}], "LastEvaluatedKey": {}})
        assert len(list(ddb.query(TableName="users"))) == 1
        assert len(http.requests) == 1

    def test_count(self, ddb, http):
        http.add_response({"Count": 4, "ScannedCount": 10})
        result = ddb.query(TableName="users", Select="COUNT")
        assert result.count == 4
        assert result.scanned_count == 10
        assert list(result.get_items(current_page_only=True)) == []


class TestScan:
    def test_paginates(self, ddb, http):
        http.add_response({"Items": [{"id": {"S": "a"}}], "LastEvaluatedKey": {"id": {"S": "a"}}})
        http.add_response({"Items": [{"id": {"S": "b"}}]})
        assert [i["id"].s for i in ddb.scan(TableName="users", Segment=0, TotalSegments=2)] == ["a", "b"]
        assert json_body(http.requests[1])["Segment"] == 0


class TestExecuteStatement:
    def test_paginates_with_next_token(self, ddb, http):
        http.add_response({"Items": [{"id": {"S": "1"}}], "NextToken": "n1"})
        http.add_response({"Items": [{"id": {"S": "2"}}]})
        items = list(ddb.execute_statement(
            Statement='SELECT * FROM "users" WHERE id = ?', Parameters=[{"S": "1"}]
        ))
        assert len(items) == 2
        body = json_body(http.requests[1])
        assert body["NextToken"] == "n1"
        assert body["Parameters"] == [{"S": "1"}]


# --- waiters ---

class TestTableWaiters:
    @patch("cloudwire.base.waiter.time.sleep")
    def test_table_exists(self, mock_sleep, ddb, http):
        http.add_response(_error("ResourceNotFoundException"), status=400)
        http.add_response({"Table": {"TableName": "users", "TableStatus": "CREATING"}})
        http.add_response({"Table": {"TableName": "users", "TableStatus": "ACTIVE"}})
        waiter = ddb.table_exists(TableName="users")
        assert waiter.is_pending()
        assert waiter.wait() is True
        assert len(http.requests) == 3
        assert mock_sleep.call_args_list[0].args[0] == 20.0
        assert all(_target(r) == "DynamoDB_20120810.DescribeTable" for r in http.requests)

    def test_table_exists_timeout(self, ddb, http):
        http.add_response({"Table": {"TableName": "users", "TableStatus": "CREATING"}})
        assert ddb.table_exists(TableName="users").wait(timeout=0, delay=1) is False

    def test_table_exists_unexpected_error(self, ddb, http):
        http.add_response({"__type": "InternalServerError"}, status=500)
        with pytest.raises(ServerException):
            ddb.table_exists(TableName="users").wait(delay=0)

    @patch("cloudwire.base.waiter.time.sleep")
    def test_table_not_exists(self, mock_sleep, ddb, http):
        http.add_response({"Table": {"TableName": "users", "TableStatus": "DELETING"}})
        http.add_response(_error("ResourceNotFoundException"), status=400)
        waiter = ddb.table_not_exists(TableName="users")
        assert waiter.wait() is True
        assert waiter.is_success()
