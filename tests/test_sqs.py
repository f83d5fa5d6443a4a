"""Tests for the SQS client."""

from unittest.mock import patch

import pytest

from cloudwire.base.exceptions import (
    InvalidArgument,
    QueueAlreadyExistsError,
    QueueNotFoundError,
    ReceiptHandleInvalidError,
)
from cloudwire.sqs import SqsClient
from cloudwire.sqs.enums import QueueAttributeName

from conftest import CONFIG, form

NS = 'xmlns="http://queue.amazonaws.com/doc/2012-11-05/"'
URL = "https://sqs.us-east-1.amazonaws.com/123456789012/jobs"


def _response(action: str, result: str = "") -> str:
    body = f"<{action}Result>{result}</{action}Result>" if result else ""
    return (
        f"<{action}Response {NS}>{body}"
        f"<ResponseMetadata><RequestId>r-1</RequestId></ResponseMetadata></{action}Response>"
    )


def _error(code: str, message: str = "error") -> str:
    return (
        f"<ErrorResponse {NS}><Error><Type>Sender</Type><Code>{code}</Code>"
        f"<Message>{message}</Message><Detail/></Error><RequestId>r-1</RequestId></ErrorResponse>"
    )


@pytest.fixture
def sqs(http):
    client = SqsClient(CONFIG, http_session=http)
    yield client
    client.close()


# --- create_queue ---

class TestCreateQueue:
    def test_success(self, sqs, http):
        http.add_response(_response("CreateQueue", f"<QueueUrl>{URL}</QueueUrl>"))
        result = sqs.create_queue(
            QueueName="jobs",
            Attributes={QueueAttributeName.DELAY_SECONDS.value: "5", "VisibilityTimeout": "30"},
        )
        assert result.queue_url == URL
        params = form(http.requests[0])
        assert params["Action"] == "CreateQueue"
        assert params["Version"] == "2012-11-05"
        assert params["Attribute.1.Name"] == "DelaySeconds"
        assert params["Attribute.1.Value"] == "5"
        assert params["Attribute.2.Name"] == "VisibilityTimeout"
        assert http.requests[0].url == "https://sqs.us-east-1.amazonaws.com/"

    def test_already_exists(self, sqs, http):
        http.add_response(_error("QueueAlreadyExists"), status=400)
        with pytest.raises(QueueAlreadyExistsError):
            sqs.create_queue(QueueName="jobs").queue_url


# --- delete_queue ---

class TestDeleteQueue:
    def test_success(self, sqs, http):
        http.add_response(_response("DeleteQueue"))
        assert sqs.delete_queue(QueueUrl=URL).resolve()
        assert form(http.requests[0]) == {
            "Action": "DeleteQueue",
            "Version": "2012-11-05",
            "QueueUrl": URL,
        }

    def test_requires_queue_url(self, sqs):
        with pytest.raises(InvalidArgument) as exc:
            sqs.delete_queue()
        assert str(exc.value) == (
            'Missing parameter "QueueUrl" for "DeleteQueueRequest". The value cannot be null.'
        )

    def test_not_found(self, sqs, http):
        http.add_response(_error("AWS.SimpleQueueService.NonExistentQueue"), status=400)
        with pytest.raises(QueueNotFoundError):
            sqs.delete_queue(QueueUrl=URL).resolve()


# --- get_queue_url ---

class TestGetQueueUrl:
    def test_success(self, sqs, http):
        http.add_response(_response("GetQueueUrl", f"<QueueUrl>{URL}</QueueUrl>"))
        assert sqs.get_queue_url(QueueName="jobs").queue_url == URL

    def test_not_found(self, sqs, http):
        http.add_response(_error("QueueDoesNotExist"), status=400)
        with pytest.raises(QueueNotFoundError):
            sqs.get_queue_url(QueueName="missing").queue_url


# --- list_queues ---

class TestListQueues:
    def test_paginates(self, sqs, http):
        http.add_response(_response(
            "ListQueues",
            f"<QueueUrl>{URL}-1</QueueUrl><QueueUrl>{URL}-2</QueueUrl><NextToken>n1</NextToken>",
        ))
        http.add_response(_response("ListQueues", f"<QueueUrl>{URL}-3</QueueUrl>"))
        urls = list(sqs.list_queues(QueueNamePrefix="jobs", MaxResults=2))
        assert urls == [f"{URL}-1", f"{URL}-2", f"{URL}-3"]
        params = form(http.requests[1])
        assert params["NextToken"] == "n1"
        assert params["QueueNamePrefix"] == "jobs"

    def test_empty(self, sqs, http):
        http.add_response(_response("ListQueues"))
        assert list(sqs.list_queues()) == []


# --- messages ---

class TestSendMessage:
    def test_success(self, sqs, http):
        http.add_response(_response(
            "SendMessage",
            "<MD5OfMessageBody>5d41402abc4b2a76b9719d911017c592</MD5OfMessageBody>"
            "<MessageId>m-1</MessageId>",
        ))
        result = sqs.send_message(
            QueueUrl=URL,
            MessageBody="hello",
            DelaySeconds=5,
            MessageAttributes={"color": {"DataType": "String", "StringValue": "blue"}},
        )
        assert result.message_id == "m-1"
        assert result.md5_of_message_body == "5d41402abc4b2a76b9719d911017c592"
        params = form(http.requests[0])
        assert params["MessageBody"] == "hello"
        assert params["DelaySeconds"] == "5"
        assert params["MessageAttribute.1.Name"] == "color"
        assert params["MessageAttribute.1.Value.DataType"] == "String"
        assert params["MessageAttribute.1.Value.StringValue"] == "blue"

    def test_attribute_requires_data_type(self, sqs):
        with pytest.raises(InvalidArgument, match='"DataType" for "MessageAttributeValue"'):
            sqs.send_message(
                QueueUrl=URL, MessageBody="hi", MessageAttributes={"a": {"StringValue": "x"}}
            )


class TestReceiveMessage:
    def test_success(self, sqs, http):
        http.add_response(_response(
            "ReceiveMessage",
            "<Message><MessageId>m-1</MessageId><ReceiptHandle>h-1</ReceiptHandle>"
            "<Body>hello</Body>"
            "<Attribute><Name>ApproximateReceiveCount</Name><Value>1</Value></Attribute>"
            "</Message>",
        ))
        result = sqs.receive_message(
            QueueUrl=URL, AttributeNames=["All"], MaxNumberOfMessages=10, WaitTimeSeconds=20
        )
        (message,) = list(result)
        assert message.body == "hello"
        assert message.receipt_handle == "h-1"
        assert message.attributes == {"ApproximateReceiveCount": "1"}
        params = form(http.requests[0])
        assert params["AttributeName.1"] == "All"
        assert params["WaitTimeSeconds"] == "20"

    def test_no_messages(self, sqs, http):
        http.add_response(_response("ReceiveMessage", ""))
        assert sqs.receive_message(QueueUrl=URL).messages == []


class TestDeleteMessage:
    def test_success(self, sqs, http):
        http.add_response(_response("DeleteMessage"))
        sqs.delete_message(QueueUrl=URL, ReceiptHandle="h-1").resolve()
        assert form(http.requests[0])["ReceiptHandle"] == "h-1"

    def test_invalid_receipt_handle(self, sqs, http):
        http.add_response(_error("ReceiptHandleIsInvalid"), status=400)
        with pytest.raises(ReceiptHandleInvalidError):
            sqs.delete_message(QueueUrl=URL, ReceiptHandle="bad").resolve()


# --- waiters ---

class TestQueueExists:
    @patch("cloudwire.base.waiter.time.sleep")
    def test_waits_for_queue(self, mock_sleep, sqs, http):
        http.add_response(_error("AWS.SimpleQueueService.NonExistentQueue"), status=400)
        http.add_response(_response("GetQueueUrl", f"<QueueUrl>{URL}</QueueUrl>"))
        assert sqs.queue_exists(QueueName="jobs").wait() is True
        assert len(http.requests) == 2
        mock_sleep.assert_called_once_with(5.0)
