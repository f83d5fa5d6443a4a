"""Enumerated string values of the SQS API."""

from enum import Enum


class QueueAttributeName(str, Enum):
    ALL = "All"
    APPROXIMATE_NUMBER_OF_MESSAGES = "ApproximateNumberOfMessages"
    APPROXIMATE_NUMBER_OF_MESSAGES_DELAYED = "ApproximateNumberOfMessagesDelayed"
    APPROXIMATE_NUMBER_OF_MESSAGES_NOT_VISIBLE = "ApproximateNumberOfMessagesNotVisible"
    CONTENT_BASED_DEDUPLICATION = "ContentBasedDeduplication"
    CREATED_TIMESTAMP = "CreatedTimestamp"
    DELAY_SECONDS = "DelaySeconds"
    FIFO_QUEUE = "FifoQueue"
    KMS_MASTER_KEY_ID = "KmsMasterKeyId"
    LAST_MODIFIED_TIMESTAMP = "LastModifiedTimestamp"
    MAXIMUM_MESSAGE_SIZE = "MaximumMessageSize"
    MESSAGE_RETENTION_PERIOD = "MessageRetentionPeriod"
    POLICY = "Policy"
    QUEUE_ARN = "QueueArn"
    RECEIVE_MESSAGE_WAIT_TIME_SECONDS = "ReceiveMessageWaitTimeSeconds"
    REDRIVE_POLICY = "RedrivePolicy"
    VISIBILITY_TIMEOUT = "VisibilityTimeout"
