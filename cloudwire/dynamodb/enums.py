"""Enumerated string values of the DynamoDB API."""

from enum import Enum


class KeyType(str, Enum):
    HASH = "HASH"
    RANGE = "RANGE"


class ScalarAttributeType(str, Enum):
    B = "B"
    N = "N"
    S = "S"


class ProjectionType(str, Enum):
    ALL = "ALL"
    INCLUDE = "INCLUDE"
    KEYS_ONLY = "KEYS_ONLY"


class BillingMode(str, Enum):
    PAY_PER_REQUEST = "PAY_PER_REQUEST"
    PROVISIONED = "PROVISIONED"


class TableClass(str, Enum):
    STANDARD = "STANDARD"
    STANDARD_INFREQUENT_ACCESS = "STANDARD_INFREQUENT_ACCESS"


class TableStatus(str, Enum):
    ACTIVE = "ACTIVE"
    ARCHIVED = "ARCHIVED"
    ARCHIVING = "ARCHIVING"
    CREATING = "CREATING"
    DELETING = "DELETING"
    INACCESSIBLE_ENCRYPTION_CREDENTIALS = "INACCESSIBLE_ENCRYPTION_CREDENTIALS"
    UPDATING = "UPDATING"


class IndexStatus(str, Enum):
    ACTIVE = "ACTIVE"
    CREATING = "CREATING"
    DELETING = "DELETING"
    UPDATING = "UPDATING"


class StreamViewType(str, Enum):
    KEYS_ONLY = "KEYS_ONLY"
    NEW_AND_OLD_IMAGES = "NEW_AND_OLD_IMAGES"
    NEW_IMAGE = "NEW_IMAGE"
    OLD_IMAGE = "OLD_IMAGE"


class SSEType(str, Enum):
    AES256 = "AES256"
    KMS = "KMS"


class ReturnValue(str, Enum):
    ALL_NEW = "ALL_NEW"
    ALL_OLD = "ALL_OLD"
    NONE = "NONE"
    UPDATED_NEW = "UPDATED_NEW"
    UPDATED_OLD = "UPDATED_OLD"


class ReturnConsumedCapacity(str, Enum):
    INDEXES = "INDEXES"
    NONE = "NONE"
    TOTAL = "TOTAL"


class ReturnItemCollectionMetrics(str, Enum):
    NONE = "NONE"
    SIZE = "SIZE"


class ReturnValuesOnConditionCheckFailure(str, Enum):
    ALL_OLD = "ALL_OLD"
    NONE = "NONE"


class Select(str, Enum):
    ALL_ATTRIBUTES = "ALL_ATTRIBUTES"
    ALL_PROJECTED_ATTRIBUTES = "ALL_PROJECTED_ATTRIBUTES"
    COUNT = "COUNT"
    SPECIFIC_ATTRIBUTES = "SPECIFIC_ATTRIBUTES"
