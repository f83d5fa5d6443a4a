"""SQS records shared by inputs and results."""

from __future__ import annotations

from cloudwire.base.shape import Shape, member


class MessageAttributeValue(Shape):
    """Typed user attribute of a message.

    ``DataType`` is ``String``, ``Number`` or ``Binary``, optionally followed
    by a custom suffix (``Number.float``).
    """

    string_value: str | None = member("StringValue")
    binary_value: bytes | None = member("BinaryValue")
    string_list_values: list[str] | None = member(
        "StringListValues", flattened=True, location="StringListValue"
    )
    binary_list_values: list[bytes] | None = member(
        "BinaryListValues", flattened=True, location="BinaryListValue"
    )
    data_type: str | None = member("DataType", required=True)


class Message(Shape):
    message_id: str | None = member("MessageId")
    receipt_handle: str | None = member("ReceiptHandle")
    md5_of_body: str | None = member("MD5OfBody")
    body: str | None = member("Body")
    attributes: dict[str, str] | None = member(
        "Attributes", flattened=True, location="Attribute", key="Name", value="Value"
    )
    md5_of_message_attributes: str | None = member("MD5OfMessageAttributes")
    message_attributes: dict[str, MessageAttributeValue] | None = member(
        "MessageAttributes",
        flattened=True,
        location="MessageAttribute",
        key="Name",
        value="Value",
    )
