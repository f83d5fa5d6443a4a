"""Protocol-independent core shared by every service binding.

Import from here to type-hint your own code or to write bindings for
another service.
"""

from .client import AbstractApi, JsonApi, QueryApi
from .config import AWSConfig
from .json_protocol import JsonInput
from .query_protocol import QueryInput
from .response import Response
from .result import JsonResult, QueryResult, Result, ResultField
from .shape import Input, Shape, member
from .supported_services import existing_services
from .waiter import Waiter


__all__ = [
    "AbstractApi",
    "JsonApi",
    "QueryApi",
    "AWSConfig",
    "Input",
    "JsonInput",
    "QueryInput",
    "Shape",
    "member",
    "Response",
    "Result",
    "ResultField",
    "QueryResult",
    "JsonResult",
    "Waiter",
    "existing_services",
]
