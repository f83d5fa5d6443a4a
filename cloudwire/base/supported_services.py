from typing import Literal


existing_services = Literal[
    "cloudformation",
    "dynamodb",
    "sqs",
]
