"""cloudwire CLI: quick service calls from the command line.

Usage examples::

    cloudwire --service dynamodb list-tables
    cloudwire --service cloudformation describe-stacks --kwargs '{"StackName": "web"}'
    cloudwire -s dynamodb -c '{"region_name": "eu-west-1"}' table-exists -k '{"TableName": "users"}'
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, get_args

from cloudwire.base.exceptions import CloudwireError
from cloudwire.base.supported_services import existing_services


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the ``cloudwire`` CLI.

    Returns:
        Configured :class:`~argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(
        prog="cloudwire",
        description="Call AWS service operations",
    )
    parser.add_argument(
        "--service", "-s",
        required=True,
        choices=list(get_args(existing_services)),
        help="Service",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        default="{}",
        help='JSON config string (e.g. \'{"region_name":"us-east-1"}\')',
    )
    parser.add_argument(
        "operation",
        help="Operation to perform (method name, e.g. list-tables)",
    )
    parser.add_argument(
        "--kwargs", "-k",
        type=str,
        default="{}",
        help="JSON input of the operation, keyed by wire names",
    )
    return parser


def _render(result: Any) -> str:
    # Waiters expose a state, results a payload.
    if hasattr(result, "is_success"):
        if result.is_success():
            return "success"
        return "failure" if result.is_failure() else "pending"
    return json.dumps(result.to_dict(), indent=2, default=str)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point.

    Parses arguments, creates a client via the universal factory, invokes the
    requested operation and prints the first page of the result as JSON.

    Args:
        argv: Optional argument list (defaults to ``sys.argv``).
    """
    parser = _build_parser()
    ns = parser.parse_args(argv)

    try:
        config: dict[str, Any] = json.loads(ns.config)
    except json.JSONDecodeError as e:
        print(f"Invalid --config JSON: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        kwargs: dict[str, Any] = json.loads(ns.kwargs)
    except json.JSONDecodeError as e:
        print(f"Invalid --kwargs JSON: {e}", file=sys.stderr)
        sys.exit(1)

    from cloudwire.factory import universal_factory

    try:
        client = universal_factory(ns.service, config, cache=False)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    # Convert operation-name to method_name
    method_name = ns.operation.replace("-", "_")
    method = getattr(client, method_name, None)
    if method_name.startswith("_") or method is None or not callable(method):
        print(f"Unknown operation '{ns.operation}' for {ns.service}", file=sys.stderr)
        sys.exit(1)

    try:
        output = _render(method(kwargs))
    except (CloudwireError, ValueError) as e:
        print(f"Operation failed: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        client.close()

    print(output)


if __name__ == "__main__":
    main()
