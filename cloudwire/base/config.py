"""
Pydantic configuration model for service clients.

Validates client configs at initialization time instead of
silently passing bad values to the HTTP and signing layers.
"""

from __future__ import annotations

import os
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, model_validator


class AWSConfig(BaseModel):
    """Configuration shared by every service client.

    Credentials are resolved in order:
    1. Explicit values passed in the config dict.
    2. Environment variables (AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY,
       AWS_SESSION_TOKEN, AWS_PROFILE, AWS_REGION / AWS_DEFAULT_REGION).
    3. If neither is set, fields are left as None so boto3 can fall back to its
       own credential chain (instance metadata, ~/.aws/credentials, etc.).
    """

    model_config = ConfigDict(extra="forbid")

    aws_access_key_id: str | None = Field(default=None, description="AWS access key ID")
    aws_secret_access_key: str | None = Field(default=None, description="AWS secret access key")
    aws_session_token: str | None = Field(default=None, description="Temporary session token")
    profile_name: str | None = Field(default=None, description="Shared config profile")
    region_name: str | None = Field(default=None, description="AWS region (e.g. 'us-east-1')")
    endpoint: str | None = Field(
        default=None, description="Endpoint override (e.g. 'http://localhost:4566')"
    )
    max_attempts: int = Field(default=3, ge=1, description="Total attempts per HTTP call")
    retry_base_delay: float = Field(default=0.5, ge=0, description="First retry delay in seconds")
    timeout: float = Field(default=60.0, gt=0, description="HTTP timeout in seconds")
    max_concurrency: int = Field(default=10, ge=1, description="Size of the request thread pool")
    prefetch_pages: bool = Field(
        default=True, description="Request the next page while the current one is consumed"
    )

    @model_validator(mode="before")
    @classmethod
    def resolve_from_env(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Fall back to environment variables for missing settings."""
        env_map = {
            "aws_access_key_id": ("AWS_ACCESS_KEY_ID",),
            "aws_secret_access_key": ("AWS_SECRET_ACCESS_KEY",),
            "aws_session_token": ("AWS_SESSION_TOKEN",),
            "profile_name": ("AWS_PROFILE",),
            "region_name": ("AWS_REGION", "AWS_DEFAULT_REGION"),
            "endpoint": ("AWS_ENDPOINT_URL",),
        }
        for field, env_vars in env_map.items():
            if not values.get(field):
                values[field] = next(
                    (os.environ[var] for var in env_vars if os.environ.get(var)), None
                )
        if "max_attempts" not in values and os.environ.get("AWS_MAX_ATTEMPTS"):
            values["max_attempts"] = os.environ["AWS_MAX_ATTEMPTS"]
        return values


def validate_config(config: AWSConfig | dict | None) -> AWSConfig:
    """Validate and return a typed client config.

    Args:
        config: Raw configuration dictionary, an already validated
            :class:`AWSConfig`, or None for an environment-only config.

    Returns:
        A validated :class:`AWSConfig`.

    Raises:
        pydantic.ValidationError: If the config is invalid.
    """
    if isinstance(config, AWSConfig):
        return config
    return AWSConfig(**(config or {}))


__all__ = [
    "AWSConfig",
    "validate_config",
]
