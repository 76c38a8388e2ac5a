"""
Runtime settings loaded once per Lambda container.

The Notion token is read from NOTION_TOKEN when present; deployed stacks
instead pass NOTION_SECRET_ARN and the token is fetched from Secrets Manager.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Optional

import boto3

from utils.error_handling import ConfigurationError
from utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Settings:
    """Read-only configuration passed to services and repositories."""

    notion_token: str
    knowledge_database_id: str
    leads_database_id: str = ""
    notion_version: str = "2022-06-28"
    timeout_seconds: float = 10.0
    max_records: int = 100
    environment: str = "dev"

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        token = os.environ.get("NOTION_TOKEN") or _token_from_secret(
            os.environ.get("NOTION_SECRET_ARN")
        )
        if not token:
            raise ConfigurationError("Notion token not configured")

        database_id = os.environ.get("NOTION_DATABASE_ID", "")
        if not database_id:
            raise ConfigurationError("NOTION_DATABASE_ID not configured")

        return cls(
            notion_token=token,
            knowledge_database_id=database_id,
            leads_database_id=os.environ.get("NOTION_LEADS_DATABASE_ID", ""),
            notion_version=os.environ.get("NOTION_VERSION", "2022-06-28"),
            timeout_seconds=float(os.environ.get("NOTION_TIMEOUT_SECONDS", "10")),
            max_records=int(os.environ.get("NOTION_MAX_RECORDS", "100")),
            environment=os.environ.get("ENVIRONMENT", "dev"),
        )


def _token_from_secret(secret_arn: Optional[str]) -> Optional[str]:
    """Fetch the Notion token from Secrets Manager.

    The secret may hold the raw token or a JSON document with a ``token`` key.
    """
    if not secret_arn:
        return None
    try:
        sm = boto3.client("secretsmanager")
        secret_value = sm.get_secret_value(SecretId=secret_arn)["SecretString"]
    except Exception as exc:
        logger.warning("Failed to load Notion secret", extra={"error": str(exc)})
        return None

    try:
        secret = json.loads(secret_value)
    except ValueError:
        return secret_value.strip() or None
    if isinstance(secret, dict):
        return secret.get("token")
    return str(secret)
