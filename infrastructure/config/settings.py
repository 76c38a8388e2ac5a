"""
Environment-specific deployment settings.

Small Lambda defaults; the Notion database ids are supplied at synth time.
"""

from dataclasses import dataclass
import os


@dataclass
class Settings:
    """Deployment settings for the chatbot stack."""

    # Environment
    environment: str = "dev"
    aws_region: str = "eu-west-2"  # Default AWS region

    # Notion databases (the token itself lives in Secrets Manager)
    notion_database_id: str = ""
    notion_leads_database_id: str = ""
    notion_version: str = "2022-06-28"

    # Lambda Configuration
    lambda_memory_mb: int = 256
    lambda_timeout_seconds: int = 15
    notion_timeout_seconds: int = 10

    @classmethod
    def from_environment(cls) -> "Settings":
        """Load settings from environment variables."""
        env = os.environ.get("ENVIRONMENT", "dev")
        common = dict(
            environment=env,
            aws_region=os.environ.get("AWS_REGION", "eu-west-2"),
            notion_database_id=os.environ.get("NOTION_DATABASE_ID", ""),
            notion_leads_database_id=os.environ.get("NOTION_LEADS_DATABASE_ID", ""),
        )

        # Production overrides
        if env == "prod":
            return cls(**common, lambda_memory_mb=512, lambda_timeout_seconds=30)

        return cls(**common)
