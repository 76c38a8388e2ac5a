"""
Main CDK Stack for the Notion FAQ chatbot.
"""

from aws_cdk import (
    Stack,
    Tags,
    CfnOutput,
    aws_secretsmanager as secretsmanager,
)
from constructs import Construct

from infrastructure.constructs.api_layer import ApiLayerConstruct
from infrastructure.config.settings import Settings


class ChatbotStack(Stack):
    """Main stack wiring the secret and API layer together."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        settings: Settings,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        Tags.of(self).add("Project", "notion-chatbot")
        Tags.of(self).add("Environment", settings.environment)
        Tags.of(self).add("ManagedBy", "cdk")

        # 1) Notion integration token; the value is set out of band after deploy.
        notion_secret = secretsmanager.Secret(
            self,
            "NotionToken",
            secret_name=f"notion-chatbot/{settings.environment}/notion-token",
            description="Notion integration token for the FAQ chatbot",
        )

        # 2) API layer (single Lambda).
        api_construct = ApiLayerConstruct(
            self,
            "ApiLayer",
            environment=settings.environment,
            notion_secret=notion_secret,
            notion_database_id=settings.notion_database_id,
            notion_leads_database_id=settings.notion_leads_database_id,
            notion_version=settings.notion_version,
            notion_timeout_seconds=settings.notion_timeout_seconds,
            lambda_memory_mb=settings.lambda_memory_mb,
            lambda_timeout_seconds=settings.lambda_timeout_seconds,
        )

        CfnOutput(self, "ApiEndpoint", value=api_construct.api.api_endpoint)
        CfnOutput(self, "NotionSecretArn", value=notion_secret.secret_arn)
