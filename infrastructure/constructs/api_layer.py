"""
API layer construct: chatbot Lambda + HTTP API routes.

Code is bundled with its dependencies using Docker (runs in CI/CD).
"""

from aws_cdk import (
    BundlingOptions,
    Duration,
    aws_lambda as _lambda,
    aws_apigatewayv2 as apigw,
    aws_apigatewayv2_integrations as integrations,
    aws_logs as logs,
    aws_secretsmanager as secretsmanager,
)
from constructs import Construct


class ApiLayerConstruct(Construct):
    """Expose the chat and health endpoints via HTTP API."""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        environment: str,
        notion_secret: secretsmanager.ISecret,
        notion_database_id: str,
        notion_leads_database_id: str,
        notion_version: str,
        notion_timeout_seconds: int = 10,
        lambda_memory_mb: int = 256,
        lambda_timeout_seconds: int = 15,
    ) -> None:
        super().__init__(scope, construct_id)

        bundled_code = _lambda.Code.from_asset(
            "src",
            bundling=BundlingOptions(
                image=_lambda.Runtime.PYTHON_3_12.bundling_image,
                command=[
                    "bash", "-c",
                    "pip install -r requirements-lambda.txt -t /asset-output && "
                    "cp -r . /asset-output"
                ],
            ),
        )

        self.main_lambda = _lambda.Function(
            self,
            "ChatHandler",
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler="handlers.main.lambda_handler",
            code=bundled_code,
            memory_size=lambda_memory_mb,
            # Notion calls must time out before the function does
            timeout=Duration.seconds(max(lambda_timeout_seconds, notion_timeout_seconds + 5)),
            architecture=_lambda.Architecture.X86_64,
            environment={
                "ENVIRONMENT": environment,
                "NOTION_SECRET_ARN": notion_secret.secret_arn,
                "NOTION_DATABASE_ID": notion_database_id,
                "NOTION_LEADS_DATABASE_ID": notion_leads_database_id,
                "NOTION_VERSION": notion_version,
                "NOTION_TIMEOUT_SECONDS": str(notion_timeout_seconds),
            },
            log_retention=logs.RetentionDays.ONE_WEEK,
        )
        notion_secret.grant_read(self.main_lambda)

        # No cors_preflight: the chat handler answers OPTIONS itself.
        self.api = apigw.HttpApi(
            self,
            "HttpApi",
            api_name=f"notion-chatbot-api-{environment}",
        )

        integration = integrations.HttpLambdaIntegration(
            "LambdaIntegration", self.main_lambda
        )

        route_defs = [
            (apigw.HttpMethod.ANY, "/api/chat"),
            (apigw.HttpMethod.GET, "/health"),
        ]

        for method, path in route_defs:
            self.api.add_routes(
                path=path,
                methods=[method],
                integration=integration,
            )
