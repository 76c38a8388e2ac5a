"""Lightweight health check handler."""

import os
from datetime import datetime, timezone

from utils.responses import build_response


def lambda_handler(event, context):
    """Return a simple 200 response to verify the function is alive."""
    return build_response(
        200,
        {
            "status": "ok",
            "environment": os.environ.get("ENVIRONMENT", "dev"),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )
