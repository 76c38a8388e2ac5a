"""
Chat handler for /api/chat.

POST bodies either carry a ``message`` to answer from the knowledge base or
``{"action": "capture_lead", "leadData": {...}}`` to store a contact request.
Every response carries permissive CORS headers for the embedded widget.
"""

from __future__ import annotations

import base64
import binascii
import json
import uuid
from typing import Any, Dict, Optional

from models.lead import LeadResult
from models.response import ChatErrorResponse, ChatResponse
from utils.error_handling import (
    ConfigurationError,
    MethodNotAllowedError,
    ValidationError,
    to_response,
)
from utils.logging_config import get_logger
from utils.responses import build_response
from utils.validators import ensure_non_empty_string

logger = get_logger(__name__)

CAPTURE_LEAD_ACTION = "capture_lead"
TECHNICAL_ERROR_TEXT = (
    "Lo siento, ha ocurrido un error técnico. Por favor, contacta con nuestro "
    "equipo para una consulta personalizada sobre financiación ENISA."
)

# Lazy-loaded services to avoid reading configuration at import time
_repository: Optional["NotionRepository"] = None
_knowledge_service: Optional["KnowledgeService"] = None
_lead_service: Optional["LeadService"] = None


def _get_repository():
    """Lazy-load the shared NotionRepository."""
    global _repository
    if _repository is None:
        from config.settings import Settings
        from repositories.notion_repo import NotionRepository
        _repository = NotionRepository(Settings.from_environment())
    return _repository


def _get_knowledge_service():
    """Lazy-load KnowledgeService."""
    global _knowledge_service
    if _knowledge_service is None:
        from services.knowledge_service import KnowledgeService
        repository = _get_repository()
        _knowledge_service = KnowledgeService(repository.settings, repository)
    return _knowledge_service


def _get_lead_service():
    """Lazy-load LeadService."""
    global _lead_service
    if _lead_service is None:
        from services.lead_service import LeadService
        repository = _get_repository()
        _lead_service = LeadService(repository.settings, repository)
    return _lead_service


def _capture_lead(lead_data: Dict[str, Any], correlation_id: str) -> LeadResult:
    """Run lead capture; missing configuration is reported like any other lead failure."""
    try:
        lead_service = _get_lead_service()
    except ConfigurationError:
        logger.exception("Lead service unavailable", extra={"correlation_id": correlation_id})
        from services.lead_service import LEAD_FAILURE_TEXT
        return LeadResult(success=False, message=LEAD_FAILURE_TEXT)
    return lead_service.capture_lead(lead_data)


def _http_method(event: Dict[str, Any]) -> str:
    method = event.get("requestContext", {}).get("http", {}).get("method")
    return (method or event.get("httpMethod") or "").upper()


def _parse_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """Decode the JSON body; anything unreadable becomes an empty payload."""
    body = event.get("body")
    if isinstance(body, dict):
        return body
    if not body:
        return {}
    try:
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body).decode("utf-8")
        payload = json.loads(body)
    except (binascii.Error, UnicodeDecodeError, ValueError):
        logger.warning("Unreadable request body")
        return {}
    return payload if isinstance(payload, dict) else {}


def lambda_handler(event, context):
    """Route a chat request by method and payload shape."""
    method = _http_method(event)
    if method == "OPTIONS":
        return build_response(200)
    if method != "POST":
        return to_response(MethodNotAllowedError())

    correlation_id = str(uuid.uuid4())
    payload = _parse_body(event)

    try:
        lead_data = payload.get("leadData")
        if payload.get("action") == CAPTURE_LEAD_ACTION and isinstance(lead_data, dict):
            result = _capture_lead(lead_data, correlation_id)
            logger.info(
                "Lead request handled",
                extra={"correlation_id": correlation_id, "success": result.success},
            )
            return build_response(200, result.model_dump_json())

        message = ensure_non_empty_string(payload.get("message"), "Message is required")
        logger.info(
            "Message received",
            extra={"correlation_id": correlation_id, "message_length": len(message)},
        )
        answer = _get_knowledge_service().search(message)
        return build_response(200, ChatResponse(answer=answer).model_dump_json())

    except ValidationError as exc:
        return to_response(exc)
    except Exception:
        logger.exception("Chat request failed", extra={"correlation_id": correlation_id})
        return build_response(
            500, ChatErrorResponse(answer=TECHNICAL_ERROR_TEXT).model_dump_json()
        )
