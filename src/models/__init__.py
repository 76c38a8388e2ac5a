"""Pydantic models for API payloads."""

from models.knowledge import (  # noqa: F401
    AnswerLink,
    FormattedAnswer,
    KnowledgeRecord,
    ScoredCandidate,
)
from models.lead import LeadRequest, LeadResult  # noqa: F401
from models.response import ChatErrorResponse, ChatResponse  # noqa: F401
