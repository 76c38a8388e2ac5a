"""Common response wrappers."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class ChatResponse(BaseModel):
    """Successful chat answer envelope."""

    success: bool = True
    answer: str
    timestamp: str = Field(default_factory=_utc_now_iso)


class ChatErrorResponse(BaseModel):
    """Envelope returned when answering fails unexpectedly."""

    success: bool = False
    answer: str
