"""Knowledge base models."""

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from utils.notion_properties import get_checkbox, get_multi_select, get_plain_text


class KnowledgeRecord(BaseModel):
    """One knowledge-base page as returned by the Notion query endpoint.

    Properties are kept raw and extracted on access so a malformed page only
    fails where it is read.
    """

    id: str = ""
    properties: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_page(cls, page: Any) -> "KnowledgeRecord":
        """Wrap a query result; a malformed page becomes an empty record."""
        if not isinstance(page, dict):
            return cls()
        properties = page.get("properties")
        return cls(
            id=str(page.get("id") or ""),
            properties=properties if isinstance(properties, dict) else {},
        )

    @property
    def question(self) -> str:
        return get_plain_text(self.properties.get("Pregunta"))

    @property
    def answer(self) -> str:
        return get_plain_text(self.properties.get("Respuesta"))

    @property
    def keywords(self) -> List[str]:
        return get_multi_select(self.properties.get("Keywords"))

    @property
    def links(self) -> str:
        return get_plain_text(self.properties.get("Enlaces"))

    @property
    def active(self) -> bool:
        return get_checkbox(self.properties.get("Activo"))


class ScoredCandidate(BaseModel):
    """A record paired with its relevance score for a single search."""

    record: KnowledgeRecord
    score: float


class AnswerLink(BaseModel):
    """Link shown under an answer."""

    title: str
    url: str


class FormattedAnswer(BaseModel):
    """Display-ready answer: HTML-ish text plus structured links."""

    text: str
    links: List[AnswerLink] = Field(default_factory=list)
