"""
Plain-value extraction from Notion property objects.

Notion pages expose a property bag where every value is tagged with a
``type``. Only the kinds the chatbot reads are recognised; anything else
degrades to an empty value instead of raising.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class PropertyKind(str, Enum):
    """Property kinds the extractor understands."""

    TITLE = "title"
    RICH_TEXT = "rich_text"
    MULTI_SELECT = "multi_select"
    OTHER = "other"

    @classmethod
    def of(cls, prop: Optional[Dict[str, Any]]) -> "PropertyKind":
        """Classify a raw property; unknown or missing types map to OTHER."""
        if not prop:
            return cls.OTHER
        try:
            return cls(prop.get("type"))
        except ValueError:
            return cls.OTHER


def _join_runs(runs: List[Dict[str, Any]]) -> str:
    return "".join(run.get("plain_text", "") for run in runs)


def get_plain_text(prop: Optional[Dict[str, Any]]) -> str:
    """Concatenate the text runs of a title or rich_text property."""
    kind = PropertyKind.of(prop)
    if kind is PropertyKind.TITLE:
        return _join_runs(prop["title"])
    if kind is PropertyKind.RICH_TEXT:
        return _join_runs(prop["rich_text"])
    return ""


def get_multi_select(prop: Optional[Dict[str, Any]]) -> List[str]:
    """Return the tag names of a multi_select property, in order."""
    if PropertyKind.of(prop) is not PropertyKind.MULTI_SELECT:
        return []
    return [item["name"] for item in prop["multi_select"]]


def get_checkbox(prop: Optional[Dict[str, Any]]) -> bool:
    """Return the value of a checkbox property (False when absent)."""
    if not isinstance(prop, dict) or prop.get("type") != "checkbox":
        return False
    return bool(prop.get("checkbox"))


def title_value(content: str) -> Dict[str, Any]:
    """Build a title property payload for page creation."""
    return {"title": [{"text": {"content": content}}]}


def rich_text_value(content: str) -> Dict[str, Any]:
    """Build a rich_text property payload for page creation."""
    return {"rich_text": [{"text": {"content": content}}]}
