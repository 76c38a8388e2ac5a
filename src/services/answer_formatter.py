"""
Turn a knowledge record's raw answer into display-ready text and links.

Answers are written in Notion with a small markdown subset (bold, italics,
``- `` bullets, ``##``/``###`` headings). Line-anchored rules run before
newlines are collapsed into ``<br>``.
"""

from __future__ import annotations

import re
from typing import List

from models.knowledge import AnswerLink, FormattedAnswer, KnowledgeRecord
from utils.logging_config import get_logger

logger = get_logger(__name__)

ANSWER_ERROR_TEXT = "Error al procesar la respuesta."

H4_STYLE = "margin: 15px 0 10px 0; font-weight: 600; color: #2c3e50;"
H3_STYLE = "margin: 20px 0 12px 0; font-weight: 700; color: #1a365d;"

_BOLD = re.compile(r"\*\*(.*?)\*\*")
_ITALIC = re.compile(r"\*(.*?)\*")
_BULLET = re.compile(r"^- (.*)$", re.MULTILINE)
_H4 = re.compile(r"^### (.*)$", re.MULTILINE)
_H3 = re.compile(r"^## (.*)$", re.MULTILINE)


def format_markup(text: str) -> str:
    """Translate the answer markup subset into inline HTML."""
    text = _BOLD.sub(r"<strong>\1</strong>", text)
    text = _ITALIC.sub(r"<em>\1</em>", text)
    text = _BULLET.sub(r"• \1", text)
    text = _H4.sub(rf'<h4 style="{H4_STYLE}">\1</h4>', text)
    text = _H3.sub(rf'<h3 style="{H3_STYLE}">\1</h3>', text)
    return text.replace("\n", "<br>")


def parse_links(raw: str) -> List[AnswerLink]:
    """Parse ``title|url`` pairs separated by commas, dropping incomplete pairs."""
    links: List[AnswerLink] = []
    if not raw:
        return links
    for piece in raw.split(","):
        title, sep, url = piece.partition("|")
        title, url = title.strip(), url.strip()
        if sep and title and url:
            links.append(AnswerLink(title=title, url=url))
    return links


def format_answer(record: KnowledgeRecord) -> FormattedAnswer:
    """Build the formatted answer for a matched record."""
    try:
        return FormattedAnswer(
            text=format_markup(record.answer),
            links=parse_links(record.links),
        )
    except Exception as exc:
        logger.error(
            "Answer extraction failed",
            extra={"record_id": record.id, "error": str(exc)},
        )
        return FormattedAnswer(text=ANSWER_ERROR_TEXT, links=[])
