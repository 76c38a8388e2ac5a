"""
Keyword/token relevance heuristic used to pick the best knowledge record.

The weights and threshold are fixed behaviour, not tuning knobs.
"""

from __future__ import annotations

from typing import Iterable, Optional

from models.knowledge import KnowledgeRecord, ScoredCandidate
from utils.logging_config import get_logger

logger = get_logger(__name__)

KEYWORD_WEIGHT = 0.3
QUESTION_TOKEN_WEIGHT = 0.2
MIN_TOKEN_LENGTH = 3
MATCH_THRESHOLD = 0.1


def calculate_relevance_score(record: KnowledgeRecord, normalized_query: str) -> float:
    """
    Score a record against an already lowercased query.

    Every keyword contained in the query adds KEYWORD_WEIGHT. Every question
    token longer than MIN_TOKEN_LENGTH that appears inside some query token
    adds QUESTION_TOKEN_WEIGHT. A record whose properties cannot be read
    scores 0.
    """
    score = 0.0
    try:
        for keyword in record.keywords:
            if keyword.lower() in normalized_query:
                score += KEYWORD_WEIGHT

        question_tokens = record.question.lower().split()
        query_tokens = normalized_query.split()
        for token in question_tokens:
            if len(token) > MIN_TOKEN_LENGTH and any(token in q for q in query_tokens):
                score += QUESTION_TOKEN_WEIGHT
    except Exception as exc:
        logger.warning(
            "Relevance scoring failed",
            extra={"record_id": record.id, "error": str(exc)},
        )
        return 0.0
    return score


def select_best_match(candidates: Iterable[ScoredCandidate]) -> Optional[ScoredCandidate]:
    """Return the first candidate with the strictly highest score above threshold."""
    best: Optional[ScoredCandidate] = None
    for candidate in candidates:
        if best is None or candidate.score > best.score:
            best = candidate
    if best is not None and best.score > MATCH_THRESHOLD:
        return best
    return None
