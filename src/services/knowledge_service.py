"""
Knowledge search over the active records of the Notion FAQ database.

Every call reads the database directly; nothing is cached between requests.
"""

from __future__ import annotations

import time
from typing import List

from config.settings import Settings
from models.knowledge import KnowledgeRecord, ScoredCandidate
from repositories.notion_repo import NotionRepository
from services.answer_formatter import format_answer
from services.scoring import calculate_relevance_score, select_best_match
from utils.logging_config import get_logger

logger = get_logger(__name__)

NO_ACTIVE_RECORDS_TEXT = (
    "No hay registros activos en la base de datos. Verifica que tengas "
    "registros con el checkbox 'Activo' marcado."
)
NO_MATCH_TEXT = (
    "No he encontrado información específica sobre tu consulta. Te recomiendo "
    "que contactes directamente con nuestro equipo de consultores para una "
    "asesoría personalizada sobre financiación ENISA."
)


class KnowledgeService:
    """Answer free-text questions from the knowledge database."""

    def __init__(self, settings: Settings, repository: NotionRepository) -> None:
        self.settings = settings
        self.repository = repository

    def search(self, query: str) -> str:
        """
        Return the serialized formatted answer of the best match.

        Falls back to fixed messages when the database has no active records
        or nothing scores above the threshold. Repository errors propagate.
        """
        start = time.perf_counter()
        pages = self.repository.query_active(self.settings.knowledge_database_id)
        records = [KnowledgeRecord.from_page(page) for page in pages]
        eligible = [record for record in records if record.active]
        if not eligible:
            return NO_ACTIVE_RECORDS_TEXT

        normalized = query.lower()
        candidates: List[ScoredCandidate] = []
        for record in eligible:
            candidates.append(
                ScoredCandidate(
                    record=record,
                    score=calculate_relevance_score(record, normalized),
                )
            )

        best = select_best_match(candidates)
        logger.info(
            "Knowledge search complete",
            extra={
                "candidates": len(candidates),
                "best_score": round(best.score, 2) if best else None,
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        if best is None:
            return NO_MATCH_TEXT
        return format_answer(best.record).model_dump_json()
