"""Notion REST repository for knowledge records and leads."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from config.settings import Settings
from utils.error_handling import NotionError
from utils.logging_config import get_logger

logger = get_logger(__name__)

NOTION_API_URL = "https://api.notion.com/v1"
NOTION_PAGE_SIZE = 100


class NotionRepository:
    """Query and create pages in Notion databases."""

    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None):
        self.settings = settings
        self.client = client or httpx.Client(
            base_url=NOTION_API_URL, timeout=settings.timeout_seconds
        )

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.settings.notion_token}",
            "Notion-Version": self.settings.notion_version,
            "Content-Type": "application/json",
        }

    def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        try:
            response = self.client.post(path, json=payload, headers=self._headers())
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            raise NotionError(
                f"Notion request failed with status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise NotionError(f"Notion request failed: {exc}") from exc

    def query_active(self, database_id: str) -> List[Dict[str, Any]]:
        """
        Return the pages whose ``Activo`` checkbox is set.

        Follows Notion's cursor pagination until the database is exhausted or
        ``max_records`` pages have been collected.
        """
        payload: Dict[str, Any] = {
            "filter": {"property": "Activo", "checkbox": {"equals": True}},
            "page_size": min(NOTION_PAGE_SIZE, self.settings.max_records),
        }
        pages: List[Dict[str, Any]] = []
        while True:
            data = self._post(f"/databases/{database_id}/query", payload)
            pages.extend(data.get("results", []))
            cursor = data.get("next_cursor")
            if not data.get("has_more") or not cursor:
                break
            if len(pages) >= self.settings.max_records:
                break
            payload["start_cursor"] = cursor

        logger.info(
            "Notion query complete",
            extra={"database_id": database_id, "results_count": len(pages)},
        )
        return pages[: self.settings.max_records]

    def create_page(self, database_id: str, properties: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a page into a database and return the created page."""
        page = self._post(
            "/pages",
            {"parent": {"database_id": database_id}, "properties": properties},
        )
        logger.info("Notion page created", extra={"page_id": page.get("id")})
        return page
