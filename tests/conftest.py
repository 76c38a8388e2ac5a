"""
Pytest configuration to ensure paths are set up correctly for tests.

This allows imports like `from handlers import chat` to work when running
tests, simulating the Lambda environment where code is deployed from the
src/ directory.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import boto3
import pytest


def _ensure_paths_on_sys_path() -> None:
    """Add repository root AND src/ to sys.path if missing.

    The src/ directory is added to simulate Lambda's import behavior,
    where Code.from_asset("src") makes src/ the root of the package.
    """
    repo_root = Path(__file__).resolve().parents[1]
    src_root = repo_root / "src"

    # Add repo root first (for imports like infrastructure.*)
    root_str = str(repo_root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)

    # Add src/ for Lambda-style imports (from handlers import ...)
    src_str = str(src_root)
    if src_str not in sys.path:
        sys.path.insert(0, src_str)


_ensure_paths_on_sys_path()

# Ensure boto3 has offline-friendly defaults so tests do not require AWS access.
os.environ.setdefault("AWS_REGION", "eu-west-2")
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-2")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "test")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "test")
os.environ.setdefault("AWS_SESSION_TOKEN", "test")
os.environ.setdefault("ENVIRONMENT", "dev")

# Lambda environment variables used by handlers
os.environ.setdefault("NOTION_TOKEN", "secret_test_token")
os.environ.setdefault("NOTION_DATABASE_ID", "test-knowledge-db")
os.environ.setdefault("NOTION_LEADS_DATABASE_ID", "test-leads-db")

# Create a default boto3 session so clients do not error during import.
boto3.setup_default_session(region_name="eu-west-2")


def build_page(
    question: str = "",
    answer: str = "",
    keywords: Iterable[str] = (),
    links: str = "",
    page_id: str = "page-1",
) -> Dict[str, Any]:
    """Build a Notion page shaped like a knowledge database query result."""
    return {
        "id": page_id,
        "properties": {
            "Pregunta": {"type": "title", "title": [{"plain_text": question}]},
            "Respuesta": {"type": "rich_text", "rich_text": [{"plain_text": answer}]},
            "Keywords": {
                "type": "multi_select",
                "multi_select": [{"name": k} for k in keywords],
            },
            "Enlaces": {
                "type": "rich_text",
                "rich_text": [{"plain_text": links}] if links else [],
            },
            "Activo": {"type": "checkbox", "checkbox": True},
        },
    }


class FakeRepository:
    """In-memory stand-in for NotionRepository."""

    def __init__(self, pages: Optional[List[Dict[str, Any]]] = None, error: Exception = None):
        self.pages = pages or []
        self.error = error
        self.queried: List[str] = []
        self.created: List[Dict[str, Any]] = []

    def query_active(self, database_id: str) -> List[Dict[str, Any]]:
        self.queried.append(database_id)
        if self.error:
            raise self.error
        return self.pages

    def create_page(self, database_id: str, properties: Dict[str, Any]) -> Dict[str, Any]:
        if self.error:
            raise self.error
        self.created.append({"database_id": database_id, "properties": properties})
        return {"id": f"lead-{len(self.created)}"}


@pytest.fixture
def make_page():
    return build_page


@pytest.fixture
def fake_repository():
    return FakeRepository


@pytest.fixture
def settings():
    from config.settings import Settings

    return Settings(
        notion_token="secret_test_token",
        knowledge_database_id="kb-db",
        leads_database_id="leads-db",
    )
