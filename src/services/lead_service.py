"""Lead capture into the Notion leads database."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from config.settings import Settings
from models.lead import LeadRequest, LeadResult
from repositories.notion_repo import NotionRepository
from utils.error_handling import ConfigurationError
from utils.logging_config import get_logger
from utils.notion_properties import rich_text_value, title_value

logger = get_logger(__name__)

LEAD_STATUS = "New"
TRANSCRIPT_PLACEHOLDER = "Sin conversación registrada"
# Notion rejects rich_text content longer than this per text object.
NOTION_TEXT_LIMIT = 2000

LEAD_SUCCESS_TEXT = (
    "¡Gracias! Hemos recibido tus datos. Un consultor se pondrá en contacto "
    "contigo muy pronto."
)
LEAD_FAILURE_TEXT = (
    "Lo siento, no hemos podido guardar tus datos. Por favor, inténtalo de "
    "nuevo o contacta directamente con nuestro equipo."
)


def build_lead_properties(lead: LeadRequest) -> Dict[str, Any]:
    """Map a lead onto the leads database schema."""
    transcript = lead.conversacion or TRANSCRIPT_PLACEHOLDER
    return {
        "Nombre": title_value(lead.nombre),
        "Empresa": rich_text_value(lead.empresa),
        "Email": {"email": lead.email or None},
        "Teléfono": {"phone_number": lead.telefono or None},
        "Fecha": {"date": {"start": datetime.now(timezone.utc).date().isoformat()}},
        "Conversación": rich_text_value(transcript[:NOTION_TEXT_LIMIT]),
        "Estado": {"select": {"name": LEAD_STATUS}},
    }


class LeadService:
    """Persist contact submissions; never raises to the caller."""

    def __init__(self, settings: Settings, repository: NotionRepository) -> None:
        self.settings = settings
        self.repository = repository

    def capture_lead(self, lead_data: Dict[str, Any]) -> LeadResult:
        try:
            if not self.settings.leads_database_id:
                raise ConfigurationError("NOTION_LEADS_DATABASE_ID not configured")
            lead = LeadRequest.model_validate(lead_data)
            page = self.repository.create_page(
                self.settings.leads_database_id, build_lead_properties(lead)
            )
        except Exception:
            logger.exception("Lead capture failed")
            return LeadResult(success=False, message=LEAD_FAILURE_TEXT)

        logger.info("Lead captured", extra={"page_id": page.get("id")})
        return LeadResult(success=True, message=LEAD_SUCCESS_TEXT)
