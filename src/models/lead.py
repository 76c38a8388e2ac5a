"""Lead capture models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class LeadRequest(BaseModel):
    """Contact form payload (``leadData``) sent by the chat widget."""

    model_config = ConfigDict(coerce_numbers_to_str=True, str_strip_whitespace=True)

    nombre: str = ""
    empresa: str = ""
    email: Optional[str] = None
    telefono: Optional[str] = None
    conversacion: Optional[str] = None


class LeadResult(BaseModel):
    """Outcome of a lead capture, returned to the client as-is."""

    success: bool
    message: str
