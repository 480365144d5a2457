"""Request/response schemas for the conversion endpoints."""

from pydantic import BaseModel, Field

from src.api.v1.schemas.formats import CustomFormatRequest
from src.core.formats.constants import DEFAULT_CONTEXT_STYLE, PREDEFINED_FORMATS
from src.core.formats.models import ParsedRecord


class SessionConvertRequest(BaseModel):
    """Submit a session's prompt; *prompt* replaces the stored one when given."""

    prompt: str | None = Field(default=None, max_length=20000)


class ConvertRequest(BaseModel):
    """Self-contained, session-less conversion request."""

    prompt: str = Field(..., max_length=20000, description="Natural-language prompt")
    formats: list[str] = Field(
        default_factory=lambda: list(PREDEFINED_FORMATS),
        description="Predefined formats to produce, in any order",
    )
    custom_formats: list[CustomFormatRequest] = Field(default_factory=list)
    context_style: str = DEFAULT_CONTEXT_STYLE


class ConvertResponse(BaseModel):
    """Result of a conversion.

    * ``status="completed"`` -- the call succeeded; *outputs* may still be
      empty when nothing in the reply could be parsed.
    * ``status="failed"`` -- the generation call failed; see *error*.
    * ``status="skipped"`` -- nothing was sent (blank prompt, no active
      formats, or a request already pending).
    """

    status: str  # "completed" | "failed" | "skipped"
    session_id: str | None = None
    outputs: list[ParsedRecord] = []
    error: str | None = None
