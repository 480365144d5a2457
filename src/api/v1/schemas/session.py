"""Request/response schemas for conversion sessions."""

from pydantic import BaseModel, Field

from src.api.v1.schemas.formats import FormatInfo
from src.core.formats.models import ParsedRecord


class SessionResponse(BaseModel):
    """Serialised view of a :class:`ConversionSession`."""

    session_id: str
    prompt: str
    context_style: str
    formats: list[FormatInfo]
    outputs: list[ParsedRecord] = []
    error: str | None = None
    is_loading: bool = False
    can_submit: bool = False


class PromptRequest(BaseModel):
    prompt: str = Field(..., max_length=20000)


class ContextStyleRequest(BaseModel):
    context_style: str
