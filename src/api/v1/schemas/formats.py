"""Request/response schemas for format catalogue and custom format management."""

from pydantic import BaseModel, Field


class FormatInfo(BaseModel):
    """One format as shown to the user, with its current selection."""

    name: str
    display_name: str
    custom: bool = False
    instructions: str | None = None
    selected: bool = False


class PredefinedFormatsResponse(BaseModel):
    """The fixed catalogue of predefined formats."""

    formats: list[FormatInfo]
    total: int


class CustomFormatRequest(BaseModel):
    """Request body for adding a user-defined format."""

    name: str = Field(..., max_length=100, description="Format name, unique ignoring case")
    instructions: str = Field(
        ...,
        max_length=5000,
        description="Rules the model should follow when producing this format",
    )


class SelectionRequest(BaseModel):
    selected: bool


class ContextStylesResponse(BaseModel):
    styles: list[str]
    default: str


class ExamplePromptResponse(BaseModel):
    prompt: str
