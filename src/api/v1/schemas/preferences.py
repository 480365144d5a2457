"""Request/response schemas for user preferences."""

from pydantic import BaseModel

from src.core.preferences.theme import Theme


class ThemeResponse(BaseModel):
    theme: Theme


class ThemeRequest(BaseModel):
    theme: Theme
