"""Catalogue endpoints -- predefined formats, context styles, example prompt."""

from __future__ import annotations

from fastapi import APIRouter

from src.api.v1.schemas.formats import (
    ContextStylesResponse,
    ExamplePromptResponse,
    FormatInfo,
    PredefinedFormatsResponse,
)
from src.core.formats.constants import (
    CONTEXT_STYLES,
    DEFAULT_CONTEXT_STYLE,
    EXAMPLE_PROMPT,
    FORMAT_DISPLAY_NAMES,
    PREDEFINED_FORMATS,
)

router = APIRouter()


@router.get(
    "/formats",
    response_model=PredefinedFormatsResponse,
    summary="List predefined formats",
)
async def list_formats() -> PredefinedFormatsResponse:
    formats = [
        FormatInfo(
            name=name,
            display_name=FORMAT_DISPLAY_NAMES.get(name, name),
            selected=True,
        )
        for name in PREDEFINED_FORMATS
    ]
    return PredefinedFormatsResponse(formats=formats, total=len(formats))


@router.get("/context-styles", response_model=ContextStylesResponse)
async def list_context_styles() -> ContextStylesResponse:
    return ContextStylesResponse(styles=list(CONTEXT_STYLES), default=DEFAULT_CONTEXT_STYLE)


@router.get("/example-prompt", response_model=ExamplePromptResponse)
async def example_prompt() -> ExamplePromptResponse:
    return ExamplePromptResponse(prompt=EXAMPLE_PROMPT)
