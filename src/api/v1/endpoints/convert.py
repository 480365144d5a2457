"""Conversion endpoints -- send a prompt to the model and return parsed formats.

Two flavours:

* ``POST /sessions/{id}/convert`` uses the format selection, custom formats
  and context style held by the session.
* ``POST /convert`` is self-contained: everything is taken from the request
  body and a throwaway session is used.

A failed generation call is not an HTTP error; it is reported with
``status="failed"`` and a human-readable ``error``.
"""

from __future__ import annotations

from typing import Callable

from fastapi import APIRouter, Depends

from src.api.v1.schemas.common import ErrorResponse
from src.api.v1.schemas.convert import ConvertRequest, ConvertResponse, SessionConvertRequest
from src.core.conversion.session import ConversionSession, TextGenerator
from src.core.conversion.store import SessionStore
from src.dependencies import get_llm_factory, get_session_store
from src.utils.exceptions import ValidationError
from src.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


async def _run(
    session: ConversionSession,
    llm_factory: Callable[[], TextGenerator],
    session_id: str | None,
) -> ConvertResponse:
    # Nothing is sent, and no client is built, for a submission that fails validation.
    if not session.can_submit():
        logger.info("convert_skipped", session_id=session_id)
        return ConvertResponse(status="skipped", session_id=session_id)

    result = await session.convert(llm_factory())
    if result is None:
        return ConvertResponse(status="skipped", session_id=session_id)

    return ConvertResponse(
        status="completed" if result.success else "failed",
        session_id=session_id,
        outputs=result.outputs,
        error=result.error,
    )


@router.post(
    "/sessions/{session_id}/convert",
    response_model=ConvertResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Unknown session"},
        502: {"model": ErrorResponse, "description": "LLM client unavailable"},
    },
    summary="Convert the session's prompt",
)
async def convert_session(
    session_id: str,
    request: SessionConvertRequest,
    store: SessionStore = Depends(get_session_store),
    llm_factory: Callable[[], TextGenerator] = Depends(get_llm_factory),
) -> ConvertResponse:
    session = store.get(session_id)
    # A resubmission while a request is pending must not change the session.
    if request.prompt is not None and not session.is_loading:
        session.prompt = request.prompt
    return await _run(session, llm_factory, session_id)


@router.post(
    "/convert",
    response_model=ConvertResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid formats or style"},
        409: {"model": ErrorResponse, "description": "Duplicate custom format name"},
        502: {"model": ErrorResponse, "description": "LLM client unavailable"},
    },
    summary="Convert a prompt without a session",
)
async def convert(
    request: ConvertRequest,
    llm_factory: Callable[[], TextGenerator] = Depends(get_llm_factory),
) -> ConvertResponse:
    session = ConversionSession()
    registry = session.registry

    wanted = {name.strip().upper() for name in request.formats}
    unknown = wanted - {spec.name for spec in registry.predefined}
    if unknown:
        raise ValidationError(f"Unknown predefined formats: {', '.join(sorted(unknown))}")

    for spec in registry.predefined:
        registry.set_selected(spec.name, spec.name in wanted)
    for custom in request.custom_formats:
        registry.add_custom(custom.name, custom.instructions)

    session.set_context_style(request.context_style)
    session.prompt = request.prompt
    return await _run(session, llm_factory, None)
