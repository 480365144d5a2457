"""Session endpoints -- the server-side counterpart of the converter form.

Each session keeps the prompt, format selection, custom formats, context
style and the most recent results.  Application errors raised here (unknown
session, duplicate format name, ...) are turned into JSON responses by
:class:`~src.api.v1.middleware.error_handler.ErrorHandlerMiddleware`.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from src.api.v1.schemas.common import ErrorResponse
from src.api.v1.schemas.formats import CustomFormatRequest, FormatInfo, SelectionRequest
from src.api.v1.schemas.session import ContextStyleRequest, PromptRequest, SessionResponse
from src.core.conversion.session import ConversionSession
from src.core.conversion.store import SessionStore
from src.dependencies import get_session_store
from src.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/sessions")

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Unknown session or format"}}


def build_session_response(session: ConversionSession) -> SessionResponse:
    registry = session.registry
    formats = [
        FormatInfo(
            name=spec.name,
            display_name=session.assembler.display_name(spec.name),
            custom=spec.is_custom,
            instructions=spec.instructions,
            selected=registry.is_selected(spec.name),
        )
        for spec in registry.predefined + registry.custom
    ]
    return SessionResponse(
        session_id=session.session_id,
        prompt=session.prompt,
        context_style=session.context_style,
        formats=formats,
        outputs=list(session.outputs),
        error=session.error,
        is_loading=session.is_loading,
        can_submit=session.can_submit(),
    )


@router.post(
    "",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Start a conversion session",
)
async def create_session(
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    return build_session_response(store.create())


@router.get("/{session_id}", response_model=SessionResponse, responses=_NOT_FOUND)
async def get_session(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    return build_session_response(store.get(session_id))


@router.delete(
    "/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_NOT_FOUND,
)
async def delete_session(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
) -> None:
    store.delete(session_id)


@router.put("/{session_id}/prompt", response_model=SessionResponse, responses=_NOT_FOUND)
async def update_prompt(
    session_id: str,
    request: PromptRequest,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    session = store.get(session_id)
    session.prompt = request.prompt
    return build_session_response(session)


@router.post(
    "/{session_id}/example",
    response_model=SessionResponse,
    responses=_NOT_FOUND,
    summary="Fill the prompt with the built-in example",
)
async def load_example(
    session_id: str,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    session = store.get(session_id)
    session.load_example()
    return build_session_response(session)


@router.put(
    "/{session_id}/context-style",
    response_model=SessionResponse,
    responses={**_NOT_FOUND, 400: {"model": ErrorResponse, "description": "Unknown style"}},
)
async def update_context_style(
    session_id: str,
    request: ContextStyleRequest,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    session = store.get(session_id)
    session.set_context_style(request.context_style)
    return build_session_response(session)


# ---------------------------------------------------------------------------
# Formats
# ---------------------------------------------------------------------------

@router.post(
    "/{session_id}/formats",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        **_NOT_FOUND,
        400: {"model": ErrorResponse, "description": "Missing name or instructions"},
        409: {"model": ErrorResponse, "description": "Format name already exists"},
    },
    summary="Add a custom format",
)
async def add_custom_format(
    session_id: str,
    request: CustomFormatRequest,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    session = store.get(session_id)
    session.registry.add_custom(request.name, request.instructions)
    return build_session_response(session)


@router.delete(
    "/{session_id}/formats/{name}",
    response_model=SessionResponse,
    responses=_NOT_FOUND,
    summary="Remove a custom format",
)
async def remove_custom_format(
    session_id: str,
    name: str,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    session = store.get(session_id)
    session.registry.remove_custom(name)
    return build_session_response(session)


@router.post(
    "/{session_id}/formats/{name}/toggle",
    response_model=SessionResponse,
    responses=_NOT_FOUND,
)
async def toggle_format(
    session_id: str,
    name: str,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    session = store.get(session_id)
    selected = session.registry.toggle(name)
    logger.debug("format_toggled", session_id=session_id, name=name, selected=selected)
    return build_session_response(session)


@router.put(
    "/{session_id}/formats/{name}/selection",
    response_model=SessionResponse,
    responses=_NOT_FOUND,
)
async def set_format_selection(
    session_id: str,
    name: str,
    request: SelectionRequest,
    store: SessionStore = Depends(get_session_store),
) -> SessionResponse:
    session = store.get(session_id)
    session.registry.set_selected(name, request.selected)
    return build_session_response(session)
