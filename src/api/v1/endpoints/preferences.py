"""Preference endpoints -- the persisted light/dark theme."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from src.api.v1.schemas.preferences import ThemeRequest, ThemeResponse
from src.core.preferences.theme import ThemeStore
from src.dependencies import get_theme_store

router = APIRouter(prefix="/preferences")


@router.get("/theme", response_model=ThemeResponse)
async def get_theme(store: ThemeStore = Depends(get_theme_store)) -> ThemeResponse:
    return ThemeResponse(theme=await store.get())


@router.post("/theme/toggle", response_model=ThemeResponse)
async def toggle_theme(store: ThemeStore = Depends(get_theme_store)) -> ThemeResponse:
    return ThemeResponse(theme=await store.toggle())


@router.put("/theme", response_model=ThemeResponse)
async def set_theme(
    request: ThemeRequest,
    store: ThemeStore = Depends(get_theme_store),
) -> ThemeResponse:
    return ThemeResponse(theme=await store.set(request.theme))
