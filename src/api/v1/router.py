from fastapi import APIRouter

from src.api.v1.endpoints import convert, formats, health, preferences, sessions

v1_router = APIRouter()
v1_router.include_router(health.router, tags=["health"])
v1_router.include_router(formats.router, tags=["formats"])
v1_router.include_router(sessions.router, tags=["sessions"])
v1_router.include_router(convert.router, tags=["convert"])
v1_router.include_router(preferences.router, tags=["preferences"])
