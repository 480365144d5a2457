"""FastAPI dependency functions for injection into endpoint handlers.

Long-lived objects (the session store and the theme store) are created
during the app lifespan and stored on ``app.state``; these helpers simply
look them up.  The LLM client is built per call from settings because it is
a thin wrapper around the provider SDK.
"""

from __future__ import annotations

from typing import Callable

from fastapi import Request

from src.config import settings
from src.core.conversion.session import TextGenerator
from src.core.conversion.store import SessionStore
from src.core.llm.client import KEYLESS_PROVIDERS, LLMClient
from src.core.preferences.theme import ThemeStore
from src.utils.exceptions import LLMError
from src.utils.logging import get_logger

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Stores (initialised during app lifespan)
# ---------------------------------------------------------------------------

def get_session_store(request: Request) -> SessionStore:
    """Return the global session store stored on ``app.state``."""
    return request.app.state.session_store


def get_theme_store(request: Request) -> ThemeStore:
    """Return the theme preference store stored on ``app.state``."""
    return request.app.state.theme_store


# ---------------------------------------------------------------------------
# LLM client
# ---------------------------------------------------------------------------

def _resolve_api_key() -> str:
    """Pick the API key for the configured provider.

    Resolution order:
      1. Provider-specific key (``GEMINI_API_KEY``, ``ANTHROPIC_API_KEY``,
         ``OPENAI_API_KEY``, ``DEEPSEEK_API_KEY``)
      2. Generic ``LLM_API_KEY``
    """
    provider_keys: dict[str, str] = {
        "gemini": settings.gemini_api_key,
        "anthropic": settings.anthropic_api_key,
        "openai": settings.openai_api_key,
        "deepseek": settings.deepseek_api_key,
    }
    return provider_keys.get(settings.llm_provider) or settings.llm_api_key


def get_llm_client() -> LLMClient:
    """Build the LLM client for the configured provider.

    Raises :class:`LLMError` when no usable API key is configured, which the
    error middleware reports as HTTP 502.
    """
    api_key = _resolve_api_key()
    provider = settings.llm_provider

    if not api_key and provider not in KEYLESS_PROVIDERS:
        logger.warning("llm_client_unavailable", provider=provider, reason="missing API key")
        raise LLMError(provider, "API key is not configured. Set it in your .env file.")

    return LLMClient(
        provider,
        api_key,
        settings.llm_model,
        base_url=settings.llm_base_url or None,
        temperature=settings.llm_temperature,
    )


def get_llm_factory() -> Callable[[], TextGenerator]:
    """Return a callable that builds the generation client on demand.

    Endpoints call it only once a submission has passed validation, so a
    skipped conversion never requires provider credentials.
    """
    return get_llm_client
