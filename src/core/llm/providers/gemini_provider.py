"""Google Gemini provider for the LLM client abstraction.

Wraps the ``google-genai`` SDK to expose the ``complete`` interface expected
by :class:`~src.core.llm.client.LLMClient`.
"""

from __future__ import annotations

from src.utils.exceptions import LLMError
from src.utils.logging import get_logger

logger = get_logger("llm.gemini")


class GeminiProvider:
    """Provider implementation for Google Gemini models.

    Parameters
    ----------
    api_key:
        Gemini API key.
    model:
        Model identifier, e.g. ``"gemini-2.5-flash"``.
    temperature:
        Sampling temperature passed on every call.
    """

    def __init__(self, api_key: str, model: str, temperature: float = 0.2):
        try:
            from google import genai
            from google.genai import types
        except ImportError as exc:
            raise LLMError(
                "gemini",
                "The 'google-genai' package is not installed. "
                "Install it with: pip install google-genai",
            ) from exc

        if not api_key:
            raise LLMError("gemini", "API key is required but was empty.")

        self.client = genai.Client(api_key=api_key)
        self.types = types
        self.model = model
        self.temperature = temperature

    async def complete(self, system: str, user: str) -> str:
        """Call Gemini and return the generated text."""
        config = self.types.GenerateContentConfig(
            system_instruction=system,
            temperature=self.temperature,
        )
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=user,
                config=config,
            )
            return response.text or ""
        except Exception as exc:
            logger.error("gemini_complete_error", error=str(exc))
            raise LLMError("gemini", str(exc)) from exc
