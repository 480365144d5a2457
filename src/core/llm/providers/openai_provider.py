"""OpenAI provider for the LLM client abstraction.

Wraps the ``openai`` SDK to expose the ``complete`` interface expected by
:class:`~src.core.llm.client.LLMClient`.
"""

from __future__ import annotations

from src.utils.exceptions import LLMError
from src.utils.logging import get_logger

logger = get_logger("llm.openai")


class OpenAIProvider:
    """Provider implementation for OpenAI chat completion models.

    Parameters
    ----------
    api_key:
        OpenAI API key.
    model:
        Model identifier, e.g. ``"gpt-4o"``.
    temperature:
        Sampling temperature passed on every call.
    base_url:
        Optional endpoint override.
    provider_name:
        Name used in log messages and error reports.
    """

    MAX_TOKENS = 8192

    def __init__(
        self,
        api_key: str,
        model: str,
        temperature: float = 0.2,
        base_url: str | None = None,
        provider_name: str = "openai",
    ):
        try:
            import openai
        except ImportError as exc:
            raise LLMError(
                provider_name,
                "The 'openai' package is not installed. "
                "Install it with: pip install openai",
            ) from exc

        if not api_key:
            raise LLMError(provider_name, "API key is required but was empty.")

        self.client = openai.AsyncOpenAI(api_key=api_key, base_url=base_url or None)
        self.model = model
        self.temperature = temperature
        self.provider_name = provider_name

    async def complete(self, system: str, user: str) -> str:
        """Call the chat completions API and return the text response."""
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                max_tokens=self.MAX_TOKENS,
                temperature=self.temperature,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
            )
        except Exception as exc:
            logger.error(
                "openai_complete_error",
                provider=self.provider_name,
                error=str(exc),
            )
            raise LLMError(self.provider_name, str(exc)) from exc

        choice = response.choices[0] if response.choices else None
        if choice and choice.message and choice.message.content:
            return choice.message.content
        return ""
