"""Anthropic Claude provider for the LLM client abstraction.

Wraps the ``anthropic`` SDK to expose the ``complete`` interface expected by
:class:`~src.core.llm.client.LLMClient`.
"""

from __future__ import annotations

from src.utils.exceptions import LLMError
from src.utils.logging import get_logger

logger = get_logger("llm.anthropic")


class AnthropicProvider:
    """Provider implementation for Anthropic Claude models.

    Parameters
    ----------
    api_key:
        Anthropic API key.
    model:
        Model identifier, e.g. ``"claude-sonnet-4-20250514"``.
    temperature:
        Sampling temperature passed on every call.
    """

    MAX_TOKENS = 8192

    def __init__(self, api_key: str, model: str, temperature: float = 0.2):
        try:
            import anthropic
        except ImportError as exc:
            raise LLMError(
                "anthropic",
                "The 'anthropic' package is not installed. "
                "Install it with: pip install anthropic",
            ) from exc

        if not api_key:
            raise LLMError("anthropic", "API key is required but was empty.")

        self.client = anthropic.AsyncAnthropic(api_key=api_key)
        self.model = model
        self.temperature = temperature

    async def complete(self, system: str, user: str) -> str:
        """Call Claude and return the concatenated text blocks."""
        try:
            message = await self.client.messages.create(
                model=self.model,
                max_tokens=self.MAX_TOKENS,
                temperature=self.temperature,
                system=system,
                messages=[{"role": "user", "content": user}],
            )
        except Exception as exc:
            logger.error("anthropic_complete_error", error=str(exc))
            raise LLMError("anthropic", str(exc)) from exc

        return "".join(
            block.text for block in message.content if getattr(block, "type", "") == "text"
        )
