"""Generic OpenAI-compatible provider for the LLM client abstraction.

Supports any LLM service that exposes an OpenAI-compatible chat completions
API, including:
  - DeepSeek (``https://api.deepseek.com``)
  - Ollama (``http://localhost:11434/v1``)
  - Together AI (``https://api.together.xyz/v1``)
  - Groq (``https://api.groq.com/openai/v1``)
  - Any other service with a compatible ``/chat/completions`` endpoint
"""

from __future__ import annotations

from src.core.llm.providers.openai_provider import OpenAIProvider
from src.utils.exceptions import LLMError


class OpenAICompatibleProvider(OpenAIProvider):
    """Provider for any OpenAI-compatible API endpoint.

    Unlike :class:`OpenAIProvider`, ``base_url`` is mandatory and an empty
    API key is accepted (local servers such as Ollama ignore it).
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        provider_name: str = "openai_compatible",
        temperature: float = 0.2,
    ):
        if not base_url:
            raise LLMError(provider_name, "base_url is required but was empty.")

        super().__init__(
            api_key=api_key or "none",
            model=model,
            temperature=temperature,
            base_url=base_url,
            provider_name=provider_name,
        )
