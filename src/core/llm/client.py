"""High-level LLM client abstraction.

Provides a unified interface for the text-generation service through a
single ``LLMClient`` class.  Supported providers:

  - ``gemini`` — Google Gemini (default)
  - ``anthropic`` — Anthropic Claude
  - ``openai`` — OpenAI GPT
  - ``deepseek`` — DeepSeek (OpenAI-compatible at api.deepseek.com)
  - ``ollama`` — Ollama local models (OpenAI-compatible at localhost:11434)
  - ``openai_compatible`` — Any OpenAI-compatible API with a custom base_url

The concrete provider is selected at initialisation time based on the
``provider`` string.
"""

from __future__ import annotations

from src.utils.exceptions import LLMError
from src.utils.logging import get_logger

# Well-known OpenAI-compatible providers and their default base URLs.
_KNOWN_COMPATIBLE_PROVIDERS: dict[str, str] = {
    "deepseek": "https://api.deepseek.com",
    "ollama": "http://localhost:11434/v1",
    "together": "https://api.together.xyz/v1",
    "groq": "https://api.groq.com/openai/v1",
    "moonshot": "https://api.moonshot.cn/v1",
    "zhipu": "https://open.bigmodel.cn/api/paas/v4",
    "siliconflow": "https://api.siliconflow.cn/v1",
}

# Providers that run locally and accept any (or no) API key.
LOCAL_PROVIDERS: frozenset[str] = frozenset({"ollama"})

# Providers that may be configured without an API key.
KEYLESS_PROVIDERS: frozenset[str] = LOCAL_PROVIDERS | {"openai_compatible"}


class LLMClient:
    """Unified LLM client that delegates to a provider-specific backend.

    Parameters
    ----------
    provider:
        Provider name — ``"gemini"``, ``"anthropic"``, ``"openai"``,
        ``"openai_compatible"``, or any key in the well-known providers
        registry.
    api_key:
        API key for the chosen provider.
    model:
        Model identifier (e.g. ``"gemini-2.5-flash"``, ``"gpt-4o"``).
    base_url:
        Optional base URL.  Required for ``openai_compatible``; overrides the
        default for ``openai`` and the well-known compatible providers.
    temperature:
        Sampling temperature used for every completion.
    """

    def __init__(
        self,
        provider: str,
        api_key: str,
        model: str,
        base_url: str | None = None,
        temperature: float = 0.2,
    ):
        self.provider = provider
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.temperature = temperature
        self.logger = get_logger("llm")
        self._provider_client = self._init_provider()

    def _init_provider(self):
        """Instantiate the appropriate provider backend."""
        if self.provider == "gemini":
            from src.core.llm.providers.gemini_provider import GeminiProvider

            return GeminiProvider(self.api_key, self.model, self.temperature)

        if self.provider == "anthropic":
            from src.core.llm.providers.anthropic_provider import AnthropicProvider

            return AnthropicProvider(self.api_key, self.model, self.temperature)

        if self.provider == "openai":
            from src.core.llm.providers.openai_provider import OpenAIProvider

            return OpenAIProvider(
                self.api_key, self.model, self.temperature, base_url=self.base_url,
            )

        if self.provider in _KNOWN_COMPATIBLE_PROVIDERS or self.provider == "openai_compatible":
            from src.core.llm.providers.openai_compatible_provider import (
                OpenAICompatibleProvider,
            )

            if not self.api_key and self.provider not in KEYLESS_PROVIDERS:
                raise LLMError(self.provider, "API key is required but was empty.")

            base_url = self.base_url or _KNOWN_COMPATIBLE_PROVIDERS.get(self.provider, "")
            if not base_url:
                raise LLMError(
                    self.provider,
                    "base_url is required for openai_compatible provider. "
                    "Set LLM_BASE_URL in your .env file.",
                )
            return OpenAICompatibleProvider(
                api_key=self.api_key,
                model=self.model,
                base_url=base_url,
                provider_name=self.provider,
                temperature=self.temperature,
            )

        raise LLMError(
            self.provider,
            f"Unknown provider: {self.provider}. "
            f"Supported: gemini, anthropic, openai, "
            f"{', '.join(_KNOWN_COMPATIBLE_PROVIDERS.keys())}, openai_compatible",
        )

    async def complete(self, system: str, user: str) -> str:
        """Send a system + user message pair and return the text response.

        Raises :class:`LLMError` on provider failures.
        """
        self.logger.info(
            "llm_complete",
            provider=self.provider,
            model=self.model,
            temperature=self.temperature,
            system_len=len(system),
            user_len=len(user),
        )
        try:
            result = await self._provider_client.complete(system, user)
        except LLMError:
            raise
        except Exception as exc:
            self.logger.error("llm_complete_error", error=str(exc))
            raise LLMError(self.provider, str(exc)) from exc

        self.logger.info("llm_complete_success", response_len=len(result))
        return result
