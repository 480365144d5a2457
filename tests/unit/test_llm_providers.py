"""Tests for LLM client multi-provider support."""
import pytest
from src.utils.exceptions import LLMError


class TestLLMClientProviderSelection:
    """Verify that LLMClient correctly instantiates different providers."""

    def test_gemini_provider(self):
        """Gemini provider should be selected for 'gemini'."""
        from src.core.llm.client import LLMClient

        with pytest.raises(LLMError, match="API key is required"):
            LLMClient("gemini", "", "gemini-2.5-flash")

    def test_gemini_provider_with_key(self):
        from src.core.llm.client import LLMClient
        from src.core.llm.providers.gemini_provider import GeminiProvider

        client = LLMClient("gemini", "test-key", "gemini-2.5-flash", temperature=0.5)
        assert isinstance(client._provider_client, GeminiProvider)
        assert client._provider_client.temperature == 0.5

    def test_anthropic_provider(self):
        from src.core.llm.client import LLMClient

        with pytest.raises(LLMError, match="API key is required"):
            LLMClient("anthropic", "", "claude-sonnet-4-20250514")

    def test_openai_provider(self):
        from src.core.llm.client import LLMClient

        with pytest.raises(LLMError, match="API key is required"):
            LLMClient("openai", "", "gpt-4o")

    def test_deepseek_requires_key(self):
        """DeepSeek is OpenAI-compatible but still needs a real key."""
        from src.core.llm.client import LLMClient

        with pytest.raises(LLMError, match="API key is required"):
            LLMClient("deepseek", "", "deepseek-chat")

    def test_ollama_provider(self):
        """Ollama should use OpenAI-compatible with localhost URL and no key."""
        from src.core.llm.client import LLMClient

        client = LLMClient("ollama", "", "llama3")
        assert client.provider == "ollama"
        assert client._provider_client.provider_name == "ollama"

    def test_groq_provider(self):
        from src.core.llm.client import LLMClient

        client = LLMClient("groq", "test-key", "llama3-70b-8192")
        assert client.provider == "groq"

    def test_openai_compatible_with_base_url(self):
        from src.core.llm.client import LLMClient

        client = LLMClient(
            "openai_compatible", "test-key", "my-model",
            base_url="http://my-server:8080/v1",
        )
        assert client.provider == "openai_compatible"

    def test_openai_compatible_without_base_url_raises(self):
        from src.core.llm.client import LLMClient

        with pytest.raises(LLMError, match="base_url is required"):
            LLMClient("openai_compatible", "test-key", "my-model")

    def test_unknown_provider_raises(self):
        from src.core.llm.client import LLMClient

        with pytest.raises(LLMError, match="Unknown provider"):
            LLMClient("nonexistent", "key", "model")


class TestLLMClientComplete:
    @pytest.mark.asyncio
    async def test_wraps_provider_errors(self):
        from src.core.llm.client import LLMClient

        class Broken:
            async def complete(self, system, user):
                raise RuntimeError("connection reset")

        client = LLMClient("groq", "test-key", "llama3-70b-8192")
        client._provider_client = Broken()
        with pytest.raises(LLMError, match=r"LLM error \(groq\): connection reset"):
            await client.complete("sys", "user")

    @pytest.mark.asyncio
    async def test_returns_provider_text(self):
        from src.core.llm.client import LLMClient

        class Echo:
            async def complete(self, system, user):
                return f"{system}|{user}"

        client = LLMClient("groq", "test-key", "llama3-70b-8192")
        client._provider_client = Echo()
        assert await client.complete("sys", "user") == "sys|user"


class TestOpenAICompatibleProvider:
    def test_init_without_base_url_raises(self):
        from src.core.llm.providers.openai_compatible_provider import (
            OpenAICompatibleProvider,
        )

        with pytest.raises(LLMError, match="base_url is required"):
            OpenAICompatibleProvider("key", "model", "")

    def test_init_without_key_uses_none(self):
        from src.core.llm.providers.openai_compatible_provider import (
            OpenAICompatibleProvider,
        )

        provider = OpenAICompatibleProvider(
            "", "llama3", "http://localhost:11434/v1", "ollama"
        )
        assert provider.model == "llama3"
        assert provider.provider_name == "ollama"


class TestGetLLMClient:
    def _configure(self, monkeypatch, provider, base_url=""):
        from src.config import settings

        monkeypatch.setattr(settings, "llm_provider", provider)
        monkeypatch.setattr(settings, "llm_model", "my-model")
        monkeypatch.setattr(settings, "llm_base_url", base_url)
        monkeypatch.setattr(settings, "llm_api_key", "")
        monkeypatch.setattr(settings, "openai_api_key", "")

    def test_openai_compatible_without_key(self, monkeypatch):
        from src.dependencies import get_llm_client

        self._configure(monkeypatch, "openai_compatible", "http://my-server:8080/v1")
        client = get_llm_client()
        assert client.provider == "openai_compatible"

    def test_openai_without_key_raises(self, monkeypatch):
        from src.dependencies import get_llm_client

        self._configure(monkeypatch, "openai")
        with pytest.raises(LLMError, match="API key is not configured"):
            get_llm_client()
