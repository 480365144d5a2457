from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # LLM
    llm_provider: str = "gemini"
    gemini_api_key: str = ""
    anthropic_api_key: str = ""
    openai_api_key: str = ""
    deepseek_api_key: str = ""
    llm_api_key: str = ""  # Generic key, used when provider-specific key is empty
    llm_model: str = "gemini-2.5-flash"
    llm_base_url: str = ""  # Custom base URL for openai_compatible provider
    llm_temperature: float = 0.2

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # Preferences
    default_theme: str = "light"
    preferences_path: str = "./.prompt-format/preferences.json"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
