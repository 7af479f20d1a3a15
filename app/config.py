"""Portfolio terminal configuration — loaded from environment / .env file."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="TERMINAL_", extra="ignore")

    env: str = "development"
    log_level: str = "INFO"

    # Upstream completion service (relay side)
    groq_api_key: str = Field(
        "", validation_alias=AliasChoices("GROQ_API_KEY", "TERMINAL_GROQ_API_KEY")
    )
    groq_base_url: str = "https://api.groq.com/openai/v1"
    chat_model: str = "llama-3.3-70b-versatile"
    max_tokens: int = 1024
    upstream_timeout: float | None = None  # None → httpx default

    # Relay HTTP surface
    cors_allow_origin: str = "*"

    # Terminal session → relay
    relay_url: str = "http://127.0.0.1:8000/api/chatbot"
    relay_token: str = ""  # hosting-level key, sent as a bearer token
    relay_timeout: float | None = None

    @property
    def chat_completions_url(self) -> str:
        return f"{self.groq_base_url.rstrip('/')}/chat/completions"


settings = Settings()
