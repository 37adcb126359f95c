# app/config.py
from typing import Optional, List
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    SERVICE_NAME: str = "chat-service"
    PORT: int = 8015
    ENV: str = "local"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Outbound calls to model providers
    REQUEST_TIMEOUT_S: float = 60
    DEFAULT_MODEL: str = "openai"

    CORS_ALLOW_ORIGINS: List[str] = ["*"]  # tighten in prod

    # API keys (optional per provider; a missing key only disables that provider)
    OPENAI_API_KEY: Optional[str] = None
    MISTRAL_API_KEY: Optional[str] = None
    MINIMAX_API_KEY: Optional[str] = None
    ANTHROPIC_API_KEY: Optional[str] = None
    GOOGLE_API_KEY: Optional[str] = None
    XAI_API_KEY: Optional[str] = None
    TOGETHER_API_KEY: Optional[str] = None
    HF_TOKEN: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()  # type: ignore
