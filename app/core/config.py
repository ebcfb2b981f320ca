from functools import lru_cache
from typing import Literal, Optional
import os
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["development", "production"]
ProviderName = Literal["xai", "gemini"]

def _env_file_for(app_env: EnvName) -> str:
    return ".env.development" if app_env == "development" else ".env.production"

class Settings(BaseSettings):

    # Core
    APP_ENV: EnvName = "development"
    APP_NAME: str = "FurnitureViewAI"
    DEBUG: bool = False
    GIT_SHA: str = "unknown"

    # Provider selection
    AI_PROVIDER: ProviderName = "xai"
    AI_TIMEOUT_S: float = 120.0  # image edits are slow; httpx default (5s) is too short

    # xAI / Grok
    XAI_API_KEY: Optional[str] = None
    XAI_BASE_URL: str = "https://api.x.ai/v1"
    XAI_CHAT_MODEL: str = "grok-4"
    XAI_IMAGE_MODEL: str = "grok-imagine-image"

    # Google Gemini
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_VISION_MODEL: str = "gemini-2.5-flash"
    GEMINI_IMAGE_MODEL: str = "gemini-2.5-flash-image"

    # ElevenLabs embed widget (public id, served to the browser)
    NEXT_PUBLIC_ELEVENLABS_AGENT_ID: Optional[str] = None

    # Uploads
    max_upload_bytes: int = 10 * 1024 * 1024   # 10MB, inclusive

    # API
    api_prefix: str = "/api"
    ALLOWED_ORIGINS: str = ""                  # CSV

    # pydantic-settings config will be set dynamically in the factory below
    model_config = SettingsConfigDict(env_file=None, case_sensitive=True, extra="ignore")

    @property
    def provider_api_key(self) -> Optional[str]:
        """Credential of the selected provider, None when unset or blank."""
        raw = self.XAI_API_KEY if self.AI_PROVIDER == "xai" else self.GEMINI_API_KEY
        return (raw or "").strip() or None

    @property
    def provider_key_name(self) -> str:
        return "XAI_API_KEY" if self.AI_PROVIDER == "xai" else "GEMINI_API_KEY"

@lru_cache
def get_settings() -> Settings:
    """
    Factory that chooses the right .env file based on APP_ENV.
    Cache makes it cheap to inject via FastAPI dependencies.
    """
    app_env: EnvName = os.getenv("APP_ENV", "development")  # earliest switch
    env_file = _env_file_for(app_env)
    return Settings(
                _env_file=env_file,  # load .env.development or .env.production
                _env_file_encoding="utf-8"
    )
