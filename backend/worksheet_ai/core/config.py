from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Application
    app_name: str = "Worksheet AI"
    debug: bool = False

    # Provider selection: mock | anthropic | openai
    llm_provider: str = "mock"

    # Anthropic
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-5-20250929"
    max_tokens: int = 4096
    request_timeout: float = 90.0

    # OpenAI (placeholder provider, falls back to demo output)
    openai_api_key: str = ""

    # Early-grade illustrations: keyword -> image URL
    early_grade_images: dict[str, str] = {}

    # CORS
    frontend_url: str = "http://localhost:3000"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    return Settings()
