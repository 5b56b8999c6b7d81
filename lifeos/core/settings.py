"""Configuration and environment settings for the LIFE OS ledger service."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings for the LIFE OS ledger service."""

    groq_api_key: str
    planner_model: str = "llama-3.3-70b-versatile"
    planner_temperature: float = 0.7
    planner_max_completion_tokens: int = 2048
    planner_top_p: float = 0.95
    # Streaming turns off JSON mode; the prompt alone asks for JSON then.
    planner_stream: bool = False
    chat_model: str = "llama-3.3-70b-versatile"
    chat_temperature: float = 0.7
    planner_locale: str = "en-IN"
    planner_location: str = "Bengaluru, India"
    planner_timezone: str = "Asia/Kolkata"
    plan_prompt_with_example: bool = True
    database_url: str = "sqlite:///lifeos.db"
    log_file: str | None = "logs/lifeos.log"
    server_host: str = "127.0.0.1"
    server_port: int = 8000

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


def get_settings() -> "Settings":
    """Return an instance of the application settings."""
    return Settings()
