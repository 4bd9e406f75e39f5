"""Configuration management for the ragchat backend."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _sanitize_secret(value: str) -> str:
    """Remove BOM characters and whitespace from secrets.

    Secrets copied from dashboards or mounted by container runtimes may carry
    a BOM that breaks HTTP headers.
    """
    if not value:
        return value
    return value.lstrip("\ufeff").strip()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Google Gemini API
    gemini_api_key: str = ""
    llm_model: str = "gemini-2.0-flash"

    # Redis (session history and embedding cache)
    redis_enabled: bool = True
    redis_host: str = "127.0.0.1"
    redis_port: int = 6379
    redis_password: str = ""

    @field_validator("gemini_api_key", "redis_password", mode="after")
    @classmethod
    def sanitize_secrets(cls, value: str) -> str:
        """Remove BOM and whitespace from secret values."""
        return _sanitize_secret(value)

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origin: str = "*"

    # Vector store
    data_dir: Path = Path("./data")
    vector_db_path: Path = Path("./data/vector_db.json")
    embedding_dimension: int = 384

    # RAG settings
    relevance_threshold: float = 0.5
    top_k_results: int = 5
    max_query_length: int = 2000

    # Retention
    session_ttl_seconds: int = 24 * 60 * 60
    embedding_cache_ttl_seconds: int = 7 * 24 * 60 * 60
    history_limit: int = 50

    # Logging
    log_level: str = "INFO"
    log_json: bool = False
    debug: bool = False

    @property
    def redis_url(self) -> str:
        """Connection URL for the Redis session store."""
        return f"redis://{self.redis_host}:{self.redis_port}"

    def ensure_directories(self) -> None:
        """Create all required directories if they don't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.vector_db_path.parent.mkdir(parents=True, exist_ok=True)


# Global settings instance
settings = Settings()
