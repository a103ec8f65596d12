from functools import lru_cache
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service configuration loaded from environment variables."""

    PROJECT_NAME: str = "items-svc"
    API_PREFIX: str = "/api"

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Development-only defaults; deployments inject the real endpoint and credentials
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_NAME: str = "demo"

    DATABASE_URL: str | None = None

    # Deadlines (seconds) for store round-trips
    DATABASE_CONNECT_TIMEOUT: float = 5.0
    DATABASE_STATEMENT_TIMEOUT: float = 10.0
    HEALTHCHECK_TIMEOUT: float = 5.0

    # CloudWatch latency metrics
    METRICS_ENABLED: bool = True
    METRICS_INLINE: bool = False  # await the submission before responding
    METRICS_NAMESPACE: str = "items-svc-metrics"
    METRICS_TIMEOUT: float = 2.0
    AWS_REGION: str = "us-east-1"

    LOG_LEVEL: str = "INFO"
    SQLALCHEMY_LOG_LEVEL: str = "WARNING"
    UVICORN_ACCESS_LOG: bool = False

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def sqlalchemy_database_uri(self) -> str:
        """Build the SQLAlchemy database URI."""
        if self.DATABASE_URL is not None:
            return str(self.DATABASE_URL)
        return (
            f"postgresql+asyncpg://{quote_plus(self.DATABASE_USER)}:{quote_plus(self.DATABASE_PASSWORD)}"
            f"@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}"
        )


@lru_cache()
def get_settings() -> Settings:  # pragma: no cover
    """Return cached settings object to avoid re-parsing env vars."""
    return Settings()

# Export a module-level settings instance for easy imports
settings = get_settings()
