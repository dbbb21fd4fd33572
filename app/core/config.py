from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List


class Config(BaseSettings):
    # Database Configuration (SQLite via aiosqlite by default)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./containers.db", alias="DB_URL"
    )

    # External identity service
    identity_service_api_url: str = Field(
        default="http://localhost:9000", alias="IDENTITY_SERVICE_API_URL"
    )
    identity_service_api_key: str = Field(default="", alias="IDENTITY_SERVICE_API_KEY")
    identity_service_timeout: float = Field(default=10.0, alias="IDENTITY_SERVICE_TIMEOUT")

    # Session cookie
    session_cookie_name: str = Field(default="session_token", alias="SESSION_COOKIE_NAME")
    session_max_age_days: int = Field(default=60, alias="SESSION_MAX_AGE_DAYS")

    cors_origins: List[str] = Field(
        default=["http://localhost", "http://localhost:5173"], alias="CORS_ORIGINS"
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @property
    def session_max_age_seconds(self) -> int:
        return self.session_max_age_days * 24 * 60 * 60

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# Instantiate the settings
config = Config()
