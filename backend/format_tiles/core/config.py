from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator


class Settings(BaseSettings):
    PROJECT_NAME: str = "Tiles Format"
    DATABASE_URL: str = "postgresql+psycopg://postgres:postgres@db:5432/moodle"
    WWWROOT: str = "http://localhost"
    MOODLE_RELEASE: str = "4.3.2 (Build: 20231222)"
    JWT_SECRET: str = "change-me"
    JWT_ALGORITHM: str = "HS256"
    SESSION_SECRET: str = "change-me"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env")

    @field_validator("WWWROOT", mode="before")
    @classmethod
    def normalize_wwwroot(cls, value: str) -> str:
        if value is None:
            return "http://localhost"
        normalized = str(value).strip().rstrip("/")
        if not normalized:
            return "http://localhost"
        return normalized


settings = Settings()
