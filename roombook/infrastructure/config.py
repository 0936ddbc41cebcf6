from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ROOMBOOK_")

    database_url: str = "sqlite+pysqlite:///:memory:"
    openapi_path: Path = Path(__file__).resolve().parents[1] / "openapi/openapi.yaml"
    log_level: str = "INFO"


settings = Settings()
