from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_WEB_DIR = Path(__file__).resolve().parents[2] / "web"


class Settings(BaseSettings):
    """
    Application settings, read from the environment and an optional .env file.
    """
    app_name: str = "HTMX Todo"
    app_env: str = Field(default="local", alias="APP_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str | None = Field(default=None, alias="LOG_FORMAT")

    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    templates_dir: Path = _WEB_DIR / "templates"
    static_dir: Path = _WEB_DIR / "static"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )
