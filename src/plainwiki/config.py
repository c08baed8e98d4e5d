"""Application configuration."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path("data")
    templates_dir: Path = PACKAGE_DIR / "templates"
    host: str = "0.0.0.0"
    port: int = 8080
    debug: bool = False
    app_title: str = "PlainWiki"
    atomic_writes: bool = True
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="PLAINWIKI_",
        env_file=".env",
        env_file_encoding="utf-8",
    )


settings = Settings()
