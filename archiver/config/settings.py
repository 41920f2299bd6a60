from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Archive configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    archive_path: Path = Path.home() / "Documents" / "PDFArchive"
    slugify_specification: bool = True

    pdf_engine: str = "pdfplumber"
    tag_store: str = "memory"

    parse_content_date: bool = False
    parse_content_tags: bool = False
    known_tags: list[str] = []
