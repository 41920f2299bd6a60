from pathlib import Path

import pytest
from pydantic import ValidationError

from archiver.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_archive_path(self) -> None:
        s = Settings()
        assert s.archive_path == Path.home() / "Documents" / "PDFArchive"

    def test_default_slugify(self) -> None:
        s = Settings()
        assert s.slugify_specification is True

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_default_tag_store(self) -> None:
        s = Settings()
        assert s.tag_store == "memory"

    def test_content_parsing_off_by_default(self) -> None:
        s = Settings()
        assert s.parse_content_date is False
        assert s.parse_content_tags is False
        assert s.known_tags == []


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_archive_path(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("ARCHIVE_PATH", str(tmp_path))
        s = Settings()
        assert s.archive_path == tmp_path

    def test_loads_slugify_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SLUGIFY_SPECIFICATION", "false")
        s = Settings()
        assert s.slugify_specification is False

    def test_loads_known_tags_as_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KNOWN_TAGS", '["invoice", "tax"]')
        s = Settings()
        assert s.known_tags == ["invoice", "tax"]


class TestSettingsValidation:
    def test_invalid_flag_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PARSE_CONTENT_DATE", "sometimes")
        with pytest.raises(ValidationError):
            Settings()
