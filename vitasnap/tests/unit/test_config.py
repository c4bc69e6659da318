"""
Tests for configuration and logging setup.
"""

from pathlib import Path
from typing import Iterator

import pytest
import structlog

from vitasnap.config import Settings, get_bool_env, get_log_level, load_settings
from vitasnap.logging_config import configure_logging


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove VitaSnap variables, restoring them after the test."""
    for name in ("VITASNAP_LOG_LEVEL", "VITASNAP_LOG_JSON", "VITASNAP_STRICT_VALIDATION"):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults after a test configures it."""
    yield
    structlog.reset_defaults()


class TestConfig:
    """Test environment configuration."""

    @pytest.mark.parametrize("raw", ["1", "true", "TRUE", "yes", "on"])
    def test_bool_true(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        """Should accept common truthy spellings."""
        monkeypatch.setenv("VITASNAP_TEST_FLAG", raw)

        assert get_bool_env("VITASNAP_TEST_FLAG") is True

    @pytest.mark.parametrize("raw", ["0", "false", "no", "maybe"])
    def test_bool_false(self, monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
        """Should read anything else as false."""
        monkeypatch.setenv("VITASNAP_TEST_FLAG", raw)

        assert get_bool_env("VITASNAP_TEST_FLAG", default=True) is False

    def test_bool_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should fall back to the default when unset or blank."""
        monkeypatch.setenv("VITASNAP_TEST_FLAG", " ")

        assert get_bool_env("VITASNAP_TEST_FLAG", default=True) is True

    def test_log_level_normalized(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should upper-case the level name."""
        monkeypatch.setenv("VITASNAP_LOG_LEVEL", "debug")

        assert get_log_level() == "DEBUG"

    def test_defaults(self, clean_env: None, tmp_path: Path) -> None:
        """Should default to INFO, console logs and lenient validation."""
        settings = load_settings(str(tmp_path / "missing.env"))

        assert settings == Settings()

    def test_env_file(
        self, clean_env: None, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Should load values from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("VITASNAP_LOG_JSON=true\nVITASNAP_STRICT_VALIDATION=yes\n")

        settings = load_settings(str(env_file))

        assert settings.log_json is True
        assert settings.strict_validation is True


class TestLogging:
    """Test structlog setup."""

    def test_json_renderer(self, reset_structlog: None) -> None:
        """Should render JSON when requested."""
        configure_logging(Settings(log_level="DEBUG", log_json=True))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer(self, reset_structlog: None) -> None:
        """Should render for the console by default."""
        configure_logging(Settings())

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_unknown_level(self, reset_structlog: None) -> None:
        """Should fall back to INFO for unknown level names."""
        configure_logging(Settings(log_level="VERBOSE"))

        structlog.get_logger("vitasnap.test").info("Configured")

        assert structlog.is_configured()
