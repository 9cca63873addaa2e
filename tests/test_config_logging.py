"""Tests for configuration and logging."""

import json
import logging
from pathlib import Path

import pytest

from bankacct.config import AppConfig, LoggingConfig
from bankacct.exceptions import ConfigurationError
from bankacct.logging import JsonFormatter, get_logger, setup_logging

ENV_VARS = (
    "BANKACCT_DB",
    "BANKACCT_REPORT",
    "BANKACCT_MAX_ROWS",
    "BANKACCT_ESC_DELAY",
    "BANKACCT_MASTER_PASSWORD",
    "BANKACCT_LOG_FILE",
    "BANKACCT_LOG_LEVEL",
    "BANKACCT_LOG_FORMAT",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Environment without any BANKACCT_* variables."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_standard_format(self, tmp_path: Path, restore_root_logger: logging.Logger) -> None:
        log_file = tmp_path / "app.log"
        handler = setup_logging(level="DEBUG", format_type="standard", log_file=log_file)

        assert restore_root_logger.level == logging.DEBUG
        assert restore_root_logger.handlers == [handler]
        assert isinstance(handler, logging.FileHandler)

    def test_json_format(self, tmp_path: Path, restore_root_logger: logging.Logger) -> None:
        setup_logging(level="INFO", format_type="json", log_file=tmp_path / "app.log")

        handler = restore_root_logger.handlers[0]
        assert isinstance(handler.formatter, JsonFormatter)

    def test_records_go_to_file(self, tmp_path: Path, restore_root_logger: logging.Logger) -> None:
        log_file = tmp_path / "app.log"
        setup_logging(level="INFO", log_file=log_file)

        get_logger("bankacct.test").info("hello from the test")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert "hello from the test" in log_file.read_text(encoding="utf-8")

    def test_invalid_level_defaults_to_info(
        self, tmp_path: Path, restore_root_logger: logging.Logger
    ) -> None:
        setup_logging(level="NOPE", log_file=tmp_path / "app.log")

        assert restore_root_logger.level == logging.INFO

    def test_replaces_existing_handlers(
        self, tmp_path: Path, restore_root_logger: logging.Logger
    ) -> None:
        setup_logging(log_file=tmp_path / "one.log")
        setup_logging(log_file=tmp_path / "two.log")

        assert len(restore_root_logger.handlers) == 1
        assert restore_root_logger.handlers[0].baseFilename == str(tmp_path / "two.log")

    def test_bad_path_keeps_current_handlers(
        self, tmp_path: Path, restore_root_logger: logging.Logger
    ) -> None:
        handler = setup_logging(log_file=tmp_path / "good.log")

        with pytest.raises(OSError):
            setup_logging(log_file=tmp_path / "missing-dir" / "bad.log")

        assert restore_root_logger.handlers == [handler]

    def test_quiets_faker(self, tmp_path: Path, restore_root_logger: logging.Logger) -> None:
        setup_logging(level="DEBUG", log_file=tmp_path / "app.log")

        assert logging.getLogger("faker").level == logging.WARNING


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_format_basic(self) -> None:
        formatter = JsonFormatter()
        record = logging.LogRecord(
            name="bankacct.test",
            level=logging.INFO,
            pathname="",
            lineno=0,
            msg="Deposited %s",
            args=("10.00",),
            exc_info=None,
        )

        data = json.loads(formatter.format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == "bankacct.test"
        assert data["message"] == "Deposited 10.00"
        assert "timestamp" in data

    def test_format_with_extra(self) -> None:
        formatter = JsonFormatter()
        record = logging.LogRecord(
            name="bankacct.test",
            level=logging.DEBUG,
            pathname="",
            lineno=0,
            msg="Loaded account",
            args=(),
            exc_info=None,
        )
        record.extra = {"number": "A1234"}

        data = json.loads(formatter.format(record))

        assert data["number"] == "A1234"

    def test_format_with_exception(self) -> None:
        formatter = JsonFormatter()
        try:
            raise ValueError("boom")
        except ValueError:
            import sys

            exc_info = sys.exc_info()
        record = logging.LogRecord(
            name="bankacct.test",
            level=logging.ERROR,
            pathname="",
            lineno=0,
            msg="failed",
            args=(),
            exc_info=exc_info,
        )

        data = json.loads(formatter.format(record))

        assert "ValueError: boom" in data["exception"]


class TestGetLogger:
    def test_returns_named_logger(self) -> None:
        assert get_logger("bankacct.store").name == "bankacct.store"


class TestAppConfig:
    """Tests for AppConfig."""

    def test_defaults(self) -> None:
        config = AppConfig()

        assert config.default_database == "db"
        assert config.default_report == "BankAcct.Rpt"
        assert config.max_rows == 40
        assert config.esc_delay_ms == 25
        assert config.master_password is None
        assert config.logging == LoggingConfig()
        assert config.logging.log_file == Path("bankacct.log")

    def test_from_env_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        assert AppConfig.from_env() == AppConfig()

    def test_from_env_overrides(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("BANKACCT_DB", "accounts.db")
        clean_env.setenv("BANKACCT_REPORT", "out.rpt")
        clean_env.setenv("BANKACCT_MAX_ROWS", "12")
        clean_env.setenv("BANKACCT_ESC_DELAY", "100")
        clean_env.setenv("BANKACCT_MASTER_PASSWORD", "passwo")
        clean_env.setenv("BANKACCT_LOG_FILE", "/tmp/x.log")
        clean_env.setenv("BANKACCT_LOG_LEVEL", "DEBUG")
        clean_env.setenv("BANKACCT_LOG_FORMAT", "json")

        config = AppConfig.from_env()

        assert config.default_database == "accounts.db"
        assert config.default_report == "out.rpt"
        assert config.max_rows == 12
        assert config.esc_delay_ms == 100
        assert config.master_password == "passwo"
        assert config.logging.log_file == Path("/tmp/x.log")
        assert config.logging.level == "DEBUG"
        assert config.logging.format_type == "json"

    def test_empty_master_password_is_disabled(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("BANKACCT_MASTER_PASSWORD", "")

        assert AppConfig.from_env().master_password is None

    def test_non_integer_rows_rejected(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("BANKACCT_MAX_ROWS", "many")

        with pytest.raises(ConfigurationError, match="BANKACCT_MAX_ROWS"):
            AppConfig.from_env()

    def test_non_positive_delay_rejected(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("BANKACCT_ESC_DELAY", "0")

        with pytest.raises(ConfigurationError, match="positive"):
            AppConfig.from_env()
