"""Configuration management for bankacct."""

from dataclasses import dataclass, field
from pathlib import Path

from bankacct.exceptions import ConfigurationError


@dataclass
class LoggingConfig:
    """Log output configuration.

    curses owns the terminal, so log records always go to a file.
    """

    log_file: Path = field(default_factory=lambda: Path("bankacct.log"))
    level: str = "INFO"
    format_type: str = "standard"


@dataclass
class AppConfig:
    """Main configuration for bankacct."""

    default_database: str = "db"
    default_report: str = "BankAcct.Rpt"
    max_rows: int = 40
    esc_delay_ms: int = 25
    master_password: str | None = None
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create config from environment variables."""
        import os

        logging_config = LoggingConfig(
            log_file=Path(os.getenv("BANKACCT_LOG_FILE", "bankacct.log")),
            level=os.getenv("BANKACCT_LOG_LEVEL", "INFO"),
            format_type=os.getenv("BANKACCT_LOG_FORMAT", "standard"),
        )

        return cls(
            default_database=os.getenv("BANKACCT_DB", "db"),
            default_report=os.getenv("BANKACCT_REPORT", "BankAcct.Rpt"),
            max_rows=_int_env("BANKACCT_MAX_ROWS", "40"),
            esc_delay_ms=_int_env("BANKACCT_ESC_DELAY", "25"),
            master_password=os.getenv("BANKACCT_MASTER_PASSWORD") or None,
            logging=logging_config,
        )


def _int_env(name: str, default: str) -> int:
    import os

    raw = os.getenv(name, default)
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value}")
    return value
