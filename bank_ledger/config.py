"""Configuration management for bank-ledger."""

from dataclasses import dataclass, field
from pathlib import Path

from bank_ledger.exceptions import ConfigurationError

DEFAULT_DATA_FILE = "accounts_secure.txt"
LOG_FORMATS = ("standard", "json")


@dataclass
class StorageConfig:
    """Flat-file storage configuration."""

    data_file: Path = field(default_factory=lambda: Path(DEFAULT_DATA_FILE))
    encoding: str = "utf-8"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    format_type: str = "standard"

    def __post_init__(self) -> None:
        if self.format_type not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.format_type!r}, expected one of {LOG_FORMATS}"
            )


@dataclass
class LedgerConfig:
    """Main configuration for bank-ledger."""

    storage: StorageConfig = field(default_factory=StorageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    export_dir: Path | None = None

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        import os

        storage = StorageConfig(
            data_file=Path(os.getenv("LEDGER_DATA_FILE", DEFAULT_DATA_FILE)),
        )

        logging_config = LoggingConfig(
            level=os.getenv("LEDGER_LOG_LEVEL", "WARNING"),
            format_type=os.getenv("LEDGER_LOG_FORMAT", "standard").lower(),
        )

        return cls(storage=storage, logging=logging_config)
