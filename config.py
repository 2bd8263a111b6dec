"""
RedemptionDarts Configuration

Centralized settings, paths, and constants for the scoring system.
"""

import logging
import sys
from pathlib import Path
from dataclasses import dataclass
import appdirs


# Application info
APP_NAME = "RedemptionDarts"
APP_AUTHOR = "RedemptionDarts"
APP_VERSION = "1.0.0"


@dataclass(frozen=True)
class Paths:
    """Application paths."""
    # Data directory
    data_dir: Path = Path(appdirs.user_data_dir(APP_NAME, APP_AUTHOR))

    # Config directory (stores user preferences)
    config_dir: Path = Path(appdirs.user_config_dir(APP_NAME, APP_AUTHOR))

    # Log directory
    log_dir: Path = Path(appdirs.user_log_dir(APP_NAME, APP_AUTHOR))

    @property
    def settings(self) -> Path:
        return self.config_dir / "settings.json"

    @property
    def log_file(self) -> Path:
        return self.log_dir / "redemption_darts.log"

    def ensure_directories(self) -> None:
        """Create all required directories."""
        for dir_path in [self.data_dir, self.config_dir, self.log_dir]:
            dir_path.mkdir(parents=True, exist_ok=True)


@dataclass(frozen=True)
class GameSettings:
    """Scoring rules."""
    # Regulation target, must be hit exactly
    target_score: int = 301

    # Added to the target every time a redemption tie forces overtime
    overtime_increment: int = 100


@dataclass(frozen=True)
class LoggingSettings:
    """Logging output settings."""
    level: int = logging.INFO
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # Also write to PATHS.log_file
    log_to_file: bool = True


# Singleton instances
PATHS = Paths()
GAME_SETTINGS = GameSettings()
LOGGING_SETTINGS = LoggingSettings()


def setup_logging(settings: LoggingSettings = LOGGING_SETTINGS) -> None:
    """Send log records to stdout and, optionally, the application log file."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if settings.log_to_file:
        PATHS.log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(PATHS.log_file, encoding="utf-8"))

    logging.basicConfig(
        level=settings.level,
        format=settings.format,
        handlers=handlers,
        force=True,
    )


def init_config() -> None:
    """Initialize configuration, create required directories and set up logging."""
    PATHS.ensure_directories()
    setup_logging()
