"""
Unit tests for configuration defaults and logging setup.
"""

import logging

from config import GAME_SETTINGS, LoggingSettings, PATHS, setup_logging


def test_game_defaults():
    """Regulation plays to 301 and overtime adds 100."""
    assert GAME_SETTINGS.target_score == 301
    assert GAME_SETTINGS.overtime_increment == 100


def test_log_file_lives_in_log_dir():
    assert PATHS.log_file.parent == PATHS.log_dir


def test_setup_logging_without_file():
    """Console-only logging installs a single stream handler."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level

    try:
        setup_logging(LoggingSettings(level=logging.DEBUG, log_to_file=False))

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)


def test_init_config_creates_directories(tmp_path, monkeypatch):
    """init_config creates the app directories and starts file logging."""
    import config

    paths = config.Paths(
        data_dir=tmp_path / "data",
        config_dir=tmp_path / "config",
        log_dir=tmp_path / "logs",
    )
    monkeypatch.setattr(config, "PATHS", paths)

    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level

    try:
        config.init_config()

        assert paths.data_dir.is_dir()
        assert paths.config_dir.is_dir()
        assert any(
            isinstance(h, logging.FileHandler) and h.baseFilename == str(paths.log_file)
            for h in root.handlers
        )
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
