"""User configuration and logging setup.

Settings are read from a JSON file in the user's config directory. Logs go
to a rotating file in the user's log directory, since the terminal itself
is taken over by the editor.
"""

from __future__ import annotations

import json
import logging
import logging.handlers
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

APP_NAME = "rezvan"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def default_config_path() -> Path:
    return Path(platformdirs.user_config_dir(APP_NAME)) / "settings.json"


def default_log_path() -> Path:
    return Path(platformdirs.user_log_dir(APP_NAME)) / "rezvan.log"


@dataclass
class EditorConfig:
    quit_times: int = EditorConstants.QUIT_TIMES
    message_timeout: float = EditorConstants.MESSAGE_TIMEOUT
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EditorConfig":
        """Build a config from a settings dict, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        config = cls()
        for key, value in data.items():
            if key not in known:
                logger.warning("Ignoring unknown setting %r", key)
                continue
            setattr(config, key, value)
        if not isinstance(config.quit_times, int) or config.quit_times < 0:
            logger.warning("Invalid quit_times %r, using default", config.quit_times)
            config.quit_times = EditorConstants.QUIT_TIMES
        if not isinstance(config.message_timeout, (int, float)) or config.message_timeout <= 0:
            logger.warning("Invalid message_timeout %r, using default", config.message_timeout)
            config.message_timeout = EditorConstants.MESSAGE_TIMEOUT
        return config


def load_config(path: Optional[Path] = None) -> EditorConfig:
    """Load settings from disk.

    Returns:
        The configured settings, or defaults if the file is missing or
        unreadable.
    """
    path = path or default_config_path()
    if not path.exists():
        return EditorConfig()
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load settings from {path}: {e}")
        return EditorConfig()
    if not isinstance(data, dict):
        logger.warning("Settings file has invalid format (not a dict), ignoring")
        return EditorConfig()
    return EditorConfig.from_dict(data)


def setup_logging(config: EditorConfig) -> None:
    """Send the package's log records to a rotating file.

    Calling this again replaces the handler installed by the previous call.
    """
    package_logger = logging.getLogger(APP_NAME)
    for handler in list(package_logger.handlers):
        if getattr(handler, "_rezvan_handler", False):
            package_logger.removeHandler(handler)
            handler.close()

    log_path = Path(config.log_file) if config.log_file else default_log_path()
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=1_000_000, backupCount=3, encoding='utf-8'
        )
    except OSError as e:
        # Editing works without a log file
        handler = logging.NullHandler()
        logger.warning(f"Could not open log file {log_path}: {e}")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._rezvan_handler = True  # type: ignore[attr-defined]
    package_logger.addHandler(handler)
    level = logging.getLevelName(str(config.log_level).upper())
    package_logger.setLevel(level if isinstance(level, int) else logging.INFO)
