"""File logging for the tomato CLI.

The live timer owns the terminal, so log records only ever go to
``tomato.log`` under the platform log directory. The threshold comes from the
``log.level`` config key; module loggers (``logging.getLogger(__name__)``)
propagate into the ``tomato_cli`` logger configured here.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "tomato_cli"
_LOG_FILE = "tomato.log"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3
_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_logger: logging.Logger | None = None


def get_log_path() -> Path:
    """Return the path of the active log file."""
    return Path(user_log_dir(_APP_NAME)) / _LOG_FILE


def _configured_level() -> str:
    from tomato_cli.config import get_config_manager

    return get_config_manager().config.log.level


def _file_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=_MAX_BYTES, backupCount=_BACKUP_COUNT, encoding="utf-8"
    )
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    return handler


def get_logger() -> logging.Logger:
    """Return the ``tomato_cli`` logger, attaching the file handler on first use."""
    global _logger
    if _logger is None:
        logger = logging.getLogger(_APP_NAME)
        logger.setLevel(_configured_level())
        if not logger.handlers:
            logger.addHandler(_file_handler(get_log_path()))
        logger.propagate = False
        _logger = logger
    return _logger
