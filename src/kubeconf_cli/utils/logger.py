"""Application-wide logger writing to platformdirs user_log_dir.

The log file is the only place diagnostics go; stdout and stderr are
reserved for command output and user-facing errors.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

_APP_NAME = "kubeconf_cli"
_LOG_FILE = "kubeconf.log"
_LEVEL_ENV_VAR = "KUBECONF_LOG_LEVEL"
_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_logger: logging.Logger | None = None


def _resolve_level() -> int:
    name = os.environ.get(_LEVEL_ENV_VAR, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.DEBUG
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.DEBUG


def _root_logger() -> logging.Logger:
    global _logger
    if _logger is not None:
        return _logger

    logger = logging.getLogger(_APP_NAME)
    logger.setLevel(_resolve_level())
    logger.propagate = False

    # Other handlers (test log capture, embedding apps) may already be attached
    if not any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
    ):
        log_dir = Path(user_log_dir(_APP_NAME))
        log_dir.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            log_dir / _LOG_FILE,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )
        logger.addHandler(handler)

    _logger = logger
    return _logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the application logger, or a named child of it.

    The file handler is attached once, on first call, to the ``kubeconf_cli``
    logger; children such as ``kubeconf_cli.config_access`` propagate to it.
    The level can be overridden with ``KUBECONF_LOG_LEVEL``.
    """
    root = _root_logger()
    if not name:
        return root
    return root.getChild(name)
