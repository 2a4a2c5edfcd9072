"""Logging initialization helpers."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from subedit.config import LoggingSettings, Settings

ROOT_LOGGER = "subedit"
_CONFIGURED_FLAG = "_subedit_configured"


def _build_handlers(cfg: LoggingSettings, log_dir: str, level: int) -> list[logging.Handler]:
    formatter = logging.Formatter(fmt=str(cfg.format), datefmt=str(cfg.datefmt))
    handlers: list[logging.Handler] = []
    if cfg.console:
        handlers.append(logging.StreamHandler())
    if cfg.file:
        file_path = Path(str(cfg.file))
        if not file_path.is_absolute():
            file_path = Path(log_dir) / file_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                file_path,
                maxBytes=int(cfg.max_bytes),
                backupCount=int(cfg.backup_count),
                encoding="utf-8",
            )
        )
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure the `subedit` logger tree once; later calls are no-ops.

    Loggers owned by the host application are left alone.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    if getattr(logger, _CONFIGURED_FLAG, False):
        return logger

    level = getattr(logging, str(settings.logging.level or "INFO").upper(), logging.INFO)
    logger.setLevel(level)
    logger.handlers = _build_handlers(settings.logging, settings.log_dir, level)
    logger.propagate = False
    setattr(logger, _CONFIGURED_FLAG, True)
    return logger


def reset_logging() -> None:
    """Close handlers installed by `setup_logging` and allow reconfiguration."""
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in logger.handlers:
        handler.close()
    logger.handlers = []
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    if hasattr(logger, _CONFIGURED_FLAG):
        delattr(logger, _CONFIGURED_FLAG)
