"""Logging setup shared by the engine modules."""

import logging

from config import AppConfig, config as default_config


def setup_logging(app_config: AppConfig | None = None) -> None:
    """Call once at program start (python -m core)."""
    cfg = app_config or default_config
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format=cfg.logging.format,
        datefmt=cfg.logging.datefmt,
    )


def get_logger(name: str) -> logging.Logger:
    """Return the named module logger."""
    return logging.getLogger(name)
