# txn_importer/utilities/config_logging.py
from __future__ import annotations

import logging.config
from pathlib import Path

LOG_FILE = "logs/app.log"

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "simple",
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "verbose",
            "filename": LOG_FILE,
            "maxBytes": 5_000_000,
            "backupCount": 5,
            "encoding": "utf-8",
        },
    },
    "loggers": {
        # root logger
        "": {
            "level": "DEBUG",
            "handlers": ["console", "file"],
        },
        # workbook reads are chatty at DEBUG
        "openpyxl": {"level": "WARNING", "propagate": True},
    },
}


def configure_logging(level: str | None = None) -> None:
    """Apply ``LOGGING``, creating the log directory first.

    ``level`` overrides the console handler level (e.g. ``"DEBUG"``).
    """
    Path(LOG_FILE).parent.mkdir(parents=True, exist_ok=True)
    if level:
        cfg = {
            **LOGGING,
            "handlers": {
                **LOGGING["handlers"],
                "console": {**LOGGING["handlers"]["console"], "level": level.upper()},
            },
        }
    else:
        cfg = LOGGING
    logging.config.dictConfig(cfg)
