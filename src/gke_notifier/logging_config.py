"""Logging configuration for Cloud Run.

With ``JSON_LOG`` enabled, Python stdlib logging emits JSON with GCP-compatible
field names. Cloud Run auto-extracts `severity`, `message`, and other fields
from JSON on stdout. Otherwise a plain text format is used for local runs.

Usage:
    from gke_notifier.logging_config import configure_logging
    configure_logging(json_log=True)
"""

import copy
import logging
import logging.config

LOGGING_CONFIG: dict = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "json": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(funcName)s %(message)s",
            "rename_fields": {
                "levelname": "severity",
                "asctime": "timestamp",
                "name": "logger",
            },
            "static_fields": {
                "service": "gke-notifier",
            },
        },
        "text": {
            "format": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "text",
            "stream": "ext://sys.stdout",
        },
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def build_logging_config(json_log: bool = False, level: str = "INFO") -> dict:
    """Return a dictConfig for the chosen output format and root level."""
    config = copy.deepcopy(LOGGING_CONFIG)
    config["handlers"]["console"]["formatter"] = "json" if json_log else "text"
    config["root"]["level"] = level.upper()
    return config


def configure_logging(json_log: bool = False, level: str = "INFO") -> None:
    """Apply logging configuration.

    Call once at application startup (e.g., in FastAPI lifespan).
    All subsequent ``logging.getLogger()`` calls write to stdout, as JSON with a
    GCP-compatible ``severity`` field when ``json_log`` is set.
    """
    logging.config.dictConfig(build_logging_config(json_log, level))
