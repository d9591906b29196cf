# settings.py
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DB_NAME = "personalwebsite"
USERS_COLLECTION = "users"

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


@dataclass(frozen=True)
class Settings:
    mongodb_uri: str
    log_level: str = "info"
    otel_metrics_endpoint: Optional[str] = None
    db_name: str = DB_NAME


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        mongodb_uri=os.environ.get("MONGODB_URI", "mongodb://localhost:27017"),
        log_level=os.environ.get("LOG_LEVEL", "info"),
        otel_metrics_endpoint=os.environ.get("OTEL_METRICS_ENDPOINT") or None,
    )


def resolve_log_level(name: Optional[str]) -> int:
    # Unknown names fall back to INFO
    return _LOG_LEVELS.get((name or "").strip().lower(), logging.INFO)


def configure_logging(level_name: Optional[str]) -> None:
    logging.basicConfig(
        level=resolve_log_level(level_name),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
