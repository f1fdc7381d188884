"""Configuration module for the onboarding lead forms."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

DEFAULT_WEBHOOK_URL = "https://n8n.axora.info/webhook/de472dda-7707-4d02-a58b-85bca0cafaed"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass
class WebhookConfig:
    """Endpoint receiving the sign-up payload."""

    endpoint: str = DEFAULT_WEBHOOK_URL
    # None waits for the webhook forever, as the browser form did
    timeout: Optional[float] = None


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: int = logging.INFO
    log_file: Optional[Path] = None


@dataclass
class AppConfig:
    """Consolidated application configuration."""

    webhook: WebhookConfig = field(default_factory=WebhookConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _resolve_timeout(env_var: str) -> Optional[float]:
    raw = os.getenv(env_var)
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def _resolve_level(env_var: str, default: int = logging.INFO) -> int:
    raw = (os.getenv(env_var) or "").strip().upper()
    if not raw:
        return default
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else default


def configure_logging(logging_config: LoggingConfig) -> None:
    """Configure global logging for the application."""

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logging_config.log_file:
        logging_config.log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(logging_config.log_file))

    logging.basicConfig(
        level=logging_config.level,
        format=LOG_FORMAT,
        handlers=handlers,
    )


def load_config() -> AppConfig:
    """Load application configuration from environment variables and defaults."""

    webhook = WebhookConfig(
        endpoint=os.getenv("LEADFORMS_WEBHOOK_URL") or DEFAULT_WEBHOOK_URL,
        timeout=_resolve_timeout("LEADFORMS_WEBHOOK_TIMEOUT"),
    )

    log_file_env = os.getenv("LEADFORMS_LOG_FILE")
    logging_config = LoggingConfig(
        level=_resolve_level("LEADFORMS_LOG_LEVEL"),
        log_file=Path(log_file_env).expanduser() if log_file_env else None,
    )

    return AppConfig(webhook=webhook, logging=logging_config)
