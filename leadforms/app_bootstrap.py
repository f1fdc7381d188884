# leadforms/app_bootstrap.py
from __future__ import annotations

import logging
from typing import Optional

from .config import AppConfig, configure_logging, load_config

log = logging.getLogger(__name__)

_BOOTSTRAP_DONE: bool = False


def ensure_bootstrap(config: Optional[AppConfig] = None) -> AppConfig:
    """Configure logging once per process and return the loaded config."""

    global _BOOTSTRAP_DONE

    config = config or load_config()
    if not _BOOTSTRAP_DONE:
        configure_logging(config.logging)
        _BOOTSTRAP_DONE = True
        log.info("app.bootstrap webhook=%s timeout=%s", config.webhook.endpoint, config.webhook.timeout)
    return config
