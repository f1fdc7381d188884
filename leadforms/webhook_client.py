"""Minimal client for the lead-capture webhook."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Dict, Optional

import requests

from .config import WebhookConfig

LOGGER = logging.getLogger(__name__)


class WebhookError(RuntimeError):
    """The webhook call could not be completed."""

    def __init__(self, message: str, response: Optional[requests.Response] = None):
        super().__init__(message)
        self.response = response


class WebhookClient:
    """POSTs JSON payloads to a single fixed endpoint."""

    def __init__(
        self,
        endpoint: str,
        *,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.endpoint = endpoint
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def from_config(cls, config: WebhookConfig, **kwargs: Any) -> "WebhookClient":
        return cls(config.endpoint, timeout=config.timeout, **kwargs)

    def post_json(self, payload: Dict[str, Any]) -> requests.Response:
        """Send ``payload``; only transport failures are raised.

        The response body is never read. A non-2xx status still counts as a
        settled call and is only logged.
        """

        try:
            response = self.session.post(
                self.endpoint,
                data=json.dumps(payload),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise WebhookError(f"Webhook request failed: {exc}") from exc

        if not response.ok:
            LOGGER.warning("webhook.status status=%s endpoint=%s", response.status_code, self.endpoint)
        return response

    async def send(self, payload: Dict[str, Any]) -> requests.Response:
        """Awaitable ``post_json``; the blocking call runs in a worker thread."""

        return await asyncio.to_thread(self.post_json, payload)
