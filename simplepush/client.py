"""HTTP transport for the simplepush.io API."""

from __future__ import annotations

import logging
from typing import Any, Dict

import requests

from .config import Settings
from .errors import SendFailed
from .message import Message
from .payload import assemble

logger = logging.getLogger(__name__)


class SimplePush:
    """Client for the simplepush.io ``/send`` endpoint.

    A ``requests.Session`` can be passed in to share a connection pool or to
    stub the transport; otherwise one is created per client.
    """

    def __init__(self, api_url: str | None = None, timeout: float | None = None, session: requests.Session | None = None):
        self.api_url = (api_url or Settings.API_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else Settings.TIMEOUT
        self.session = session or requests.Session()

    def send(self, message: Message) -> Dict[str, Any]:
        message.validate()
        payload = assemble(message)

        url = f"{self.api_url}/send"
        try:
            resp = self.session.post(url, json=payload.to_dict(), timeout=self.timeout)
            logger.debug("POST %s -> %s", url, resp.status_code)
            resp.raise_for_status()
        except requests.exceptions.Timeout as exc:
            raise SendFailed("Timeout", cause=exc) from exc
        except requests.exceptions.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            raise SendFailed(f"Unexpected status {status}", cause=exc, status_code=status) from exc
        except requests.exceptions.RequestException as exc:
            raise SendFailed(str(exc), cause=exc) from exc

        try:
            return resp.json()
        except ValueError:
            return {}


def send(message: Message) -> Dict[str, Any]:
    """Send ``message`` with a client built from :class:`~simplepush.config.Settings`."""
    return SimplePush().send(message)


__all__ = ["SimplePush", "send"]
