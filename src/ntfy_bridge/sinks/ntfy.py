"""ntfy sink: publishes notifications as JSON to an ntfy server."""

from __future__ import annotations

import logging

import httpx

from ntfy_bridge.errors.exceptions import DeliveryError
from ntfy_bridge.models.notification import Notification
from ntfy_bridge.sinks.base import NotificationSink

logger = logging.getLogger(__name__)


class NtfySink(NotificationSink):
    """Publishes to ntfy's JSON endpoint at the server root.

    The topic travels inside the body, so every notification is POSTed to
    ``base_url`` itself. No retries: a failure is final for that alert.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    async def send(self, notification: Notification) -> None:
        payload = notification.model_dump(mode="json", exclude_none=True)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.base_url, json=payload)
        except httpx.HTTPError as exc:
            raise DeliveryError(f"ntfy at {self.base_url} unreachable: {exc}") from exc

        if response.status_code >= 300:
            raise DeliveryError(
                f"ntfy rejected topic {notification.topic!r}: HTTP {response.status_code}",
                status=response.status_code,
            )
        logger.debug("ntfy accepted topic %s (HTTP %d)", notification.topic, response.status_code)
