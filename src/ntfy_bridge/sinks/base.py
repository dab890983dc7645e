"""Abstract base class for notification sinks."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ntfy_bridge.models.notification import Notification


class NotificationSink(ABC):
    """Delivers a built notification to an external service."""

    @abstractmethod
    async def send(self, notification: Notification) -> None:
        """Deliver one notification.

        Raises:
            DeliveryError: If the sink rejects it or cannot be reached.
        """
        ...
