"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from ntfy_bridge.config import Settings
from ntfy_bridge.errors.exceptions import DeliveryError
from ntfy_bridge.models.notification import Notification
from ntfy_bridge.services.dispatcher import AlertDispatcher
from ntfy_bridge.sinks.base import NotificationSink


class RecordingSink(NotificationSink):
    """In-memory sink that records deliveries and fails for chosen topics."""

    def __init__(self, failing_topics=()):
        self.sent: list[Notification] = []
        self.attempts = 0
        self.failing_topics = set(failing_topics)

    async def send(self, notification: Notification) -> None:
        self.attempts += 1
        if notification.topic in self.failing_topics:
            raise DeliveryError(f"ntfy rejected topic {notification.topic!r}: HTTP 500", status=500)
        self.sent.append(notification)


def make_alert(**overrides) -> dict:
    """Return a raw Alertmanager alert object."""
    alert = {
        "status": "firing",
        "labels": {"alertname": "DiskFull", "severity": "critical", "instance": "db-1:9100"},
        "annotations": {"summary": "Disk full", "description": "/var is at 99%"},
        "startsAt": "2024-05-01T10:00:00Z",
        "endsAt": "0001-01-01T00:00:00Z",
        "generatorURL": "http://prometheus.local:9090/graph?g0.expr=disk_free",
        "fingerprint": "c0ffee01",
    }
    alert.update(overrides)
    return alert


def make_payload(alerts: list) -> dict:
    """Wrap alerts in a webhook v4 envelope."""
    return {
        "version": "4",
        "groupKey": '{}:{alertname="DiskFull"}',
        "truncatedAlerts": 0,
        "status": "firing",
        "receiver": "ntfy",
        "groupLabels": {"alertname": "DiskFull"},
        "commonLabels": {"alertname": "DiskFull"},
        "commonAnnotations": {},
        "externalURL": "http://alertmanager.local:9093",
        "alerts": alerts,
    }


@pytest.fixture
def settings():
    return Settings(ntfy_server_address="http://ntfy.test", json_logs=False, log_level="debug")


@pytest.fixture
def sink():
    return RecordingSink(failing_topics={"broken"})


@pytest.fixture
def dispatcher(sink):
    return AlertDispatcher(sink=sink)


@pytest.fixture
def app(settings, dispatcher):
    """Create a test application instance with the recording sink."""
    from ntfy_bridge.main import create_app

    _app = create_app(settings)
    _app.state.dispatcher = dispatcher
    return _app


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
