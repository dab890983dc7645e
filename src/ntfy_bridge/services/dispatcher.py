"""Concurrent fan-out of one alert batch to the notification sink."""

import asyncio
import logging
from typing import Any

from ntfy_bridge.errors.exceptions import BridgeError
from ntfy_bridge.models.alert import AlertBatch
from ntfy_bridge.models.notification import ExtractionMapping
from ntfy_bridge.models.outcome import AlertResult, AlertState, BatchOutcome
from ntfy_bridge.services.builder import build_notification
from ntfy_bridge.services.extractor import JqEvaluator, QueryEvaluator
from ntfy_bridge.services.validation import validate_alert
from ntfy_bridge.sinks.base import NotificationSink

logger = logging.getLogger(__name__)


def _fingerprint(raw: Any) -> str | None:
    if isinstance(raw, dict) and isinstance(raw.get("fingerprint"), str):
        return raw["fingerprint"]
    return None


class AlertDispatcher:
    """Runs the validate → build → send pipeline for every alert of a batch.

    Pipelines run concurrently and each one ends in an :class:`AlertResult`;
    a failing alert is logged and recorded but never affects its siblings.
    The mapping is shared read-only between pipelines.
    """

    def __init__(self, sink: NotificationSink, evaluator: QueryEvaluator | None = None) -> None:
        self.sink = sink
        self.evaluator = evaluator or JqEvaluator()

    async def process_batch(self, mapping: ExtractionMapping, batch: AlertBatch) -> BatchOutcome:
        results = await asyncio.gather(
            *(self._run_pipeline(index, raw, mapping) for index, raw in enumerate(batch.alerts))
        )
        outcome = BatchOutcome(results=list(results))
        if outcome.has_failures:
            logger.warning("Batch processed with failures: %s", outcome.summary())
        else:
            logger.info("Batch processed: %s", outcome.summary())
        return outcome

    async def _run_pipeline(self, index: int, raw: Any, mapping: ExtractionMapping) -> AlertResult:
        fingerprint = _fingerprint(raw)
        state = AlertState.RECEIVED
        try:
            alert = validate_alert(raw)
            state = AlertState.VALIDATED
            logger.info("Alert object received (fingerprint=%s, status=%s)", fingerprint, alert.status)

            notification = await build_notification(mapping, alert, self.evaluator)
            state = AlertState.BUILT
            logger.info(
                "Notification constructed (fingerprint=%s): %s",
                fingerprint,
                notification.model_dump(mode="json", exclude_none=True),
            )

            await self.sink.send(notification)
        except BridgeError as exc:
            logger.warning(
                "Error occurred for alert #%d (fingerprint=%s, stage=%s, last_state=%s): %s",
                index,
                fingerprint,
                exc.stage,
                state,
                exc.diagnostic("; "),
                extra={"details": exc.details},
            )
            return AlertResult(
                index, fingerprint, AlertState.FAILED, exc.stage, exc.message, exc.violation_lines()
            )
        except Exception as exc:
            logger.exception("Unexpected error for alert #%d (fingerprint=%s)", index, fingerprint)
            return AlertResult(index, fingerprint, AlertState.FAILED, "internal", str(exc))

        logger.info("Notification sent (fingerprint=%s, topic=%s)", fingerprint, notification.topic)
        return AlertResult(index, fingerprint, AlertState.DISPATCHED)
