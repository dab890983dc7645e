"""Build a notification for one alert from an extraction mapping."""

import asyncio
from collections.abc import Iterable
from typing import Any

from ntfy_bridge.models.alert import Alert
from ntfy_bridge.models.notification import ExtractionMapping, Notification
from ntfy_bridge.services.extractor import QueryEvaluator, extract
from ntfy_bridge.services.validation import validate_notification


def assemble_fields(pairs: Iterable[tuple[str, Any]]) -> dict[str, Any]:
    """Merge ``(field, value)`` pairs into one record; later pairs win on collision."""
    fields: dict[str, Any] = {}
    for name, value in pairs:
        fields[name] = value
    return fields


async def _extract_field(name: str, query: str, alert: Alert, evaluator: QueryEvaluator) -> tuple[str, Any]:
    return name, await extract(query, alert, evaluator)


async def build_notification(
    mapping: ExtractionMapping,
    alert: Alert,
    evaluator: QueryEvaluator,
) -> Notification:
    """Extract every mapped field concurrently, then validate and default the result.

    Raises:
        ExtractionError: If any field query fails.
        NotificationSchemaError: If the assembled record breaks the contract.
    """
    pairs = await asyncio.gather(
        *(_extract_field(name, query, alert, evaluator) for name, query in mapping.entries())
    )
    return validate_notification(assemble_fields(pairs))
