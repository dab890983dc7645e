"""Alertmanager webhook receiver."""

import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from ntfy_bridge.dependencies import Dispatcher, TraceId
from ntfy_bridge.errors.exceptions import ValidationError
from ntfy_bridge.logging_config import bind_request_context
from ntfy_bridge.services.validation import BATCH_REJECTED, validate_batch, validate_mapping

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Alerts"])

ACKNOWLEDGEMENT = "tnx alertmanager"


@router.post("/ntfy_alert", response_class=PlainTextResponse)
async def ntfy_alert(request: Request, dispatcher: Dispatcher, trace_id: TraceId):
    """Forward every alert of the batch to ntfy.

    Query parameters are jq programs keyed by notification field (``topic``
    is required). The response only reflects whether the request itself was
    well-formed; per-alert failures show up in the logs.
    """
    # Repeated keys collapse to their last value
    mapping = validate_mapping(dict(request.query_params))

    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValidationError(BATCH_REJECTED, details=[{"loc": "<body>", "msg": f"invalid JSON: {exc}"}]) from exc
    batch = validate_batch(payload)

    bind_request_context(trace_id, receiver=batch.receiver)
    logger.info("Received %d alert(s) for topic query %r", len(batch.alerts), mapping.topic)

    await dispatcher.process_batch(mapping, batch)
    return ACKNOWLEDGEMENT
