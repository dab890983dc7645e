"""jq-based field extraction."""

import asyncio

import pytest

from conftest import make_alert
from ntfy_bridge.errors.exceptions import ExtractionError
from ntfy_bridge.services.extractor import JqEvaluator, extract
from ntfy_bridge.services.validation import validate_alert


@pytest.fixture
def alert():
    return validate_alert(make_alert())


@pytest.fixture
def evaluator():
    return JqEvaluator()


async def test_extracts_label(alert, evaluator):
    assert await extract(".labels.severity", alert, evaluator) == "critical"


async def test_document_uses_wire_field_names(alert, evaluator):
    assert await extract(".generatorURL", alert, evaluator) == (
        "http://prometheus.local:9090/graph?g0.expr=disk_free"
    )
    starts_at = await extract(".startsAt", alert, evaluator)
    assert starts_at.startswith("2024-05-01T10:00:00")


async def test_structured_results(alert, evaluator):
    tags = await extract("[.labels.alertname, .status]", alert, evaluator)
    assert tags == ["DiskFull", "firing"]
    assert await extract("4", alert, evaluator) == 4
    assert await extract('"\\(.labels.instance) is \\(.status)"', alert, evaluator) == (
        "db-1:9100 is firing"
    )


async def test_invalid_syntax(alert, evaluator):
    with pytest.raises(ExtractionError) as exc_info:
        await extract(".labels.[", alert, evaluator)
    assert exc_info.value.query == ".labels.["
    assert exc_info.value.stage == "extraction"


async def test_absent_path(alert, evaluator):
    with pytest.raises(ExtractionError):
        await extract(".labels.team", alert, evaluator)


async def test_no_output(alert, evaluator):
    with pytest.raises(ExtractionError):
        await extract("empty", alert, evaluator)


async def test_runtime_error(alert, evaluator):
    with pytest.raises(ExtractionError):
        await extract(".labels.severity | tonumber", alert, evaluator)


async def test_concurrent_evaluations_are_independent(alert, evaluator):
    queries = [".labels.severity", ".annotations.summary", ".fingerprint", ".status"]
    values = await asyncio.gather(*(extract(q, alert, evaluator) for q in queries))
    assert values == ["critical", "Disk full", "c0ffee01", "firing"]
