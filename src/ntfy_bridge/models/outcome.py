"""Per-alert pipeline results and the batch summary built from them."""

from dataclasses import dataclass, field
from enum import StrEnum


class AlertState(StrEnum):
    RECEIVED = "received"
    VALIDATED = "validated"
    BUILT = "built"
    DISPATCHED = "dispatched"
    FAILED = "failed"


@dataclass(frozen=True)
class AlertResult:
    """Terminal state of one alert pipeline."""

    index: int
    fingerprint: str | None
    state: AlertState
    stage: str | None = None
    reason: str | None = None
    # Violated fields, one "- loc: msg" entry each
    details: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.state is AlertState.DISPATCHED


@dataclass
class BatchOutcome:
    results: list[AlertResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> list[AlertResult]:
        return [r for r in self.results if r.ok]

    @property
    def failed(self) -> list[AlertResult]:
        return [r for r in self.results if not r.ok]

    @property
    def has_failures(self) -> bool:
        return any(not r.ok for r in self.results)

    def summary(self) -> dict:
        return {
            "total": self.total,
            "succeeded": len(self.succeeded),
            "failed": len(self.failed),
            "failed_fingerprints": [r.fingerprint for r in self.failed],
        }
