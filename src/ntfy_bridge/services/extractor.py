"""Field extraction: evaluate one query against one alert document."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any

import jq

from ntfy_bridge.errors.exceptions import ExtractionError
from ntfy_bridge.models.alert import Alert


class QueryEvaluator(ABC):
    """Evaluates a query string against a JSON document."""

    @abstractmethod
    async def evaluate(self, query: str, document: Any) -> Any:
        """Return the value the query produces.

        Raises:
            ExtractionError: If the query is invalid, fails, or yields nothing.
        """
        ...


class JqEvaluator(QueryEvaluator):
    """Runs jq programs through the ``jq`` bindings.

    Programs are compiled per call so concurrent evaluations share nothing.
    The first output of the program is the result; ``null`` counts as a miss
    because jq reports absent paths that way.
    """

    async def evaluate(self, query: str, document: Any) -> Any:
        outputs = await asyncio.to_thread(self._run, query, document)
        if not outputs:
            raise ExtractionError(query, "produced no output")
        value = outputs[0]
        if value is None:
            raise ExtractionError(query, "produced null (path absent?)")
        return value

    @staticmethod
    def _run(query: str, document: Any) -> list[Any]:
        try:
            program = jq.compile(query)
        except ValueError as exc:
            raise ExtractionError(query, f"invalid program: {exc}") from exc
        try:
            return program.input_value(document).all()
        except ValueError as exc:
            raise ExtractionError(query, str(exc)) from exc


async def extract(query: str, alert: Alert, evaluator: QueryEvaluator) -> Any:
    """Evaluate ``query`` against the alert's wire document."""
    return await evaluator.evaluate(query, alert.document())
