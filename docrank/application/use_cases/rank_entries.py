# docrank/application/use_cases/rank_entries.py
from __future__ import annotations

import logging

from docrank.application.dto.rank_dto import RankedEntries, RankRequest
from docrank.application.ports.telemetry_port import TelemetryPort
from docrank.application.ports.type_distance_port import TypeDistancePort
from docrank.domain.errors import TypeDistanceError, ValidationError
from docrank.domain.services.cost import update_entry_cost
from docrank.domain.services.entry_kinds import is_type_bearing
from docrank.domain.services.ranking import sort_by_cost, take_top
from docrank.domain.types import Result, TypeSignature

logger = logging.getLogger(__name__)


class RankEntries:
    """
    Application Use-Case ranking candidate entries for one query.
    No I/O, uses only ports; handles errors via Result[T, E].
    Only type distance port failures become a Result; anything else, including
    invariant violations from the domain, is a programming error and propagates.
    """

    def __init__(
        self,
        type_distance: TypeDistancePort,
        telemetry: TelemetryPort | None = None,
        default_limit: int | None = None,
    ) -> None:
        self.type_distance = type_distance
        self.telemetry = telemetry
        self.default_limit = default_limit

    def execute(self, req: RankRequest) -> Result[RankedEntries, Exception]:
        # 1) Validate
        if isinstance(req.query_words, str) or not all(
            isinstance(w, str) for w in req.query_words
        ):
            return self._fail(ValidationError("query_words must be a sequence of strings"))
        if req.limit is not None and not isinstance(req.limit, int):
            return self._fail(ValidationError("limit must be an int or None"))

        # 2) Typed queries only rank type-bearing entries
        candidates = list(req.entries)
        filtered_out = 0
        if req.query_type is not None:
            candidates = [e for e in candidates if is_type_bearing(e.kind)]
            filtered_out = len(req.entries) - len(candidates)

        # 3) Score
        try:
            scored = [
                update_entry_cost(req.query_words, req.query_type, e, distance=self._distance)
                for e in candidates
            ]
        except TypeDistanceError as ex:
            logger.warning("%s", ex)
            return self._fail(ex)

        # 4) Sort & slice
        limit = req.limit if req.limit is not None else self.default_limit
        ranked = take_top(sort_by_cost(scored), limit)
        logger.debug(
            "ranked %d candidates (%d filtered out, %d returned)",
            len(scored),
            filtered_out,
            len(ranked),
        )

        if self.telemetry is not None:
            self.telemetry.incr("docrank.rank.requests", {"status": "success"})
            self.telemetry.observe("docrank.rank.candidates", len(scored), None)
            if ranked:
                self.telemetry.observe("docrank.rank.best_cost", ranked[0].cost, None)

        return Result.success(RankedEntries(entries=ranked, filtered_out=filtered_out))

    def _distance(self, query: TypeSignature, entry: TypeSignature) -> int:
        try:
            return self.type_distance.distance(query, entry)
        except Exception as ex:
            raise TypeDistanceError(f"type distance failed: {ex}") from ex

    def _fail(self, err: Exception) -> Result[RankedEntries, Exception]:
        if self.telemetry is not None:
            self.telemetry.incr(
                "docrank.rank.requests", {"status": "failure", "error_type": type(err).__name__}
            )
        return Result.failure(err)
