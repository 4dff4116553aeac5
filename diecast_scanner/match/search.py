"""
Approximate lookup of a scanned box in an existing collection.

Each searchable field of a car is compared with the query using
rapidfuzz's token set ratio. A car's similarity averages its best field
ratio with the mean over all its fields; the score inverts it so that
0.0 is a perfect match and 1.0 shares nothing with the query.
"""

from typing import List, Optional, Sequence

from rapidfuzz import fuzz, utils

from ..core.constants import SEARCH_KEYS
from ..core.types import DiecastCar, MatchResult, ParsedInfo
from ..utils.config import settings
from ..utils.log import LoggerMixin
from ..utils.validation import validate_numeric_range


class CollectionMatcher(LoggerMixin):
    """Fuzzy search over an in-memory list of cars."""

    def __init__(
        self,
        cars: Sequence[DiecastCar],
        threshold: Optional[float] = None,
        accept_score: Optional[float] = None,
        keys: Sequence[str] = SEARCH_KEYS,
    ):
        self.cars = list(cars)
        self.keys = tuple(keys)
        self.threshold = validate_numeric_range(
            settings.SEARCH_THRESHOLD if threshold is None else threshold,
            0.0, 1.0, "threshold",
        )
        self.accept_score = validate_numeric_range(
            settings.MATCH_ACCEPT_SCORE if accept_score is None else accept_score,
            0.0, 1.0, "accept_score",
        )

    def score(self, query: str, car: DiecastCar) -> Optional[MatchResult]:
        """Score one car against a query; None if it has no searchable field."""
        ratios = {}
        for key in self.keys:
            value = getattr(car, key, None)
            if value:
                ratios[key] = fuzz.token_set_ratio(query, value, processor=utils.default_process)
        if not ratios:
            return None

        # Best field dominates, the other fields separate cars sharing it
        best_key = max(ratios, key=ratios.get)
        mean_ratio = sum(ratios.values()) / len(ratios)
        similarity = (ratios[best_key] + mean_ratio) / 2.0
        return MatchResult(car=car, score=round(1.0 - similarity / 100.0, 4), matched_key=best_key)

    def search(self, query: str) -> List[MatchResult]:
        """Cars scoring within the threshold, best first."""
        if not query or not query.strip():
            return []

        results = []
        for car in self.cars:
            result = self.score(query, car)
            if result is not None and result.score <= self.threshold:
                results.append(result)

        # sorted() is stable, so collection order breaks ties
        results = sorted(results, key=lambda r: r.score)
        self.logger.debug("Collection searched", query=query, hits=len(results))
        return results

    def find_match(self, info: ParsedInfo) -> Optional[MatchResult]:
        """Best car for a parsed box, or None if nothing is close enough."""
        context = self.log_start("Collection match", query=info.search_key(), cars=len(self.cars))
        results = self.search(info.search_key())
        if results and results[0].score < self.accept_score:
            best = results[0]
            self.log_success(context, car_id=best.car.id, score=best.score, matched_key=best.matched_key)
            return best

        self.log_success(context, car_id=None, candidates=len(results))
        return None
