from __future__ import annotations

from typing import Mapping, Sequence

from ..models import Issue
from .base import (
    GRAMMAR_RANGE,
    READABILITY_RANGE,
    STYLE_RANGE,
    BaselineScores,
    ScoringModel,
)

DEFAULT_PENALTIES: dict[str, int] = {"low": 1, "medium": 3, "high": 5}

GRAMMAR_KINDS = frozenset({"grammar", "spelling", "punctuation"})
STYLE_KINDS = frozenset({"style", "structure", "citation", "plagiarism"})
READABILITY_KINDS = frozenset({"clarity", "structure"})


def _clamp(value: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    return max(low, min(high, value))


class PenaltyScoringModel(ScoringModel):
    """Deterministic model: start at the top of each range and subtract per issue."""

    def __init__(self, penalties: Mapping[str, int] | None = None) -> None:
        self.penalties = dict(DEFAULT_PENALTIES if penalties is None else penalties)

    def _penalty(self, issues: Sequence[Issue], kinds: frozenset[str]) -> int:
        return sum(
            self.penalties.get(issue.severity, 0)
            for issue in issues
            if issue.kind in kinds
        )

    def baseline(self, text: str, issues: Sequence[Issue]) -> BaselineScores:
        return BaselineScores(
            grammar=_clamp(
                GRAMMAR_RANGE[1] - self._penalty(issues, GRAMMAR_KINDS), GRAMMAR_RANGE
            ),
            style=_clamp(
                STYLE_RANGE[1] - self._penalty(issues, STYLE_KINDS), STYLE_RANGE
            ),
            readability=_clamp(
                READABILITY_RANGE[1] - self._penalty(issues, READABILITY_KINDS),
                READABILITY_RANGE,
            ),
        )
