from __future__ import annotations

import random
from typing import Sequence

from ..models import Issue
from .base import (
    GRAMMAR_RANGE,
    READABILITY_RANGE,
    STYLE_RANGE,
    BaselineScores,
    ScoringModel,
)


class SimulatedScoringModel(ScoringModel):
    """
    Stand-in for an external scoring service: draws bounded random scores
    from the injected random source. Seed the source for reproducible runs.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def baseline(self, text: str, issues: Sequence[Issue]) -> BaselineScores:
        return BaselineScores(
            grammar=self._rng.randint(*GRAMMAR_RANGE),
            style=self._rng.randint(*STYLE_RANGE),
            readability=self._rng.randint(*READABILITY_RANGE),
        )
