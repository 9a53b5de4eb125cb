from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from ..models import Issue

GRAMMAR_RANGE = (70, 95)
STYLE_RANGE = (60, 90)
READABILITY_RANGE = (30, 70)


@dataclass(frozen=True, slots=True)
class BaselineScores:
    """Unadjusted grammar, style and readability scores."""

    grammar: int
    style: int
    readability: int


class ScoringModel(ABC):
    """Abstract model that supplies baseline scores for a document."""

    @abstractmethod
    def baseline(self, text: str, issues: Sequence[Issue]) -> BaselineScores:
        """Return baseline scores for the text and its detected issues."""
        raise NotImplementedError
