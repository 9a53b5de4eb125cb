from __future__ import annotations

from typing import Sequence

from ..config import AnalysisOptions
from ..models import Issue
from ..segmentation import count_words, split_sentences
from .base import Detector


class ClarityDetector(Detector):
    """Flags sentences that run past the configured word limit."""

    name = "clarity"
    kind = "clarity"

    def __init__(self, max_words: int = 40) -> None:
        self.max_words = max_words

    def detect(
        self, paragraphs: Sequence[str], options: AnalysisOptions
    ) -> list[Issue]:
        issues: list[Issue] = []
        for index, paragraph in enumerate(paragraphs):
            for sentence in split_sentences(paragraph):
                if count_words(sentence.text) <= self.max_words:
                    continue
                issues.append(
                    self.make_issue(
                        paragraphs,
                        index,
                        sentence.start,
                        sentence.end,
                        severity="medium",
                        suggestion="Consider breaking this into smaller sentences",
                        explanation=(
                            f"This sentence is very long ({self.max_words}+ words). "
                            "Long sentences can be difficult to follow. Consider "
                            "breaking it into smaller, clearer sentences."
                        ),
                    )
                )
        return issues
