from __future__ import annotations

from typing import Sequence

from ..config import AnalysisOptions
from ..models import Issue
from ..segmentation import count_words
from .base import Detector


class StructureDetector(Detector):
    """Flags paragraphs that run past the configured word limit."""

    name = "structure"
    kind = "structure"

    def __init__(self, max_words: int = 150) -> None:
        self.max_words = max_words

    def detect(
        self, paragraphs: Sequence[str], options: AnalysisOptions
    ) -> list[Issue]:
        issues: list[Issue] = []
        for index, paragraph in enumerate(paragraphs):
            if count_words(paragraph) > self.max_words:
                issues.append(
                    self.make_issue(
                        paragraphs,
                        index,
                        0,
                        len(paragraph),
                        severity="medium",
                        suggestion="Consider breaking this into smaller paragraphs",
                        explanation=(
                            f"Long paragraphs ({self.max_words}+ words) can be difficult "
                            "to read. Consider breaking this into smaller, more focused "
                            "paragraphs of 3-5 sentences each."
                        ),
                    )
                )
        return issues
