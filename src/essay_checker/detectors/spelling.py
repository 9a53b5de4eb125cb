from __future__ import annotations

import re
from typing import Mapping, Sequence

from ..config import AnalysisOptions
from ..models import Issue
from .base import Detector

# misspelling -> (correction, explanation)
COMMON_MISSPELLINGS: dict[str, tuple[str, str]] = {
    "accomodate": ("accommodate", "This word has double 'c' and double 'm'."),
    "acheive": ("achieve", "Remember the rule: 'i' before 'e' except after 'c'."),
    "definately": ("definitely", "This word is spelled with 'i' in the middle, not 'a'."),
    "embarassing": ("embarrassing", "This word has double 'r' and double 's'."),
    "occured": ("occurred", "This word has double 'c' and double 'r'."),
    "recieve": ("receive", "Remember the rule: 'i' before 'e' except after 'c'."),
    "seperate": ("separate", "This word has an 'a' in the middle, not an 'e'."),
    "neccessary": ("necessary", "This word has one 'c' followed by double 's'."),
}


class SpellingDetector(Detector):
    """Whole-word lookup against a table of common misspellings."""

    name = "spelling"
    kind = "spelling"

    def __init__(
        self, misspellings: Mapping[str, tuple[str, str]] = COMMON_MISSPELLINGS
    ) -> None:
        self._patterns = [
            (re.compile(rf"\b{re.escape(wrong)}\b", re.IGNORECASE), correct, explanation)
            for wrong, (correct, explanation) in misspellings.items()
        ]

    def enabled(self, options: AnalysisOptions) -> bool:
        return options.check_spelling

    def detect(
        self, paragraphs: Sequence[str], options: AnalysisOptions
    ) -> list[Issue]:
        issues: list[Issue] = []
        for index, paragraph in enumerate(paragraphs):
            for pattern, correct, explanation in self._patterns:
                match = pattern.search(paragraph)
                if match:
                    issues.append(
                        self.make_issue(
                            paragraphs,
                            index,
                            match.start(),
                            match.end(),
                            severity="low",
                            suggestion=correct,
                            explanation=explanation,
                        )
                    )
        return issues
