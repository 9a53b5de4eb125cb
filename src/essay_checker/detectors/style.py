from __future__ import annotations

import re
from typing import Sequence

from ..config import AnalysisOptions
from ..models import Issue
from .base import Detector

PASSIVE_VOICE_RE = re.compile(
    r"\b(?:is|are|was|were|be|been|being)\s+(?:[a-z]+ed|done|made|built|created|written)\b",
    re.IGNORECASE,
)
REPEATED_WORD_RE = re.compile(r"\b(\w+)\s+\1\b", re.IGNORECASE)

# phrase -> (replacement, explanation)
WORDY_PHRASES: dict[str, tuple[str, str]] = {
    "due to the fact that": ("because", "This phrase is wordy. 'Because' is more concise."),
    "at this point in time": ("now", "This phrase is wordy. 'Now' is more concise."),
    "in order to": ("to", "In most cases, 'to' alone is sufficient."),
    "for the purpose of": ("for", "This phrase is wordy. 'For' is more concise."),
    "in the event that": ("if", "This phrase is wordy. 'If' is more concise."),
}

PASSIVE_SUGGESTION = "Consider using active voice"
PASSIVE_EXPLANATION = (
    "Passive voice can make your writing less direct and engaging. "
    "Consider restructuring to use active voice."
)
REPEATED_EXPLANATION = (
    "You've repeated the same word. Consider using a synonym or restructuring "
    "the sentence."
)


class StyleDetector(Detector):
    """Passive voice, wordy phrases and accidentally doubled words."""

    name = "style"
    kind = "style"

    def __init__(self, wordy_phrases: dict[str, tuple[str, str]] = WORDY_PHRASES) -> None:
        self._wordy = [
            (re.compile(re.escape(phrase), re.IGNORECASE), replacement, explanation)
            for phrase, (replacement, explanation) in wordy_phrases.items()
        ]

    def enabled(self, options: AnalysisOptions) -> bool:
        return options.check_style

    def detect(
        self, paragraphs: Sequence[str], options: AnalysisOptions
    ) -> list[Issue]:
        issues: list[Issue] = []
        issues.extend(self._passive_voice(paragraphs))
        issues.extend(self._wordiness(paragraphs))
        issues.extend(self._repeated_words(paragraphs))
        return issues

    def _passive_voice(self, paragraphs: Sequence[str]) -> list[Issue]:
        issues: list[Issue] = []
        for index, paragraph in enumerate(paragraphs):
            # one per paragraph, at the first construction
            match = PASSIVE_VOICE_RE.search(paragraph)
            if match:
                issues.append(
                    self.make_issue(
                        paragraphs,
                        index,
                        match.start(),
                        match.end(),
                        severity="low",
                        suggestion=PASSIVE_SUGGESTION,
                        explanation=PASSIVE_EXPLANATION,
                        advisory=True,
                    )
                )
        return issues

    def _wordiness(self, paragraphs: Sequence[str]) -> list[Issue]:
        issues: list[Issue] = []
        for index, paragraph in enumerate(paragraphs):
            for pattern, replacement, explanation in self._wordy:
                match = pattern.search(paragraph)
                if match:
                    issues.append(
                        self.make_issue(
                            paragraphs,
                            index,
                            match.start(),
                            match.end(),
                            severity="low",
                            suggestion=replacement,
                            explanation=explanation,
                        )
                    )
        return issues

    def _repeated_words(self, paragraphs: Sequence[str]) -> list[Issue]:
        issues: list[Issue] = []
        for index, paragraph in enumerate(paragraphs):
            for match in REPEATED_WORD_RE.finditer(paragraph):
                issues.append(
                    self.make_issue(
                        paragraphs,
                        index,
                        match.start(),
                        match.end(),
                        severity="low",
                        suggestion=match.group(1),
                        explanation=REPEATED_EXPLANATION,
                    )
                )
        return issues
