from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from ..config import AnalysisOptions
from ..models import Issue
from .base import Detector


@dataclass(frozen=True, slots=True)
class PunctuationRule:
    pattern: re.Pattern[str]
    suggestion: str
    explanation: str
    advisory: bool = False


PUNCTUATION_RULES: tuple[PunctuationRule, ...] = (
    PunctuationRule(
        re.compile(r"(?<=\w)[ \t]+([.,;:!?])"),
        r"\1",
        "There should be no space before punctuation marks.",
    ),
    PunctuationRule(
        re.compile(r"([,;!?])([A-Za-z])"),
        r"\1 \2",
        "There should be a space after punctuation marks.",
    ),
    PunctuationRule(
        re.compile(r"(?<=[a-z])\.([A-Z][a-z])"),
        r". \1",
        "There should be a space after a sentence-ending period.",
    ),
    PunctuationRule(
        re.compile(r",\s+(and|or|but)\s+"),
        r" \1 ",
        "Don't use a comma before a coordinating conjunction that joins two "
        "independent clauses.",
        advisory=True,
    ),
)


class PunctuationDetector(Detector):
    """Flags spacing and comma mistakes around punctuation marks."""

    name = "punctuation"
    kind = "punctuation"

    def __init__(self, rules: Sequence[PunctuationRule] = PUNCTUATION_RULES) -> None:
        self._rules = tuple(rules)

    def enabled(self, options: AnalysisOptions) -> bool:
        return options.check_punctuation

    def detect(
        self, paragraphs: Sequence[str], options: AnalysisOptions
    ) -> list[Issue]:
        issues: list[Issue] = []
        for index, paragraph in enumerate(paragraphs):
            for rule in self._rules:
                for match in rule.pattern.finditer(paragraph):
                    issues.append(
                        self.make_issue(
                            paragraphs,
                            index,
                            match.start(),
                            match.end(),
                            severity="medium",
                            suggestion=match.expand(rule.suggestion),
                            explanation=rule.explanation,
                            advisory=rule.advisory,
                        )
                    )
        return issues
