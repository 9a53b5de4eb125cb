from __future__ import annotations

import logging
import random
import re
from dataclasses import dataclass
from typing import Sequence

from ..config import AnalysisOptions
from ..models import Issue
from .base import Detector

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GrammarRule:
    """A pattern plus a ``re`` expansion template for its replacement."""

    pattern: re.Pattern[str]
    suggestion: str
    explanation: str
    advisory: bool = False


@dataclass(frozen=True, slots=True)
class SupplementalRule:
    phrase: str
    suggestion: str
    explanation: str


GRAMMAR_RULES: tuple[GrammarRule, ...] = (
    GrammarRule(
        re.compile(r"\b(t)here is ([a-z]+) things\b", re.IGNORECASE),
        r"\1here are \2 things",
        "Use 'are' with plural nouns.",
    ),
    GrammarRule(
        re.compile(r"\bbetween you and (I|we)\b", re.IGNORECASE),
        "between you and me",
        "Use the objective pronoun 'me' after a preposition.",
    ),
    GrammarRule(
        re.compile(r"\b(could|should|would) of\b", re.IGNORECASE),
        r"\1 have",
        "The correct form is '[modal verb] + have', not 'of'.",
    ),
    GrammarRule(
        re.compile(r"\bless ([a-z]+s)\b", re.IGNORECASE),
        r"fewer \1",
        "Use 'fewer' with countable nouns.",
    ),
    GrammarRule(
        re.compile(r"\b(affect|effect)\b", re.IGNORECASE),
        "[affect/effect]",
        "Ensure you're using the right word: 'affect' (verb) means to influence; "
        "'effect' (noun) is the result.",
        advisory=True,
    ),
)

SUPPLEMENTAL_RULES: tuple[SupplementalRule, ...] = (
    SupplementalRule(
        "the data is",
        "the data are",
        "'Data' is technically a plural noun and should take a plural verb.",
    ),
    SupplementalRule(
        "different than",
        "different from",
        "The correct idiom is 'different from', not 'different than'.",
    ),
    SupplementalRule(
        "comprised of",
        "composed of",
        "'Comprise' means 'to include or contain', so 'comprised of' is redundant.",
    ),
)

MIN_RULE_MATCHES = 3


class GrammarDetector(Detector):
    """Pattern-table grammar pass with generic fallback feedback for clean texts."""

    name = "grammar"
    kind = "grammar"

    def __init__(
        self,
        rng: random.Random | None = None,
        rules: Sequence[GrammarRule] = GRAMMAR_RULES,
        supplemental_rules: Sequence[SupplementalRule] = SUPPLEMENTAL_RULES,
    ) -> None:
        self._rng = rng or random.Random()
        self._rules = tuple(rules)
        self._supplemental_rules = tuple(supplemental_rules)

    def enabled(self, options: AnalysisOptions) -> bool:
        return options.check_grammar

    def detect(
        self, paragraphs: Sequence[str], options: AnalysisOptions
    ) -> list[Issue]:
        issues: list[Issue] = []
        for index, paragraph in enumerate(paragraphs):
            for rule in self._rules:
                match = rule.pattern.search(paragraph)
                if match is None:
                    continue
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

        if len(issues) < MIN_RULE_MATCHES and paragraphs:
            issues.extend(self._supplemental_issues(paragraphs))
        return issues

    def _supplemental_issues(self, paragraphs: Sequence[str]) -> list[Issue]:
        """Attach generic reminders to randomly chosen paragraphs.

        The span starts at offset 0 and covers as many characters as the
        reminder phrase, clipped to the paragraph.
        """
        issues: list[Issue] = []
        for rule in self._supplemental_rules:
            index = self._rng.randrange(len(paragraphs))
            end = min(len(rule.phrase), len(paragraphs[index]))
            issues.append(
                self.make_issue(
                    paragraphs,
                    index,
                    0,
                    end,
                    severity="low",
                    suggestion=rule.suggestion,
                    explanation=rule.explanation,
                    advisory=True,
                )
            )
        logger.debug(
            "Added %d supplemental grammar reminders", len(self._supplemental_rules)
        )
        return issues
