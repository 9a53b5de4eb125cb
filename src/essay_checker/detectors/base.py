from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, Sequence

from ..config import AnalysisOptions
from ..models import DetectorResult, Issue, IssueKind, Position, Severity


class Detector(ABC):
    """Abstract detection pass producing issues of a single kind."""

    name: ClassVar[str]
    kind: ClassVar[IssueKind]

    def enabled(self, options: AnalysisOptions) -> bool:
        """Return True when the options ask for this pass to run."""
        return True

    @abstractmethod
    def detect(
        self, paragraphs: Sequence[str], options: AnalysisOptions
    ) -> list[Issue]:
        """Return the issues found in the paragraphs without mutating them."""
        raise NotImplementedError

    def run(self, paragraphs: Sequence[str], options: AnalysisOptions) -> DetectorResult:
        return DetectorResult(issues=self.detect(paragraphs, options))

    def make_issue(
        self,
        paragraphs: Sequence[str],
        paragraph_index: int,
        start: int,
        end: int,
        *,
        severity: Severity,
        suggestion: str,
        explanation: str,
        advisory: bool = False,
    ) -> Issue:
        """Build an unnumbered issue whose matched text is read from the paragraph."""
        return Issue(
            id="",
            kind=self.kind,
            severity=severity,
            matched_text=paragraphs[paragraph_index][start:end],
            suggestion=suggestion,
            explanation=explanation,
            position=Position(paragraph_index, start, end),
            advisory=advisory,
        )
