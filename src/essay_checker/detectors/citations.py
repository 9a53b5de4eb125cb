from __future__ import annotations

import logging
import re
from typing import Sequence

from ..config import AnalysisOptions
from ..models import Citation, CitationForm, DetectorResult, Issue
from .base import Detector

logger = logging.getLogger(__name__)

CITATION_PATTERNS: tuple[tuple[re.Pattern[str], CitationForm], ...] = (
    (re.compile(r"\(([A-Za-z]+),?\s+(\d{4})\)"), "in-text"),
    (re.compile(r"\b([A-Za-z]+)\s+\((\d{4})\)"), "narrative"),
)
CLOSING_QUOTES = ('"', "”", "'", "’")

MISSING_CITATIONS_EXPLANATION = (
    "No citations were found in this academic essay. Academic writing typically "
    "requires citations to support claims and arguments."
)


def citation_problems(
    style: str, form: CitationForm, paragraph: str, start: int
) -> list[str]:
    """Return the style-specific problems for one citation occurrence."""
    if style == "apa" and form == "in-text":
        if paragraph[:start].rstrip().endswith(CLOSING_QUOTES):
            return ["Missing page number for direct quote"]
    elif style == "mla" and form == "in-text":
        return ["Missing page number for MLA citation"]
    elif style == "chicago" and form == "narrative":
        return ["Chicago style prefers footnotes over in-text citations"]
    return []


class CitationDetector(Detector):
    """Recognizes author/year citations and checks them against the citation style.

    Only academic documents are checked. Every recognized occurrence is
    reported as a :class:`Citation`; occurrences with problems also become
    issues. A document with no citations at all gets a single high-severity
    issue anchored to its first paragraph.
    """

    name = "citation"
    kind = "citation"

    def enabled(self, options: AnalysisOptions) -> bool:
        return options.check_citations and options.document_type == "academic"

    def detect(
        self, paragraphs: Sequence[str], options: AnalysisOptions
    ) -> list[Issue]:
        return self.run(paragraphs, options).issues

    def run(self, paragraphs: Sequence[str], options: AnalysisOptions) -> DetectorResult:
        result = DetectorResult()
        if not paragraphs:
            return result

        for index, paragraph in enumerate(paragraphs):
            for pattern, form in CITATION_PATTERNS:
                for match in pattern.finditer(paragraph):
                    problems = citation_problems(
                        options.citation_style, form, paragraph, match.start()
                    )
                    result.citations.append(
                        Citation(text=match.group(0), form=form, problems=tuple(problems))
                    )
                    if problems:
                        result.issues.append(
                            self.make_issue(
                                paragraphs,
                                index,
                                match.start(),
                                match.end(),
                                severity="medium",
                                suggestion="Correct citation format",
                                explanation=". ".join(problems),
                                advisory=True,
                            )
                        )

        if not result.citations:
            logger.debug("No citations found in academic document")
            result.issues.append(
                self.make_issue(
                    paragraphs,
                    0,
                    0,
                    len(paragraphs[0]),
                    severity="high",
                    suggestion="Add appropriate citations",
                    explanation=MISSING_CITATIONS_EXPLANATION,
                    advisory=True,
                )
            )
        return result
