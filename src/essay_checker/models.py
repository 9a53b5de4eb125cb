from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Tuple

IssueKind = Literal[
    "grammar",
    "spelling",
    "punctuation",
    "clarity",
    "structure",
    "style",
    "citation",
    "plagiarism",
]
Severity = Literal["low", "medium", "high"]
CitationForm = Literal["in-text", "narrative"]
ReadabilityLevel = Literal["Complex", "Moderate", "Easy"]

ISSUE_KINDS: Tuple[str, ...] = (
    "grammar",
    "spelling",
    "punctuation",
    "clarity",
    "structure",
    "style",
    "citation",
    "plagiarism",
)
SEVERITIES: Tuple[str, ...] = ("low", "medium", "high")

# Kinds whose suggestion is guidance for the writer rather than replacement text.
ADVISORY_KINDS = frozenset({"structure", "clarity", "plagiarism"})


@dataclass(frozen=True, slots=True)
class Position:
    """Paragraph index plus inclusive-exclusive character offsets."""

    paragraph_index: int
    start_offset: int
    end_offset: int

    @property
    def sort_key(self) -> Tuple[int, int]:
        return (self.paragraph_index, self.start_offset)


@dataclass(frozen=True, slots=True)
class Issue:
    """A detected writing problem tied to one document snapshot."""

    id: str
    kind: IssueKind
    severity: Severity
    matched_text: str
    suggestion: str
    explanation: str
    position: Position
    advisory: bool = False

    @property
    def is_advisory(self) -> bool:
        """True when the suggestion reads as guidance rather than literal text."""
        return self.advisory or self.kind in ADVISORY_KINDS


@dataclass(frozen=True, slots=True)
class Citation:
    """A recognized author/year reference occurrence."""

    text: str
    form: CitationForm
    problems: Tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Document:
    """The working text as an immutable sequence of paragraphs."""

    paragraphs: Tuple[str, ...]

    @property
    def text(self) -> str:
        return "\n\n".join(self.paragraphs)

    def __len__(self) -> int:
        return len(self.paragraphs)

    def replace_paragraph(self, index: int, value: str) -> "Document":
        """Return a new Document with a single paragraph swapped out."""
        paragraphs = list(self.paragraphs)
        paragraphs[index] = value
        return Document(paragraphs=tuple(paragraphs))


@dataclass(frozen=True, slots=True)
class Scores:
    """Numeric results produced by the scorer."""

    word_count: int
    reading_time_minutes: int
    readability_score: int
    readability_level: ReadabilityLevel
    grammar_score: int
    style_score: int
    overall_score: int


@dataclass(frozen=True, slots=True)
class Analysis:
    """Aggregate result of a single analysis run."""

    word_count: int
    reading_time_minutes: int
    readability_score: int
    readability_level: ReadabilityLevel
    grammar_score: int
    style_score: int
    overall_score: int
    citations: Tuple[Citation, ...] = ()
    issues: Tuple[Issue, ...] = ()

    @classmethod
    def from_scores(
        cls,
        scores: Scores,
        citations: Tuple[Citation, ...],
        issues: Tuple[Issue, ...],
    ) -> "Analysis":
        return cls(
            word_count=scores.word_count,
            reading_time_minutes=scores.reading_time_minutes,
            readability_score=scores.readability_score,
            readability_level=scores.readability_level,
            grammar_score=scores.grammar_score,
            style_score=scores.style_score,
            overall_score=scores.overall_score,
            citations=citations,
            issues=issues,
        )


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """Summary of a past analysis for display."""

    title_snippet: str
    word_count: int
    issue_count: int


@dataclass(slots=True)
class DetectorResult:
    """Issues plus any citations found by a single detector pass."""

    issues: list[Issue] = field(default_factory=list)
    citations: list[Citation] = field(default_factory=list)
