from __future__ import annotations

import math
from typing import Sequence

from .models import Issue, ReadabilityLevel, Scores
from .scorers import ScoringModel
from .segmentation import count_words

ACADEMIC_READABILITY_PENALTY = 10
ACADEMIC_READABILITY_FLOOR = 30
CREATIVE_STYLE_BONUS = 5
CREATIVE_STYLE_CAP = 95


def reading_time_minutes(word_count: int, words_per_minute: int = 200) -> int:
    """Approximate reading time, rounded up to whole minutes."""
    return math.ceil(word_count / max(1, words_per_minute))


def readability_level(readability_score: int) -> ReadabilityLevel:
    if readability_score < 40:
        return "Complex"
    if readability_score < 60:
        return "Moderate"
    return "Easy"


def adjust_for_document_type(
    document_type: str, readability_score: int, style_score: int
) -> tuple[int, int]:
    """
    Academic writing is expected to read as more complex; creative writing is
    allowed more stylistic latitude.
    """
    if document_type == "academic":
        readability_score = max(
            ACADEMIC_READABILITY_FLOOR,
            readability_score - ACADEMIC_READABILITY_PENALTY,
        )
    elif document_type == "creative":
        style_score = min(CREATIVE_STYLE_CAP, style_score + CREATIVE_STYLE_BONUS)
    return readability_score, style_score


def _bounded(value: int) -> int:
    return max(0, min(100, int(value)))


def score(
    text: str,
    issues: Sequence[Issue],
    document_type: str,
    model: ScoringModel,
    words_per_minute: int = 200,
) -> Scores:
    """Score a document from its text and detected issues."""
    word_count = count_words(text)
    baseline = model.baseline(text, issues)
    readability, style = adjust_for_document_type(
        document_type, baseline.readability, baseline.style
    )
    readability = _bounded(readability)
    style = _bounded(style)
    grammar = _bounded(baseline.grammar)
    return Scores(
        word_count=word_count,
        reading_time_minutes=reading_time_minutes(word_count, words_per_minute),
        readability_score=readability,
        readability_level=readability_level(readability),
        grammar_score=grammar,
        style_score=style,
        overall_score=(grammar + style) // 2,
    )
