from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Tuple

PARAGRAPH_BREAK_RE = re.compile(r"\n[ \t\r\f\v]*\n")
SENTENCE_RE = re.compile(r"[^.!?]+[.!?]+")


@dataclass(frozen=True, slots=True)
class SentenceSpan:
    """A sentence and its inclusive-exclusive offsets within a paragraph."""

    text: str
    start: int
    end: int


def segment(text: str) -> Tuple[str, ...]:
    """Split text on blank lines into trimmed, non-empty paragraphs."""
    if not text or not text.strip():
        return ()
    pieces = (piece.strip() for piece in PARAGRAPH_BREAK_RE.split(text))
    return tuple(piece for piece in pieces if piece)


def split_sentences(paragraph: str) -> List[SentenceSpan]:
    """Return punctuation-terminated sentences with their offsets.

    Leading whitespace is left out of each span so the offsets point at the
    first visible character. Trailing text without terminal punctuation is
    not a sentence.
    """
    spans: List[SentenceSpan] = []
    for match in SENTENCE_RE.finditer(paragraph):
        raw = match.group(0)
        stripped = raw.lstrip()
        if not stripped.strip(".!?").strip():
            continue
        start = match.start() + (len(raw) - len(stripped))
        spans.append(SentenceSpan(text=stripped, start=start, end=match.end()))
    return spans


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens."""
    return len(text.split())
