from __future__ import annotations

from typing import List

from .models import HistoryEntry

TITLE_SNIPPET_CHARS = 40


def title_snippet(text: str, limit: int = TITLE_SNIPPET_CHARS) -> str:
    """Return the leading characters of the text, marked when truncated."""
    snippet = text[:limit].strip()
    return snippet + ("..." if len(text) > limit else "")


class SessionLog:
    """Newest-first list of past analyses, capped at ``limit`` entries."""

    def __init__(self, limit: int = 5) -> None:
        self.limit = max(1, limit)
        self._entries: List[HistoryEntry] = []

    def record(self, title: str, word_count: int, issue_count: int) -> HistoryEntry:
        entry = HistoryEntry(
            title_snippet=title, word_count=word_count, issue_count=issue_count
        )
        self._entries = [entry, *self._entries][: self.limit]
        return entry

    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries = []

    def __len__(self) -> int:
        return len(self._entries)
