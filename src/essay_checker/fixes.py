from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List

from .errors import PositionOutOfRange
from .models import Document, Issue

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FixResult:
    """Outcome of a batch fix: the new document plus what was and wasn't applied."""

    document: Document
    applied: List[Issue] = field(default_factory=list)
    skipped: List[Issue] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


def application_order(issues: Iterable[Issue]) -> List[Issue]:
    """Sort issues bottom-of-document first, right-to-left within a paragraph."""
    return sorted(issues, key=lambda issue: issue.position.sort_key, reverse=True)


def is_stale(document: Document, issue: Issue) -> bool:
    """True when the issue's span no longer holds the text it was detected on."""
    position = issue.position
    if position.paragraph_index >= len(document):
        return True
    paragraph = document.paragraphs[position.paragraph_index]
    return paragraph[position.start_offset : position.end_offset] != issue.matched_text


def apply_one(document: Document, issue: Issue) -> Document:
    """Return a new document with the issue's span replaced by its suggestion.

    The stored offsets are used as-is; the span's current contents are not
    compared with ``matched_text``.
    """
    position = issue.position
    if not 0 <= position.paragraph_index < len(document):
        raise PositionOutOfRange(
            issue.id,
            f"paragraph {position.paragraph_index} does not exist "
            f"(document has {len(document)})",
        )
    paragraph = document.paragraphs[position.paragraph_index]
    if position.start_offset >= len(paragraph):
        raise PositionOutOfRange(
            issue.id,
            f"offset {position.start_offset} is past the end of paragraph "
            f"{position.paragraph_index} ({len(paragraph)} characters)",
        )
    updated = (
        paragraph[: position.start_offset]
        + issue.suggestion
        + paragraph[position.end_offset :]
    )
    return document.replace_paragraph(position.paragraph_index, updated)


def apply_many(
    document: Document, issues: Iterable[Issue], strict: bool = False
) -> FixResult:
    """Apply a batch of fixes against one document snapshot.

    Equivalent to folding :func:`apply_one` over the issues in
    :func:`application_order`. Issues that no longer fit the document are
    skipped and reported. Overlapping spans are cut at their stored offsets
    unless ``strict`` is set, in which case issues whose text has changed
    are skipped as well.
    """
    result = FixResult(document=document)
    for issue in application_order(issues):
        if strict and is_stale(result.document, issue):
            logger.warning("Skipping stale issue %s", issue.id)
            result.skipped.append(issue)
            continue
        try:
            result.document = apply_one(result.document, issue)
        except PositionOutOfRange as exc:
            logger.warning("Skipping issue: %s", exc)
            result.skipped.append(issue)
            continue
        result.applied.append(issue)
    return result
