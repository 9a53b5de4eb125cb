from __future__ import annotations

from collections import Counter
from dataclasses import replace
from typing import Iterable, Iterator, Sequence, Tuple

from .errors import IssueNotFoundError
from .models import Issue


def issue_id(issue: Issue, sequence: int) -> str:
    """Build the id for the ``sequence``-th issue of an analysis run."""
    position = issue.position
    return f"{issue.kind}-{position.paragraph_index}-{position.start_offset}-{sequence}"


class IssueList(Sequence[Issue]):
    """Read-only, id-addressable collection of issues from one analysis run."""

    def __init__(self, issues: Iterable[Issue] = ()) -> None:
        self._issues: Tuple[Issue, ...] = tuple(issues)
        self._by_id = {issue.id: issue for issue in self._issues}

    def __getitem__(self, index):  # type: ignore[override]
        return self._issues[index]

    def __len__(self) -> int:
        return len(self._issues)

    def __iter__(self) -> Iterator[Issue]:
        return iter(self._issues)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IssueList):
            return self._issues == other._issues
        return NotImplemented

    def __repr__(self) -> str:
        return f"IssueList({list(self._issues)!r})"

    def as_tuple(self) -> Tuple[Issue, ...]:
        return self._issues

    def get(self, issue_id: str) -> Issue:
        try:
            return self._by_id[issue_id]
        except KeyError:
            raise IssueNotFoundError(issue_id) from None

    def count_by_kind(self, kind: str) -> int:
        return sum(1 for issue in self._issues if issue.kind == kind)

    def filter_by_kind(self, kind: str) -> "IssueList":
        """Return the issues of one kind; ``"all"`` returns everything."""
        if kind == "all":
            return IssueList(self._issues)
        return IssueList(issue for issue in self._issues if issue.kind == kind)

    def counts(self) -> dict[str, int]:
        return dict(Counter(issue.kind for issue in self._issues))

    def without(self, issue_ids: Iterable[str]) -> "IssueList":
        """Return a copy with the given ids removed; other issues are untouched."""
        removed = set(issue_ids)
        return IssueList(issue for issue in self._issues if issue.id not in removed)


def aggregate(batches: Iterable[Sequence[Issue]]) -> IssueList:
    """Concatenate detector outputs and assign ids that are unique within the run."""
    merged: list[Issue] = []
    for batch in batches:
        for issue in batch:
            merged.append(replace(issue, id=issue_id(issue, len(merged))))
    return IssueList(merged)
