"""
essay_checker package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .aggregation import IssueList, aggregate
from .config import (
    AnalysisOptions,
    EssayCheckerConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)
from .engine import EssayCheckerSession
from .errors import (
    EssayCheckerError,
    InputTooShortError,
    InvalidOptionError,
    IssueNotFoundError,
    PositionOutOfRange,
)
from .fixes import FixResult, apply_many, apply_one
from .models import Analysis, Citation, Document, Issue, Position
from .segmentation import segment

__all__ = [
    "AnalysisOptions",
    "EssayCheckerConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "EssayCheckerSession",
    "EssayCheckerError",
    "InputTooShortError",
    "InvalidOptionError",
    "IssueNotFoundError",
    "PositionOutOfRange",
    "IssueList",
    "aggregate",
    "FixResult",
    "apply_one",
    "apply_many",
    "Analysis",
    "Citation",
    "Document",
    "Issue",
    "Position",
    "segment",
]

__version__ = "0.1.0"
