from __future__ import annotations

import logging
import random
import threading
from dataclasses import replace
from typing import List, Tuple

from .aggregation import IssueList, aggregate
from .config import AnalysisOptions, EssayCheckerConfig
from .detectors import Detector, build_detectors_from_config
from .errors import EssayCheckerError, InputTooShortError, InvalidOptionError
from .fixes import FixResult, apply_many, apply_one
from .history import SessionLog, title_snippet
from .models import ISSUE_KINDS, Analysis, Citation, Document, HistoryEntry, Issue
from .scorers import ScoringModel, build_scoring_model_from_config
from .scoring import score
from .segmentation import segment

logger = logging.getLogger(__name__)


class EssayCheckerSession:
    """One editing session: analyze a text, then apply fixes against it.

    The session owns the current document and issue list. Fixes replace the
    document with a new version and drop the applied issues; scores are left
    as they were, so call :meth:`analyze` again for a fully consistent result.
    """

    def __init__(
        self,
        config: EssayCheckerConfig | None = None,
        *,
        rng: random.Random | None = None,
        detectors: List[Detector] | None = None,
        scoring_model: ScoringModel | None = None,
    ) -> None:
        self.config = config or EssayCheckerConfig()
        self._rng = rng or random.Random(self.config.seed)
        self.detectors = (
            detectors
            if detectors is not None
            else build_detectors_from_config(self.config, self._rng)
        )
        self.scoring_model = scoring_model or build_scoring_model_from_config(
            self.config, self._rng
        )
        self.history = SessionLog(limit=self.config.history_limit)
        self._lock = threading.Lock()
        self._document: Document | None = None
        self._issues = IssueList()
        self._analysis: Analysis | None = None
        self.last_fix_result: FixResult | None = None

    @property
    def document(self) -> Document | None:
        return self._document

    @property
    def analysis(self) -> Analysis | None:
        return self._analysis

    @property
    def issues(self) -> IssueList:
        return self._issues

    def analyze(self, text: str, options: AnalysisOptions | None = None) -> Analysis:
        """Run every enabled detector over the text and score it."""
        options = options or self.config.options
        trimmed_length = len(text.strip())
        if trimmed_length < self.config.min_input_chars:
            raise InputTooShortError(trimmed_length, self.config.min_input_chars)

        paragraphs = segment(text)
        batches: List[List[Issue]] = []
        citations: List[Citation] = []
        for detector in self.detectors:
            if not detector.enabled(options):
                continue
            result = detector.run(paragraphs, options)
            logger.debug("%s detector found %d issues", detector.name, len(result.issues))
            batches.append(result.issues)
            citations.extend(result.citations)

        issues = aggregate(batches)
        scores = score(
            text,
            issues,
            options.document_type,
            self.scoring_model,
            words_per_minute=self.config.reading_words_per_minute,
        )
        analysis = Analysis.from_scores(scores, tuple(citations), issues.as_tuple())

        with self._lock:
            self._document = Document(paragraphs=paragraphs)
            self._issues = issues
            self._analysis = analysis
            self.last_fix_result = None
            self.history.record(title_snippet(text), scores.word_count, len(issues))

        logger.info(
            "Analyzed %d words in %d paragraphs: %d issues %s",
            scores.word_count,
            len(paragraphs),
            len(issues),
            issues.counts(),
        )
        return analysis

    def apply_fix(self, issue_id: str) -> Tuple[str, Analysis]:
        """Apply a single issue's suggestion and return the new text and analysis."""
        with self._lock:
            document, analysis = self._require_analysis()
            issue = self._issues.get(issue_id)
            self._document = apply_one(document, issue)
            self._issues = self._issues.without([issue.id])
            self._analysis = replace(analysis, issues=self._issues.as_tuple())
            self.last_fix_result = FixResult(
                document=self._document, applied=[issue], skipped=[]
            )
            logger.info("Applied fix %s", issue.id)
            return self._document.text, self._analysis

    def apply_fixes_by_kind(self, kind: str = "all") -> Tuple[str, Analysis]:
        """Apply every issue of one kind (or ``"all"``) in a single batch.

        Issues that could not be applied stay in the issue list; see
        :attr:`last_fix_result` for the skipped ones.
        """
        if kind != "all" and kind not in ISSUE_KINDS:
            raise InvalidOptionError(
                f"Unknown issue kind '{kind}'. Expected 'all' or one of: "
                f"{', '.join(ISSUE_KINDS)}."
            )
        with self._lock:
            document, analysis = self._require_analysis()
            targets = self._issues.filter_by_kind(kind)
            result = apply_many(document, targets, strict=self.config.strict_fixes)
            self._document = result.document
            self._issues = self._issues.without(issue.id for issue in result.applied)
            self._analysis = replace(analysis, issues=self._issues.as_tuple())
            self.last_fix_result = result
            logger.info(
                "Applied %d %s fixes (%d skipped)",
                len(result.applied),
                kind,
                result.skipped_count,
            )
            return self._document.text, self._analysis

    def get_history(self) -> List[HistoryEntry]:
        return self.history.entries()

    def reset(self) -> None:
        """Forget the current document, analysis and history."""
        with self._lock:
            self._document = None
            self._issues = IssueList()
            self._analysis = None
            self.last_fix_result = None
            self.history.clear()

    def _require_analysis(self) -> Tuple[Document, Analysis]:
        if self._document is None or self._analysis is None:
            raise EssayCheckerError("No analysis available; call analyze() first.")
        return self._document, self._analysis
