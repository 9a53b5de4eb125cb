from __future__ import annotations

import logging
import random
from typing import Sequence

from ..config import AnalysisOptions
from ..models import Issue
from ..segmentation import split_sentences
from .base import Detector

logger = logging.getLogger(__name__)


class SimilarityDetector(Detector):
    """Placeholder similarity pass that samples one sentence to flag.

    No source comparison takes place. The pass stands where a real text
    similarity service would plug in, and its output is a sample rather than
    evidence of copying.
    """

    name = "similarity"
    kind = "plagiarism"

    def __init__(self, rng: random.Random | None = None, probability: float = 0.3) -> None:
        self._rng = rng or random.Random()
        self.probability = probability

    def enabled(self, options: AnalysisOptions) -> bool:
        return options.check_plagiarism

    def detect(
        self, paragraphs: Sequence[str], options: AnalysisOptions
    ) -> list[Issue]:
        if len(paragraphs) < 2:
            return []
        if self._rng.random() >= self.probability:
            return []

        index = self._rng.randrange(len(paragraphs))
        sentences = split_sentences(paragraphs[index])
        if not sentences:
            return []
        sentence = sentences[self._rng.randrange(len(sentences))]
        logger.debug("Flagging sampled sentence in paragraph %d", index)
        return [
            self.make_issue(
                paragraphs,
                index,
                sentence.start,
                sentence.end,
                severity="high",
                suggestion="Rewrite or cite properly",
                explanation=(
                    "This text appears to be similar to content from an external "
                    "source. Either rewrite it in your own words or provide proper "
                    "citation."
                ),
            )
        ]
