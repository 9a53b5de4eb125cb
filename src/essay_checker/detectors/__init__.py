from __future__ import annotations

import random
from typing import TYPE_CHECKING, Any

from ..randomness import derive_rng
from .base import Detector
from .citations import CitationDetector
from .clarity import ClarityDetector
from .grammar import GrammarDetector
from .punctuation import PunctuationDetector
from .similarity import SimilarityDetector
from .spelling import SpellingDetector
from .structure import StructureDetector
from .style import StyleDetector

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from ..config import EssayCheckerConfig

__all__ = [
    "Detector",
    "GrammarDetector",
    "SpellingDetector",
    "PunctuationDetector",
    "StyleDetector",
    "StructureDetector",
    "ClarityDetector",
    "CitationDetector",
    "SimilarityDetector",
    "DETECTOR_REGISTRY",
    "create_detector",
    "build_detectors_from_config",
]

# Registry order is also the order issues appear in an analysis.
DETECTOR_REGISTRY: dict[str, type[Detector]] = {
    GrammarDetector.name: GrammarDetector,
    SpellingDetector.name: SpellingDetector,
    PunctuationDetector.name: PunctuationDetector,
    StyleDetector.name: StyleDetector,
    StructureDetector.name: StructureDetector,
    ClarityDetector.name: ClarityDetector,
    CitationDetector.name: CitationDetector,
    SimilarityDetector.name: SimilarityDetector,
}


def create_detector(name: str, **kwargs: Any) -> Detector:
    """Factory for building detectors by name."""
    normalized = name.lower().strip()
    detector_cls = DETECTOR_REGISTRY.get(normalized)
    if detector_cls is None:
        raise ValueError(f"Unknown detector '{name}'.")
    return detector_cls(**kwargs)


def build_detectors_from_config(
    config: "EssayCheckerConfig", rng: random.Random
) -> list[Detector]:
    """Build every registered detector, wiring in config values.

    Each randomized detector gets its own source derived from ``rng``.
    """
    detectors: list[Detector] = []
    for name in DETECTOR_REGISTRY:
        if name == GrammarDetector.name:
            detectors.append(create_detector(name, rng=derive_rng(rng, name)))
        elif name == StructureDetector.name:
            detectors.append(create_detector(name, max_words=config.long_paragraph_words))
        elif name == ClarityDetector.name:
            detectors.append(create_detector(name, max_words=config.long_sentence_words))
        elif name == SimilarityDetector.name:
            detectors.append(
                create_detector(
                    name,
                    rng=derive_rng(rng, name),
                    probability=config.plagiarism_probability,
                )
            )
        else:
            detectors.append(create_detector(name))
    return detectors
