from __future__ import annotations

import random
from typing import TYPE_CHECKING, Any

from ..randomness import derive_rng
from .base import BaselineScores, ScoringModel
from .penalty import PenaltyScoringModel
from .simulated import SimulatedScoringModel

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from ..config import EssayCheckerConfig

__all__ = [
    "BaselineScores",
    "ScoringModel",
    "PenaltyScoringModel",
    "SimulatedScoringModel",
    "create_scoring_model",
    "build_scoring_model_from_config",
]


def create_scoring_model(name: str, **kwargs: Any) -> ScoringModel:
    """Factory for building scoring models by name."""
    normalized = name.lower().strip()
    if normalized in {"simulated", "random"}:
        return SimulatedScoringModel(**kwargs)
    if normalized == "penalty":
        return PenaltyScoringModel(**kwargs)
    raise ValueError(f"Unknown scoring model '{name}'.")


def build_scoring_model_from_config(
    config: "EssayCheckerConfig", rng: random.Random
) -> ScoringModel:
    """Convenience helper to build a scoring model from EssayCheckerConfig."""
    normalized = config.scoring_model.lower().strip()
    if normalized in {"simulated", "random"}:
        return create_scoring_model(
            config.scoring_model, rng=derive_rng(rng, "scoring")
        )
    return create_scoring_model(config.scoring_model)
