from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .errors import InvalidOptionError

DOCUMENT_TYPES = ("academic", "creative", "business", "general")
CITATION_STYLES = ("apa", "mla", "chicago", "harvard")


@dataclass(slots=True)
class AnalysisOptions:
    """Per-run toggles controlling which detectors run."""

    document_type: str = "academic"
    citation_style: str = "apa"
    check_grammar: bool = True
    check_spelling: bool = True
    check_punctuation: bool = True
    check_style: bool = True
    check_citations: bool = True
    check_plagiarism: bool = True

    def __post_init__(self) -> None:
        self.document_type = self.document_type.lower().strip()
        self.citation_style = self.citation_style.lower().strip()
        if self.document_type not in DOCUMENT_TYPES:
            raise InvalidOptionError(
                f"Unknown document type '{self.document_type}'. "
                f"Expected one of: {', '.join(DOCUMENT_TYPES)}."
            )
        if self.citation_style not in CITATION_STYLES:
            raise InvalidOptionError(
                f"Unknown citation style '{self.citation_style}'. "
                f"Expected one of: {', '.join(CITATION_STYLES)}."
            )


@dataclass(slots=True)
class EssayCheckerConfig:
    """Configuration options for the essay checker engine."""

    options: AnalysisOptions = field(default_factory=AnalysisOptions)
    scoring_model: str = "simulated"
    seed: int | None = None
    plagiarism_probability: float = 0.3
    min_input_chars: int = 100
    history_limit: int = 5
    strict_fixes: bool = False
    long_paragraph_words: int = 150
    long_sentence_words: int = 40
    reading_words_per_minute: int = 200

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(EssayCheckerConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "options" in data:
        options_value = data["options"]
        if isinstance(options_value, AnalysisOptions):
            kwargs["options"] = options_value
        elif isinstance(options_value, Mapping):
            kwargs["options"] = options_from_dict(options_value)
        else:
            kwargs.pop("options")
    return kwargs


def options_from_dict(data: Mapping[str, Any] | None) -> AnalysisOptions:
    """Build AnalysisOptions from a mapping, ignoring unknown keys."""
    if data is None:
        return AnalysisOptions()
    allowed = {field.name for field in fields(AnalysisOptions)}
    filtered = {key: data[key] for key in data if key in allowed}
    return AnalysisOptions(**filtered)


def config_from_dict(data: Mapping[str, Any] | None) -> EssayCheckerConfig:
    """Build an EssayCheckerConfig from a dictionary-like input."""
    if data is None:
        return EssayCheckerConfig()
    return EssayCheckerConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> EssayCheckerConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> EssayCheckerConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return EssayCheckerConfig()
    return config_from_yaml(path)
