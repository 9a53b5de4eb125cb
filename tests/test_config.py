from pathlib import Path

import pytest

from essay_checker.config import (
    AnalysisOptions,
    EssayCheckerConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)
from essay_checker.errors import InvalidOptionError


def test_defaults():
    config = load_config()
    assert config == EssayCheckerConfig()
    assert config.options.document_type == "academic"
    assert config.min_input_chars == 100
    assert config.history_limit == 5


def test_config_from_dict_builds_nested_options_and_ignores_unknown_keys():
    config = config_from_dict(
        {
            "seed": 11,
            "scoring_model": "penalty",
            "unknown": True,
            "options": {"document_type": "Creative", "check_plagiarism": False, "extra": 1},
        }
    )
    assert config.seed == 11
    assert config.scoring_model == "penalty"
    assert config.options.document_type == "creative"
    assert config.options.check_plagiarism is False


def test_config_from_yaml(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "strict_fixes: true\noptions:\n  citation_style: mla\n", encoding="utf-8"
    )
    config = config_from_yaml(path)
    assert config.strict_fixes is True
    assert config.options.citation_style == "mla"


def test_config_yaml_must_be_mapping(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ValueError):
        config_from_yaml(path)


def test_options_reject_values_outside_closed_sets():
    with pytest.raises(InvalidOptionError):
        AnalysisOptions(document_type="poetry")
    with pytest.raises(ValueError):
        AnalysisOptions(citation_style="ieee")


def test_to_dict_round_trips():
    config = EssayCheckerConfig(seed=3)
    assert config_from_dict(config.to_dict()) == config
