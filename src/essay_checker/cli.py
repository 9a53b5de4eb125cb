from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, TypedDict

import typer
import yaml

from .config import AnalysisOptions, EssayCheckerConfig, load_config
from .engine import EssayCheckerSession
from .errors import EssayCheckerError, InvalidOptionError
from .models import Analysis, Citation, Issue

app = typer.Typer(help="Essay checker CLI.", no_args_is_help=True)


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    document_type: str | None = typer.Option(
        None,
        "--document-type",
        "-t",
        help="academic, creative, business or general.",
    ),
    citation_style: str | None = typer.Option(
        None, "--citation-style", help="apa, mla, chicago or harvard."
    ),
    check_grammar: bool | None = typer.Option(None, "--grammar/--no-grammar"),
    check_spelling: bool | None = typer.Option(None, "--spelling/--no-spelling"),
    check_punctuation: bool | None = typer.Option(
        None, "--punctuation/--no-punctuation"
    ),
    check_style: bool | None = typer.Option(None, "--style/--no-style"),
    check_citations: bool | None = typer.Option(None, "--citations/--no-citations"),
    check_plagiarism: bool | None = typer.Option(
        None, "--plagiarism/--no-plagiarism"
    ),
    scoring_model: str | None = typer.Option(
        None, "--scoring-model", help="Scoring model to use ('simulated' or 'penalty')."
    ),
    seed: int | None = typer.Option(None, "--seed", help="Seed for reproducible runs."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Analyze a text file and emit the analysis as JSON."""
    _configure_logging(verbose)
    cfg = load_config(config)
    _apply_overrides(
        cfg,
        document_type,
        citation_style,
        check_grammar,
        check_spelling,
        check_punctuation,
        check_style,
        check_citations,
        check_plagiarism,
        scoring_model,
        seed,
    )
    session = EssayCheckerSession(cfg)
    text = input_path.read_text(encoding="utf-8")
    try:
        analysis = session.analyze(text)
    except EssayCheckerError as exc:
        raise typer.BadParameter(str(exc), param_hint="--input-path") from exc
    typer.echo(json.dumps(_analysis_dict(analysis), indent=2))


@app.command()
def fix(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    output_path: Path = typer.Option(..., dir_okay=False),
    kind: str = typer.Option(
        "all", "--kind", "-k", help="Issue kind to fix, or 'all'."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    document_type: str | None = typer.Option(None, "--document-type", "-t"),
    citation_style: str | None = typer.Option(None, "--citation-style"),
    strict: bool | None = typer.Option(
        None,
        "--strict/--best-effort",
        help="Skip issues whose text changed under an earlier fix.",
    ),
    seed: int | None = typer.Option(None, "--seed"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Analyze a text file, apply fixes and write the corrected text."""
    _configure_logging(verbose)
    cfg = load_config(config)
    _apply_overrides(
        cfg,
        document_type,
        citation_style,
        None,
        None,
        None,
        None,
        None,
        None,
        None,
        seed,
    )
    if strict is not None:
        cfg.strict_fixes = strict
    session = EssayCheckerSession(cfg)
    text = input_path.read_text(encoding="utf-8")
    try:
        before = session.analyze(text)
        fixed_text, after = session.apply_fixes_by_kind(kind)
    except EssayCheckerError as exc:
        raise typer.BadParameter(str(exc)) from exc

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(fixed_text, encoding="utf-8")
    result = session.last_fix_result
    summary: FixSummary = {
        "kind": kind,
        "issues_before": len(before.issues),
        "issues_after": len(after.issues),
        "applied": len(result.applied) if result else 0,
        "skipped": result.skipped_count if result else 0,
        "remaining": [_issue_dict(issue) for issue in after.issues],
    }
    typer.echo(json.dumps(summary, indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = EssayCheckerConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


@app.command()
def history(
    input_paths: List[Path] = typer.Argument(..., exists=True, dir_okay=False),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Analyze several files in one session and print the session history."""
    session = EssayCheckerSession(load_config(config))
    for path in input_paths:
        try:
            session.analyze(path.read_text(encoding="utf-8"))
        except EssayCheckerError as exc:
            typer.echo(f"[skip] {path}: {exc}", err=True)
    entries = [
        {
            "title": entry.title_snippet,
            "word_count": entry.word_count,
            "issues": entry.issue_count,
        }
        for entry in session.get_history()
    ]
    typer.echo(json.dumps({"history": entries}, indent=2))


def main() -> None:
    app()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _apply_overrides(
    config: EssayCheckerConfig,
    document_type: str | None,
    citation_style: str | None,
    check_grammar: bool | None,
    check_spelling: bool | None,
    check_punctuation: bool | None,
    check_style: bool | None,
    check_citations: bool | None,
    check_plagiarism: bool | None,
    scoring_model: str | None,
    seed: int | None,
) -> None:
    """Apply CLI overrides to the config when provided."""
    options = config.options
    try:
        # Rebuild so the closed-set validation runs on overridden values.
        config.options = AnalysisOptions(
            document_type=document_type or options.document_type,
            citation_style=citation_style or options.citation_style,
            check_grammar=_pick(check_grammar, options.check_grammar),
            check_spelling=_pick(check_spelling, options.check_spelling),
            check_punctuation=_pick(check_punctuation, options.check_punctuation),
            check_style=_pick(check_style, options.check_style),
            check_citations=_pick(check_citations, options.check_citations),
            check_plagiarism=_pick(check_plagiarism, options.check_plagiarism),
        )
    except InvalidOptionError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if scoring_model:
        config.scoring_model = scoring_model
    if seed is not None:
        config.seed = seed


def _pick(override: bool | None, current: bool) -> bool:
    return current if override is None else override


class PositionPayload(TypedDict):
    paragraph_index: int
    start_offset: int
    end_offset: int


class IssuePayload(TypedDict):
    id: str
    kind: str
    severity: str
    matched_text: str
    suggestion: str
    explanation: str
    advisory: bool
    position: PositionPayload


class CitationPayload(TypedDict):
    text: str
    form: str
    problems: List[str]


class AnalysisPayload(TypedDict):
    word_count: int
    reading_time_minutes: int
    readability_score: int
    readability_level: str
    grammar_score: int
    style_score: int
    overall_score: int
    citations: List[CitationPayload]
    issues: List[IssuePayload]


class FixSummary(TypedDict):
    kind: str
    issues_before: int
    issues_after: int
    applied: int
    skipped: int
    remaining: List[IssuePayload]


def _issue_dict(issue: Issue) -> IssuePayload:
    """Serialize an Issue so it can be emitted in JSON."""
    return {
        "id": issue.id,
        "kind": issue.kind,
        "severity": issue.severity,
        "matched_text": issue.matched_text,
        "suggestion": issue.suggestion,
        "explanation": issue.explanation,
        "advisory": issue.is_advisory,
        "position": {
            "paragraph_index": issue.position.paragraph_index,
            "start_offset": issue.position.start_offset,
            "end_offset": issue.position.end_offset,
        },
    }


def _citation_dict(citation: Citation) -> CitationPayload:
    return {
        "text": citation.text,
        "form": citation.form,
        "problems": list(citation.problems),
    }


def _analysis_dict(analysis: Analysis) -> AnalysisPayload:
    return {
        "word_count": analysis.word_count,
        "reading_time_minutes": analysis.reading_time_minutes,
        "readability_score": analysis.readability_score,
        "readability_level": analysis.readability_level,
        "grammar_score": analysis.grammar_score,
        "style_score": analysis.style_score,
        "overall_score": analysis.overall_score,
        "citations": [_citation_dict(c) for c in analysis.citations],
        "issues": [_issue_dict(i) for i in analysis.issues],
    }


if __name__ == "__main__":
    main()
