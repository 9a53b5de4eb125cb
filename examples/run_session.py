"""Minimal example: analyze an essay, fix its spelling, then re-analyze."""

from __future__ import annotations

from essay_checker import AnalysisOptions, EssayCheckerConfig, EssayCheckerSession


def main() -> None:
    session = EssayCheckerSession(EssayCheckerConfig(seed=42, scoring_model="penalty"))
    essay = (
        "We could of planned better due to the fact that the schedule slipped. "
        "Barack Obama (2008) wrote about hope, and (Smith, 2010) disagrees.\n\n"
        "The team will definately accomodate every request next quarter."
    )
    analysis = session.analyze(essay, AnalysisOptions(document_type="academic"))
    print(f"Overall score: {analysis.overall_score} ({analysis.readability_level})")
    for issue in analysis.issues:
        print(f"  [{issue.kind}/{issue.severity}] {issue.matched_text!r} -> {issue.suggestion!r}")

    fixed_text, remaining = session.apply_fixes_by_kind("spelling")
    print("\nAfter spelling fixes:\n", fixed_text)
    print(f"{len(remaining.issues)} issues remain; re-analyzing.")
    session.analyze(fixed_text)
    for entry in session.get_history():
        print(f"  {entry.title_snippet} ({entry.word_count} words, {entry.issue_count} issues)")


if __name__ == "__main__":
    main()
