import pytest

from essay_checker.config import AnalysisOptions, EssayCheckerConfig
from essay_checker.engine import EssayCheckerSession
from essay_checker.errors import (
    EssayCheckerError,
    InputTooShortError,
    InvalidOptionError,
    IssueNotFoundError,
)
from tests.utils import CITED_TEXT, CLEAN_TEXT, MESSY_TEXT


def _session(**overrides) -> EssayCheckerSession:
    return EssayCheckerSession(EssayCheckerConfig(seed=7, **overrides))


def _signature(issues):
    return [(i.kind, i.position, i.suggestion) for i in issues]


def test_rejects_short_input():
    session = _session()
    with pytest.raises(InputTooShortError):
        session.analyze("short text")
    with pytest.raises(InputTooShortError):
        session.analyze(" " * 100 + "word")
    assert session.analysis is None
    assert session.get_history() == []


def test_accepts_input_at_boundary():
    session = _session()
    with pytest.raises(InputTooShortError):
        session.analyze("  " + "a" * 99 + "  ")
    analysis = session.analyze("  " + "a" * 100 + "  ")
    assert analysis.word_count == 1


def test_fresh_issues_point_at_their_text():
    session = _session(plagiarism_probability=1.0)
    analysis = session.analyze(MESSY_TEXT)
    paragraphs = session.document.paragraphs

    assert analysis.issues
    for issue in analysis.issues:
        pos = issue.position
        assert paragraphs[pos.paragraph_index][pos.start_offset : pos.end_offset] == issue.matched_text


def test_spelling_example():
    text = CLEAN_TEXT.replace("prepared", "could accomodate")
    analysis = _session().analyze(text)
    spelling = [i for i in analysis.issues if i.kind == "spelling"]

    assert len(spelling) == 1
    assert spelling[0].suggestion == "accommodate"


def test_academic_citation_example():
    analysis = _session().analyze(
        CITED_TEXT, AnalysisOptions(document_type="academic", check_citations=True)
    )

    forms = {c.form for c in analysis.citations}
    assert forms == {"in-text", "narrative"}
    assert not [i for i in analysis.issues if i.kind == "citation" and i.severity == "high"]


def test_academic_without_citations_gets_one_document_issue():
    analysis = _session().analyze(CLEAN_TEXT, AnalysisOptions(document_type="academic"))
    missing = [i for i in analysis.issues if i.kind == "citation" and i.severity == "high"]

    assert len(missing) == 1
    assert missing[0].position.paragraph_index == 0
    assert missing[0].position.start_offset == 0
    assert analysis.citations == ()


def test_citations_only_checked_for_academic_documents():
    analysis = _session().analyze(CITED_TEXT, AnalysisOptions(document_type="business"))
    assert analysis.citations == ()
    assert not [i for i in analysis.issues if i.kind == "citation"]


def test_toggles_disable_detectors():
    options = AnalysisOptions(
        check_grammar=False,
        check_spelling=False,
        check_punctuation=False,
        check_style=False,
        check_citations=False,
        check_plagiarism=False,
    )
    analysis = _session().analyze(MESSY_TEXT, options)
    assert {i.kind for i in analysis.issues} <= {"structure", "clarity"}


def test_detector_subset_matches_standalone_output():
    full = _session().analyze(MESSY_TEXT)
    only_spelling = _session().analyze(
        MESSY_TEXT,
        AnalysisOptions(
            check_grammar=False,
            check_punctuation=False,
            check_style=False,
            check_citations=False,
            check_plagiarism=False,
        ),
    )
    assert _signature(i for i in full.issues if i.kind == "spelling") == _signature(
        i for i in only_spelling.issues if i.kind == "spelling"
    )


@pytest.mark.parametrize("seed", range(10))
def test_randomized_detectors_do_not_depend_on_each_other(seed):
    config = dict(seed=seed, plagiarism_probability=1.0)
    full = EssayCheckerSession(EssayCheckerConfig(**config)).analyze(CLEAN_TEXT)
    without_grammar = EssayCheckerSession(EssayCheckerConfig(**config)).analyze(
        CLEAN_TEXT, AnalysisOptions(check_grammar=False)
    )
    only_grammar = EssayCheckerSession(EssayCheckerConfig(**config)).analyze(
        CLEAN_TEXT,
        AnalysisOptions(
            check_spelling=False,
            check_punctuation=False,
            check_style=False,
            check_citations=False,
            check_plagiarism=False,
        ),
    )

    def of_kind(analysis, kind):
        return _signature(i for i in analysis.issues if i.kind == kind)

    assert of_kind(full, "plagiarism")
    assert of_kind(full, "plagiarism") == of_kind(without_grammar, "plagiarism")
    assert of_kind(full, "grammar")
    assert of_kind(full, "grammar") == of_kind(only_grammar, "grammar")
    assert full.grammar_score == without_grammar.grammar_score == only_grammar.grammar_score


def test_scores_are_bounded_integers():
    analysis = _session().analyze(MESSY_TEXT)
    for value in (
        analysis.grammar_score,
        analysis.style_score,
        analysis.overall_score,
        analysis.readability_score,
    ):
        assert isinstance(value, int)
        assert 0 <= value <= 100
    assert analysis.overall_score == (analysis.grammar_score + analysis.style_score) // 2


def test_same_seed_same_analysis():
    assert _session().analyze(MESSY_TEXT) == _session().analyze(MESSY_TEXT)


def test_apply_fix_updates_text_and_drops_issue():
    session = _session()
    analysis = session.analyze(MESSY_TEXT)
    target = next(i for i in analysis.issues if i.suggestion == "definitely")

    text, updated = session.apply_fix(target.id)

    assert "will definitely meet" in text
    assert target not in updated.issues
    assert len(updated.issues) == len(analysis.issues) - 1
    assert updated.grammar_score == analysis.grammar_score


def test_apply_fix_unknown_id():
    session = _session()
    session.analyze(MESSY_TEXT)
    with pytest.raises(IssueNotFoundError):
        session.apply_fix("grammar-99-0-999")


def test_fix_before_analyze():
    with pytest.raises(EssayCheckerError):
        _session().apply_fixes_by_kind("all")


def test_apply_fixes_by_kind_removes_only_that_kind():
    session = _session()
    analysis = session.analyze(MESSY_TEXT)
    others = [i for i in analysis.issues if i.kind != "spelling"]

    text, updated = session.apply_fixes_by_kind("spelling")

    assert list(updated.issues) == others
    for word in ("accommodate", "separate", "definitely"):
        assert word in text
    assert session.last_fix_result.skipped_count == 0
    assert len(session.last_fix_result.applied) == 3


def test_batch_keeps_issues_pushed_out_of_range():
    long_sentence = " ".join(f"w{n}" for n in range(45)) + "."
    session = _session(plagiarism_probability=0.0)
    session.analyze(long_sentence + " Then we definately agree on the plan.")
    clarity = next(i for i in session.issues if i.kind == "clarity")
    spelling = next(i for i in session.issues if i.kind == "spelling")

    session.apply_fix(clarity.id)
    _, updated = session.apply_fixes_by_kind("all")

    assert spelling in updated.issues
    assert spelling in session.last_fix_result.skipped
    assert session.last_fix_result.skipped_count > 0


def test_apply_fixes_by_kind_all_empties_issue_list():
    session = _session()
    session.analyze(MESSY_TEXT)
    _, updated = session.apply_fixes_by_kind("all")
    assert updated.issues == ()


def test_apply_fixes_by_unknown_kind():
    session = _session()
    session.analyze(MESSY_TEXT)
    with pytest.raises(InvalidOptionError):
        session.apply_fixes_by_kind("formatting")


def test_history_is_newest_first_and_capped():
    session = _session()
    texts = [f"Essay number {n}. " + CLEAN_TEXT for n in range(7)]
    for text in texts:
        session.analyze(text)

    history = session.get_history()
    assert len(history) == 5
    assert history[0].title_snippet == texts[-1][:40].strip() + "..."
    assert history[-1].title_snippet.startswith("Essay number 2.")
    assert history[0].word_count == len(texts[-1].split())


def test_reset_clears_session():
    session = _session()
    session.analyze(MESSY_TEXT)
    session.reset()

    assert session.get_history() == []
    assert session.analysis is None
    assert session.document is None
