import pytest

from qnamatch.engine import Engine
from qnamatch.models import Corpus, QuestionEntry as Q
from qnamatch.search import collect_candidates, find_all_matches, find_best_match


def _corpus(*pairs) -> Corpus:
    return Corpus.from_entries(Q(question=q, variant=v) for q, v in pairs)


FRANCE = _corpus(
    ("What is the capital of France", "Paris"),
    ("What is the capital of france?", "Paris"),
    ("Who wrote Hamlet", "Shakespeare"),
)


def test_capital_of_france_end_to_end():
    eng = Engine(FRANCE)
    out = eng.get_answer("what is the capital of France")
    assert out.answer == ["Paris"]
    assert out.original_text == "what is the capital of France"


def test_same_question_different_variants_tie_break_by_variant():
    corpus = _corpus(
        ("Who painted the Mona Lisa?", "Zulu"),
        ("Who painted the Mona Lisa?", "Alpha"),
    )
    assert Engine(corpus).get_answer("Who painted the Mona Lisa?").answer == ["Alpha", "Zulu"]


def test_raw_candidates_keep_duplicates_in_corpus_order():
    rows = collect_candidates("what is the capital of France", FRANCE)
    assert [(r.variant, r.score) for r in rows] == [("Paris", 100), ("Paris", 100)]


def test_find_all_matches_never_repeats_a_variant():
    rows = find_all_matches("what is the capital of France", FRANCE)
    variants = [r.variant for r in rows]
    assert len(variants) == len(set(variants))


def test_threshold_is_strict():
    words = [f"w{i}" for i in range(20)]
    corpus = _corpus((" ".join(words), "exact65"))
    query = " ".join(words[:13])  # 13/20 -> 65

    assert collect_candidates(query, corpus, threshold=64)[0].score == 65
    assert collect_candidates(query, corpus, threshold=65) == []
    assert find_all_matches(query, corpus) == []


def test_every_returned_score_is_above_threshold():
    corpus = _corpus(
        ("how do i reset my password", "reset"),
        ("how do i change my password", "change"),
        ("how do i delete my account", "delete"),
    )
    for threshold in (0, 30, 65, 90):
        rows = find_all_matches("how do i reset my password", corpus, threshold)
        assert all(r.score > threshold for r in rows)
    ranked = [r.variant for r in find_all_matches("how do i reset my password", corpus, 50)]
    assert ranked == ["reset", "change"]


def test_partial_overlap_below_threshold_is_dropped():
    corpus = _corpus(("alpha beta gamma delta epsilon", "greek"))
    # 3/5 -> 60
    assert find_all_matches("alpha beta gamma", corpus) == []
    # 4/5 -> 80
    assert [r.variant for r in find_all_matches("alpha beta gamma delta", corpus)] == ["greek"]


def test_empty_and_punctuation_only_queries_match_nothing():
    assert find_all_matches("", FRANCE) == []
    assert find_all_matches("?!... ---", FRANCE) == []


def test_question_that_normalizes_to_empty_never_matches():
    corpus = _corpus(("???", "nothing"))
    assert find_all_matches("???", corpus) == []


def test_find_best_match_returns_top_variant_or_none():
    corpus = _corpus(
        ("capital of france", "Paris"),
        ("capital of france and its river", "Seine"),
    )
    assert find_best_match("the capital of france", corpus) == "Paris"
    assert Engine(corpus).find_best_match("the capital of france") == "Paris"
    assert find_best_match("completely unrelated words", corpus) is None


def test_query_is_case_and_punctuation_insensitive():
    eng = Engine(FRANCE)
    assert eng.get_answer("WHO WROTE... hamlet?!").answer == ["Shakespeare"]


def test_invalid_threshold_is_rejected():
    with pytest.raises(ValueError):
        Engine(FRANCE, threshold=101)
    with pytest.raises(ValueError):
        find_all_matches("x", FRANCE, threshold=-1)


def test_custom_engine_threshold_is_used():
    corpus = _corpus(("alpha beta gamma delta epsilon", "greek"))
    assert Engine(corpus, threshold=50).get_answer("alpha beta gamma").answer == ["greek"]
    assert Engine(corpus).get_answer("alpha beta gamma").answer == []
