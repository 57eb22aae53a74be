from speller.spellcheck.candidates import Candidate
from speller.spellcheck.ranking import choose_correction, rank_candidates
from speller.spellcheck.trie import DEFINITE, Weight


def test_rank_candidates_orders_by_probability() -> None:
    ranked = rank_candidates(
        [
            Candidate("ths", Weight.finite(1), 0.2),
            Candidate("this", Weight.finite(4), 0.8),
        ]
    )

    assert [c.word for c in ranked] == ["this", "ths"]


def test_rank_candidates_breaks_ties_alphabetically() -> None:
    ranked = rank_candidates(
        [
            Candidate("ths", Weight.finite(2), 0.5),
            Candidate("this", Weight.finite(2), 0.5),
        ]
    )

    assert [c.word for c in ranked] == ["this", "ths"]


def test_rank_candidates_orders_finite_words_below_definite_by_count() -> None:
    ranked = rank_candidates(
        [
            Candidate("bat", Weight.finite(1), 0.0),
            Candidate("cat", Weight.finite(9), 0.0),
            Candidate("hat", DEFINITE, 1.0),
        ]
    )

    assert [c.word for c in ranked] == ["hat", "cat", "bat"]


def test_choose_correction_falls_back_to_original_word() -> None:
    assert choose_correction("qwzx", []) == "qwzx"
    assert choose_correction("ths", [Candidate("this", Weight.finite(1), 1.0)]) == "this"
