from __future__ import annotations

from typing import Iterable

from speller.spellcheck.candidates import Candidate


def rank_candidates(candidates: Iterable[Candidate]) -> list[Candidate]:
    ranked = sorted(candidates, key=lambda candidate: candidate.word)
    # Stable sort: equal weights stay in alphabetical order.
    ranked.sort(key=lambda candidate: (candidate.probability, candidate.weight), reverse=True)
    return ranked


def choose_correction(word: str, candidates: Iterable[Candidate]) -> str:
    ranked = rank_candidates(candidates)
    if not ranked:
        return word
    return ranked[0].word
