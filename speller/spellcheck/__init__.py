from .candidates import Candidate, edits1, generate_candidates
from .engine import (
    WORD_RE,
    SpellCorrector,
    apply_case,
    is_word,
    normalize_word,
)
from .phonetic import MetaphoneProvider, PhoneticProvider, phonetic_filter, similar_keys
from .ranking import choose_correction, rank_candidates
from .trie import DEFINITE, FrequencyTrie, SnapshotError, Weight

__all__ = [
    "Candidate",
    "DEFINITE",
    "FrequencyTrie",
    "MetaphoneProvider",
    "PhoneticProvider",
    "SnapshotError",
    "SpellCorrector",
    "WORD_RE",
    "Weight",
    "apply_case",
    "choose_correction",
    "edits1",
    "generate_candidates",
    "is_word",
    "normalize_word",
    "phonetic_filter",
    "rank_candidates",
    "similar_keys",
]
