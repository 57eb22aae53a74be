from __future__ import annotations

from typing import Iterable, Protocol

from metaphone import doublemetaphone

from speller.spellcheck.candidates import Candidate


class PhoneticProvider(Protocol):
    def phonetic_key(self, word: str) -> str: ...

    def phonetically_equal(self, word_a: str, word_b: str) -> bool: ...


class MetaphoneProvider:
    """Double Metaphone codes; the primary code serves as the phonetic key."""

    def phonetic_key(self, word: str) -> str:
        return doublemetaphone(word)[0]

    def phonetically_equal(self, word_a: str, word_b: str) -> bool:
        codes_a = {code for code in doublemetaphone(word_a) if code}
        codes_b = {code for code in doublemetaphone(word_b) if code}
        return bool(codes_a & codes_b)


def similar_keys(key_a: str, key_b: str) -> bool:
    """Loose near-match between two phonetic keys.

    A mismatch at position i is forgiven when key_a[i] matches key_b at i-1 or
    i+1, which tolerates a one-position drift. Two unforgiven mismatches end
    the scan.
    """
    if len(key_b) - len(key_a) > 1:
        return False

    mismatches = 0
    for idx in range(min(len(key_a), len(key_b))):
        if mismatches >= 2:
            break
        if key_a[idx] == key_b[idx]:
            continue
        drifted = (idx > 0 and key_a[idx] == key_b[idx - 1]) or (
            idx + 1 < len(key_b) and key_a[idx] == key_b[idx + 1]
        )
        if not drifted:
            mismatches += 1

    return mismatches < 2


def phonetic_filter(
    word: str,
    candidates: Iterable[Candidate],
    provider: PhoneticProvider,
) -> list[Candidate]:
    word_key = provider.phonetic_key(word)
    kept: list[Candidate] = []
    for candidate in candidates:
        if provider.phonetically_equal(word, candidate.word) or similar_keys(
            word_key, provider.phonetic_key(candidate.word)
        ):
            kept.append(candidate)
    return kept
