from __future__ import annotations

import re
from dataclasses import dataclass

from speller.spellcheck.trie import FrequencyTrie, Weight

ALPHABET = "abcdefghijklmnopqrstuvwxyz"
CHARSET_RE = re.compile(r"^[a-z']*$")


@dataclass(frozen=True)
class Candidate:
    word: str
    weight: Weight
    probability: float = 0.0


def edits1(word: str) -> list[str]:
    """All strings one delete, adjacent transpose, replace or insert away from `word`.

    The result is deduplicated and keeps generation order. The word itself is
    included, since replacing a letter with the same letter is a valid edit.
    """
    if not CHARSET_RE.match(word):
        raise ValueError(f"cannot generate edits for non-ASCII word: {word!r}")

    chars = list(word)
    length = len(chars)
    edits: list[str] = []

    for idx in range(length):
        edits.append("".join(chars[:idx] + chars[idx + 1 :]))

    for idx in range(1, length):
        swapped = chars[:]
        swapped[idx - 1], swapped[idx] = swapped[idx], swapped[idx - 1]
        edits.append("".join(swapped))

    for idx in range(length):
        for letter in ALPHABET:
            edits.append("".join(chars[:idx] + [letter] + chars[idx + 1 :]))

    for idx in range(length + 1):
        for letter in ALPHABET:
            edits.append("".join(chars[:idx] + [letter] + chars[idx:]))

    return list(dict.fromkeys(edits))


def normalize(known: list[tuple[str, Weight]]) -> list[Candidate]:
    """Turn raw weights into probabilities over the candidate set.

    Definite candidates share the whole mass when any is present.
    """
    definite = [word for word, weight in known if weight.definite]
    if definite:
        share = 1.0 / len(definite)
        return [Candidate(word, weight, share if weight.definite else 0.0) for word, weight in known]

    total = sum(weight.count for _, weight in known)
    if total <= 0:
        return []
    return [Candidate(word, weight, weight.count / total) for word, weight in known]


def generate_candidates(word: str, trie: FrequencyTrie) -> list[Candidate]:
    known: list[tuple[str, Weight]] = []
    for edit in edits1(word):
        weight = trie.frequency(edit)
        if weight:
            known.append((edit, weight))
    return normalize(known)
