from __future__ import annotations

import json
import logging
import re
from typing import Any, Iterable, Mapping

from speller.common.config import settings
from speller.spellcheck.candidates import generate_candidates
from speller.spellcheck.phonetic import MetaphoneProvider, PhoneticProvider, phonetic_filter
from speller.spellcheck.ranking import choose_correction
from speller.spellcheck.trie import FrequencyTrie, Weight

logger = logging.getLogger(__name__)

MAX_WORD_LENGTH = 64
WORD_RE = re.compile(rf"[A-Za-z']{{2,{MAX_WORD_LENGTH}}}")
WHITESPACE_RE = re.compile(r"\s+")
WHITESPACE_RUNS_RE = re.compile(r"(\s+)")
WORD_LIST_SPLIT_RE = re.compile(r"[\s,]+")


def is_word(token: str) -> bool:
    return WORD_RE.fullmatch(token) is not None


def normalize_word(word: str) -> str:
    return (word or "").strip().lower()


def apply_case(original: str, replacement: str) -> str:
    if original.isupper():
        return replacement.upper()
    if original[:1].isupper() and original[1:].islower():
        return replacement.capitalize()
    return replacement


class SpellCorrector:
    """Self-training spelling corrector.

    Vocabulary comes only from text passed to :meth:`learn` and words passed
    to :meth:`define`/:meth:`import_words`. Corrections pick the most frequent
    known word within one edit of the input that also sounds like it.

    Instances are not thread-safe; hosts serialize access to each engine.
    """

    def __init__(
        self,
        trie: FrequencyTrie | None = None,
        phonetic: PhoneticProvider | None = None,
        preserve_whitespace: bool | None = None,
    ) -> None:
        self.trie = trie if trie is not None else FrequencyTrie()
        self.phonetic = phonetic if phonetic is not None else MetaphoneProvider()
        self.preserve_whitespace = (
            settings.preserve_whitespace if preserve_whitespace is None else preserve_whitespace
        )

    def learn(self, text: str) -> SpellCorrector:
        for token in WHITESPACE_RE.split(text or ""):
            if is_word(token):
                self.trie.increment(token.lower())
        return self

    def define(self, word: str) -> SpellCorrector:
        word = normalize_word(word)
        if not word:
            return self
        if not is_word(word):
            logger.debug("skipping definition of non-word %r", word)
            return self
        self.trie.set_definite(word)
        return self

    def import_words(self, words: str | Iterable[str]) -> SpellCorrector:
        if isinstance(words, str):
            words = WORD_LIST_SPLIT_RE.split(words)
        for word in words:
            self.define(word)
        return self

    def frequency(self, word: str) -> Weight:
        return self.trie.frequency(normalize_word(word))

    def correct_word(self, word: str) -> str:
        if not is_word(word):
            return word

        lowered = word.lower()
        candidates = generate_candidates(lowered, self.trie)
        candidates = phonetic_filter(lowered, candidates, self.phonetic)
        corrected = choose_correction(lowered, candidates)
        if corrected == lowered:
            return word

        logger.debug("corrected %r to %r from %s candidates", word, corrected, len(candidates))
        return apply_case(word, corrected)

    def fix(self, text: str) -> str:
        text = text or ""
        if self.preserve_whitespace:
            parts = WHITESPACE_RUNS_RE.split(text)
            # Odd indices hold the whitespace runs captured by the split.
            return "".join(part if idx % 2 else self.correct_word(part) for idx, part in enumerate(parts))
        return " ".join(self.correct_word(token) for token in WHITESPACE_RE.split(text))

    def fix_and_learn(self, text: str) -> str:
        """Fix `text`, then learn from the original, uncorrected text.

        The misspellings themselves gain frequency, so a misspelling repeated
        often enough will eventually outrank its correct form. Use
        :meth:`learn` on trusted text when accuracy matters.
        """
        fixed = self.fix(text)
        self.learn(text)
        return fixed

    def to_snapshot(self) -> dict[str, Any]:
        return self.trie.serialize()

    def to_json(self) -> str:
        return json.dumps(self.to_snapshot())

    def from_snapshot(self, snapshot: Mapping[str, Any] | str | bytes) -> SpellCorrector:
        self.trie.deserialize(snapshot)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("loaded snapshot with %s words", len(self.trie))
        return self
