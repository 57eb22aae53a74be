from speller.spellcheck.candidates import Candidate
from speller.spellcheck.phonetic import MetaphoneProvider, phonetic_filter, similar_keys
from speller.spellcheck.trie import Weight


class _KeyTableProvider:
    def __init__(self, keys: dict[str, str]) -> None:
        self.keys = keys

    def phonetic_key(self, word: str) -> str:
        return self.keys[word]

    def phonetically_equal(self, word_a: str, word_b: str) -> bool:
        return self.keys[word_a] == self.keys[word_b]


def test_similar_keys_accepts_equal_and_one_longer_keys() -> None:
    assert similar_keys("0S", "0S")
    assert similar_keys("TST", "TSTS")


def test_similar_keys_rejects_keys_two_longer() -> None:
    assert not similar_keys("A", "ABC")


def test_similar_keys_forgives_adjacent_drift() -> None:
    assert similar_keys("ABCD", "BACD")
    assert similar_keys("ABCD", "AXCD")
    assert not similar_keys("ABCD", "XYCD")


def test_phonetic_filter_keeps_equal_or_similar_candidates() -> None:
    provider = _KeyTableProvider(
        {
            "nite": "NT",
            "night": "NT",
            "note": "NTS",
            "kite": "KT",
            "mite": "MXYZ",
        }
    )
    candidates = [
        Candidate("night", Weight.finite(1), 0.25),
        Candidate("note", Weight.finite(1), 0.25),
        Candidate("kite", Weight.finite(1), 0.25),
        Candidate("mite", Weight.finite(1), 0.25),
    ]

    kept = phonetic_filter("nite", candidates, provider)

    assert [c.word for c in kept] == ["night", "note", "kite"]


def test_metaphone_provider_matches_sound_alike_words() -> None:
    provider = MetaphoneProvider()

    assert provider.phonetic_key("this") == provider.phonetic_key("ths")
    assert provider.phonetically_equal("this", "ths")
    assert not provider.phonetically_equal("this", "market")
