from dataclasses import FrozenInstanceError

import pytest

from speller.common.config import Settings, _env_flag


def test_env_flag_reads_truthy_values(monkeypatch) -> None:
    monkeypatch.setenv("SPELLER_TEST_FLAG", " Yes ")
    assert _env_flag("SPELLER_TEST_FLAG", "false")

    monkeypatch.setenv("SPELLER_TEST_FLAG", "0")
    assert not _env_flag("SPELLER_TEST_FLAG", "true")


def test_env_flag_falls_back_to_default(monkeypatch) -> None:
    monkeypatch.delenv("SPELLER_TEST_FLAG", raising=False)
    assert _env_flag("SPELLER_TEST_FLAG", "true")


def test_settings_are_frozen() -> None:
    settings = Settings()

    with pytest.raises(FrozenInstanceError):
        settings.wordlist_limit = 1  # type: ignore[misc]
