import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import httpx

from speller.common.config import settings
from speller.spellcheck.engine import SpellCorrector, is_word
from speller.storage.snapshot_file import SnapshotFile

logger = logging.getLogger(__name__)

USER_AGENT = "adaptive-speller/1.0"


@dataclass(frozen=True)
class WordListSource:
    name: str
    url: str
    limit: int = settings.wordlist_limit


DEFAULT_SOURCES = (
    WordListSource(
        name="google-20k",
        url="https://raw.githubusercontent.com/first20hours/google-10000-english/master/20k.txt",
        limit=20000,
    ),
)


def _parse_word(line: str) -> str | None:
    parts = line.split()
    if not parts:
        return None
    word = parts[0].lower()
    if not is_word(word):
        return None
    return word


def fetch_word_list(source: WordListSource, client: httpx.Client | None = None) -> list[str]:
    owns_client = client is None
    if client is None:
        client = httpx.Client(
            timeout=settings.request_timeout_s,
            headers={"User-Agent": USER_AGENT},
            follow_redirects=True,
        )
    try:
        resp = client.get(source.url)
        resp.raise_for_status()
        words: list[str] = []
        for line in resp.text.splitlines():
            if len(words) >= source.limit:
                break
            word = _parse_word(line)
            if word is not None:
                words.append(word)
        return words
    finally:
        if owns_client:
            client.close()


def learn_from_files(engine: SpellCorrector, paths: Iterable[Path | str]) -> int:
    lines = 0
    for path in paths:
        with open(path, encoding="utf-8", errors="ignore") as handle:
            for line in handle:
                engine.learn(line)
                lines += 1
        logger.info("learned from %s", path)
    return lines


def import_word_lists(
    engine: SpellCorrector,
    sources: Iterable[WordListSource],
    client: httpx.Client | None = None,
) -> int:
    imported = 0
    for source in sources:
        try:
            words = fetch_word_list(source, client=client)
        except httpx.HTTPError:
            logger.exception("failed to load word list from %s", source.url)
            continue
        engine.import_words(words)
        imported += len(words)
        logger.info("imported %s words from %s", len(words), source.name)
    return imported


def run(
    text_paths: Iterable[Path | str] = (),
    sources: Iterable[WordListSource] = (),
    snapshot: SnapshotFile | None = None,
    client: httpx.Client | None = None,
) -> SpellCorrector:
    snapshot = snapshot or SnapshotFile()
    engine = snapshot.load()

    lines = learn_from_files(engine, text_paths)
    imported = import_word_lists(engine, sources, client=client)

    snapshot.save(engine)
    logger.info("training complete: lines=%s imported_words=%s", lines, imported)
    return engine
