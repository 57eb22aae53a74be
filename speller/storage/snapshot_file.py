import json
import logging
from pathlib import Path
from typing import Any

from speller.common.config import settings
from speller.spellcheck.engine import SpellCorrector
from speller.spellcheck.trie import SnapshotError

logger = logging.getLogger(__name__)


class SnapshotFile:
    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path or settings.snapshot_path)
        self._mtime: float | None = None
        self._cached: dict[str, Any] | None = None

    def _read_tree(self) -> dict[str, Any]:
        mtime = self.path.stat().st_mtime
        if self._mtime == mtime and self._cached is not None:
            return self._cached

        try:
            tree = json.loads(self.path.read_text())
        except (ValueError, RecursionError) as exc:
            raise SnapshotError(f"snapshot {self.path} is not valid JSON: {exc}") from exc

        self._cached = tree
        self._mtime = mtime
        return tree

    def load(self, engine: SpellCorrector | None = None) -> SpellCorrector:
        engine = engine or SpellCorrector()
        if not self.path.exists():
            logger.info("no snapshot at %s; starting with an empty vocabulary", self.path)
            return engine

        # Each load builds a fresh trie; the cached tree itself is never mutated.
        return engine.from_snapshot(self._read_tree())

    def save(self, engine: SpellCorrector) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tree = engine.to_snapshot()
        self.path.write_text(json.dumps(tree))
        self._mtime = self.path.stat().st_mtime
        self._cached = tree
        logger.info("saved snapshot to %s", self.path)
