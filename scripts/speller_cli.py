#!/usr/bin/env python3
import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from speller.batch.train import DEFAULT_SOURCES, import_word_lists, learn_from_files
from speller.spellcheck.trie import SnapshotError
from speller.storage.snapshot_file import SnapshotFile

logging.basicConfig(level=logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Train and query the adaptive spelling corrector."
    )
    parser.add_argument("--snapshot", help="Snapshot file (defaults to SPELLER_SNAPSHOT_PATH)")
    sub = parser.add_subparsers(dest="command", required=True)

    learn = sub.add_parser("learn", help="Learn word frequencies from text files")
    learn.add_argument("files", nargs="+")

    define = sub.add_parser("define", help="Pin words to the definite weight")
    define.add_argument("words", nargs="+")

    sub.add_parser("import-defaults", help="Define every word of the default word lists")

    fix = sub.add_parser("fix", help="Print corrected text")
    fix.add_argument("text")

    fix_and_learn = sub.add_parser("fix-and-learn", help="Print corrected text, then learn the original")
    fix_and_learn.add_argument("text")

    lookup = sub.add_parser("lookup", help="Print the stored weight of a word")
    lookup.add_argument("word")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    snapshot = SnapshotFile(args.snapshot)

    try:
        engine = snapshot.load()
    except SnapshotError as exc:
        print(f"Cannot read snapshot {snapshot.path}: {exc}", file=sys.stderr)
        return 1

    if args.command == "learn":
        learn_from_files(engine, args.files)
    elif args.command == "define":
        engine.import_words(args.words)
    elif args.command == "import-defaults":
        import_word_lists(engine, DEFAULT_SOURCES)
    elif args.command == "fix":
        print(engine.fix(args.text))
        return 0
    elif args.command == "fix-and-learn":
        print(engine.fix_and_learn(args.text))
    elif args.command == "lookup":
        weight = engine.frequency(args.word)
        print("definite" if weight.definite else weight.count)
        return 0

    snapshot.save(engine)
    return 0


if __name__ == "__main__":
    sys.exit(main())
