from pathlib import Path

from scripts import speller_cli


def test_cli_learns_then_fixes(tmp_path: Path, capsys) -> None:
    snapshot = tmp_path / "snapshot.json"
    corpus = tmp_path / "corpus.txt"
    corpus.write_text("this is a test\nthis is a test\n")

    assert speller_cli.main(["--snapshot", str(snapshot), "learn", str(corpus)]) == 0
    assert speller_cli.main(["--snapshot", str(snapshot), "fix", "ths is a test"]) == 0
    assert capsys.readouterr().out.strip() == "this is a test"


def test_cli_define_and_lookup(tmp_path: Path, capsys) -> None:
    snapshot = tmp_path / "snapshot.json"

    speller_cli.main(["--snapshot", str(snapshot), "define", "Anne"])
    speller_cli.main(["--snapshot", str(snapshot), "fix-and-learn", "hello hello"])
    capsys.readouterr()

    speller_cli.main(["--snapshot", str(snapshot), "lookup", "anne"])
    speller_cli.main(["--snapshot", str(snapshot), "lookup", "hello"])
    assert capsys.readouterr().out.split() == ["definite", "2"]


def test_cli_reports_corrupt_snapshot(tmp_path: Path, capsys) -> None:
    snapshot = tmp_path / "snapshot.json"
    snapshot.write_text("[]")

    assert speller_cli.main(["--snapshot", str(snapshot), "lookup", "word"]) == 1
    assert "Cannot read snapshot" in capsys.readouterr().err
