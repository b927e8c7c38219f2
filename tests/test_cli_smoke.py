import csv
import json
import sys
from pathlib import Path

import pytest
from apps.cli import play, run


def test_play_scores_raw_prompt(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", [
        "play", "--prompt", "a cute cat astronaut floating in space",
        "--guess", "a cute kat astronaut floting in space", "--share",
    ])
    play.main()
    out = capsys.readouterr().out
    data = json.loads(out[: out.index("}") + 1])
    assert data["score"] == 86 and data["totalWords"] == 7
    assert "I scored 86%" in out


def test_play_catalog_challenge_with_hints(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", [
        "play", "--challenge", "day1", "--guess", "", "--request-hints", "2", "--seed", "3",
    ])
    play.main()
    data = json.loads(capsys.readouterr().out)
    assert len(data["hints"]) == 2 and data["hintPenalty"] == 10
    assert set(data["hints"]) == set(data["matchedWords"])


@pytest.mark.parametrize("extra", [
    ["--request-hints", "-1"],
    ["--request-hints", "two"],
    ["--hint-penalty", "-5"],
])
def test_play_rejects_bad_counts(monkeypatch, capsys, extra):
    monkeypatch.setattr(sys, "argv", ["play", "--prompt", "ocean", "--guess", "ocean", *extra])
    with pytest.raises(SystemExit) as exc:
        play.main()
    assert exc.value.code == 2
    assert extra[0] in capsys.readouterr().err


def test_play_rejects_catalog_with_raw_prompt(tmp_path: Path, monkeypatch, capsys):
    cat = tmp_path / "cat.json"
    cat.write_text('[{"id": "x1", "imageUrl": "", "prompt": "red fox"}]', encoding="utf-8")
    monkeypatch.setattr(sys, "argv", [
        "play", "--prompt", "ocean", "--guess", "ocean", "--catalog", str(cat),
    ])
    with pytest.raises(SystemExit):
        play.main()
    assert "--catalog" in capsys.readouterr().err


def test_play_unknown_challenge_is_usage_error(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["play", "--challenge", "day99", "--guess", "x"])
    with pytest.raises(SystemExit):
        play.main()
    assert "Unknown challenge id" in capsys.readouterr().err


def test_play_writes_missed_words(tmp_path: Path, monkeypatch, capsys):
    missed = tmp_path / "missed.txt"
    monkeypatch.setattr(sys, "argv", [
        "play", "--prompt", "Ocean waves at dawn", "--guess", "ocean dawn",
        "--missed", str(missed),
    ])
    play.main()
    assert json.loads(capsys.readouterr().out)["score"] == 50
    assert missed.read_text(encoding="utf-8") == "waves\nat\n"


def test_run_writes_csv_and_manifest(tmp_path: Path, monkeypatch, capsys):
    subs = tmp_path / "subs.jsonl"
    subs.write_text(
        '{"challengeId": "day1", "guess": "a cute cat astronaut"}\n'
        '{"challengeId": "day2", "guess": "steampunk city", "requestHints": 2}\n'
        '{"challengeId": "day3", "guess": "forest", "hintPenalty": -1}\n',
        encoding="utf-8",
    )
    outdir = tmp_path / "reports"
    monkeypatch.setattr(sys, "argv", [
        "run", "--submissions", str(subs), "--outdir", str(outdir),
        "--today", "2025-01-01", "--progress", "off",
    ])
    run.main()

    printed = capsys.readouterr().out
    assert "catalog=<builtin>" in printed and "OK" in printed

    (csv_path,) = outdir.glob("run_*.csv")
    (manifest_path,) = outdir.glob("run_*_manifest.json")
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["challenge_id"] for r in rows] == ["day1", "day2", "day3"]
    assert rows[1]["hint_penalty"] == "10"

    manifest = json.loads(manifest_path.read_text(encoding="utf-8"))
    assert manifest["num_cases"] == 3
    assert manifest["summary"]["num_valid"] == 2
    assert manifest["catalog"]["passed"] is True
    assert manifest["config"]["today"] == "2025-01-01"


def test_run_fails_on_bad_catalog(tmp_path: Path, monkeypatch):
    cat = tmp_path / "bad.json"
    cat.write_text("[]", encoding="utf-8")
    subs = tmp_path / "subs.jsonl"
    subs.write_text("", encoding="utf-8")
    monkeypatch.setattr(sys, "argv", [
        "run", "--submissions", str(subs), "--catalog", str(cat),
        "--outdir", str(tmp_path / "out"), "--progress", "off",
    ])
    with pytest.raises(SystemExit):
        run.main()


def test_run_keeps_going_past_malformed_hint_requests(tmp_path: Path, monkeypatch, capsys):
    subs = tmp_path / "subs.jsonl"
    subs.write_text(
        '{"challengeId": "day1", "guess": "cat", "requestHints": null}\n'
        '{"challengeId": "day1", "guess": "cat", "requestHints": true}\n'
        '{"challengeId": "day1", "guess": "cat", "requestHints": 1}\n',
        encoding="utf-8",
    )
    outdir = tmp_path / "reports"
    monkeypatch.setattr(sys, "argv", [
        "run", "--submissions", str(subs), "--outdir", str(outdir), "--progress", "plain",
    ])
    run.main()
    assert "[3/3]" in capsys.readouterr().err

    (csv_path,) = outdir.glob("run_*.csv")
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["valid"] for r in rows] == ["False", "False", "True"]
