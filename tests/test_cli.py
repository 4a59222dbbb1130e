import json
from pathlib import Path

import pyarrow.parquet as pq
import pytest

from monkey_business.cli import _coerce_bool, _coerce_int, main


def _write_notes(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "notes.txt"
    path.write_text(text)
    return path


def test_main_prints_both_scores(
    sample_notes: str, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    main([str(_write_notes(tmp_path, sample_notes))])
    summary = json.loads(capsys.readouterr().out)
    assert summary["agents"] == 4
    assert summary["relief"]["score"] == 10605
    assert summary["relief"]["inspection_counts"] == [101, 95, 7, 105]
    assert summary["bounded"]["score"] == 2713310158
    assert summary["bounded"]["modulus"] == 96577


def test_config_file_overrides_defaults_and_cli_overrides_file(
    sample_notes: str, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"relief_rounds": 1, "bounded_rounds": 1}))
    notes = _write_notes(tmp_path, sample_notes)
    main([str(notes), "--config", str(config), "--bounded-rounds", "20"])
    summary = json.loads(capsys.readouterr().out)
    assert summary["relief"]["rounds"] == 1
    assert summary["relief"]["inspection_counts"] == [2, 4, 3, 5]
    assert summary["bounded"]["rounds"] == 20
    assert summary["bounded"]["inspection_counts"] == [99, 97, 8, 103]


def test_write_round_log(
    sample_notes: str, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    out_dir = tmp_path / "out"
    main(
        [
            str(_write_notes(tmp_path, sample_notes)),
            "--bounded-rounds",
            "50",
            "--out-dir",
            str(out_dir),
            "--write-round-log",
            "--round-log-interval",
            "10",
        ]
    )
    capsys.readouterr()
    relief_log = pq.read_table(out_dir / "logs" / "round_log_relief_r20.parquet")
    bounded_log = pq.read_table(out_dir / "logs" / "round_log_bounded_r50.parquet")
    assert relief_log.num_rows == 2 * 4
    assert bounded_log.num_rows == 5 * 4


def test_write_round_log_requires_out_dir(sample_notes: str, tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main([str(_write_notes(tmp_path, sample_notes)), "--write-round-log"])


def test_invalid_rounds_rejected(sample_notes: str, tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main([str(_write_notes(tmp_path, sample_notes)), "--relief-rounds", "0"])


def test_missing_config_file(sample_notes: str, tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        notes = _write_notes(tmp_path, sample_notes)
        main([str(notes), "--config", str(tmp_path / "nope.json")])


def test_missing_notes_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main([str(tmp_path / "missing.txt")])


def test_malformed_notes_exit_nonzero(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(_write_notes(tmp_path, "Monkey 0:\n  nonsense\n"))])
    assert excinfo.value.code == 1


def test_non_utf8_notes_exit_nonzero(tmp_path: Path) -> None:
    path = tmp_path / "notes.txt"
    path.write_bytes(b"\xff\xfe")
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == 1


def test_invalid_log_level_in_config_rejected(sample_notes: str, tmp_path: Path) -> None:
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"log_level": "LOUD"}))
    notes = _write_notes(tmp_path, sample_notes)
    with pytest.raises(SystemExit) as excinfo:
        main([str(notes), "--config", str(config)])
    assert excinfo.value.code == 2


def test_coerce_helpers() -> None:
    assert _coerce_bool("yes", "flag") is True
    assert _coerce_bool("off", "flag") is False
    with pytest.raises(ValueError):
        _coerce_bool("maybe", "flag")
    assert _coerce_int(3.0, "n") == 3
    with pytest.raises(ValueError):
        _coerce_int(True, "n")
    with pytest.raises(ValueError):
        _coerce_int(2.5, "n")
