"""CLI integration tests for tools/read_bsor.py."""

from __future__ import annotations

import os
from pathlib import Path
import subprocess
import sys

import pytest

from replay_fixtures import build_replay, frame_record, info_block, sample_replay

REPO_ROOT = Path(__file__).resolve().parents[1]
SCRIPT = REPO_ROOT / "tools" / "read_bsor.py"


def _run_cli(*args: str) -> subprocess.CompletedProcess[str]:
    env = dict(os.environ)
    env["PYTHONPATH"] = str(REPO_ROOT)
    return subprocess.run(
        [sys.executable, str(SCRIPT), *args],
        cwd=str(REPO_ROOT),
        env=env,
        text=True,
        capture_output=True,
        check=False,
    )


@pytest.fixture
def replay_path(tmp_path: Path) -> Path:
    path = tmp_path / "sample.bsor"
    path.write_bytes(sample_replay())
    return path


def test_no_arguments_prints_help() -> None:
    result = _run_cli()
    assert result.returncode == 0
    assert "usage:" in result.stdout
    assert "f - Frame" in result.stdout


def test_info_only(replay_path: Path) -> None:
    result = _run_cli(str(replay_path))
    assert result.returncode == 0, result.stderr
    lines = result.stdout.splitlines()
    assert lines[0] == f"File {replay_path}:"
    assert lines[1] == "Info:"
    assert "\tplayer_name = tester" in lines
    assert "\ttimestamp = 1672531200" in lines
    assert "\tmodifiers:" in lines
    assert "\t\tDA" in lines
    assert "\t\tFS" in lines
    assert "\tjump_distance = 18.5" in lines
    assert "Events:" not in lines


def test_event_filter(replay_path: Path) -> None:
    result = _run_cli(str(replay_path), "wp")
    assert result.returncode == 0, result.stderr
    lines = result.stdout.splitlines()
    events_at = lines.index("Events:")
    kinds = [line for line in lines[events_at + 1 :] if not line.startswith("\t")]
    assert kinds == ["WALL", "PAUSE"]
    assert "\tduration=2500" in lines


def test_note_cut_data_is_listed(replay_path: Path) -> None:
    result = _run_cli(str(replay_path), "n")
    assert result.returncode == 0, result.stderr
    lines = result.stdout.splitlines()
    assert lines.count("NOTE") == 4
    # Two hits carry cut data, two (miss, bomb) do not.
    assert lines.count("\tspeed_ok=True") == 2
    assert "\tsaber_dir=(0, -1, 0)" in lines
    assert "\tcut_data=None" not in lines


def test_limit_reports_remaining(tmp_path: Path) -> None:
    path = tmp_path / "frames.bsor"
    path.write_bytes(build_replay(frames=[frame_record(float(i)) for i in range(25)]))
    result = _run_cli(str(path), "f")
    assert result.returncode == 0, result.stderr
    lines = result.stdout.splitlines()
    assert lines.count("FRAME") == 20
    assert lines[-1] == "[5 more entries]"

    result = _run_cli(str(path), "f", "--limit", "30")
    assert result.stdout.splitlines().count("FRAME") == 25
    assert "more entries" not in result.stdout


def test_unknown_event_letter(replay_path: Path) -> None:
    result = _run_cli(str(replay_path), "fx")
    assert result.returncode == 1
    assert "Unknown event type 'x'." in result.stdout


def test_too_many_arguments(replay_path: Path) -> None:
    result = _run_cli(str(replay_path), "f", "extra")
    assert result.returncode == 1
    assert "error" in result.stderr


def test_decode_failure(tmp_path: Path) -> None:
    path = tmp_path / "broken.bsor"
    path.write_bytes(sample_replay()[:50])
    result = _run_cli(str(path))
    assert result.returncode == 1
    assert "\tParse failed: unexpected end of data" in result.stdout


def test_oversized_timestamp_reports_failure(tmp_path: Path) -> None:
    path = tmp_path / "huge_timestamp.bsor"
    path.write_bytes(build_replay(info=info_block(timestamp="1" * 5000)))
    result = _run_cli(str(path))
    assert result.returncode == 1
    assert "\tParse failed: timestamp is not a valid integer" in result.stdout
    assert "Traceback" not in result.stderr


def test_missing_file(tmp_path: Path) -> None:
    result = _run_cli(str(tmp_path / "nope.bsor"))
    assert result.returncode == 1
    assert "Parse failed" in result.stdout


def test_verbose_logs_sections(replay_path: Path) -> None:
    result = _run_cli(str(replay_path), "-v")
    assert result.returncode == 0, result.stderr
    assert "[DEBUG] bsor.events: read 3 frames records" in result.stderr
