from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SCRIPT = ROOT / "scripts" / "str_ranges.py"

FAMILY = "\U0001F468\u200d\U0001F469\u200d\U0001F467\u200d\U0001F466"


def _run(*args: str, env_extra: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(ROOT / "src"), env.get("PYTHONPATH", "")) if p
    )
    env["PYTHONIOENCODING"] = "utf-8"
    env.pop("STR_LEN_FORMAT", None)
    env.update(env_extra or {})
    return subprocess.run(
        [sys.executable, str(SCRIPT), *args],
        cwd=str(ROOT),
        capture_output=True,
        text=True,
        encoding="utf-8",
        env=env,
        check=False,
    )


def test_measure_json() -> None:
    proc = _run("measure", FAMILY, "a")
    assert proc.returncode == 0, proc.stdout + proc.stderr
    assert json.loads(proc.stdout) == [
        {"byte": 25, "utf16": 11, "codepoint": 7, "grapheme": 1},
        {"byte": 1, "utf16": 1, "codepoint": 1, "grapheme": 1},
    ]


def test_ranges_text() -> None:
    proc = _run("--format", "text", "ranges", FAMILY, "a", FAMILY)
    assert proc.returncode == 0, proc.stdout + proc.stderr
    assert proc.stdout.splitlines() == [
        "0:25|0:11|0:7|0:1",
        "25:1|11:1|7:1|1:1",
        "26:25|12:11|8:7|2:1",
    ]


def test_ranges_after_json() -> None:
    proc = _run("ranges", "two", "--after", "0:4")
    assert proc.returncode == 0, proc.stdout + proc.stderr
    assert json.loads(proc.stdout) == [
        {"byte": [4, 3], "utf16": [4, 3], "codepoint": [4, 3], "grapheme": [4, 3]}
    ]


def test_format_from_environment() -> None:
    proc = _run("--compact", "parse", "4-7", env_extra={"STR_LEN_FORMAT": "text"})
    assert proc.returncode == 0, proc.stdout + proc.stderr
    assert proc.stdout.strip() == "4:4"


def test_slice() -> None:
    proc = _run("--format", "text", "slice", FAMILY + "ne two", "28:3")
    assert proc.returncode == 0, proc.stdout + proc.stderr
    assert proc.stdout.strip() == "two"


def test_classify() -> None:
    proc = _run("classify", "5:5", "3:10")
    assert proc.returncode == 0, proc.stdout + proc.stderr
    assert json.loads(proc.stdout)["overlap"] == "covered_by"


def test_bad_literal_exits_nonzero() -> None:
    proc = _run("parse", "not-a-range")
    assert proc.returncode == 2
    assert "Unparsable" in proc.stderr
