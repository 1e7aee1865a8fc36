import os
import re
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from src.main import main

_PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _run(*args):
    return subprocess.run(
        [sys.executable, "-m", "src.main", *args],
        cwd=_PROJECT_ROOT,
        capture_output=True,
        text=True,
        check=False,
    )


@pytest.mark.parametrize(
    "os_raw, arch_raw, expected",
    [
        ("linux", "x86_64", "OS: linux\nArch: amd64\n"),
        ("darwin", "arm64", "OS: darwin\nArch: arm64\n"),
        ("win32", "ARM64", "OS: windows\nArch: arm64\n"),
    ],
)
def test_main_prints_host(capsys, os_raw, arch_raw, expected):
    with (
        patch("src.platform_engine.identifiers.raw_os", return_value=os_raw),
        patch("src.platform_engine.identifiers.raw_arch", return_value=arch_raw),
    ):
        main()
    captured = capsys.readouterr()
    assert captured.out == expected
    assert captured.err == ""


def test_cli_output_shape():
    result = _run()
    assert result.returncode == 0
    lines = result.stdout.splitlines()
    assert len(lines) == 2
    assert re.fullmatch(r"OS: \S+", lines[0])
    assert re.fullmatch(r"Arch: \S+", lines[1])


def test_cli_output_is_stable():
    assert _run().stdout == _run().stdout


@pytest.mark.parametrize("args", [("--help",), ("foo", "bar")])
def test_cli_ignores_arguments(args):
    baseline = _run()
    result = _run(*args)
    assert result.returncode == 0
    assert result.stdout == baseline.stdout


@pytest.mark.parametrize(
    "os_raw, arch_raw, expected",
    [
        ("linux", "armv5tel", "OS: linux\nArch: armv5tel\n"),
        ("haiku1", "sparc64", "OS: haiku\nArch: sparc64\n"),
        ("linux", "", "OS: linux\nArch: unknown\n"),
    ],
)
def test_main_unmapped_host_writes_stdout_only(capfd, os_raw, arch_raw, expected):
    with (
        patch("src.platform_engine.identifiers.raw_os", return_value=os_raw),
        patch("src.platform_engine.identifiers.raw_arch", return_value=arch_raw),
    ):
        main()
    out, err = capfd.readouterr()
    assert out == expected
    assert err == ""


def test_cli_runs_outside_the_checkout(tmp_path):
    result = subprocess.run(
        [sys.executable, "-c", "from src.main import main; main()"],
        cwd=tmp_path,
        env={**os.environ, "PYTHONPATH": str(_PROJECT_ROOT)},
        capture_output=True,
        text=True,
        check=False,
    )
    assert result.returncode == 0
    assert result.stdout == _run().stdout
    assert result.stderr == ""
