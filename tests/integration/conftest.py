import stat
import sys
from pathlib import Path

import pytest

from ghostprint.host.base import BaseHost


class RecordingHost(BaseHost):
    """Host that records reports and exit codes instead of exiting."""

    def __init__(self) -> None:
        self.reports: list[tuple[str, str]] = []
        self.exit_codes: list[int] = []

    def report(self, title: str, message: str) -> None:
        self.reports.append((title, message))

    def terminate(self, exit_code: int) -> None:
        self.exit_codes.append(exit_code)


@pytest.fixture
def host() -> RecordingHost:
    return RecordingHost()


def _write_stub_java(path: Path, args_file: Path, exit_code: int) -> Path:
    path.write_text(
        "#!/bin/sh\n"
        f"printf '%s\\n' \"$@\" > '{args_file}'\n"
        f"exit {exit_code}\n"
    )
    path.chmod(path.stat().st_mode | stat.S_IXUSR)
    return path


@pytest.fixture
def stub_java(tmp_path: Path):
    """Factory for a shell script standing in for the bundled JRE."""
    if sys.platform == "win32":
        pytest.skip("stub print executable is a POSIX shell script")

    args_file = tmp_path / "java-args.txt"

    def make(exit_code: int = 0) -> tuple[Path, Path]:
        return _write_stub_java(tmp_path / "java", args_file, exit_code), args_file

    return make
