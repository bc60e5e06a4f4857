import sys
from typing import TextIO

from ghostprint.host.base import BaseHost
from ghostprint.logging.logger import Log


class ConsoleHost(BaseHost):
    """Reports failures on stderr and exits the interpreter."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def report(self, title: str, message: str) -> None:
        stream = self._stream or sys.stderr
        print(f"{title}: {message}", file=stream)
        stream.flush()

    def terminate(self, exit_code: int) -> None:
        Log.debug(f"Exiting with code {exit_code}")
        sys.exit(exit_code)
