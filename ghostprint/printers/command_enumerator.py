import subprocess
from collections.abc import Sequence

from ghostprint.logging.logger import Log
from ghostprint.pipeline.exceptions import PrinterEnumerationError
from ghostprint.printers.base import BasePrinterEnumerator
from ghostprint.printers.models import PrinterDescriptor


class CommandPrinterEnumerator(BasePrinterEnumerator):
    """Lists printers by running a system command that prints one name per line."""

    def __init__(self, command: Sequence[str], *, timeout_seconds: float) -> None:
        self._command = list(command)
        self._timeout_seconds = timeout_seconds

    def list_printers(self) -> list[PrinterDescriptor]:
        try:
            proc = subprocess.run(
                self._command,
                capture_output=True,
                text=True,
                timeout=self._timeout_seconds,
            )
        except subprocess.TimeoutExpired as exc:
            raise PrinterEnumerationError(
                f"'{self._command[0]}' did not finish within {self._timeout_seconds}s"
            ) from exc
        except OSError as exc:
            raise PrinterEnumerationError(f"Could not run '{self._command[0]}': {exc}") from exc

        if proc.returncode != 0:
            if self._is_empty_result(proc.stderr or ""):
                return []
            out = (proc.stdout or "") + (proc.stderr or "")
            raise PrinterEnumerationError(
                f"'{self._command[0]}' failed (rc={proc.returncode}): {out.strip()}"
            )

        printers = [
            PrinterDescriptor(name=line.strip())
            for line in (proc.stdout or "").splitlines()
            if line.strip()
        ]
        Log.debug(f"Found {len(printers)} installed printers")
        return printers

    def _is_empty_result(self, stderr: str) -> bool:
        return False


class CupsPrinterEnumerator(CommandPrinterEnumerator):
    """CUPS destinations via `lpstat -e`."""

    def __init__(self, *, lpstat_path: str = "lpstat", timeout_seconds: float) -> None:
        super().__init__([lpstat_path, "-e"], timeout_seconds=timeout_seconds)

    def _is_empty_result(self, stderr: str) -> bool:
        # lpstat exits non-zero when no destination has been added yet
        return "no destinations" in stderr.lower()


class WindowsPrinterEnumerator(CommandPrinterEnumerator):
    """Windows spooler printers via PowerShell `Get-Printer`."""

    def __init__(self, *, powershell_path: str = "powershell", timeout_seconds: float) -> None:
        super().__init__(
            [
                powershell_path,
                "-NoProfile",
                "-NonInteractive",
                "-Command",
                "Get-Printer | Select-Object -ExpandProperty Name",
            ],
            timeout_seconds=timeout_seconds,
        )
