import subprocess
from pathlib import Path

from ghostprint.logging.logger import Log
from ghostprint.pipeline.exceptions import MissingInputError, PrintExecutionError
from ghostprint.printing.models import PrintCommand, PrintInvokerConfig


class PrintInvoker:
    """Runs the bundled print jar against a downloaded PDF.

    Submission is fire-and-forget: the jar's output is captured only to
    report failures, and a zero exit status means the job was accepted.
    """

    def __init__(self, config: PrintInvokerConfig) -> None:
        self._config = config

    def invoke(self, pdf_path: Path | str | None, printer_name: str | None = None) -> None:
        """Print `pdf_path` on `printer_name` (system default when None).

        Raises:
            MissingInputError: if no path is given or the file does not exist.
            PrintExecutionError: if the executable cannot be launched, times
                out or exits non-zero.
        """
        if not pdf_path:
            raise MissingInputError("No PDF specified for printing.")
        path = Path(pdf_path)
        if not path.is_file():
            raise MissingInputError(f"The specified PDF file {path} does not exist.")

        command = PrintCommand(pdf_path=path, printer_name=printer_name)
        args = self.build_command(command)
        Log.info(f"Printing {path} on {printer_name or 'default printer'}")
        Log.debug(f"Print command: {args}")

        try:
            proc = subprocess.run(
                args,
                capture_output=True,
                text=True,
                timeout=self._config.timeout_seconds,
            )
        except subprocess.TimeoutExpired as exc:
            raise PrintExecutionError(
                path, f"timed out after {self._config.timeout_seconds}s"
            ) from exc
        except OSError as exc:
            raise PrintExecutionError(path, str(exc)) from exc

        if proc.returncode != 0:
            out = ((proc.stdout or "") + (proc.stderr or "")).strip()
            Log.error(f"Print jar failed (rc={proc.returncode}): {out}")
            raise PrintExecutionError(path, f"rc={proc.returncode}: {out}")

        Log.info(f"Print job for {path} submitted")

    def build_command(self, command: PrintCommand) -> list[str]:
        args = [
            str(self._config.java_path),
            "-jar",
            str(self._config.jar_path),
            "-path",
            str(command.pdf_path),
        ]
        if command.printer_name:
            # quoted so names with spaces reach the jar as one value
            args.extend(["-printer", f'"{command.printer_name}"'])
        return args
