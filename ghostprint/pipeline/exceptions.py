from pathlib import Path


class PipelineError(Exception):
    """Base exception for every failure that ends a print run.

    Each subclass carries the dialog title shown to the operator and the
    process exit code used when the run terminates.
    """

    title: str = "Error"
    exit_code: int = 1

    def __init__(self, message: str, *, title: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if title is not None:
            self.title = title


class DecodeError(PipelineError):
    """Raised when the invocation payload cannot be decoded."""

    title = "Invalid Request"
    exit_code = 2


class PrinterNotFoundError(PipelineError):
    """Raised when the requested printer is not installed."""

    title = "Error"
    exit_code = 3

    def __init__(self, printer_name: str) -> None:
        super().__init__(f"Printer {printer_name} is not found")
        self.printer_name = printer_name


class FetchError(PipelineError):
    """Raised when the document cannot be retrieved to local storage."""

    title = "Download Error"
    exit_code = 4


class DownloadError(FetchError):
    """Raised on transport failure or a non-success HTTP response."""


class FileWriteError(FetchError):
    """Raised when the downloaded bytes cannot be written to disk."""

    title = "File Write Error"


class PrintError(PipelineError):
    """Raised when the print executable cannot print the document."""

    title = "Print Error"
    exit_code = 5


class MissingInputError(PrintError):
    """Raised when the file handed to the print executable does not exist."""


class PrintExecutionError(PrintError):
    """Raised when the print executable fails to launch or exits non-zero."""

    def __init__(self, pdf_path: Path | str, detail: str = "") -> None:
        super().__init__(f"There was an error while printing the PDF {pdf_path}.")
        self.pdf_path = str(pdf_path)
        self.detail = detail


class UnexpectedError(PipelineError):
    """Raised for any failure outside the known stage errors."""

    title = "Error"
    exit_code = 1


class PrinterEnumerationError(UnexpectedError):
    """Raised when the installed printers cannot be listed."""

    title = "No Printer found"
