from dataclasses import dataclass
from pathlib import Path

from ghostprint.config.settings import Settings


@dataclass(frozen=True)
class PrintInvokerConfig:
    """Locations of the bundled JRE and print jar, built once at startup."""

    java_path: Path
    jar_path: Path
    timeout_seconds: float = 120.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "PrintInvokerConfig":
        return cls(
            java_path=settings.java_path,
            jar_path=settings.jar_path,
            timeout_seconds=settings.print_timeout_seconds,
        )


@dataclass(frozen=True)
class PrintCommand:
    """Finalized instruction handed to the print executable."""

    pdf_path: Path
    printer_name: str | None = None
