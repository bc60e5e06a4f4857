from ghostprint.config.settings import Settings
from ghostprint.printers.base import BasePrinterEnumerator
from ghostprint.printers.command_enumerator import (
    CupsPrinterEnumerator,
    WindowsPrinterEnumerator,
)
from ghostprint.printers.static_enumerator import StaticPrinterEnumerator


class PrinterEnumeratorFactory:
    """Creates the printer enumeration backend selected in settings."""

    BACKENDS = ("cups", "windows", "static")

    @classmethod
    def create(cls, settings: Settings) -> BasePrinterEnumerator:
        backend = settings.printer_backend.lower()
        timeout = settings.printer_enumeration_timeout_seconds
        if backend == "cups":
            return CupsPrinterEnumerator(timeout_seconds=timeout)
        if backend == "windows":
            return WindowsPrinterEnumerator(timeout_seconds=timeout)
        if backend == "static":
            return StaticPrinterEnumerator(settings.static_printers)
        raise ValueError(
            f"Unknown printer backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
