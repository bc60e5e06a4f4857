from collections.abc import Iterable

from ghostprint.printers.base import BasePrinterEnumerator
from ghostprint.printers.models import PrinterDescriptor


class StaticPrinterEnumerator(BasePrinterEnumerator):
    """Returns a fixed list of printer names from configuration."""

    def __init__(self, names: Iterable[str]) -> None:
        self._printers = [PrinterDescriptor(name=name) for name in names]

    def list_printers(self) -> list[PrinterDescriptor]:
        return list(self._printers)
