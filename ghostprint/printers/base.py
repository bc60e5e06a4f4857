from abc import ABC, abstractmethod

from ghostprint.printers.models import PrinterDescriptor


class BasePrinterEnumerator(ABC):
    """Contract for all installed-printer enumeration backends."""

    @abstractmethod
    def list_printers(self) -> list[PrinterDescriptor]:
        """Return the printers installed on this machine.

        Raises:
            PrinterEnumerationError: if the backend cannot be queried.
        """
