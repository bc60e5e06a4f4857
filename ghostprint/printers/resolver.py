from collections.abc import Sequence

from ghostprint.pipeline.exceptions import PrinterNotFoundError
from ghostprint.printers.models import PrinterDescriptor, ResolvedPrinter


class PrinterResolver:
    """Matches a requested printer name against the installed printers."""

    def resolve(
        self,
        requested: str | None,
        available: Sequence[PrinterDescriptor] | None,
    ) -> ResolvedPrinter:
        """Return the printer to use.

        Matching is exact and case-sensitive. An absent name selects the
        default printer without looking at `available`.

        Raises:
            PrinterNotFoundError: if `requested` matches no installed printer.
        """
        if requested is None:
            return ResolvedPrinter(name=None)
        for printer in available or ():
            if printer.name == requested:
                return ResolvedPrinter(name=printer.name)
        raise PrinterNotFoundError(requested)
