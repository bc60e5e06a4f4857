from dataclasses import dataclass


@dataclass(frozen=True)
class PrinterDescriptor:
    """One installed printer as reported by the enumeration backend."""

    name: str


@dataclass(frozen=True)
class ResolvedPrinter:
    """Printer selected for the run; name None means the system default."""

    name: str | None = None

    @property
    def is_default(self) -> bool:
        return self.name is None
