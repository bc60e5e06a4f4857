from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from ghostprint.fetch.models import FetchedDocument
from ghostprint.payload.models import PrintRequest
from ghostprint.pipeline.exceptions import PipelineError
from ghostprint.printers.models import PrinterDescriptor, ResolvedPrinter


@dataclass(slots=True)
class PipelineContext:
    raw_invocation: str
    printers: Sequence[PrinterDescriptor] | None = None
    request: PrintRequest | None = None
    printer: ResolvedPrinter | None = None
    document: FetchedDocument | None = None


@dataclass(frozen=True)
class PipelineOutcome:
    """Result of one print run."""

    exit_code: int
    error: PipelineError | None = None
    document: FetchedDocument | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
