from collections.abc import Sequence

from ghostprint.config.settings import Settings
from ghostprint.fetch.fetcher import DocumentFetcher
from ghostprint.host.base import BaseHost
from ghostprint.host.console_host import ConsoleHost
from ghostprint.logging.logger import Log
from ghostprint.payload.codec import PayloadCodec
from ghostprint.pipeline.exceptions import PipelineError, UnexpectedError
from ghostprint.pipeline.pipeline import PipelineContext, PipelineOutcome, PipelineStep
from ghostprint.pipeline.steps import (
    DecodePayloadStep,
    FetchDocumentStep,
    PrintDocumentStep,
    ResolvePrinterStep,
)
from ghostprint.printers.base import BasePrinterEnumerator
from ghostprint.printers.factory import PrinterEnumeratorFactory
from ghostprint.printers.models import PrinterDescriptor
from ghostprint.printers.resolver import PrinterResolver
from ghostprint.printing.invoker import PrintInvoker
from ghostprint.printing.models import PrintInvokerConfig


class PipelineOrchestrator:
    """Runs one print request end to end and terminates the process.

    Pipeline: decode -> resolve printer -> fetch -> print.
    The first failing step stops the run; its error is reported once
    through the host, which then terminates with the error's exit code.
    """

    def __init__(
        self,
        *,
        codec: PayloadCodec,
        resolver: PrinterResolver,
        enumerator: BasePrinterEnumerator,
        fetcher: DocumentFetcher,
        invoker: PrintInvoker,
        host: BaseHost,
    ) -> None:
        self._host = host
        self._steps: list[PipelineStep] = [
            DecodePayloadStep(codec),
            ResolvePrinterStep(resolver, enumerator),
            FetchDocumentStep(fetcher),
            PrintDocumentStep(invoker),
        ]

    def run(
        self,
        raw_invocation: str,
        printers: Sequence[PrinterDescriptor] | None = None,
    ) -> PipelineOutcome:
        """Run the pipeline for one invocation.

        `printers` overrides enumeration; when None, installed printers are
        listed only if the request names a printer.
        """
        context = PipelineContext(raw_invocation=raw_invocation, printers=printers)
        try:
            for step in self._steps:
                context = step.run(context)
        except PipelineError as exc:
            outcome = self._handle_failure(exc, context)
        except Exception as exc:
            error = UnexpectedError(str(exc) or type(exc).__name__)
            error.__cause__ = exc
            outcome = self._handle_failure(error, context)
        else:
            Log.info("Print run completed successfully")
            outcome = PipelineOutcome(exit_code=0, document=context.document)

        self._host.terminate(outcome.exit_code)
        return outcome

    def _handle_failure(self, error: PipelineError, context: PipelineContext) -> PipelineOutcome:
        Log.error(f"Print run failed ({type(error).__name__}): {error.message}")
        self._host.report(error.title, error.message)
        return PipelineOutcome(
            exit_code=error.exit_code,
            error=error,
            document=context.document,
        )


def build_orchestrator(
    settings: Settings,
    host: BaseHost | None = None,
) -> PipelineOrchestrator:
    """Build a PipelineOrchestrator with all required adapters."""
    return PipelineOrchestrator(
        codec=PayloadCodec(
            prefix=settings.protocol_prefix,
            delimiter=settings.payload_delimiter,
        ),
        resolver=PrinterResolver(),
        enumerator=PrinterEnumeratorFactory.create(settings),
        fetcher=DocumentFetcher(
            downloads_dir=settings.downloads_dir,
            extension=settings.document_extension,
            timeout_seconds=settings.fetch_timeout_seconds,
            verify_tls=settings.fetch_verify_tls,
        ),
        invoker=PrintInvoker(PrintInvokerConfig.from_settings(settings)),
        host=host or ConsoleHost(),
    )
