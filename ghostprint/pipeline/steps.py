from ghostprint.fetch.fetcher import DocumentFetcher
from ghostprint.logging.logger import Log
from ghostprint.payload.codec import PayloadCodec
from ghostprint.pipeline.pipeline import PipelineContext, PipelineStep
from ghostprint.printers.base import BasePrinterEnumerator
from ghostprint.printers.resolver import PrinterResolver
from ghostprint.printing.invoker import PrintInvoker


class DecodePayloadStep(PipelineStep):
    def __init__(self, codec: PayloadCodec) -> None:
        self._codec = codec

    def run(self, context: PipelineContext) -> PipelineContext:
        context.request = self._codec.decode(context.raw_invocation)
        Log.info(
            f"Decoded {context.request.request_type.value.upper()} request for "
            f"{context.request.url}"
        )
        return context


class ResolvePrinterStep(PipelineStep):
    def __init__(
        self,
        resolver: PrinterResolver,
        enumerator: BasePrinterEnumerator,
    ) -> None:
        self._resolver = resolver
        self._enumerator = enumerator

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.request is None:
            raise ValueError("PipelineContext.request must be set before printer resolution")
        requested = context.request.printer_name
        # the default printer needs no enumeration
        if requested is not None and context.printers is None:
            context.printers = self._enumerator.list_printers()
        context.printer = self._resolver.resolve(requested, context.printers)
        Log.info(f"Using printer: {context.printer.name or 'system default'}")
        return context


class FetchDocumentStep(PipelineStep):
    def __init__(self, fetcher: DocumentFetcher) -> None:
        self._fetcher = fetcher

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.request is None:
            raise ValueError("PipelineContext.request must be set before fetching")
        if context.printer is None:
            raise ValueError("PipelineContext.printer must be resolved before fetching")
        context.document = self._fetcher.fetch(
            context.request.url,
            context.request.request_type,
            context.request.payload_body,
        )
        return context


class PrintDocumentStep(PipelineStep):
    def __init__(self, invoker: PrintInvoker) -> None:
        self._invoker = invoker

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.document is None or context.printer is None:
            raise ValueError("PipelineContext.document and printer must be set before printing")
        self._invoker.invoke(context.document.local_path, context.printer.name)
        return context
