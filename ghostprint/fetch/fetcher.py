import contextlib
import uuid
from pathlib import Path

import httpx

from ghostprint.fetch.models import FetchedDocument
from ghostprint.logging.logger import Log
from ghostprint.payload.models import RequestType
from ghostprint.pipeline.exceptions import DownloadError, FileWriteError

_DOWNLOAD_FAILED = "There was an error while downloading the PDF file."
_WRITE_FAILED = "There was an error while writing the PDF file."


def document_file_path(downloads_dir: Path, extension: str) -> Path:
    """Build a fresh destination path: {downloads_dir}/{uuid4}{extension}"""
    return downloads_dir / f"{uuid.uuid4()}{extension}"


class DocumentFetcher:
    """Downloads a document over HTTP and streams it into a uniquely named file."""

    def __init__(
        self,
        *,
        downloads_dir: Path,
        extension: str = ".pdf",
        timeout_seconds: float = 60.0,
        verify_tls: bool = True,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._downloads_dir = downloads_dir
        self._extension = extension
        self._timeout_seconds = timeout_seconds
        self._verify_tls = verify_tls
        self._transport = transport

    def fetch(
        self,
        url: str,
        method: RequestType,
        body: object | None = None,
    ) -> FetchedDocument:
        """Retrieve `url` and write the response body to local storage.

        Raises:
            DownloadError: on transport failure, an invalid URL or a non-2xx
                response.
            FileWriteError: if the destination cannot be created or written.
        """
        path = document_file_path(self._downloads_dir, self._extension)
        Log.info(f"Downloading {method.value.upper()} {url} to {path}")
        try:
            with self._client() as client:
                with client.stream(method.value.upper(), url, **self._body_kwargs(body)) as response:
                    response.raise_for_status()
                    size = self._write_stream(response, path)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            self._discard(path)
            raise DownloadError(_DOWNLOAD_FAILED) from exc
        except FileWriteError:
            self._discard(path)
            raise

        Log.info(f"Downloaded {size} bytes to {path}")
        return FetchedDocument(local_path=path)

    def _client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self._timeout_seconds,
            verify=self._verify_tls,
            follow_redirects=True,
            transport=self._transport,
        )

    @staticmethod
    def _body_kwargs(body: object | None) -> dict[str, object]:
        if body is None:
            return {}
        if isinstance(body, bytes):
            return {"content": body}
        if isinstance(body, str):
            return {"content": body.encode("utf-8")}
        return {"json": body}

    def _write_stream(self, response: httpx.Response, path: Path) -> int:
        size = 0
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("wb") as fh:
                for chunk in response.iter_bytes():
                    fh.write(chunk)
                    size += len(chunk)
        except OSError as exc:
            Log.error(f"Failed writing {path}: {exc}")
            raise FileWriteError(_WRITE_FAILED) from exc
        return size

    @staticmethod
    def _discard(path: Path) -> None:
        with contextlib.suppress(OSError):
            path.unlink(missing_ok=True)
