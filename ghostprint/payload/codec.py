"""Decodes the custom-URI invocation payload into a PrintRequest."""

import json
import re
from typing import Any
from urllib.parse import unquote

from ghostprint.payload.models import PrintRequest, RequestType
from ghostprint.pipeline.exceptions import DecodeError

_INVALID_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_INVALID_REQUEST_TYPE = 'Invalid request type. Use "post" or "get".'


class PayloadCodec:
    """Turns `<prefix><percent-encoded JSON><delimiter>` into a PrintRequest.

    The whole string is percent-decoded first, then the prefix and the single
    trailing delimiter are stripped and the remainder is parsed as JSON.
    """

    def __init__(self, *, prefix: str, delimiter: str = "/") -> None:
        if len(delimiter) != 1:
            raise ValueError("delimiter must be a single character")
        self._prefix = prefix
        self._delimiter = delimiter

    def decode(self, raw: str) -> PrintRequest:
        """Decode a raw invocation string.

        Raises:
            DecodeError: on bad percent-encoding, missing prefix or delimiter,
                malformed JSON, or fields of the wrong shape.
        """
        text = self._percent_decode(raw)
        body = self._strip_envelope(text)
        data = self._parse_json(body)
        return self._build_request(data)

    @staticmethod
    def _percent_decode(raw: str) -> str:
        if _INVALID_ESCAPE.search(raw):
            raise DecodeError("Payload contains an invalid percent-encoded sequence")
        try:
            return unquote(raw, errors="strict")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"Payload is not valid UTF-8 after decoding: {exc}") from exc

    def _strip_envelope(self, text: str) -> str:
        if text[: len(self._prefix)].lower() != self._prefix.lower():
            raise DecodeError(f"Payload must start with '{self._prefix}'")
        remainder = text[len(self._prefix):]
        if not remainder.endswith(self._delimiter):
            raise DecodeError(f"Payload must end with '{self._delimiter}'")
        return remainder[:-1]

    @staticmethod
    def _parse_json(body: str) -> dict[str, Any]:
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError as exc:
            raise DecodeError(f"Payload is not valid JSON: {exc}") from exc
        if not isinstance(parsed, dict):
            raise DecodeError("Payload JSON must be an object")
        return parsed

    @staticmethod
    def _build_request(data: dict[str, Any]) -> PrintRequest:
        url = data.get("url")
        if not url or not isinstance(url, str):
            raise DecodeError("'url' must be a non-empty string")

        raw_type = data.get("requestType")
        if not isinstance(raw_type, str):
            raise DecodeError(_INVALID_REQUEST_TYPE)
        try:
            request_type = RequestType(raw_type.lower())
        except ValueError as exc:
            raise DecodeError(_INVALID_REQUEST_TYPE) from exc

        printer_name = data.get("printerName")
        if printer_name is not None and not isinstance(printer_name, str):
            raise DecodeError("'printerName' must be a string or null")

        return PrintRequest(
            url=url,
            request_type=request_type,
            payload_body=data.get("payloadBody"),
            printer_name=printer_name or None,
        )
