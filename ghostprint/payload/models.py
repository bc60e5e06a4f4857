from dataclasses import dataclass
from enum import Enum


class RequestType(str, Enum):
    """HTTP method used to retrieve the document."""

    GET = "get"
    POST = "post"


@dataclass(frozen=True)
class PrintRequest:
    """Print request decoded from the invocation payload."""

    url: str
    request_type: RequestType
    payload_body: object | None = None
    printer_name: str | None = None
