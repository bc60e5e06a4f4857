from ghostprint.payload.codec import PayloadCodec
from ghostprint.payload.models import PrintRequest, RequestType

__all__ = ["PayloadCodec", "PrintRequest", "RequestType"]
