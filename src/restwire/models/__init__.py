from .errors import (
    BaseUrlMissingError,
    ConfigurationError,
    DecompressionError,
    DeserializationError,
    RestwireError,
    UnsupportedContentTypeError,
    UnsupportedSerializationError,
)
from .parameters import PathParameter, RequestHeader, RequestQuery
from .response import ClientResponse, SupportsClientResponse

__all__ = [
    "RestwireError",
    "ConfigurationError",
    "BaseUrlMissingError",
    "UnsupportedSerializationError",
    "DeserializationError",
    "UnsupportedContentTypeError",
    "DecompressionError",
    "RequestHeader",
    "RequestQuery",
    "PathParameter",
    "ClientResponse",
    "SupportsClientResponse",
]
