"""Fluent builder for outbound REST API calls.

Examples:
    ```python
    from restwire import ApiClient, PathParameter

    with ApiClient(base_url="https://api.example.com") as api:
        user = (
            api.create_request("GET", "/users/{id}", dict)
            .with_path_parameter(PathParameter.of("id", "42"))
            .send()
            .result()
        )
    ```
"""

from ._client import ApiClient
from ._config import Config
from ._request import ApiRequest, CompletedApiRequest
from ._serializers import BytesSerializer, JsonSerializer, Serializer, StringSerializer
from ._transports import HttpxTransport, Transport
from .models import (
    BaseUrlMissingError,
    ClientResponse,
    ConfigurationError,
    DecompressionError,
    DeserializationError,
    PathParameter,
    RequestHeader,
    RequestQuery,
    RestwireError,
    SupportsClientResponse,
    UnsupportedContentTypeError,
    UnsupportedSerializationError,
)

__all__ = [
    "ApiClient",
    "ApiRequest",
    "CompletedApiRequest",
    "Config",
    "Transport",
    "HttpxTransport",
    "Serializer",
    "StringSerializer",
    "BytesSerializer",
    "JsonSerializer",
    "RequestHeader",
    "RequestQuery",
    "PathParameter",
    "ClientResponse",
    "SupportsClientResponse",
    "RestwireError",
    "ConfigurationError",
    "BaseUrlMissingError",
    "UnsupportedSerializationError",
    "DeserializationError",
    "UnsupportedContentTypeError",
    "DecompressionError",
]
