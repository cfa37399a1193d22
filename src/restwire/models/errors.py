class RestwireError(Exception):
    """Base class for every error raised by restwire itself."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(RestwireError, RuntimeError):
    """Raised when a request cannot be built from the current state.

    These errors are raised synchronously, before any work is submitted to the
    transport, and are never retried.
    """


class BaseUrlMissingError(ConfigurationError):
    def __init__(
        self,
        message="No base URL available. Set one on the request with with_url(), pass base_url to the client or set the RESTWIRE_URL environment variable.",
    ):
        super().__init__(message)


class UnsupportedSerializationError(RestwireError, NotImplementedError):
    """Raised when a serializer cannot represent the given value or type."""


class DeserializationError(RestwireError, ValueError):
    """Raised when a response body cannot be turned into the requested type."""


class UnsupportedContentTypeError(DeserializationError):
    def __init__(self, content_type: str):
        self.content_type = content_type
        super().__init__(f"Unsupported Content-Type: {content_type}")


class DecompressionError(RestwireError, ValueError):
    def __init__(self, encoding: str):
        self.encoding = encoding
        super().__init__(f"Failed to decompress response with encoding '{encoding}'")
