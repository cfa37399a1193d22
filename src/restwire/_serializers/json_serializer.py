from typing import Any, Iterable, Mapping, Optional, Union

from httpx import Headers
from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError
from pydantic_core import PydanticSerializationError

from .._utils.constants import CONTENT_TYPE_JSON, HEADER_CONTENT_TYPE
from ..models.errors import (
    DeserializationError,
    UnsupportedContentTypeError,
    UnsupportedSerializationError,
)
from ._base_serializer import Serializer


class JsonSerializer(Serializer):
    """JSON serializer backed by pydantic.

    Request bodies are dumped with a ``TypeAdapter`` for their runtime type, so
    pydantic models, dataclasses, dicts and lists all work. Response bodies are
    validated against the request's response type.

    A response without ``Content-Type`` is treated as JSON. Otherwise its media
    type (parameters such as ``charset`` are ignored) must be one of
    ``accepted_content_types``.

    Examples:
        ```python
        serializer = JsonSerializer(
            accepted_content_types=("application/json", "application/problem+json")
        )
        ```
    """

    def __init__(
        self, accepted_content_types: Iterable[str] = (CONTENT_TYPE_JSON,)
    ) -> None:
        self.accepted_content_types = frozenset(
            content_type.lower() for content_type in accepted_content_types
        )

    def serialize(self, value: Any) -> bytes:
        if value is None:
            return b""
        if isinstance(value, str):
            return value.encode("utf-8")
        if isinstance(value, (bytes, bytearray)):
            return bytes(value)

        try:
            return TypeAdapter(type(value)).dump_json(value, by_alias=True)
        except (PydanticSchemaGenerationError, PydanticSerializationError) as e:
            raise UnsupportedSerializationError(
                f"Cannot serialize {type(value).__name__} to JSON: {e}"
            ) from e

    def deserialize(
        self,
        response_type: Any,
        status_code: int,
        headers: Union[Headers, Mapping[str, str]],
        body: bytes,
    ) -> Optional[Any]:
        if not body:
            return None

        content_type = Headers(headers).get(HEADER_CONTENT_TYPE)
        if content_type and not self.is_accepted(content_type):
            raise UnsupportedContentTypeError(content_type)

        try:
            adapter = TypeAdapter(response_type)
        except PydanticSchemaGenerationError as e:
            raise DeserializationError(
                f"JsonSerializer cannot deserialize to {response_type!r}"
            ) from e

        try:
            return adapter.validate_json(body)
        except ValidationError as e:
            text = body.decode("utf-8", errors="replace")
            raise DeserializationError(
                f"Failed to deserialize response into {response_type!r}: {e}. Body: {text}"
            ) from e

    def is_accepted(self, content_type: str) -> bool:
        media_type = content_type.split(";", 1)[0].strip().lower()
        return media_type in self.accepted_content_types
