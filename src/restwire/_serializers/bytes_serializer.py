from typing import Any, Mapping, Union

from httpx import Headers

from ..models.errors import DeserializationError, UnsupportedSerializationError
from ._base_serializer import Serializer


class BytesSerializer(Serializer):
    """Returns response bodies untouched. Serialization is not supported."""

    def serialize(self, value: Any) -> bytes:
        raise UnsupportedSerializationError(
            "BytesSerializer does not support serialization"
        )

    def deserialize(
        self,
        response_type: Any,
        status_code: int,
        headers: Union[Headers, Mapping[str, str]],
        body: bytes,
    ) -> bytes:
        if response_type is not bytes:
            raise DeserializationError("BytesSerializer can only deserialize to bytes")
        return body
