from typing import Any, Mapping, Union

from httpx import Headers

from ..models.errors import DeserializationError, UnsupportedSerializationError
from ._base_serializer import Serializer


class StringSerializer(Serializer):
    """Serializes ``str`` bodies and reads responses as text."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def serialize(self, value: Any) -> bytes:
        if value is None:
            return b""
        if isinstance(value, str):
            return value.encode(self.encoding)
        raise UnsupportedSerializationError(
            f"StringSerializer only supports serialization of str, got {type(value).__name__}"
        )

    def deserialize(
        self,
        response_type: Any,
        status_code: int,
        headers: Union[Headers, Mapping[str, str]],
        body: bytes,
    ) -> str:
        if response_type is not str:
            raise DeserializationError("StringSerializer can only deserialize to str")
        try:
            return body.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise DeserializationError(
                f"Response body is not valid {self.encoding} text"
            ) from e
