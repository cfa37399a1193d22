from abc import ABC, abstractmethod
from typing import Any, Mapping, Union

from httpx import Headers


class Serializer(ABC):
    """Converts request bodies to bytes and response bodies to values."""

    @abstractmethod
    def serialize(self, value: Any) -> bytes:
        """Serialize a request body.

        Raises:
            UnsupportedSerializationError: the value cannot be represented.
        """

    @abstractmethod
    def deserialize(
        self,
        response_type: Any,
        status_code: int,
        headers: Union[Headers, Mapping[str, str]],
        body: bytes,
    ) -> Any:
        """Deserialize a (already decompressed) response body into ``response_type``.

        Raises:
            DeserializationError: the target type or the payload is not supported.
        """
