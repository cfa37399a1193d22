from abc import ABC, abstractmethod
from concurrent.futures import Future, ThreadPoolExecutor
from logging import getLogger
from typing import TYPE_CHECKING, Any, Mapping, Optional, TypeVar, Union

from httpx import Headers

from .._utils import decompress_if_needed
from .._utils.constants import DEFAULT_MAX_WORKERS
from ..models.response import SupportsClientResponse

if TYPE_CHECKING:
    from .._client import ApiClient
    from .._request import ApiRequest
    from .._serializers import Serializer

T = TypeVar("T")


class Transport(ABC):
    """Performs the network exchange of a request on a worker thread pool.

    Subclasses implement :meth:`send` with a concrete HTTP library and reuse
    the body, response and decompression helpers defined here.
    """

    def __init__(self, max_workers: Optional[int] = None) -> None:
        self._logger = getLogger("restwire")
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers or DEFAULT_MAX_WORKERS,
            thread_name_prefix="restwire",
        )

    @property
    def executor(self) -> ThreadPoolExecutor:
        return self._executor

    @abstractmethod
    def send(self, request: "ApiRequest[T]") -> "Future[T]":
        """Submit the request and return a future for its deserialized response."""

    def close(self) -> None:
        self._executor.shutdown(wait=False)

    def convert_body_to_bytes(
        self, client: "ApiClient", request: "ApiRequest[Any]", body: Any
    ) -> bytes:
        if isinstance(body, (bytes, bytearray)):
            return bytes(body)
        if isinstance(body, str):
            return body.encode("utf-8")
        return self._serializer_for(client, request).serialize(body)

    def convert_bytes_to_response(
        self,
        client: "ApiClient",
        request: "ApiRequest[Any]",
        body: bytes,
        response_type: type[T],
        status_code: int,
        headers: Union[Headers, Mapping[str, str]],
    ) -> T:
        decompressed = self.decompress_if_needed(body, headers)
        return self._serializer_for(client, request).deserialize(
            response_type, status_code, headers, decompressed
        )

    def _serializer_for(
        self, client: "ApiClient", request: "ApiRequest[Any]"
    ) -> "Serializer":
        if request.serializer_override is not None:
            return request.serializer_override
        return client.serializer

    def decompress_if_needed(
        self, data: bytes, headers: Union[Headers, Mapping[str, str]]
    ) -> bytes:
        return decompress_if_needed(data, headers)

    def handle_client_supported_response(self, client: "ApiClient", response: T) -> T:
        if isinstance(response, SupportsClientResponse):
            response.bind_client(client)
        return response
