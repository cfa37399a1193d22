from logging import getLogger
from typing import Any, Optional, Self, TypeVar

from ._config import Config
from ._request import ApiRequest, CompletedApiRequest
from ._serializers import JsonSerializer, Serializer
from ._transports import HttpxTransport, Transport
from .models.parameters import RequestHeader

T = TypeVar("T")


class ApiClient:
    """Base class for API clients built on restwire.

    An ``ApiClient`` owns one transport and one default serializer, and holds
    the base URL and default headers applied to every request it creates.
    Subclasses usually expose one method per API operation and may override
    the ``on_request``, ``on_response`` and ``on_exception`` hooks.

    Hooks run on the transport's worker thread. An exception raised from a
    hook fails the request's future.

    Args:
        transport: Transport to send requests with. Defaults to an
            :class:`HttpxTransport` configured from ``config``.
        serializer: Default serializer. Defaults to :class:`JsonSerializer`.
        base_url: Base URL prepended to request endpoints. Defaults to
            ``config.base_url``.
        default_headers: Headers copied into every created request.
        config: Defaults to :meth:`Config.from_env`.

    Examples:
        ```python
        class HttpBinApi(ApiClient):
            def __init__(self) -> None:
                super().__init__(base_url="https://httpbin.org")

            def get_anything(self) -> ApiRequest[dict]:
                return self.create_request("GET", "/anything", dict)

        with HttpBinApi() as api:
            payload = api.get_anything().send().result()
        ```
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        serializer: Optional[Serializer] = None,
        base_url: Optional[str] = None,
        default_headers: Optional[list[RequestHeader]] = None,
        *,
        config: Optional[Config] = None,
    ) -> None:
        self._logger = getLogger("restwire")
        self._config = config or Config.from_env()

        self._transport = transport or HttpxTransport(config=self._config)
        self._serializer = serializer or JsonSerializer()
        self._base_url = base_url if base_url is not None else self._config.base_url
        self.default_headers: list[RequestHeader] = list(default_headers or [])

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def serializer(self) -> Serializer:
        return self._serializer

    @property
    def base_url(self) -> Optional[str]:
        return self._base_url

    @base_url.setter
    def base_url(self, value: Optional[str]) -> None:
        self._base_url = value

    def create_request(
        self, method: str, endpoint: str, response_type: type[T]
    ) -> ApiRequest[T]:
        return ApiRequest(
            self, method, self.base_url, endpoint, response_type
        ).with_explicit_headers(list(self.default_headers))

    def create_completed_request(self, response: T) -> CompletedApiRequest[T]:
        return CompletedApiRequest(self, response)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def on_request(self, request: ApiRequest[Any]) -> None:
        self._logger.debug(f"Sending {request!r}")

    def on_response(self, request: ApiRequest[Any], response: Any) -> None:
        self._logger.debug(f"Received response for {request!r}")

    def on_exception(self, request: ApiRequest[Any], exception: BaseException) -> None:
        self._logger.debug(f"Request {request!r} failed: {exception!r}")
