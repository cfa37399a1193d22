from concurrent.futures import Future
from typing import TYPE_CHECKING, Any, Optional, TypeVar

import httpx

from .._config import Config
from .._utils import get_httpx_client_kwargs
from .._utils.constants import HEADER_ACCEPT_ENCODING, SUPPORTED_ACCEPT_ENCODING
from ..models.parameters import RequestHeader
from ._base_transport import Transport

if TYPE_CHECKING:
    from .._request import ApiRequest

T = TypeVar("T")


class HttpxTransport(Transport):
    """Transport backed by a synchronous ``httpx.Client``.

    The response body is read raw, without httpx's own content decoding, so
    decompression follows :func:`restwire._utils.decompress_if_needed`.

    Args:
        http_client: Client to send requests with. When omitted, one is created
            from ``config`` with the package's SSL, timeout and redirect settings.
        config: Supplies the timeout and the worker pool size.
    """

    def __init__(
        self,
        http_client: Optional[httpx.Client] = None,
        *,
        config: Optional[Config] = None,
    ) -> None:
        config = config or Config()
        super().__init__(max_workers=config.max_workers)

        if http_client is None:
            http_client = httpx.Client(
                **get_httpx_client_kwargs(config.timeout),
                headers={HEADER_ACCEPT_ENCODING: SUPPORTED_ACCEPT_ENCODING},
            )
        self._http_client = http_client

    @property
    def http_client(self) -> httpx.Client:
        return self._http_client

    def send(self, request: "ApiRequest[T]") -> "Future[T]":
        url = request.compute_request_url()
        headers = RequestHeader.convert_to_map(request.headers or [])
        content = None
        if request.body is not None:
            content = self.convert_body_to_bytes(request.client, request, request.body)

        return self.executor.submit(self._exchange, request, url, headers, content)

    def close(self) -> None:
        self._http_client.close()
        super().close()

    def _exchange(
        self,
        request: "ApiRequest[T]",
        url: str,
        headers: dict[str, str],
        content: Optional[bytes],
    ) -> T:
        client = request.client
        try:
            http_request = self._http_client.build_request(
                request.method, url, headers=headers, content=content
            )

            self._logger.debug(f"Request: {request.method} {url}")
            self._logger.debug(f"HEADERS: {headers}")

            client.on_request(request)
            status_code, response_headers, body = self._read_raw(http_request)

            self._logger.debug(
                f"Response: {status_code} {request.method} {url} ({len(body)} bytes)"
            )

            response: Any = self.convert_bytes_to_response(
                client,
                request,
                body,
                request.response_type,
                status_code,
                response_headers,
            )
            client.on_response(request, response)

            return self.handle_client_supported_response(client, response)
        except Exception as e:
            client.on_exception(request, e)
            raise

    def _read_raw(
        self, http_request: httpx.Request
    ) -> tuple[int, httpx.Headers, bytes]:
        response = self._http_client.send(http_request, stream=True)
        try:
            body = b"".join(response.iter_raw())
        finally:
            response.close()
        return response.status_code, response.headers, body
