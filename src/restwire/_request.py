import asyncio
from concurrent.futures import Future
from typing import TYPE_CHECKING, Any, Generic, Optional, Self, TypeVar

from ._utils import encode_value
from .models.errors import BaseUrlMissingError, ConfigurationError
from .models.parameters import PathParameter, RequestHeader, RequestQuery

if TYPE_CHECKING:
    from ._client import ApiClient
    from ._serializers import Serializer

T = TypeVar("T")


class ApiRequest(Generic[T]):
    """A single API call, assembled through chained ``with_*`` setters.

    A request is owned by its creator until :meth:`send` is called and is not
    meant to be reused or mutated afterwards.

    Examples:
        ```python
        user = (
            api.create_request("GET", "/users/{id}", User)
            .with_path_parameter(PathParameter.of("id", "42"))
            .with_request_query(RequestQuery.of("active", "true"))
            .send()
            .result()
        )
        ```
    """

    def __init__(
        self,
        client: "ApiClient",
        method: str,
        url: Optional[str],
        endpoint: str,
        response_type: type[T],
    ) -> None:
        self.client = client
        self.method = method
        self.url = url
        self.endpoint = endpoint
        self.response_type = response_type

        self.headers: Optional[list[RequestHeader]] = None
        self.path_parameters: Optional[set[PathParameter]] = None
        self.request_queries: Optional[set[RequestQuery]] = None
        self.body: Any = None
        self.serializer_override: Optional["Serializer"] = None

    def with_url(self, url: Optional[str]) -> Self:
        self.url = url
        return self

    def with_serializer_override(self, serializer: Optional["Serializer"]) -> Self:
        self.serializer_override = serializer
        return self

    def with_explicit_headers(self, headers: Optional[list[RequestHeader]]) -> Self:
        self.headers = headers
        return self

    def with_explicit_path_parameters(
        self, path_parameters: Optional[set[PathParameter]]
    ) -> Self:
        self.path_parameters = path_parameters
        return self

    def with_explicit_request_queries(
        self, request_queries: Optional[set[RequestQuery]]
    ) -> Self:
        self.request_queries = request_queries
        return self

    def with_header(self, header: RequestHeader) -> Self:
        return self.with_headers(header)

    def with_path_parameter(self, path_parameter: PathParameter) -> Self:
        return self.with_path_parameters(path_parameter)

    def with_request_query(self, request_query: RequestQuery) -> Self:
        return self.with_request_queries(request_query)

    def with_headers(self, *headers: RequestHeader) -> Self:
        if self.headers is None:
            self.headers = []
        self.headers.extend(headers)
        return self

    def with_path_parameters(self, *path_parameters: PathParameter) -> Self:
        if self.path_parameters is None:
            self.path_parameters = set()
        self.path_parameters.update(path_parameters)
        return self

    def with_request_queries(self, *request_queries: RequestQuery) -> Self:
        if self.request_queries is None:
            self.request_queries = set()
        self.request_queries.update(request_queries)
        return self

    def with_body(self, body: Any) -> Self:
        self.body = body
        return self

    @property
    def active_serializer(self) -> "Serializer":
        if self.serializer_override is not None:
            return self.serializer_override
        return self.client.serializer

    def compute_request_url(self) -> str:
        """Build the final URL of the request.

        Every ``{key}`` placeholder of the endpoint is replaced with its path
        parameter value (unescaped). Query parameters are percent-encoded and
        appended as ``?k=v&k=v``; their order follows set iteration order.

        An explicit base URL is concatenated as is. Without one, the client's
        base URL is used and the whole endpoint (query string included) is
        percent-encoded as a single value before concatenation. No slash
        normalization happens in either case.

        Placeholders whose keys overlap textually (``{id}`` and ``{id}x``)
        resolve in an unspecified order.

        Raises:
            BaseUrlMissingError: neither the request nor the client has a base URL.
        """
        endpoint = self.endpoint

        for path_parameter in self.path_parameters or ():
            endpoint = endpoint.replace(
                f"{{{path_parameter.key}}}", path_parameter.value
            )

        if self.request_queries:
            endpoint += "?" + "&".join(
                f"{encode_value(query.key)}={encode_value(query.value)}"
                for query in self.request_queries
            )

        if self.url is not None:
            return self.url + endpoint

        base_url = self.client.base_url
        if base_url is None:
            raise BaseUrlMissingError()
        return base_url + encode_value(endpoint)

    def send(self) -> "Future[T]":
        """Send the request through the client's transport.

        Returns:
            A future resolved on a worker thread with the deserialized response.
            Cancelling it does not interrupt a request that is already running.
        """
        return self.client.transport.send(self)

    async def send_async(self) -> T:
        """Send the request and await the result from asyncio code."""
        return await asyncio.wrap_future(self.send())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(method={self.method!r}, url={self.url!r}, "
            f"endpoint={self.endpoint!r})"
        )


class CompletedApiRequest(ApiRequest[T]):
    """A request bound to a response that is already known, e.g. from a cache.

    ``send()`` resolves immediately and never touches the transport.
    """

    def __init__(self, client: "ApiClient", response: T) -> None:
        super().__init__(client, "", None, "", type(response))
        self.response = response

    def compute_request_url(self) -> str:
        raise ConfigurationError("Completed API requests do not have a request URL")

    def send(self) -> "Future[T]":
        future: Future[T] = Future()
        future.set_result(self.response)
        return future
