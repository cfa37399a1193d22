import weakref
from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, PrivateAttr

if TYPE_CHECKING:
    from .._client import ApiClient


@runtime_checkable
class SupportsClientResponse(Protocol):
    """Response values that want a back-reference to the client that fetched them."""

    @property
    def client(self) -> Optional["ApiClient"]: ...

    def bind_client(self, client: "ApiClient") -> None: ...


class ClientResponse(BaseModel):
    """Base model for responses that keep a reference to their client.

    The reference is weak: a response never keeps its client alive, and
    ``client`` returns ``None`` once the client has been garbage collected.

    Examples:
        ```python
        class User(ClientResponse):
            id: int
            name: str

        user = api.create_request("GET", "/users/{id}", User).send().result()
        user.client is api  # True
        ```
    """

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )

    _client_ref: Any = PrivateAttr(default=None)

    @property
    def client(self) -> Optional["ApiClient"]:
        if self._client_ref is None:
            return None
        return self._client_ref()

    def bind_client(self, client: "ApiClient") -> None:
        self._client_ref = weakref.ref(client)
