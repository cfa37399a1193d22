from typing import Iterable, Self

from pydantic import BaseModel, ConfigDict


class _KeyValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    value: str

    @classmethod
    def of(cls, key: str, value: str) -> Self:
        return cls(key=key, value=value)


class RequestHeader(_KeyValue):
    """A single request header.

    Several headers may share a key; they are folded together by
    :meth:`convert_to_map` when the request is sent.
    """

    @staticmethod
    def convert_to_map(headers: Iterable["RequestHeader"]) -> dict[str, str]:
        """Fold a header list into a map, joining repeated keys with ``", "``.

        Examples:
            >>> RequestHeader.convert_to_map(
            ...     [RequestHeader.of("Accept", "a"), RequestHeader.of("Accept", "b")]
            ... )
            {'Accept': 'a, b'}
        """
        grouped: dict[str, list[str]] = {}
        for header in headers:
            grouped.setdefault(header.key, []).append(header.value)
        return {key: ", ".join(values) for key, values in grouped.items()}


class RequestQuery(_KeyValue):
    """A query string parameter. Identical pairs collapse inside a request."""


class PathParameter(_KeyValue):
    """Replaces every ``{key}`` placeholder of an endpoint template with ``value``."""
