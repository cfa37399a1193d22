from ._compression import decompress_if_needed, sniff_encoding
from ._ssl_context import get_httpx_client_kwargs
from ._url import encode_value

__all__ = [
    "decompress_if_needed",
    "sniff_encoding",
    "encode_value",
    "get_httpx_client_kwargs",
]
