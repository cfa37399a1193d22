"""Response body decompression.

The encoding is taken from the ``Content-Encoding`` header when present. When
it is missing, the first two bytes of the body are sniffed for a gzip magic
number or a valid zlib header (RFC 1950).
"""

import gzip
import logging
import zlib
from typing import Mapping, Union

from httpx import Headers

from ..models.errors import DecompressionError
from .constants import (
    ENCODING_DEFLATE,
    ENCODING_GZIP,
    ENCODING_IDENTITY,
    HEADER_CONTENT_ENCODING,
)

logger = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"
ZLIB_COMPRESSION_METHOD_DEFLATE = 8


def sniff_encoding(data: bytes) -> str | None:
    """Guess the compression of ``data`` from its first two bytes.

    Returns:
        ``"gzip"``, ``"deflate"`` or ``None`` when the body looks uncompressed.
    """
    if len(data) < 2:
        return None

    if data[:2] == GZIP_MAGIC:
        return ENCODING_GZIP

    cmf, flg = data[0], data[1]
    if (cmf & 0x0F) == ZLIB_COMPRESSION_METHOD_DEFLATE and (cmf * 256 + flg) % 31 == 0:
        return ENCODING_DEFLATE

    return None


def decompress_if_needed(
    data: bytes, headers: Union[Headers, Mapping[str, str]]
) -> bytes:
    """Decompress a response body according to its headers or its leading bytes.

    A non-empty ``Content-Encoding`` header always wins over sniffing. Unknown
    encodings are passed through unchanged with a warning.

    Raises:
        DecompressionError: the body is not a valid stream for its encoding.
    """
    values = Headers(headers).get_list(HEADER_CONTENT_ENCODING)
    encoding = values[0].strip().lower() if values else ""

    if not data:
        return data

    if not encoding:
        sniffed = sniff_encoding(data)
        if sniffed is None:
            return data
        encoding = sniffed

    try:
        if ENCODING_GZIP in encoding:
            return gzip.decompress(data)
        if ENCODING_DEFLATE in encoding:
            return zlib.decompress(data)
    except (OSError, EOFError, zlib.error) as e:
        raise DecompressionError(encoding) from e

    if ENCODING_IDENTITY not in encoding:
        logger.warning(f"Unsupported Content-Encoding: {encoding}")
    return data
