from ._base_serializer import Serializer
from .bytes_serializer import BytesSerializer
from .json_serializer import JsonSerializer
from .string_serializer import StringSerializer

__all__ = [
    "Serializer",
    "StringSerializer",
    "BytesSerializer",
    "JsonSerializer",
]
