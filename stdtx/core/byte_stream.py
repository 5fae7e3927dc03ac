"""
Reading fixed-width transaction fields from a byte stream
"""
from io import BytesIO

from stdtx.core.exceptions import ReadError

__all__ = ["SERIALIZED", "get_stream", "read_stream", "read_little_int"]

SERIALIZED = bytes | bytearray | BytesIO


def get_stream(byte_stream: SERIALIZED) -> BytesIO:
    """
    Wrap raw bytes in a stream. A stream is returned as is, so nested from_bytes calls share one read position.
    """
    if isinstance(byte_stream, BytesIO):
        return byte_stream
    if isinstance(byte_stream, (bytes, bytearray)):
        return BytesIO(byte_stream)
    raise TypeError(f"Expected bytes or BytesIO, received {type(byte_stream).__name__}")


def read_stream(stream: BytesIO, length: int, field: str) -> bytes:
    data = stream.read(length)
    if len(data) != length:
        raise ReadError(f"Truncated {field}: expected {length} bytes, found {len(data)}")
    return data


def read_little_int(stream: BytesIO, length: int, field: str) -> int:
    return int.from_bytes(read_stream(stream, length, field), "little")
