"""
CompactSize: the variable-length integer in front of every count and script length in a transaction
"""
from stdtx.core import DATA, SERIALIZED, WriteError, get_stream, read_little_int

__all__ = ["read_compact_size", "write_compact_size"]

# prefix byte -> width of the little-endian integer that follows it
_PREFIX_WIDTH = {
    0xfd: 2,
    0xfe: 4,
    0xff: 8,
}


def read_compact_size(byte_stream: SERIALIZED) -> int:
    """
    Read one CompactSize integer. Raises ReadError if the stream ends inside it.
    """
    stream = get_stream(byte_stream)
    prefix = read_little_int(stream, 1, "CompactSize prefix")

    width = _PREFIX_WIDTH.get(prefix)
    if width is None:
        return prefix
    return read_little_int(stream, width, f"CompactSize value after {prefix:#04x}")


def write_compact_size(num: int) -> bytes:
    if not 0 <= num <= DATA.MAX_COMPACTSIZE:
        raise WriteError(f"{num} is out of range for CompactSize")

    if num < 0xfd:
        return num.to_bytes(1, "little")
    for prefix, width in _PREFIX_WIDTH.items():
        if num < 1 << (8 * width):
            return prefix.to_bytes(1, "little") + num.to_bytes(width, "little")
