"""
Methods for encoding data pushes and splitting push-only scripts into their pushed objects
"""
from stdtx.core import PushOverrun, SCRIPT

__all__ = ["pushdata", "decompose_scriptsig"]

OP_PUSHDATA1 = 0x4c
OP_PUSHDATA2 = 0x4d
OP_PUSHDATA4 = 0x4e

# push opcode -> number of length bytes following it
_PUSHDATA_WIDTH = {
    OP_PUSHDATA1: 1,
    OP_PUSHDATA2: 2,
    OP_PUSHDATA4: 4,
}


def pushdata(item: bytes) -> bytes:
    """
    For a given item, return the corresponding OP_CODES + Data for a datapush
    """
    length = len(item)
    if length <= SCRIPT.MAX_PUSHBYTES:
        return length.to_bytes(1, "little") + item
    elif length <= 0xff:
        return b'\x4c' + length.to_bytes(1, "little") + item
    elif length <= 0xffff:
        return b'\x4d' + length.to_bytes(2, "little") + item
    else:
        return b'\x4e' + length.to_bytes(4, "little") + item


def decompose_scriptsig(script: bytes, input_index: int = 0) -> list[bytes] | None:
    """
    Split a scriptsig into the objects it pushes, in order. OP_0 yields an empty object.

    Returns None if the script contains an opcode that is not a data push.
    Raises PushOverrun if a declared push length runs past the end of the script.
    """
    objects = []
    pos = 0
    length = len(script)

    while pos < length:
        opcode = script[pos]
        start = pos + 1

        if opcode <= SCRIPT.MAX_PUSHBYTES:
            push_len = opcode
        elif opcode in _PUSHDATA_WIDTH:
            width = _PUSHDATA_WIDTH[opcode]
            if start + width > length:
                raise PushOverrun(input_index, pos)
            push_len = int.from_bytes(script[start:start + width], "little")
            start += width
        else:
            return None

        end = start + push_len
        if end > length:
            raise PushOverrun(input_index, pos)

        objects.append(script[start:end])
        pos = end

    return objects
