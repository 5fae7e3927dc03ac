"""
Methods for parsing script
"""
from stdtx.core import SERIALIZED, get_stream, OpCodeError, OPCODES, SCRIPT

__all__ = ["to_asm"]


def to_asm(script: SERIALIZED) -> list:
    """
    Given a script, we return the associated ASM
    """
    if isinstance(script, bytes):
        data = script
    else:
        data = get_stream(script).read()

    pos = 0
    length = len(data)
    asm_log = []

    while pos < length:
        opcode_int = data[pos]
        pos += 1

        # Direct push length (0x01-0x4b)
        if 0x01 <= opcode_int <= SCRIPT.MAX_PUSHBYTES:
            asm_log.append(f"OP_PUSHBYTES_{opcode_int}")

            if pos + opcode_int > length:
                raise OpCodeError("Script truncated during push operation")

            asm_log.append(data[pos:pos + opcode_int].hex())
            pos += opcode_int

        # OP_PUSHDATA1, OP_PUSHDATA2, OP_PUSHDATA4
        elif 0x4c <= opcode_int <= 0x4e:
            width = {0x4c: 1, 0x4d: 2, 0x4e: 4}[opcode_int]
            if pos + width > length:
                raise OpCodeError(f"Script truncated during {OPCODES[opcode_int]}")

            push_length = int.from_bytes(data[pos:pos + width], "little")
            pos += width

            asm_log.append(OPCODES[opcode_int])
            asm_log.append(f"{push_length:x}")

            if pos + push_length > length:
                raise OpCodeError(f"Script truncated during {OPCODES[opcode_int]} data")

            asm_log.append(data[pos:pos + push_length].hex())
            pos += push_length

        else:
            asm_log.append(OPCODES.get(opcode_int, f"OP_UNKNOWN_{opcode_int:02x}"))

    return asm_log
