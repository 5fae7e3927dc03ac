"""
The standard formats and constants
"""
from typing import Final

__all__ = ["DATA", "ADDRESS", "TX", "SCRIPT", "OPCODES"]


class DATA:
    """
    Constants used in data manipulation
    """
    MAX_COMPACTSIZE: Final[int] = 0xffffffffffffffff


class ADDRESS:
    """
    Address version pairs, given as (pay-to-address version, pay-to-script-hash version)
    """
    MAINNET: Final[tuple[int, int]] = (0x00, 0x05)
    TESTNET: Final[tuple[int, int]] = (0x6f, 0xc4)
    HASH_LEN: Final[int] = 20


class TX:
    """
    Transaction byte sizes and defaults
    """
    TXID: Final[int] = 32
    VOUT: Final[int] = 4
    SEQUENCE: Final[int] = 4
    AMOUNT: Final[int] = 8
    VERSION: Final[int] = 4
    LOCKTIME: Final[int] = 4
    DEFAULT_SEQUENCE: Final[int] = 0xffffffff
    DEFAULT_VERSION: Final[int] = 1


class SCRIPT:
    """
    Constants in use in standard scripts
    """
    MAX_PUSHBYTES: Final[int] = 0x4b
    SMALL_INT_OFFSET: Final[int] = 0x50  # OP_n = n + 0x50
    MIN_SIGS: Final[int] = 1
    MAX_KEYS: Final[int] = 16
    MIN_REDEEM_SCRIPT: Final[int] = 3


# --- OPCODES DICT FOR ASM --- #

OPCODES = {
    # push value
    0x00: "OP_0",  # == OP_FALSE
    0x4c: "OP_PUSHDATA1",
    0x4d: "OP_PUSHDATA2",
    0x4e: "OP_PUSHDATA4",
    0x4f: "OP_1NEGATE",
    0x50: "OP_RESERVED",
    0x51: "OP_1",  # == OP_TRUE
    0x52: "OP_2",
    0x53: "OP_3",
    0x54: "OP_4",
    0x55: "OP_5",
    0x56: "OP_6",
    0x57: "OP_7",
    0x58: "OP_8",
    0x59: "OP_9",
    0x5a: "OP_10",
    0x5b: "OP_11",
    0x5c: "OP_12",
    0x5d: "OP_13",
    0x5e: "OP_14",
    0x5f: "OP_15",
    0x60: "OP_16",

    # control
    0x61: "OP_NOP",
    0x63: "OP_IF",
    0x64: "OP_NOTIF",
    0x67: "OP_ELSE",
    0x68: "OP_ENDIF",
    0x69: "OP_VERIFY",
    0x6a: "OP_RETURN",

    # stack ops
    0x75: "OP_DROP",
    0x76: "OP_DUP",
    0x7c: "OP_SWAP",

    # bit logic
    0x87: "OP_EQUAL",
    0x88: "OP_EQUALVERIFY",

    # crypto
    0xa6: "OP_RIPEMD160",
    0xa8: "OP_SHA256",
    0xa9: "OP_HASH160",
    0xaa: "OP_HASH256",
    0xab: "OP_CODESEPARATOR",
    0xac: "OP_CHECKSIG",
    0xad: "OP_CHECKSIGVERIFY",
    0xae: "OP_CHECKMULTISIG",
    0xaf: "OP_CHECKMULTISIGVERIFY",

    # expansion
    0xb1: "OP_CHECKLOCKTIMEVERIFY",  # == OP_NOP2
    0xb2: "OP_CHECKSEQUENCEVERIFY",  # == OP_NOP3

    0xff: "OP_INVALIDOPCODE",
}
