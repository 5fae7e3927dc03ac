"""
Enum classes for standard scripts
"""
from enum import Enum, IntEnum

__all__ = ["ScriptType", "ScriptSigMode", "SigHashType"]


class ScriptType(Enum):
    P2PKH = "P2PKH"
    P2MS = "P2MS"
    P2SH = "P2SH"


class ScriptSigMode(Enum):
    """
    BROADCAST: final scriptsig, only populated signatures
    EDIT: partially signed scriptsig keeping a placeholder for every missing signature
    SIGN: the substitute script placed in the input while computing a signature hash
    """
    BROADCAST = "broadcast"
    EDIT = "edit"
    SIGN = "sign"


class SigHashType(IntEnum):
    ALL = 0x01
    NONE = 0x02
    SINGLE = 0x03
    ANYONECANPAY = 0x80

    def to_byte(self) -> bytes:
        return self.value.to_bytes(1, "little")
