"""
Locking scripts for the standard output types
"""
from stdtx.core import ADDRESS, SCRIPT, InvalidHashLength
from stdtx.script.script_type import ScriptType

__all__ = ["ScriptPubKey"]


class ScriptPubKey:
    """
    Builders and type detection for P2PKH and P2SH locking scripts
    """
    # -- Common OP-Codes
    OP_0 = b'\x00'
    OP_PUSHBYTES_20 = b'\x14'
    OP_DUP = b'\x76'
    OP_EQUAL = b'\x87'
    OP_EQUALVERIFY = b'\x88'
    OP_HASH160 = b'\xa9'
    OP_CHECKSIG = b'\xac'
    OP_CHECKMULTISIG = b'\xae'

    @staticmethod
    def _check_hash(hash160_bytes: bytes):
        if len(hash160_bytes) != ADDRESS.HASH_LEN:
            raise InvalidHashLength(f"Expected {ADDRESS.HASH_LEN}-byte hash, received {len(hash160_bytes)} bytes")

    @classmethod
    def p2pkh(cls, pubkeyhash: bytes) -> bytes:
        """
        P2PKH | OP_DUP + OP_HASH160 + OP_PUSHBYTES_20 + pubkeyhash + OP_EQUALVERIFY + OP_CHECKSIG
        """
        cls._check_hash(pubkeyhash)
        return cls.OP_DUP + cls.OP_HASH160 + cls.OP_PUSHBYTES_20 + pubkeyhash + cls.OP_EQUALVERIFY + cls.OP_CHECKSIG

    @classmethod
    def p2sh(cls, scripthash: bytes) -> bytes:
        """
        P2SH | OP_HASH160 + OP_PUSHBYTES_20 + scripthash + OP_EQUAL
        """
        cls._check_hash(scripthash)
        return cls.OP_HASH160 + cls.OP_PUSHBYTES_20 + scripthash + cls.OP_EQUAL

    @classmethod
    def detect_type(cls, script: bytes) -> ScriptType | None:
        """
        Attempts to classify a raw locking script. Returns None if it is not one of the standard types.
        """
        # P2PKH
        if (len(script) == 25 and
                script[0] == cls.OP_DUP[0] and
                script[1] == cls.OP_HASH160[0] and
                script[2] == cls.OP_PUSHBYTES_20[0] and
                script[-2] == cls.OP_EQUALVERIFY[0] and
                script[-1] == cls.OP_CHECKSIG[0]):
            return ScriptType.P2PKH

        # P2SH
        if (len(script) == 23 and
                script[0] == cls.OP_HASH160[0] and
                script[1] == cls.OP_PUSHBYTES_20[0] and
                script[-1] == cls.OP_EQUAL[0]):
            return ScriptType.P2SH

        # P2MS | OP_m ... OP_n OP_CHECKMULTISIG
        if (len(script) >= SCRIPT.MIN_REDEEM_SCRIPT and
                script[-1] == cls.OP_CHECKMULTISIG[0] and
                0x51 <= script[0] <= 0x60 and
                0x51 <= script[-2] <= 0x60):
            return ScriptType.P2MS

        return None
