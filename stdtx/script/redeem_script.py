"""
The MultiSigRedeemScript class

A multisig redeem script has the form

    OP_m <OP_PUSHBYTES key_1> ... <OP_PUSHBYTES key_n> OP_n OP_CHECKMULTISIG

where 1 <= m <= n <= 16, OP_k = 0x50 + k and every key fits a single-byte push (1-75 bytes).
"""
import json
from io import BytesIO

from stdtx.core import (ADDRESS, SCRIPT, Serializable, get_stream, get_logger, InsufficientKeys, TooManyKeys,
                        InvalidKeyLength, KeyTooLong, InvalidThreshold, InvalidSignatureCount,
                        ThresholdExceedsKeyCount, InvalidTermination, MalformedPush, UnexpectedEnd)
from stdtx.data import pubkey_to_address, script_to_address

logger = get_logger(__name__)

__all__ = ["MultiSigRedeemScript"]


class MultiSigRedeemScript(Serializable):
    """
    An M-of-N threshold condition. The serialized form is built lazily and cached until the next mutation.
    """
    OP_CHECKMULTISIG = 0xae

    def __init__(self, min_sigs: int = SCRIPT.MIN_SIGS, pubkeys: list[bytes] | None = None,
                 address_versions: tuple[int, int] = ADDRESS.MAINNET):
        self.address_versions = address_versions
        self._min_sigs = SCRIPT.MIN_SIGS
        self._pubkeys: list[bytes] = []

        # Cache
        self._redeem_script = b''
        self._updated = False

        self.set_min_sigs(min_sigs)
        for pubkey in pubkeys or []:
            self.add_pubkey(pubkey)

    # --- HELPERS --- #

    @staticmethod
    def _is_small_int(byte: int) -> bool:
        """
        True if byte is one of OP_1 through OP_16
        """
        return SCRIPT.SMALL_INT_OFFSET + 1 <= byte <= SCRIPT.SMALL_INT_OFFSET + SCRIPT.MAX_KEYS

    @staticmethod
    def _small_int_byte(num: int) -> bytes:
        return (num + SCRIPT.SMALL_INT_OFFSET).to_bytes(1, "little")

    # --- MUTATION --- #

    @property
    def min_sigs(self) -> int:
        return self._min_sigs

    def set_min_sigs(self, min_sigs: int):
        if min_sigs < SCRIPT.MIN_SIGS:
            raise InvalidThreshold("At least one signature is required.")
        if min_sigs > SCRIPT.MAX_KEYS:
            raise InvalidThreshold(f"At most {SCRIPT.MAX_KEYS} signatures are allowed.")

        self._min_sigs = min_sigs
        self._updated = False

    @property
    def pubkeys(self) -> list[bytes]:
        return list(self._pubkeys)

    @property
    def pubkey_count(self) -> int:
        return len(self._pubkeys)

    def clear_pubkeys(self):
        self._pubkeys = []
        self._updated = False

    def add_pubkey(self, pubkey: bytes):
        if len(self._pubkeys) >= SCRIPT.MAX_KEYS:
            raise TooManyKeys(f"Public key maximum of {SCRIPT.MAX_KEYS} already reached.")
        if len(pubkey) > SCRIPT.MAX_PUSHBYTES:
            raise KeyTooLong(f"Public keys can be a maximum of {SCRIPT.MAX_PUSHBYTES} bytes.")
        if len(pubkey) == 0:
            raise InvalidKeyLength("Public key is empty.")

        self._pubkeys.append(bytes(pubkey))
        self._updated = False

    def set_address_types(self, address_versions: tuple[int, int]):
        self.address_versions = address_versions

    # --- PARSING --- #

    def parse(self, redeem_script: bytes):
        """
        Parse a multisig redeem script, replacing the current threshold and keys.
        The current state is left untouched if the script is rejected.
        """
        data = bytes(redeem_script)
        length = len(data)

        if length < SCRIPT.MIN_REDEEM_SCRIPT:
            raise UnexpectedEnd(f"Redeem script is too short: {length} bytes.")

        m_byte = data[0]
        if not self._is_small_int(m_byte):
            raise InvalidThreshold(f"Invalid signature minimum: {m_byte:#04x}.")
        min_sigs = m_byte - SCRIPT.SMALL_INT_OFFSET

        pubkeys = []
        pos = 1
        while pos < length:
            byte = data[pos]

            # Key count, followed by OP_CHECKMULTISIG
            if self._is_small_int(byte):
                key_count = byte - SCRIPT.SMALL_INT_OFFSET
                if key_count != len(pubkeys):
                    raise InvalidSignatureCount(
                        f"Key count {key_count} at byte {pos} does not match the {len(pubkeys)} keys read.")
                if len(pubkeys) < min_sigs:
                    raise ThresholdExceedsKeyCount(
                        f"The required signature minimum {min_sigs} exceeds the number of keys {len(pubkeys)}.")
                pos += 1
                if pos >= length:
                    raise UnexpectedEnd("Script terminates before OP_CHECKMULTISIG.")
                if data[pos] != self.OP_CHECKMULTISIG:
                    raise InvalidTermination(f"Invalid script termination: {data[pos]:#04x} at byte {pos}.")

                self._min_sigs = min_sigs
                self._pubkeys = pubkeys
                self._updated = False
                logger.debug(f"Parsed {min_sigs}-of-{len(pubkeys)} redeem script")
                return

            # Pubkey push
            if not 1 <= byte <= SCRIPT.MAX_PUSHBYTES or pos + 1 + byte > length:
                raise MalformedPush(pos)
            pubkeys.append(data[pos + 1:pos + 1 + byte])
            if len(pubkeys) > SCRIPT.MAX_KEYS:
                raise TooManyKeys(f"Public key maximum of {SCRIPT.MAX_KEYS} exceeded.")
            pos += 1 + byte

        raise UnexpectedEnd("Script terminates prematurely.")

    @classmethod
    def from_bytes(cls, byte_stream: bytes | BytesIO, address_versions: tuple[int, int] = ADDRESS.MAINNET):
        data = byte_stream if isinstance(byte_stream, bytes) else get_stream(byte_stream).read()
        redeem_script = cls(address_versions=address_versions)
        redeem_script.parse(data)
        return redeem_script

    # --- BUILDING --- #

    def to_bytes(self) -> bytes:
        """
        OP_m || (OP_PUSHBYTES || pubkey) for each pubkey || OP_n || OP_CHECKMULTISIG
        """
        if not self._updated:
            key_count = len(self._pubkeys)
            if self._min_sigs > key_count:
                raise InsufficientKeys(f"Insufficient public keys: {self._min_sigs} required, {key_count} given.")

            parts = [self._small_int_byte(self._min_sigs)]
            for pubkey in self._pubkeys:
                parts.append(len(pubkey).to_bytes(1, "little") + pubkey)
            parts.append(self._small_int_byte(key_count))
            parts.append(self.OP_CHECKMULTISIG.to_bytes(1, "little"))

            self._redeem_script = b''.join(parts)
            self._updated = True
            logger.debug(f"Built {self._min_sigs}-of-{key_count} redeem script")

        return self._redeem_script

    @property
    def redeem_script(self) -> bytes:
        return self.to_bytes()

    @property
    def address(self) -> str:
        """
        The base58check P2SH address of the redeem script
        """
        return script_to_address(self.to_bytes(), self.address_versions[1])

    # --- DISPLAY --- #

    def to_dict(self, show_pubkeys: bool = False) -> dict:
        redeem_dict = {
            "m": self._min_sigs,
            "n": len(self._pubkeys),
            "address": self.address,
            "redeemScript": self.to_bytes().hex()
        }
        if show_pubkeys:
            redeem_dict.update({
                "pubKeys": [
                    {
                        "address": pubkey_to_address(pubkey, self.address_versions[0]),
                        "pubKey": pubkey.hex()
                    } for pubkey in self._pubkeys
                ]
            })
        return redeem_dict

    def to_json(self, show_pubkeys: bool = False) -> str:
        return json.dumps(self.to_dict(show_pubkeys), indent=4)

    def __eq__(self, other) -> bool:
        """
        Same threshold and same keys in the same order. Valid for scripts that cannot be built yet.
        """
        if not isinstance(other, MultiSigRedeemScript):
            return NotImplemented
        return self._min_sigs == other._min_sigs and self._pubkeys == other._pubkeys

    def __repr__(self) -> str:
        keys = ", ".join(pubkey.hex() for pubkey in self._pubkeys)
        return f"{self.__class__.__name__}(m={self._min_sigs}, n={len(self._pubkeys)}, pubkeys=[{keys}])"
