"""
The standard inputs: a common abstract contract and its three variants

    P2AddressTxIn   | spends a pay-to-address output with one key and one signature
    MofNTxIn        | spends with an M-of-N redeem script, one signature slot per key
    P2SHTxIn        | spends a pay-to-script-hash output with an opaque redeem script

Every variant accumulates keys and signatures and builds its scriptsig on request in one of the ScriptSigMode modes.
"""
from abc import ABC, abstractmethod

from stdtx.core import (TX, KeyAlreadySet, NoKeySet, KeyMismatch, DuplicateKey, UnknownKey, SignatureNotSet,
                        InvalidSigHash, InvalidKeyLength)
from stdtx.crypto import hash160
from stdtx.script import (MultiSigRedeemScript, ScriptPubKey, ScriptSigMode, ScriptType, SigHashType, pushdata,
                          to_asm)
from stdtx.tx.tx import TxInput

__all__ = ["StandardTxIn", "P2AddressTxIn", "MofNTxIn", "P2SHTxIn"]


class StandardTxIn(TxInput, ABC):
    """
    The capability set shared by every standard input
    """
    OP_0 = b'\x00'
    script_type: ScriptType

    def __init__(self, txid: bytes, vout: int, sequence: int = TX.DEFAULT_SEQUENCE):
        super().__init__(txid, vout, b'', sequence)

    @staticmethod
    def _tag(sig: bytes, sighash: SigHashType | int) -> bytes:
        """
        Append the sighash byte to the signature
        """
        flags = int(sighash)
        if not 0 <= flags <= 0xff:
            raise InvalidSigHash(f"Sighash flags {flags:#x} do not fit in one byte.")
        return bytes(sig) + flags.to_bytes(1, "little")

    @abstractmethod
    def clear_keys(self):
        raise NotImplementedError(f"{self.__class__.__name__} must implement clear_keys()")

    @abstractmethod
    def add_key(self, pubkey: bytes):
        raise NotImplementedError(f"{self.__class__.__name__} must implement add_key()")

    @abstractmethod
    def clear_signatures(self):
        raise NotImplementedError(f"{self.__class__.__name__} must implement clear_signatures()")

    @abstractmethod
    def add_signature(self, pubkey: bytes, sig: bytes, sighash: SigHashType | int = SigHashType.ALL):
        raise NotImplementedError(f"{self.__class__.__name__} must implement add_signature()")

    @abstractmethod
    def build_scriptsig(self, mode: ScriptSigMode) -> bytes:
        """
        Build the scriptsig for the given mode, store it in self.scriptsig and return it
        """
        raise NotImplementedError(f"{self.__class__.__name__} must implement build_scriptsig()")

    def to_dict(self, formatted: bool = True) -> dict:
        input_dict = super().to_dict(formatted)
        input_dict.update({
            "script_type": self.script_type.value,
            "asm": " ".join(to_asm(self.scriptsig))
        })
        return input_dict


class P2AddressTxIn(StandardTxIn):
    """
    P2PKH input | OP_PUSHBYTES + SIGNATURE + OP_PUSHBYTES + PUBKEY
    """
    script_type = ScriptType.P2PKH

    def __init__(self, txid: bytes, vout: int, pubkey: bytes = b'', sequence: int = TX.DEFAULT_SEQUENCE):
        super().__init__(txid, vout, sequence)
        self._pubkey = bytes(pubkey)
        self._sig = b''

    @classmethod
    def from_push_objects(cls, txid: bytes, vout: int, objects: list[bytes], sequence: int = TX.DEFAULT_SEQUENCE):
        """
        Rebuild an input from the two objects pushed by its scriptsig: signature (with sighash byte) then pubkey
        """
        sig, pubkey = objects
        txin = cls(txid, vout, pubkey, sequence)
        txin._sig = bytes(sig)
        return txin

    @property
    def pubkey(self) -> bytes:
        return self._pubkey

    @property
    def sig(self) -> bytes:
        return self._sig

    def clear_keys(self):
        self._pubkey = b''

    def add_key(self, pubkey: bytes):
        if self._pubkey:
            raise KeyAlreadySet("PubKey already added.")
        if not pubkey:
            raise InvalidKeyLength("Public key is empty.")
        self._pubkey = bytes(pubkey)

    def clear_signatures(self):
        self._sig = b''

    def add_signature(self, pubkey: bytes, sig: bytes, sighash: SigHashType | int = SigHashType.ALL):
        if not self._pubkey:
            raise NoKeySet("No PubKey added yet.")
        if pubkey != self._pubkey:
            raise KeyMismatch("PubKey not part of input.")
        self._sig = self._tag(sig, sighash)

    def build_scriptsig(self, mode: ScriptSigMode) -> bytes:
        if not self._pubkey:
            raise NoKeySet("No PubKey added yet.")

        if mode == ScriptSigMode.SIGN:
            # The locking script stands in for the scriptsig during signature hashing
            scriptsig = ScriptPubKey.p2pkh(hash160(self._pubkey))
        else:
            if not self._sig and mode == ScriptSigMode.BROADCAST:
                raise SignatureNotSet("Cannot build a broadcast scriptsig without a signature.")
            scriptsig = pushdata(self._sig) + pushdata(self._pubkey)

        self.scriptsig = scriptsig
        return scriptsig


class MofNTxIn(StandardTxIn):
    """
    M-of-N input | OP_0 + (OP_PUSHBYTES + SIGNATURE) * k + OP_PUSHBYTES + REDEEM SCRIPT
    """
    script_type = ScriptType.P2MS

    def __init__(self, txid: bytes, vout: int, redeem_script: MultiSigRedeemScript | None = None,
                 sequence: int = TX.DEFAULT_SEQUENCE):
        super().__init__(txid, vout, sequence)
        self._min_sigs = 1
        self._sigs: dict[bytes, bytes] = {}  # pubkey -> sig, in key order
        if redeem_script is not None:
            self.set_redeem_script(redeem_script)

    @property
    def min_sigs(self) -> int:
        return self._min_sigs

    @property
    def pubkeys(self) -> list[bytes]:
        return list(self._sigs)

    @property
    def sigs(self) -> list[bytes]:
        return list(self._sigs.values())

    @property
    def redeem_script(self) -> bytes:
        """
        The redeem script rebuilt from the current threshold and keys
        """
        return MultiSigRedeemScript(self._min_sigs, self.pubkeys).to_bytes()

    def set_redeem_script(self, redeem_script: MultiSigRedeemScript):
        self._min_sigs = redeem_script.min_sigs
        self._sigs = {pubkey: b'' for pubkey in redeem_script.pubkeys}

    def clear_keys(self):
        self._sigs = {}

    def add_key(self, pubkey: bytes):
        pubkey = bytes(pubkey)
        if not pubkey:
            raise InvalidKeyLength("Public key is empty.")
        if pubkey in self._sigs:
            raise DuplicateKey("PubKey already added.")
        self._sigs[pubkey] = b''

    def clear_signatures(self):
        self._sigs = {pubkey: b'' for pubkey in self._sigs}

    def add_signature(self, pubkey: bytes, sig: bytes, sighash: SigHashType | int = SigHashType.ALL):
        pubkey = bytes(pubkey)
        if pubkey not in self._sigs:
            raise UnknownKey(f"PubKey {pubkey.hex()} not yet added.")
        self._sigs[pubkey] = self._tag(sig, sighash)

    def build_scriptsig(self, mode: ScriptSigMode) -> bytes:
        redeem_script = self.redeem_script

        if mode == ScriptSigMode.SIGN:
            scriptsig = redeem_script
        else:
            parts = [self.OP_0]
            for sig in self._sigs.values():
                if sig or mode == ScriptSigMode.EDIT:
                    parts.append(pushdata(sig))
            parts.append(pushdata(redeem_script))
            scriptsig = b''.join(parts)

        self.scriptsig = scriptsig
        return scriptsig


class P2SHTxIn(StandardTxIn):
    """
    P2SH input | OP_0 + (OP_PUSHBYTES + SIGNATURE) * k + OP_PUSHBYTES + REDEEM SCRIPT

    The redeem script is opaque. Signatures are pushed in the order they were added.
    """
    script_type = ScriptType.P2SH

    def __init__(self, txid: bytes, vout: int, redeem_script: bytes = b'', sequence: int = TX.DEFAULT_SEQUENCE):
        super().__init__(txid, vout, sequence)
        self.redeem_script = bytes(redeem_script)
        self._sigs: list[bytes] = []

    @property
    def sigs(self) -> list[bytes]:
        return list(self._sigs)

    def clear_keys(self):
        pass

    def add_key(self, pubkey: bytes):
        pass

    def clear_signatures(self):
        self._sigs = []

    def add_signature(self, pubkey: bytes, sig: bytes, sighash: SigHashType | int = SigHashType.ALL):
        self._sigs.append(self._tag(sig, sighash))

    def build_scriptsig(self, mode: ScriptSigMode) -> bytes:
        parts = [self.OP_0]
        parts.extend([pushdata(sig) for sig in self._sigs])
        parts.append(pushdata(self.redeem_script))

        self.scriptsig = b''.join(parts)
        return self.scriptsig
