"""
The classes for legacy transactions
"""
from stdtx.core import Serializable, SERIALIZED, get_stream, read_little_int, read_stream, TX
from stdtx.crypto import hash256
from stdtx.data import read_compact_size, write_compact_size

__all__ = ["TxInput", "TxOutput", "Transaction"]


class TxInput(Serializable):
    """
    =============================================================================
    |   name            |   data type   |   format              |   byte size   |
    =============================================================================
    |   txid            |   bytes       |   natural byte order  |   32          |
    |   vout            |   int         |   little-endian       |   4           |
    |   scriptsig_size  |               |   compactSize         |   var         |
    |   scriptsig       |   bytes       |   script bytes        |   var         |
    |   sequence        |   int         |   little-endian       |   4           |
    =============================================================================
    """

    def __init__(self, txid: bytes, vout: int | bytes, scriptsig: bytes = b'',
                 sequence: int | bytes = TX.DEFAULT_SEQUENCE):
        self.txid = txid
        self.vout = vout if isinstance(vout, int) else int.from_bytes(vout, "little")
        self.scriptsig = scriptsig
        self.sequence = sequence if isinstance(sequence, int) else int.from_bytes(sequence, "little")

    @property
    def outpoint(self) -> bytes:
        return self.txid + self.vout.to_bytes(TX.VOUT, "little")

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        txid = read_stream(stream, TX.TXID, "txid")
        vout = read_little_int(stream, TX.VOUT, "vout")
        scriptsig_size = read_compact_size(stream)
        scriptsig = read_stream(stream, scriptsig_size, "scriptsig")
        sequence = read_little_int(stream, TX.SEQUENCE, "sequence")

        return TxInput(txid, vout, scriptsig, sequence)

    def to_bytes(self) -> bytes:
        """
        txid || vout || scriptsig_size || scriptsig || sequence
        """
        parts = [
            self.txid,
            self.vout.to_bytes(TX.VOUT, "little"),
            write_compact_size(len(self.scriptsig)),
            self.scriptsig,
            self.sequence.to_bytes(TX.SEQUENCE, "little")
        ]
        return b''.join(parts)

    def to_dict(self, formatted: bool = True) -> dict:
        ss_len = len(self.scriptsig)
        return {
            "txid": self.txid[::-1].hex() if formatted else self.txid.hex(),
            "vout": self.vout.to_bytes(TX.VOUT, "little").hex() if formatted else self.vout,
            "scriptsig_size": write_compact_size(ss_len).hex() if formatted else ss_len,
            "scriptsig": self.scriptsig.hex(),
            "sequence": self.sequence.to_bytes(TX.SEQUENCE, "little").hex() if formatted else self.sequence
        }


class TxOutput(Serializable):
    """
    -----------------------------------------------------------------
    |   Field               |   Byte Size   |   Format              |
    -----------------------------------------------------------------
    |   Amount              |   8           |   little-endian       |
    |   scriptpubkey_size   |   var         |   CompactSize         |
    |   scriptpubkey        |   var         |   Script              |
    -----------------------------------------------------------------
    """

    def __init__(self, amount: int | bytes, scriptpubkey: bytes):
        self.amount: int = amount if isinstance(amount, int) else int.from_bytes(amount, "little")
        self.scriptpubkey = scriptpubkey

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        amount = read_little_int(stream, TX.AMOUNT, "amount")
        scriptpubkey_size = read_compact_size(stream)
        scriptpubkey = read_stream(stream, scriptpubkey_size, "scriptpubkey")

        return TxOutput(amount, scriptpubkey)

    def to_bytes(self) -> bytes:
        """
        amount || scriptpubkey_size || scriptpubkey
        """
        return self.amount.to_bytes(TX.AMOUNT, "little") + write_compact_size(len(self.scriptpubkey)) + \
            self.scriptpubkey

    def to_dict(self) -> dict:
        return {
            "amount": self.amount.to_bytes(TX.AMOUNT, "little").hex(),
            "amount_int": self.amount,
            "scriptpubkey_size": write_compact_size(len(self.scriptpubkey)).hex(),
            "scriptpubkey": self.scriptpubkey.hex()
        }


class Transaction(Serializable):
    """
    -------------------------------------------------------------
    |   Field           |   Byte Size   |   Format              |
    -------------------------------------------------------------
    |   Version         |   4           |   little-endian       |
    |   input_count     |   var         |   CompactSize         |
    |   inputs          |   var         |   TxInput             |
    |   output_count    |   var         |   CompactSize         |
    |   outputs         |   var         |   TxOutput            |
    |   locktime        |   4           |   little-endian       |
    -------------------------------------------------------------
    """
    __slots__ = ("version", "inputs", "outputs", "locktime")

    def __init__(self, inputs: list[TxInput] = None, outputs: list[TxOutput] = None, locktime: int = 0,
                 version: int = TX.DEFAULT_VERSION):
        self.inputs = inputs or []
        self.outputs = outputs or []
        self.version = version
        self.locktime = locktime

    @property
    def txid(self) -> bytes:
        return hash256(self.to_bytes())

    @classmethod
    def from_bytes(cls, byte_stream: SERIALIZED):
        stream = get_stream(byte_stream)

        version = read_little_int(stream, TX.VERSION, "version")

        num_inputs = read_compact_size(stream)
        inputs = [TxInput.from_bytes(stream) for _ in range(num_inputs)]

        num_outputs = read_compact_size(stream)
        outputs = [TxOutput.from_bytes(stream) for _ in range(num_outputs)]

        locktime = read_little_int(stream, TX.LOCKTIME, "locktime")

        return cls(inputs, outputs, locktime, version)

    def to_bytes(self) -> bytes:
        parts = [
            self.version.to_bytes(TX.VERSION, "little"),
            write_compact_size(len(self.inputs)),
            *[i.to_bytes() for i in self.inputs],
            write_compact_size(len(self.outputs)),
            *[o.to_bytes() for o in self.outputs],
            self.locktime.to_bytes(TX.LOCKTIME, "little")
        ]
        return b''.join(parts)

    def to_dict(self) -> dict:
        return {
            "txid": self.txid[::-1].hex(),  # Reverse byte order for display
            "bytes": self.length,
            "version": self.version.to_bytes(TX.VERSION, "little").hex(),
            "input_num": write_compact_size(len(self.inputs)).hex(),
            "inputs": [i.to_dict() for i in self.inputs],
            "output_num": write_compact_size(len(self.outputs)).hex(),
            "outputs": [o.to_dict() for o in self.outputs],
            "locktime": self.locktime.to_bytes(TX.LOCKTIME, "little").hex()
        }
