"""
Tests for the CompactSize lengths written in front of scripts and input/output counts
"""
from io import BytesIO

import pytest

from stdtx.core import ReadError, WriteError, DATA
from stdtx.data import read_compact_size, write_compact_size
from stdtx.script import MultiSigRedeemScript, ScriptSigMode
from stdtx.tx import MofNTxIn, TxInput
from tests.utility import GAVIN_REDEEM_SCRIPT, getrand_txid

# Stand-in DER signature of fixed size: 71 bytes, 72 with the sighash byte
FIXED_SIG = b'\x30' + b'\x44' * 70


@pytest.mark.parametrize("num, encoded", [
    (0, "00"),  # empty scriptsig
    (0x17, "17"),  # P2SH scriptpubkey
    (0x19, "19"),  # P2PKH scriptpubkey
    (0xc9, "c9"),  # 2-of-3 uncompressed redeem script
    (0xfc, "fc"),
    (0xfd, "fdfd00"),
    (0x015e, "fd5e01"),  # 2-of-3 scriptsig with two signatures
    (0xffff, "fdffff"),
    (0x10000, "fe00000100"),
    (0x100000000, "ff0000000001000000"),
    (DATA.MAX_COMPACTSIZE, "ff" + "ff" * 8),
])
def test_compactsize_vectors(num, encoded):
    assert write_compact_size(num).hex() == encoded, f"Wrong CompactSize encoding for {num}"
    assert read_compact_size(bytes.fromhex(encoded)) == num, f"Wrong CompactSize decoding of {encoded}"


def test_read_leaves_stream_after_value():
    stream = BytesIO(bytes.fromhex("fd5e01") + b'\xaa')
    assert read_compact_size(stream) == 0x015e
    assert stream.read() == b'\xaa'


def test_multisig_scriptsig_length_prefix():
    """
    A fully signed 2-of-3 scriptsig is longer than 0xfc bytes and takes the 3-byte length prefix
    """
    txin = MofNTxIn(getrand_txid(), 0, MultiSigRedeemScript.from_bytes(GAVIN_REDEEM_SCRIPT))
    for pubkey in txin.pubkeys[:2]:
        txin.add_signature(pubkey, FIXED_SIG)
    scriptsig = txin.build_scriptsig(ScriptSigMode.BROADCAST)
    assert len(scriptsig) == 350

    serialized = txin.to_bytes()
    assert serialized[36:39] == bytes.fromhex("fd5e01"), "Scriptsig length must follow txid and vout"
    assert TxInput.from_bytes(serialized).scriptsig == scriptsig


@pytest.mark.parametrize("num", [-1, DATA.MAX_COMPACTSIZE + 1])
def test_write_out_of_range(num):
    with pytest.raises(WriteError):
        write_compact_size(num)


@pytest.mark.parametrize("encoded", ["", "fd5e", "fe000001", "ff00000000010000"])
def test_read_truncated(encoded):
    with pytest.raises(ReadError):
        read_compact_size(bytes.fromhex(encoded))
