"""
Tests for data pushes, scriptsig decomposition, ASM and locking script detection
"""
from secrets import token_bytes

import pytest

from stdtx.core import InvalidHashLength, OpCodeError, PushOverrun
from stdtx.script import ScriptPubKey, ScriptType, decompose_scriptsig, pushdata, to_asm
from tests.utility import GAVIN_REDEEM_SCRIPT, GENESIS_PUBKEYHASH


@pytest.mark.parametrize("length, prefix", [
    (0, b'\x00'),
    (1, b'\x01'),
    (75, b'\x4b'),
    (76, b'\x4c\x4c'),
    (255, b'\x4c\xff'),
    (256, b'\x4d\x00\x01'),
    (0x10000, b'\x4e\x00\x00\x01\x00'),
])
def test_pushdata_boundaries(length, prefix):
    item = token_bytes(length)
    assert pushdata(item) == prefix + item, f"Wrong push prefix for a {length}-byte item"


def test_decompose_scriptsig():
    items = [b'', token_bytes(72), token_bytes(33), token_bytes(200), token_bytes(300)]
    script = b''.join(pushdata(item) for item in items)
    assert decompose_scriptsig(script) == items

    assert decompose_scriptsig(b'') == []
    assert decompose_scriptsig(b'\x01\xaa\x76') is None, "Non-push opcode must stop decomposition"


@pytest.mark.parametrize("script, offset", [
    (b'\x05\xaa', 0),
    (b'\x01\xaa\x4c', 2),
    (b'\x01\xaa\x4c\x02\xbb', 2),
    (b'\x4d\x00', 0),
])
def test_decompose_overrun(script, offset):
    with pytest.raises(PushOverrun) as exc_info:
        decompose_scriptsig(script, input_index=4)
    assert exc_info.value.input_index == 4
    assert exc_info.value.offset == offset
    assert "input 4" in str(exc_info.value)


def test_to_asm():
    p2pkh = ScriptPubKey.p2pkh(GENESIS_PUBKEYHASH)
    assert to_asm(p2pkh) == ["OP_DUP", "OP_HASH160", "OP_PUSHBYTES_20", GENESIS_PUBKEYHASH.hex(), "OP_EQUALVERIFY",
                             "OP_CHECKSIG"]

    redeem_asm = to_asm(GAVIN_REDEEM_SCRIPT)
    assert redeem_asm[0] == "OP_2"
    assert redeem_asm[-2:] == ["OP_3", "OP_CHECKMULTISIG"]

    assert to_asm(b'\x4c\x02\xaa\xbb') == ["OP_PUSHDATA1", "2", "aabb"]
    assert to_asm(b'\xba') == ["OP_UNKNOWN_ba"]

    with pytest.raises(OpCodeError):
        to_asm(b'\x05\xaa')


def test_scriptpubkey_builders():
    scripthash = token_bytes(20)
    assert ScriptPubKey.p2sh(scripthash) == b'\xa9\x14' + scripthash + b'\x87'

    with pytest.raises(InvalidHashLength):
        ScriptPubKey.p2pkh(token_bytes(19))
    with pytest.raises(InvalidHashLength):
        ScriptPubKey.p2sh(token_bytes(21))


def test_detect_type():
    assert ScriptPubKey.detect_type(ScriptPubKey.p2pkh(token_bytes(20))) == ScriptType.P2PKH
    assert ScriptPubKey.detect_type(ScriptPubKey.p2sh(token_bytes(20))) == ScriptType.P2SH
    assert ScriptPubKey.detect_type(GAVIN_REDEEM_SCRIPT) == ScriptType.P2MS
    assert ScriptPubKey.detect_type(b'\x6a\x04abcd') is None
