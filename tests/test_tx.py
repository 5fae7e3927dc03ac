"""
We test the various parts of a legacy transaction
"""
from secrets import token_bytes

import pytest

from stdtx.core import TX, ReadError
from stdtx.tx import TxInput, TxOutput, Transaction
from tests.utility import FUNDING_TX, GAVIN_SCRIPTHASH, getrand_tx


def test_txinput():
    """
    We test the serialization and class method of TxInput
    """
    # Generate random txInput
    txid = token_bytes(TX.TXID)
    vout = int.from_bytes(token_bytes(TX.VOUT), "big")
    scriptsig = token_bytes(32)  # Random bytes as substitute for actual script
    sequence = int.from_bytes(token_bytes(TX.SEQUENCE), "big")

    random_txinput = TxInput(txid, vout, scriptsig, sequence)
    recovered_txinput = TxInput.from_bytes(random_txinput.to_bytes())

    assert recovered_txinput == random_txinput, "Failed to reconstruct TxInput using to_bytes -> from_bytes method"
    assert random_txinput.outpoint == txid + vout.to_bytes(TX.VOUT, "little")


def test_txoutput():
    """
    We test the serialization and class method of TxOutput
    """
    # Generate random txOutput
    amount = int.from_bytes(token_bytes(8), "big")
    scriptpubkey = token_bytes(32)  # Random bytes as substitute for actual script

    random_txoutput = TxOutput(amount, scriptpubkey)
    recovered_txoutput = TxOutput.from_bytes(random_txoutput.to_bytes())

    assert recovered_txoutput == random_txoutput, "Failed to reconstruct TxOutput using to_bytes -> from_bytes method"


def test_tx():
    """
    We test the serialization of a random legacy transaction
    """
    random_tx = getrand_tx()
    recovered_tx = Transaction.from_bytes(random_tx.to_bytes())

    assert recovered_tx == random_tx, "Failed to reconstruct Transaction using to_bytes -> from_bytes method"
    assert recovered_tx.txid == random_tx.txid


def test_known_tx():
    """
    We parse a known transaction paying 0.01 BTC to a P2SH address
    """
    tx = Transaction.from_bytes(FUNDING_TX)

    assert tx.version == 1
    assert tx.locktime == 0
    assert len(tx.inputs) == 1
    assert tx.inputs[0].vout == 0
    assert tx.inputs[0].scriptsig == b''
    assert tx.inputs[0].sequence == TX.DEFAULT_SEQUENCE
    assert tx.outputs[0].amount == 1000000
    assert tx.outputs[0].scriptpubkey == b'\xa9\x14' + GAVIN_SCRIPTHASH + b'\x87'
    assert tx.to_bytes() == FUNDING_TX, "Known transaction does not re-serialize to the same bytes"

    tx_dict = tx.to_dict()
    assert tx_dict["bytes"] == len(FUNDING_TX)
    assert tx_dict["outputs"][0]["amount_int"] == 1000000


def test_truncated_tx():
    with pytest.raises(ReadError):
        Transaction.from_bytes(FUNDING_TX[:-2])
