"""
Fixtures used in the tests
"""
import pytest

from stdtx.script import MultiSigRedeemScript
from tests.utility import GAVIN_PUBKEYS, getrand_pubkey


@pytest.fixture()
def gavin_redeem_script():
    return MultiSigRedeemScript(2, GAVIN_PUBKEYS)


@pytest.fixture()
def pubkeys():
    return [getrand_pubkey() for _ in range(3)]
