"""
Methods for encoding and decoding base58check addresses
"""
import base58

from stdtx.core import ChecksumError, InvalidHashLength
from stdtx.crypto import hash160

__all__ = ["decode_address", "encode_address", "pubkey_to_address", "script_to_address"]


def decode_address(address: str) -> tuple[bytes, int]:
    """
    Given a base58check address we return the payload and the version byte.
    Raises ChecksumError if the checksum fails or the address contains non-base58 characters.
    """
    try:
        decoded = base58.b58decode_check(address)
    except ValueError as e:
        raise ChecksumError(f"Invalid address checksum: {address}") from e

    if len(decoded) < 1:
        raise InvalidHashLength(f"Address {address} decodes to an empty payload")

    return decoded[1:], decoded[0]


def encode_address(payload: bytes, version: int) -> str:
    """
    Given a payload and a version byte we return the base58check encoding of version || payload
    """
    return base58.b58encode_check(version.to_bytes(1, "big") + payload).decode("ascii")


def pubkey_to_address(pubkey: bytes, version: int) -> str:
    return encode_address(hash160(pubkey), version)


def script_to_address(script: bytes, version: int) -> str:
    return encode_address(hash160(script), version)
