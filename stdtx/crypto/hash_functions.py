"""
Hash functions
"""
import hashlib

from ripemd.ripemd160 import ripemd160 as _ripemd160

__all__ = ["sha256", "hash256", "ripemd160", "hash160"]


# HASHLIB
def sha256(encoded_data: bytes) -> bytes:
    return hashlib.sha256(encoded_data).digest()


def hash256(encoded_data: bytes) -> bytes:
    return sha256(sha256(encoded_data))


# RIPEMD
def ripemd160(encoded_data: bytes) -> bytes:
    """
    RIPEMD-160 from the ripemd package
    """
    return _ripemd160(encoded_data)


def hash160(encoded_data: bytes) -> bytes:
    return ripemd160(sha256(encoded_data))
