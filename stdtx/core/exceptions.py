"""
The custom exceptions used throughout stdtx
"""
__all__ = ["StdTxError", "StreamError", "ReadError", "WriteError", "AddressError", "ChecksumError",
           "InvalidAddressVersion", "InvalidHashLength", "TxInputError", "KeyAlreadySet", "NoKeySet", "KeyMismatch",
           "DuplicateKey", "UnknownKey", "SignatureNotSet", "InvalidSigHash", "RedeemScriptError", "InsufficientKeys",
           "TooManyKeys", "InvalidKeyLength", "KeyTooLong", "InvalidThreshold", "InvalidSignatureCount",
           "ThresholdExceedsKeyCount", "InvalidTermination", "MalformedPush", "UnexpectedEnd", "ScriptSigError",
           "PushOverrun", "OpCodeError"]


class StdTxError(Exception):
    """
    Parent class for every stdtx error
    """
    pass


# --- STREAMS --- #

class StreamError(StdTxError):
    """
    Catchall for stream errors
    """
    pass


class ReadError(StreamError):
    """
    For when trying to read data of length n from the stream and receiving data of length < n
    """
    pass


class WriteError(StreamError):
    """
    For when writing data that would be otherwise out of bounds
    """
    pass


# --- ADDRESSES --- #

class AddressError(StdTxError):
    """
    For use when decoding addresses into locking scripts
    """
    pass


class ChecksumError(AddressError):
    """
    The base58check checksum of an address does not verify
    """
    pass


class InvalidAddressVersion(AddressError):
    """
    The address version byte matches neither of the expected versions
    """
    pass


class InvalidHashLength(AddressError):
    """
    The decoded address payload is not a 20-byte hash
    """
    pass


# --- INPUTS --- #

class TxInputError(StdTxError):
    """
    For use in StandardTxIn and its children
    """
    pass


class KeyAlreadySet(TxInputError):
    pass


class NoKeySet(TxInputError):
    pass


class KeyMismatch(TxInputError):
    pass


class DuplicateKey(TxInputError):
    pass


class UnknownKey(TxInputError):
    pass


class SignatureNotSet(TxInputError):
    """
    Raised when a broadcast scriptsig is requested before a signature was added
    """
    pass


class InvalidSigHash(TxInputError):
    """
    The sighash flags do not fit the single byte appended to a signature
    """
    pass


# --- REDEEM SCRIPTS --- #

class RedeemScriptError(StdTxError):
    """
    For use in MultiSigRedeemScript building and parsing
    """
    pass


class InsufficientKeys(RedeemScriptError):
    pass


class TooManyKeys(RedeemScriptError):
    pass


class InvalidKeyLength(RedeemScriptError):
    pass


class KeyTooLong(InvalidKeyLength):
    pass


class InvalidThreshold(RedeemScriptError):
    pass


class InvalidSignatureCount(RedeemScriptError):
    pass


class ThresholdExceedsKeyCount(RedeemScriptError):
    pass


class InvalidTermination(RedeemScriptError):
    pass


class MalformedPush(RedeemScriptError):
    """
    A push length byte is out of range or points past the end of the script
    """

    def __init__(self, offset: int, message: str | None = None):
        self.offset = offset
        super().__init__(message or f"Invalid OP at byte {offset}")


class UnexpectedEnd(RedeemScriptError):
    pass


# --- SCRIPTSIGS --- #

class ScriptSigError(StdTxError):
    """
    For use when decomposing existing scriptsigs
    """
    pass


class PushOverrun(ScriptSigError):
    """
    A scriptsig declares a push longer than the bytes that remain
    """

    def __init__(self, input_index: int, offset: int):
        self.input_index = input_index
        self.offset = offset
        super().__init__(f"Tried to push object that exceeds scriptsig size in input {input_index} at byte {offset}")


class OpCodeError(ScriptSigError):
    """
    For use when rendering scripts as ASM
    """
    pass
