"""
The StandardTxOut class: an output whose locking script is derived from an address
"""
from stdtx.core import ADDRESS, InvalidAddressVersion, InvalidHashLength, get_logger
from stdtx.data import decode_address
from stdtx.script import ScriptPubKey, to_asm
from stdtx.tx.tx import TxOutput

logger = get_logger(__name__)

__all__ = ["StandardTxOut"]


class StandardTxOut(TxOutput):

    def __init__(self, address: str | None = None, value: int = 0,
                 address_versions: tuple[int, int] = ADDRESS.MAINNET):
        super().__init__(value, b'')
        if address is not None:
            self.set(address, value, address_versions)

    @classmethod
    def from_txoutput(cls, txoutput: TxOutput) -> "StandardTxOut":
        std_output = cls()
        std_output.amount = txoutput.amount
        std_output.scriptpubkey = txoutput.scriptpubkey
        return std_output

    def set(self, address: str, value: int, address_versions: tuple[int, int] = ADDRESS.MAINNET):
        """
        Decode the address and set the P2PKH or P2SH locking script it calls for, along with the output value.
        """
        payload, version = decode_address(address)

        if len(payload) != ADDRESS.HASH_LEN:
            raise InvalidHashLength(f"Invalid hash length: {len(payload)} bytes.")

        if version == address_versions[0]:
            scriptpubkey = ScriptPubKey.p2pkh(payload)
        elif version == address_versions[1]:
            scriptpubkey = ScriptPubKey.p2sh(payload)
        else:
            raise InvalidAddressVersion(f"Invalid address version: {version:#04x}.")

        logger.debug(f"Output of {value} to {address} (version {version:#04x})")
        self.scriptpubkey = scriptpubkey
        self.amount = value

    def to_dict(self) -> dict:
        output_dict = super().to_dict()
        script_type = ScriptPubKey.detect_type(self.scriptpubkey)
        output_dict.update({
            "script_type": script_type.value if script_type else None,
            "asm": " ".join(to_asm(self.scriptpubkey))
        })
        return output_dict
