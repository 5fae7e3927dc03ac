"""
The TransactionBuilder class

Holds the standard inputs and outputs of a transaction under construction. Loading an existing transaction
classifies each of its scriptsigs back into a standard input.
"""
from stdtx.core import TX, StdTxError, get_logger
from stdtx.script import ScriptSigMode, decompose_scriptsig
from stdtx.tx.standard_input import StandardTxIn, P2AddressTxIn
from stdtx.tx.standard_output import StandardTxOut
from stdtx.tx.tx import Transaction, TxInput, TxOutput

logger = get_logger(__name__)

__all__ = ["TransactionBuilder"]


class TransactionBuilder:

    def __init__(self, tx: Transaction | None = None):
        self.version = TX.DEFAULT_VERSION
        self.locktime = 0
        self.inputs: list[StandardTxIn] = []
        self.outputs: list[StandardTxOut] = []
        if tx is not None:
            self.set_tx(tx)

    def clear_inputs(self):
        self.inputs = []

    def clear_outputs(self):
        self.outputs = []

    def add_input(self, txin: StandardTxIn):
        self.inputs.append(txin)

    def add_output(self, txout: StandardTxOut):
        self.outputs.append(txout)

    @staticmethod
    def _classify_input(index: int, txin) -> StandardTxIn | None:
        """
        Return the standard input matching the pushes of the scriptsig, or None if no variant matches.
        Only the two-push P2PKH shape is recognized.
        """
        objects = decompose_scriptsig(txin.scriptsig, index)
        if objects is None:
            logger.debug(f"Input {index}: scriptsig is not push-only, left unclassified")
            return None

        if len(objects) == 2:
            std_input = P2AddressTxIn.from_push_objects(txin.txid, txin.vout, objects, txin.sequence)
            std_input.scriptsig = txin.scriptsig
            logger.debug(f"Input {index}: classified as {std_input.script_type.value}")
            return std_input

        logger.debug(f"Input {index}: {len(objects)} pushed objects, left unclassified")
        return None

    def set_tx(self, tx: Transaction):
        """
        Replace the builder contents with the inputs and outputs of tx.
        Raises PushOverrun (and keeps the current contents) if any scriptsig overruns its own length.

        A scriptsig holding a non-push opcode, such as OP_1 or a stored SIGN-mode locking script, is not read as a
        run of length prefixes. It yields no standard input instead of raising PushOverrun.
        """
        inputs = []
        for index, txin in enumerate(tx.inputs):
            std_input = self._classify_input(index, txin)
            if std_input is not None:
                inputs.append(std_input)

        outputs = [StandardTxOut.from_txoutput(txout) for txout in tx.outputs]

        self.version = tx.version
        self.locktime = tx.locktime
        self.inputs = inputs
        self.outputs = outputs

    def get_tx(self, mode: ScriptSigMode = ScriptSigMode.BROADCAST) -> Transaction:
        """
        Build every input's scriptsig in the given mode and return the resulting transaction
        """
        previous = [txin.scriptsig for txin in self.inputs]
        try:
            scriptsigs = [txin.build_scriptsig(mode) for txin in self.inputs]
        except StdTxError:
            for txin, scriptsig in zip(self.inputs, previous):
                txin.scriptsig = scriptsig
            raise

        inputs = [TxInput(txin.txid, txin.vout, scriptsig, txin.sequence)
                  for txin, scriptsig in zip(self.inputs, scriptsigs)]
        outputs = [TxOutput(txout.amount, txout.scriptpubkey) for txout in self.outputs]
        return Transaction(inputs, outputs, self.locktime, self.version)
