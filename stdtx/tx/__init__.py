"""
All classes for transactions and the standard inputs and outputs used to build them
"""
# tx/__init__.py
from stdtx.tx.standard_input import *
from stdtx.tx.standard_output import *
from stdtx.tx.tx import *
from stdtx.tx.tx_builder import *
