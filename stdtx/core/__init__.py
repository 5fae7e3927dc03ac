"""
Contains the core elements that are used within stdtx

Core:
    -Provides the standard protocol for serializable elements
    -Provides the reference formats and constants
    -Provides custom exceptions for the script and transaction elements
"""
# core/__init__.py
from stdtx.core.byte_stream import *
from stdtx.core.exceptions import *
from stdtx.core.formats import *
from stdtx.core.logging import *
from stdtx.core.serializable import *
