"""
All methods for manipulating and representing data in stdtx
"""

# data/__init__.py
from stdtx.data.address import *
from stdtx.data.compact_size import *
