"""
crypto folder used to house the hash functions
"""

# crypto/__init__.py
from stdtx.crypto.hash_functions import *
