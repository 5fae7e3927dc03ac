"""
All methods for building and parsing standard scripts
"""
# script/__init__.py
from stdtx.script.parser import *
from stdtx.script.pushdata import *
from stdtx.script.redeem_script import *
from stdtx.script.script_type import *
from stdtx.script.scriptpubkey import *
