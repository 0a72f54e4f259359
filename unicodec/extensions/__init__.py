"""
Several extensions Python is missing, such as a proper class to
walk a sequence of code units one at a time.
"""
from .unitreader import UnitReader, MAX_LOOKAHEAD
