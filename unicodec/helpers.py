"""Various helpers shared by the codecs"""
import array

from .enums import Encoding

SURROGATE_MIN = 0xD800
LOW_SURROGATE_MIN = 0xDC00
SURROGATE_MAX = 0xDFFF
SUPPLEMENTARY_MIN = 0x10000
MAX_CODEPOINT = 0x10FFFF


def _typecode_for(size):
    for code in array.typecodes:
        if code.isupper() and array.array(code).itemsize == size:
            return code
    raise RuntimeError('No unsigned array type is {} bytes wide'.format(size))


# Unsigned array types whose items are exactly as wide as the code unit
UNIT_TYPECODES = {
    Encoding.UTF16: _typecode_for(2),
    Encoding.UTF32: _typecode_for(4),
}


# region Surrogates


def is_surrogate(unit):
    return SURROGATE_MIN <= unit <= SURROGATE_MAX


def is_high_surrogate(unit):
    return SURROGATE_MIN <= unit < LOW_SURROGATE_MIN


def is_low_surrogate(unit):
    return LOW_SURROGATE_MIN <= unit <= SURROGATE_MAX


def combine_surrogates(high, low):
    """
    Joins a high and a low surrogate into the scalar value they encode.
    Both units are assumed to be in their respective ranges.
    """
    return (((high - SURROGATE_MIN) << 10)
            | (low - LOW_SURROGATE_MIN)) + SUPPLEMENTARY_MIN


def split_surrogates(scalar):
    """
    Splits a supplementary-plane scalar (0x10000 to 0x10FFFF)
    into its ``(high, low)`` surrogate pair.
    """
    scalar -= SUPPLEMENTARY_MIN
    return SURROGATE_MIN + (scalar >> 10), LOW_SURROGATE_MIN + (scalar & 0x3FF)


# endregion


def allocate(encoding, length):
    """
    Returns a new zero-filled buffer of ``length`` code units.

    UTF-8 gets a ``bytearray``; the wider forms get an ``array.array``
    whose items are exactly as wide as their code units.
    May raise `MemoryError`.
    """
    if encoding is Encoding.UTF8:
        return bytearray(length)

    return array.array(UNIT_TYPECODES[encoding], [0]) * length
