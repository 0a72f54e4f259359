"""
Utilities to move between Python strings and null-terminated
code unit sequences. These lean on Python's own codecs and are
meant for building input and inspecting output, not for validation.
"""
import array
import sys

from .enums import Encoding
from .helpers import UNIT_TYPECODES

_CODEC_NAMES = {
    Encoding.UTF8: 'utf-8',
    Encoding.UTF16: 'utf-16-le',
    Encoding.UTF32: 'utf-32-le',
}


def to_units(text, encoding):
    """
    Encodes ``text`` into a null-terminated sequence of ``encoding`` units.

    Lone surrogates in ``text`` are kept as they are, which makes it easy
    to build ill-formed input. The text itself may not contain a null.
    """
    if '\0' in text:
        raise ValueError('Null characters cannot be represented as data')

    data = text.encode(_CODEC_NAMES[encoding], 'surrogatepass')
    if encoding is Encoding.UTF8:
        return data + b'\0'

    units = array.array(UNIT_TYPECODES[encoding])
    units.frombytes(data)
    if sys.byteorder == 'big':
        units.byteswap()

    units.append(0)
    return units


def strip_terminator(units):
    """Returns the data units of ``units``, up to the first null."""
    for i, unit in enumerate(units):
        if unit == 0:
            return units[:i]
    return units[:]


def to_text(units, encoding):
    """
    Decodes a (null-terminated or not) sequence of ``encoding``
    units back into a string. Raises `UnicodeDecodeError` on bad input.
    """
    units = strip_terminator(units)
    if encoding is Encoding.UTF8:
        return bytes(units).decode(_CODEC_NAMES[encoding])

    units = array.array(UNIT_TYPECODES[encoding], units)
    if sys.byteorder == 'big':
        units.byteswap()

    return units.tobytes().decode(_CODEC_NAMES[encoding])
