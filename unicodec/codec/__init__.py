"""
This module holds the codecs converting between encoding forms.

UTF-16 and UTF-32 are never converted into each other directly;
go through UTF-8 instead.
"""
from .basecodec import BaseCodec
from .utf16to8codec import Utf16To8Codec
from .utf8to16codec import Utf8To16Codec
from .utf32to8codec import Utf32To8Codec
from .utf8to32codec import Utf8To32Codec

_utf16_to_utf8 = Utf16To8Codec()
_utf8_to_utf16 = Utf8To16Codec()
_utf32_to_utf8 = Utf32To8Codec()
_utf8_to_utf32 = Utf8To32Codec()


def utf16_to_utf8(source):
    """
    Converts a null-terminated sequence of UTF-16 units
    into UTF-8 ``bytes``, returning a `Result`.
    """
    return _utf16_to_utf8.convert(source)


def utf8_to_utf16(source):
    """
    Converts null-terminated UTF-8 bytes into an
    ``array`` of UTF-16 units, returning a `Result`.
    """
    return _utf8_to_utf16.convert(source)


def utf32_to_utf8(source):
    """
    Converts a null-terminated sequence of UTF-32 units
    into UTF-8 ``bytes``, returning a `Result`.
    """
    return _utf32_to_utf8.convert(source)


def utf8_to_utf32(source):
    """
    Converts null-terminated UTF-8 bytes into an
    ``array`` of UTF-32 units, returning a `Result`.
    """
    return _utf8_to_utf32.convert(source)
