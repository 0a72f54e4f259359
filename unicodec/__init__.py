from .codec import (
    BaseCodec, Utf16To8Codec, Utf8To16Codec, Utf32To8Codec, Utf8To32Codec,
    utf16_to_utf8, utf8_to_utf16, utf32_to_utf8, utf8_to_utf32
)
from .enums import Encoding, ErrorKind
from .result import Result
from . import version, errors, helpers, utils

__version__ = version.__version__

__all__ = [
    'utf16_to_utf8', 'utf8_to_utf16', 'utf32_to_utf8', 'utf8_to_utf32',
    'BaseCodec', 'Utf16To8Codec', 'Utf8To16Codec', 'Utf32To8Codec',
    'Utf8To32Codec', 'Encoding', 'ErrorKind', 'Result',
    'errors', 'helpers', 'utils'
]
