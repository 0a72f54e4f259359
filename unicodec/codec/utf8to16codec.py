from . import utf8
from .basecodec import BaseCodec
from .. import helpers
from ..enums import Encoding, ErrorKind


class Utf8To16Codec(BaseCodec):
    """
    Converts UTF-8 into UTF-16.

    Scalars below 0x10000 take one unit and the rest a surrogate pair.
    Overlong forms, encoded surrogates and values past 0x10FFFF are
    rejected even when the bytes themselves are well shaped.
    """
    @staticmethod
    def source():
        return Encoding.UTF8

    @staticmethod
    def target():
        return Encoding.UTF16

    @staticmethod
    def status_codes():
        return {
            ErrorKind.MALFORMED_LEAD: 1,
            ErrorKind.UNEXPECTED_TERMINATOR: 2,
            ErrorKind.BAD_CONTINUATION: 3,
            ErrorKind.SURROGATE_AS_SCALAR: 4,
            ErrorKind.CODEPOINT_TOO_LARGE: 5,
            ErrorKind.OVERLONG_ENCODING: 6,
            ErrorKind.ALLOCATION_FAILURE: 7,
        }

    def read_scalar(self, reader):
        return utf8.read_utf8_scalar(reader)

    def unit_cost(self, scalar):
        return 1 if scalar < helpers.SUPPLEMENTARY_MIN else 2

    def write_scalar(self, buffer, index, scalar):
        if scalar < helpers.SUPPLEMENTARY_MIN:
            buffer[index] = scalar
            return index + 1

        buffer[index], buffer[index + 1] = helpers.split_surrogates(scalar)
        return index + 2
