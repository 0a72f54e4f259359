from . import utf8
from .basecodec import BaseCodec
from .. import helpers
from ..enums import Encoding, ErrorKind
from ..errors import (
    MalformedLeadError, UnexpectedTerminatorError, MismatchedSurrogateError
)


class Utf16To8Codec(BaseCodec):
    """
    Converts UTF-16 into UTF-8.

    Units outside the surrogate range take 1, 2 or 3 bytes. A high
    surrogate must be immediately followed by a low surrogate, and the
    pair is written as a single 4-byte sequence. A low surrogate on its
    own can never start a character.
    """
    @staticmethod
    def source():
        return Encoding.UTF16

    @staticmethod
    def target():
        return Encoding.UTF8

    @staticmethod
    def status_codes():
        return {
            ErrorKind.MALFORMED_LEAD: 1,
            ErrorKind.UNEXPECTED_TERMINATOR: 2,
            ErrorKind.MISMATCHED_SURROGATE: 3,
            ErrorKind.ALLOCATION_FAILURE: 4,
        }

    def read_scalar(self, reader):
        start = reader.tell_position()
        unit = reader.peek()
        if not helpers.is_surrogate(unit):
            reader.skip()
            return unit

        if helpers.is_low_surrogate(unit):
            raise MalformedLeadError(start, unit)

        low = reader.peek(1)
        if low == 0:
            raise UnexpectedTerminatorError(start + 1)
        if not helpers.is_low_surrogate(low):
            raise MismatchedSurrogateError(start + 1, low)

        reader.skip(2)
        return helpers.combine_surrogates(unit, low)

    def unit_cost(self, scalar):
        return utf8.utf8_width(scalar)

    def write_scalar(self, buffer, index, scalar):
        return utf8.write_utf8(buffer, index, scalar)
