from . import utf8
from .basecodec import BaseCodec
from .. import helpers
from ..enums import Encoding, ErrorKind
from ..errors import SurrogateScalarError, CodepointTooLargeError


class Utf32To8Codec(BaseCodec):
    """
    Converts UTF-32 into UTF-8.

    Every unit already is a scalar value, so there is nothing to pair
    up; units in the surrogate range or past 0x10FFFF are rejected.
    """
    @staticmethod
    def source():
        return Encoding.UTF32

    @staticmethod
    def target():
        return Encoding.UTF8

    @staticmethod
    def status_codes():
        return {
            ErrorKind.SURROGATE_AS_SCALAR: 1,
            ErrorKind.CODEPOINT_TOO_LARGE: 2,
            ErrorKind.ALLOCATION_FAILURE: 3,
        }

    def read_scalar(self, reader):
        unit = reader.peek()
        if helpers.is_surrogate(unit):
            raise SurrogateScalarError(reader.tell_position(), unit)
        if unit > helpers.MAX_CODEPOINT:
            raise CodepointTooLargeError(reader.tell_position(), unit)

        reader.skip()
        return unit

    def unit_cost(self, scalar):
        return utf8.utf8_width(scalar)

    def write_scalar(self, buffer, index, scalar):
        return utf8.write_utf8(buffer, index, scalar)
