from . import utf8
from .basecodec import BaseCodec
from ..enums import Encoding, ErrorKind


class Utf8To32Codec(BaseCodec):
    """
    Converts UTF-8 into UTF-32, one unit per scalar value.

    Accepts and rejects exactly the same input as `Utf8To16Codec`,
    and reports errors with the same status codes.
    """
    @staticmethod
    def source():
        return Encoding.UTF8

    @staticmethod
    def target():
        return Encoding.UTF32

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
        return 1

    def write_scalar(self, buffer, index, scalar):
        buffer[index] = scalar
        return index + 1
