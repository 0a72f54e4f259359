from enum import Enum


class Encoding(Enum):
    """
    The three Unicode encoding forms, valued by the width of their
    code units in bits.
    """
    UTF8 = 8
    UTF16 = 16
    UTF32 = 32

    @property
    def unit_mask(self):
        """The largest value a single code unit can hold."""
        return (1 << self.value) - 1


class ErrorKind(Enum):
    MALFORMED_LEAD = 'malformed-lead'
    UNEXPECTED_TERMINATOR = 'unexpected-terminator'
    BAD_CONTINUATION = 'bad-continuation'
    MISMATCHED_SURROGATE = 'mismatched-surrogate'
    SURROGATE_AS_SCALAR = 'surrogate-as-scalar'
    CODEPOINT_TOO_LARGE = 'codepoint-too-large'
    OVERLONG_ENCODING = 'overlong-encoding'
    ALLOCATION_FAILURE = 'allocation-failure'
