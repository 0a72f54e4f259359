"""Errors raised while transcoding between Unicode encoding forms"""
from ..enums import ErrorKind


class TranscodeError(Exception):
    """
    Base class for every error that makes a conversion fail.

    A failed conversion never produces output; the error is the only
    thing the caller gets back.
    """
    kind = None

    def __init__(self, message, position=None, unit=None):
        super().__init__(message)
        self.position = position
        self.unit = unit


class MalformedInputError(TranscodeError, ValueError):
    """
    Occurs when the input is not well-formed in its source encoding.
    ``position`` is the index of the offending code unit and ``unit``
    its value (or the decoded value, for checks on whole sequences).
    """
    def __init__(self, position, unit, reason):
        super().__init__(
            '{} at position {} (unit 0x{:X})'.format(reason, position, unit),
            position, unit
        )


class MalformedLeadError(MalformedInputError):
    """
    Occurs when a unit cannot begin any valid sequence, such as a UTF-8
    continuation byte or a UTF-16 low surrogate in lead position.
    """
    kind = ErrorKind.MALFORMED_LEAD

    def __init__(self, position, unit):
        super().__init__(position, unit, 'Unit cannot start a sequence')


class UnexpectedTerminatorError(MalformedInputError):
    """
    Occurs when the input ends where a continuation byte
    or the second half of a surrogate pair was required.
    """
    kind = ErrorKind.UNEXPECTED_TERMINATOR

    def __init__(self, position):
        super().__init__(position, 0, 'Input ended inside a sequence')


class BadContinuationError(MalformedInputError):
    """Occurs when a UTF-8 continuation byte is outside 0x80-0xBF."""
    kind = ErrorKind.BAD_CONTINUATION

    def __init__(self, position, unit):
        super().__init__(position, unit, 'Expected a continuation byte')


class MismatchedSurrogateError(MalformedInputError):
    """
    Occurs when a high surrogate is followed by
    something other than a low surrogate.
    """
    kind = ErrorKind.MISMATCHED_SURROGATE

    def __init__(self, position, unit):
        super().__init__(position, unit, 'Expected a low surrogate')


class SurrogateScalarError(MalformedInputError):
    """
    Occurs when a value in the surrogate range (0xD800-0xDFFF)
    would be used as a scalar value outside of UTF-16.
    """
    kind = ErrorKind.SURROGATE_AS_SCALAR

    def __init__(self, position, value):
        super().__init__(position, value, 'Surrogate is not a scalar value')


class CodepointTooLargeError(MalformedInputError):
    """Occurs when a value is 0x110000 or greater."""
    kind = ErrorKind.CODEPOINT_TOO_LARGE

    def __init__(self, position, value):
        super().__init__(position, value, 'Codepoint beyond 0x10FFFF')


class OverlongEncodingError(MalformedInputError):
    """
    Occurs when a value was encoded with more units than needed.
    This check wins over `SurrogateScalarError` if both would apply.
    """
    kind = ErrorKind.OVERLONG_ENCODING

    def __init__(self, position, value):
        super().__init__(position, value, 'Overlong encoding')


class AllocationError(TranscodeError, MemoryError):
    """Occurs when the output buffer could not be allocated."""
    kind = ErrorKind.ALLOCATION_FAILURE

    def __init__(self, length):
        super().__init__(
            'Could not allocate an output buffer of {} units'.format(length))

        self.length = length


class MeasurementMismatchError(RuntimeError):
    """
    Occurs when the second pass of a conversion writes a different
    number of units than the first pass measured. This is a bug in
    the codec and never a property of the input.
    """
    def __init__(self, measured, written):
        super().__init__('Measured {} output units but wrote {}'.format(
            measured, 'more' if written is None else written))

        self.measured = measured
        self.written = written
