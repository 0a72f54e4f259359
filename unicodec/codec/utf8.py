"""
The UTF-8 grammar, shared by every codec that reads or writes UTF-8.

A sequence is a lead byte followed by as many continuation bytes
(``10xxxxxx``) as its high bits announce:

    0xxxxxxx                             7 bits, U+0000..U+007F
    110xxxxx 10xxxxxx                   11 bits, U+0080..U+07FF
    1110xxxx 10xxxxxx 10xxxxxx          16 bits, U+0800..U+FFFF
    11110xxx 10xxxxxx 10xxxxxx 10xxxxxx 21 bits, U+10000..U+10FFFF
"""
from .. import helpers
from ..errors import (
    MalformedLeadError, UnexpectedTerminatorError, BadContinuationError,
    SurrogateScalarError, CodepointTooLargeError, OverlongEncodingError
)

# lead byte upper bound -> (sequence width, payload mask, smallest legal value)
_LEAD_CLASSES = (
    (0xE0, 2, 0x1F, 0x80),
    (0xF0, 3, 0x0F, 0x800),
    (0xF8, 4, 0x07, 0x10000),
)


def read_utf8_scalar(reader):
    """
    Consumes one whole UTF-8 sequence from ``reader``
    and returns the scalar value it encodes.

    The sequence is only consumed if it is valid. The decoded value
    is checked for overlong form before the surrogate range, so a
    surrogate reached through an overlong form is reported as overlong.
    """
    start = reader.tell_position()
    lead = reader.peek()
    if lead < 0x80:
        reader.skip()
        return lead

    if lead < 0xC0:
        raise MalformedLeadError(start, lead)

    for bound, width, mask, minimum in _LEAD_CLASSES:
        if lead < bound:
            break
    else:
        raise MalformedLeadError(start, lead)

    value = lead & mask
    for offset in range(1, width):
        unit = reader.peek(offset)
        if unit == 0:
            raise UnexpectedTerminatorError(start + offset)
        if not 0x80 <= unit < 0xC0:
            raise BadContinuationError(start + offset, unit)
        value = (value << 6) | (unit & 0x3F)

    if value < minimum:
        raise OverlongEncodingError(start, value)
    if helpers.is_surrogate(value):
        raise SurrogateScalarError(start, value)
    if value > helpers.MAX_CODEPOINT:
        raise CodepointTooLargeError(start, value)

    reader.skip(width)
    return value


def utf8_width(scalar):
    """How many bytes the UTF-8 form of ``scalar`` takes."""
    if scalar < 0x80:
        return 1
    elif scalar < 0x800:
        return 2
    elif scalar < helpers.SUPPLEMENTARY_MIN:
        return 3
    else:
        return 4


def write_utf8(buffer, index, scalar):
    """
    Writes the UTF-8 form of ``scalar`` at ``buffer[index]``
    and returns the index right after it.
    """
    if scalar < 0x80:
        buffer[index] = scalar
        return index + 1

    if scalar < 0x800:
        buffer[index] = 0xC0 | (scalar >> 6)
        buffer[index + 1] = 0x80 | (scalar & 0x3F)
        return index + 2

    if scalar < helpers.SUPPLEMENTARY_MIN:
        buffer[index] = 0xE0 | (scalar >> 12)
        buffer[index + 1] = 0x80 | ((scalar >> 6) & 0x3F)
        buffer[index + 2] = 0x80 | (scalar & 0x3F)
        return index + 3

    buffer[index] = 0xF0 | (scalar >> 18)
    buffer[index + 1] = 0x80 | ((scalar >> 12) & 0x3F)
    buffer[index + 2] = 0x80 | ((scalar >> 6) & 0x3F)
    buffer[index + 3] = 0x80 | (scalar & 0x3F)
    return index + 4
