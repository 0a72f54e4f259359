import array

import pytest

from unicodec import utf32_to_utf8, ErrorKind
from unicodec.errors import SurrogateScalarError, CodepointTooLargeError


@pytest.mark.parametrize("scalar", [
    0x1, 0x7F, 0x80, 0x7FF, 0x800, 0xD7FF, 0xE000, 0xFFFF, 0x10000, 0x1FC0F, 0x10FFFF
])
def test_converts(scalar):
    assert utf32_to_utf8([scalar, 0]).unwrap() == chr(scalar).encode('utf-8') + b'\0'


def test_supplementary_scalar():
    assert utf32_to_utf8(array.array('I', [0x1FC0F, 0])).units == b'\xf0\x9f\xb0\x8f\0'


def test_empty():
    assert utf32_to_utf8([0]).units == b'\0'


@pytest.mark.parametrize(("source", "error", "status", "position"), [
    ([0xD800, 0], SurrogateScalarError, 1, 0),
    ([0x41, 0xDFFF, 0], SurrogateScalarError, 1, 1),
    ([0x110000, 0], CodepointTooLargeError, 2, 0),
    ([0x41, 0xFFFFFFFF], CodepointTooLargeError, 2, 1),
    ([0x41, 0x110000, 0xD800, 0], CodepointTooLargeError, 2, 1),
])
def test_rejects(source, error, status, position):
    result = utf32_to_utf8(source)
    assert result.units is None
    assert isinstance(result.error, error)
    assert result.status == status
    assert result.error.position == position


def test_statuses():
    assert utf32_to_utf8([0xDABC]).kind is ErrorKind.SURROGATE_AS_SCALAR
    assert utf32_to_utf8([0x7FFFFFFF]).kind is ErrorKind.CODEPOINT_TOO_LARGE


@pytest.mark.parametrize("source", [
    '\U0001F600'.encode('utf-32-le') + b'\0' * 4,
    array.array('H', [0x41, 0]),
])
def test_buffers_of_another_width_are_rejected(source):
    with pytest.raises(ValueError):
        utf32_to_utf8(source)
