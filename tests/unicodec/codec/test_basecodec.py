import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from unicodec import Utf16To8Codec, Utf8To16Codec, ErrorKind, Encoding, utils
from unicodec.errors import (
    AllocationError, MalformedLeadError, MeasurementMismatchError
)

TEXT = 'Grüße, ぐてんモルゲン \U0002F80F!'


def test_empty_input_everywhere(codec):
    result = codec.convert([0])
    assert result.ok
    assert list(result.units) == [0]


def test_statuses_cover_every_kind(codec):
    codes = codec.status_codes()
    assert ErrorKind.ALLOCATION_FAILURE in codes
    assert 0 not in codes.values()
    assert len(set(codes.values())) == len(codes)


def test_measure_excludes_terminator():
    assert Utf16To8Codec().measure([0xE9, 0xD83D, 0xDE00, 0]) == 6
    assert Utf8To16Codec().measure(b'\xf0\x9f\x98\x80\0') == 2


def test_allocates_exactly_once(allocations):
    assert Utf16To8Codec().convert([0x20AC, 0x41, 0]).ok
    assert allocations == [(Encoding.UTF8, 5)]


def test_no_allocation_on_invalid_input(allocations):
    assert not Utf16To8Codec().convert([0x41, 0xDC00, 0])
    assert allocations == []


def test_allocation_failure(codec, out_of_memory):
    result = codec.convert([0x41, 0])
    assert result.kind is ErrorKind.ALLOCATION_FAILURE
    assert isinstance(result.error, AllocationError)
    assert isinstance(result.error, MemoryError)
    assert result.status == codec.status_codes()[ErrorKind.ALLOCATION_FAILURE]
    assert result.units is None


def test_allocation_failure_statuses(out_of_memory):
    assert Utf16To8Codec().convert([0]).status == 4
    assert Utf8To16Codec().convert(b'\0').status == 7


def test_input_changed_between_passes(caplog):
    class Changing(Utf16To8Codec):
        def measure(self, source):
            length = super().measure(source)
            source[1] = 0xDC00
            return length

    with caplog.at_level(logging.WARNING, logger='unicodec'):
        result = Changing().convert([0x41, 0x42, 0])

    assert isinstance(result.error, MalformedLeadError)
    assert result.status == 1
    assert result.units is None
    assert 'changed while it was being converted' in caplog.text


class Miscounting(Utf16To8Codec):
    def unit_cost(self, scalar):
        return 1


# The first input writes past the measured length, the second past the buffer
@pytest.mark.parametrize("source", [[0xE9, 0], [0x20AC, 0]])
def test_miscounted_output_raises(source):
    with pytest.raises(MeasurementMismatchError):
        Miscounting().convert(source)


@pytest.mark.parametrize("source", [[0xE9, 0], [0x20AC, 0]])
def test_miscounted_output_is_discarded(source):
    with pytest.raises(MeasurementMismatchError) as e:
        Miscounting().convert(source)

    assert e.value.__context__ is None
    tb = e.value.__traceback__
    while tb is not None:
        assert 'buffer' not in tb.tb_frame.f_locals
        tb = tb.tb_next


def test_concurrent_calls_share_nothing():
    codec = Utf16To8Codec()
    inputs = [utils.to_units(TEXT[:i], Encoding.UTF16) for i in range(len(TEXT))]
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(codec.convert, inputs * 4))

    expected = [TEXT[:i].encode('utf-8') + b'\0' for i in range(len(TEXT))] * 4
    assert [r.units for r in results] == expected
