import pytest

from unicodec import Result, ErrorKind
from unicodec.errors import OverlongEncodingError

STATUS_CODES = {ErrorKind.OVERLONG_ENCODING: 6}


def test_success():
    result = Result.success(b'a\0')
    assert result.ok
    assert result
    assert result.units == b'a\0'
    assert result.error is None
    assert result.kind is None
    assert result.status == 0
    assert result.unwrap() == b'a\0'


def test_failure():
    error = OverlongEncodingError(0, 0)
    result = Result.failure(error, STATUS_CODES)
    assert not result.ok
    assert not result
    assert result.units is None
    assert result.kind is ErrorKind.OVERLONG_ENCODING
    assert result.status == 6
    assert 'status=6' in repr(result)

    with pytest.raises(OverlongEncodingError):
        result.unwrap()


def test_unmapped_kind_is_still_a_failure():
    assert Result.failure(OverlongEncodingError(0, 0)).status != 0


@pytest.mark.parametrize("kwargs", [{}, {'units': b'\0', 'error': OverlongEncodingError(0, 0)}])
def test_needs_exactly_one_outcome(kwargs):
    with pytest.raises(ValueError):
        Result(**kwargs)
