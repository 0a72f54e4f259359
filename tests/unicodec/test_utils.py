import array

import pytest

from unicodec import utils, Encoding


def test_to_units():
    assert utils.to_units('a\xe9', Encoding.UTF8) == b'a\xc3\xa9\0'
    assert list(utils.to_units('a\U0001F600', Encoding.UTF16)) == [0x61, 0xD83D, 0xDE00, 0]
    assert list(utils.to_units('a\U0001F600', Encoding.UTF32)) == [0x61, 0x1F600, 0]
    assert utils.to_units('', Encoding.UTF8) == b'\0'


def test_to_units_keeps_lone_surrogates():
    assert list(utils.to_units('\ud800', Encoding.UTF16)) == [0xD800, 0]
    assert utils.to_units('\ud800', Encoding.UTF8) == b'\xed\xa0\x80\0'


def test_to_units_rejects_null():
    with pytest.raises(ValueError):
        utils.to_units('a\0b', Encoding.UTF16)


def test_to_text():
    assert utils.to_text(b'a\xc3\xa9\0', Encoding.UTF8) == 'a\xe9'
    assert utils.to_text([0x61, 0xD83D, 0xDE00, 0], Encoding.UTF16) == 'a\U0001F600'
    assert utils.to_text(array.array('I', [0x1F600]), Encoding.UTF32) == '\U0001F600'


def test_strip_terminator():
    assert utils.strip_terminator(b'ab\0cd') == b'ab'
    assert utils.strip_terminator([1, 2]) == [1, 2]
    assert utils.strip_terminator([0]) == []
