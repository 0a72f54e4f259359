import pytest

from unicodec import (
    helpers, Utf16To8Codec, Utf8To16Codec, Utf32To8Codec, Utf8To32Codec
)


@pytest.fixture(params=[Utf16To8Codec, Utf8To16Codec, Utf32To8Codec, Utf8To32Codec])
def codec(request):
    return request.param()


@pytest.fixture
def allocations(monkeypatch):
    """Records the ``(encoding, length)`` of every output buffer allocated."""
    calls = []
    allocate = helpers.allocate

    def recording_allocate(encoding, length):
        calls.append((encoding, length))
        return allocate(encoding, length)

    monkeypatch.setattr(helpers, 'allocate', recording_allocate)
    return calls


@pytest.fixture
def out_of_memory(monkeypatch):
    def failing_allocate(encoding, length):
        raise MemoryError

    monkeypatch.setattr(helpers, 'allocate', failing_allocate)
