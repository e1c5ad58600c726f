import io

import pytest

from mefs.hook_reader import HookReader, new_hook


class Recorder:
    def __init__(self):
        self.chunks = []

    def read(self, chunk):
        self.chunks.append(chunk)
        return len(chunk)


class SeekableRecorder(Recorder):
    def __init__(self, length):
        super().__init__()
        self._buffer = io.BytesIO(bytes(length))

    def seek(self, offset, whence=io.SEEK_SET):
        return self._buffer.seek(offset, whence)


class NoSeek:
    def __init__(self, data):
        self._buffer = io.BytesIO(data)

    def read(self, size=-1):
        return self._buffer.read(size)


def test_new_hook_without_hook_returns_source():
    source = io.BytesIO(b"abc")
    assert new_hook(source, None) is source


def test_reads_are_reported_to_hook():
    hook = Recorder()
    reader = new_hook(io.BytesIO(b"hello world"), hook)
    assert isinstance(reader, HookReader)
    assert reader.read(5) == b"hello"
    assert reader.read() == b" world"
    assert reader.read() == b""
    assert hook.chunks == [b"hello", b" world", b""]
    assert b"".join(hook.chunks) == b"hello world"


def test_seek_moves_source_and_hook():
    hook = SeekableRecorder(11)
    reader = HookReader(io.BytesIO(b"hello world"), hook)
    assert reader.seek(6) == 6
    assert reader.read() == b"world"
    assert reader.seek(0, io.SEEK_END) == 11


def test_seek_mismatch_raises():
    reader = HookReader(io.BytesIO(b"hello world"), SeekableRecorder(5))
    with pytest.raises(ValueError, match="hook seeker seeked"):
        reader.seek(0, io.SEEK_END)


def test_seek_with_unseekable_source_requires_hook_at_zero():
    reader = HookReader(NoSeek(b"data"), SeekableRecorder(4))
    assert reader.seek(0) == 0
    with pytest.raises(ValueError):
        reader.seek(3)


def test_seek_with_unseekable_hook_moves_only_source():
    source = io.BytesIO(b"abcdef")
    reader = HookReader(source, Recorder())
    assert reader.seek(2) == 2
    assert source.tell() == 2
    assert reader.read(2) == b"cd"