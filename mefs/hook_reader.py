"""Reader wrapper that reports every chunk read to a second object."""

from __future__ import annotations

import io
from typing import Any


class HookReader:
    """Reads from ``source`` and passes each chunk to ``hook.read(chunk)``.

    Useful for progress reporting. Seeking moves the source and, if it can
    seek, the hook too; both must land on the same offset.
    """

    def __init__(self, source: Any, hook: Any) -> None:
        self.source = source
        self.hook = hook

    def read(self, size: int = -1) -> bytes:
        """Read from the source and report the bytes to the hook."""
        data = self.source.read(size)
        self.hook.read(data)
        return data

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        """Seek the source and the hook; raise if they disagree."""
        position = 0
        source_seek = getattr(self.source, "seek", None)
        if callable(source_seek):
            position = source_seek(offset, whence)
        hook_seek = getattr(self.hook, "seek", None)
        if callable(hook_seek):
            hook_position = hook_seek(offset, whence)
            if hook_position != position:
                raise ValueError(
                    f"hook seeker seeked {hook_position} bytes, expected source {position} bytes"
                )
        return position


def new_hook(source: Any, hook: Any) -> Any:
    """Wrap ``source`` so reads are reported to ``hook``; no hook means no wrapping."""
    if hook is None:
        return source
    return HookReader(source, hook)