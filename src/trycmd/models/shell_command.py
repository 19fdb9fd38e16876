"""Shell argument vector model."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class ShellCommand:
    """An exec-ready argument vector stored in one NUL-separated buffer.

    ``spans`` holds the ``(start, end)`` offsets of each argument inside
    ``buffer``; every argument is followed by a NUL byte and the vector is
    closed by one more NUL.
    """

    buffer: memoryview
    spans: tuple[tuple[int, int], ...]

    def views(self) -> list[memoryview]:
        """Return zero-copy views of each argument."""
        return [self.buffer[start:end] for start, end in self.spans]

    @property
    def argv_bytes(self) -> list[bytes]:
        return [bytes(view) for view in self.views()]

    @property
    def argv(self) -> list[str]:
        return [os.fsdecode(arg) for arg in self.argv_bytes]

    @property
    def executable(self) -> str:
        return self.argv[0]
