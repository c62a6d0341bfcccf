"""Bounds-checked writer over a caller-owned byte buffer."""

from __future__ import annotations

from typing import Iterable, Union

from ..errors import BufferTooSmallError

WritableBuffer = Union[bytearray, memoryview]


class OutputBuffer:
    """Append-only view over a fixed-size writable buffer.

    Writes go to ``target`` by index and never resize it. Any write that
    would run past the end raises :class:`BufferTooSmallError` before a
    single byte of it is stored.
    """

    def __init__(self, target: WritableBuffer, offset: int = 0) -> None:
        if isinstance(target, memoryview) and target.readonly:
            raise TypeError("Output buffer must be writable")
        if not 0 <= offset <= len(target):
            raise ValueError(f"Offset {offset} outside buffer of {len(target)}")
        self._target = target
        self._position = offset

    @property
    def position(self) -> int:
        return self._position

    @property
    def capacity(self) -> int:
        return len(self._target)

    @property
    def remaining(self) -> int:
        return len(self._target) - self._position

    def reserve(self, count: int) -> None:
        """Fail unless ``count`` more bytes fit."""
        if count > self.remaining:
            raise BufferTooSmallError(self._position + count, len(self._target))

    def push(self, value: int) -> None:
        self.reserve(1)
        self._target[self._position] = value & 0xFF
        self._position += 1

    def extend(self, values: Iterable[int]) -> None:
        data = bytes(values)
        self.reserve(len(data))
        end = self._position + len(data)
        self._target[self._position : end] = data
        self._position = end

    def written(self) -> bytes:
        return bytes(self._target[: self._position])


def as_output(out: Union[OutputBuffer, WritableBuffer]) -> OutputBuffer:
    if isinstance(out, OutputBuffer):
        return out
    return OutputBuffer(out)


__all__ = ["OutputBuffer", "WritableBuffer", "as_output"]
