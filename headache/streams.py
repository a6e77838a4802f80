from __future__ import annotations

import io
from typing import Iterable, Iterator, Protocol, TextIO, Union


class ByteSource(Protocol):
    """Anything with a binary ``read``; ``read(1)`` returns ``b""`` at end of input."""

    def read(self, size: int = -1) -> bytes:
        ...


class ByteSink(Protocol):
    def write(self, data: bytes) -> int:
        ...

    def flush(self) -> None:
        ...


class IterableSource:
    """Byte source fed from an iterable of integers in ``range(256)``."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values: Iterator[int] = iter(values)

    def read(self, size: int = -1) -> bytes:
        chunk = bytearray()
        while size < 0 or len(chunk) < size:
            try:
                chunk.append(next(self._values))
            except StopIteration:
                break
        return bytes(chunk)


class TextStreamSource:
    """Reads UTF-8 encoded bytes out of a text stream one character at a time."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = b""

    def read(self, size: int = -1) -> bytes:
        while size < 0 or len(self._pending) < size:
            char = self._stream.read(1)
            if not char:
                break
            self._pending += char.encode("utf-8")
        if size < 0:
            size = len(self._pending)
        chunk, self._pending = self._pending[:size], self._pending[size:]
        return chunk


class TextStreamSink:
    """Writes each byte to a text stream as the character with the same code point."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def write(self, data: bytes) -> int:
        self._stream.write("".join(chr(byte) for byte in data))
        return len(data)

    def flush(self) -> None:
        self._stream.flush()


def binary_source(stream: Union[TextIO, ByteSource]) -> ByteSource:
    """Return the binary side of ``stream`` (``sys.stdin.buffer`` for ``sys.stdin``)."""
    buffer = getattr(stream, "buffer", None)
    if buffer is not None:
        return buffer
    if isinstance(stream, io.TextIOBase):
        return TextStreamSource(stream)  # type: ignore[arg-type]
    return stream  # type: ignore[return-value]


def binary_sink(stream: Union[TextIO, ByteSink]) -> ByteSink:
    buffer = getattr(stream, "buffer", None)
    if buffer is not None:
        return buffer
    if isinstance(stream, io.TextIOBase):
        return TextStreamSink(stream)
    return stream  # type: ignore[return-value]


__all__ = [
    "ByteSink",
    "ByteSource",
    "IterableSource",
    "TextStreamSink",
    "TextStreamSource",
    "binary_sink",
    "binary_source",
]
