"""Buffered reader for fixed-width text fields such as those in DEM files."""

from __future__ import annotations

import io
import math
import struct
from typing import BinaryIO

from .parse_number import parse_float, parse_int

__all__ = ["GridLibError", "FortranReader"]

_FLOAT32_MAX_EXPONENT10 = 38
_FLOAT64_MAX_EXPONENT10 = 308


class GridLibError(Exception):
    """Raised when grid data cannot be read or is invalid."""


def _to_float32(value: float) -> float:
    """Round *value* to the nearest single-precision float."""
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class FortranReader:
    """Reads fixed-width fields from a binary stream.

    Each field is read as text of a given width. Numeric fields that are
    blank are returned as None.
    """

    def __init__(self, stream: BinaryIO | None = None, buffer_size: int = 8192) -> None:
        self._stream = stream
        self._capacity = buffer_size
        self._buffer = b""
        self._offset = 0
        self._at_end = False

    @property
    def _remaining(self) -> int:
        return len(self._buffer) - self._offset

    def _clear_buffer(self) -> None:
        self._buffer = b""
        self._offset = 0

    def read_string(self, size: int, trim_spaces: bool = True) -> str:
        """Read a field of *size* characters, optionally stripping spaces."""
        while self._remaining < size and self.fill_buffer(size):
            continue
        if size > self._remaining:
            raise GridLibError("End of file reached.")
        chunk = self._buffer[self._offset:self._offset + size]
        self._offset += size
        text = chunk.decode("latin-1")
        return text.strip(" ") if trim_spaces else text

    def read_char(self) -> str | None:
        """Read a single character; a blank yields None."""
        text = self.read_string(1)
        return text[0] if text else None

    def _read_int(self, size: int, bits: int) -> int | None:
        text = self.read_string(size)
        if not text:
            return None
        try:
            return parse_int(text, bits=bits, signed=True)
        except ValueError:
            raise GridLibError(f"Invalid integer: {text!r}") from None

    def _read_float(self, size: int, max_exponent10: int) -> float | None:
        text = self.read_string(size)
        if not text:
            return None
        try:
            return parse_float(text, max_exponent10=max_exponent10)
        except ValueError:
            raise GridLibError(f"Invalid floating-point number: {text!r}") from None

    def read_int8(self, size: int) -> int | None:
        return self._read_int(size, 8)

    def read_int16(self, size: int) -> int | None:
        return self._read_int(size, 16)

    def read_int32(self, size: int) -> int | None:
        return self._read_int(size, 32)

    def read_float32(self, size: int) -> float | None:
        value = self._read_float(size, _FLOAT32_MAX_EXPONENT10)
        return None if value is None else _to_float32(value)

    def read_float64(self, size: int) -> float | None:
        return self._read_float(size, _FLOAT64_MAX_EXPONENT10)

    def skip(self, size: int) -> None:
        """Skip *size* bytes; raises GridLibError if that passes the end."""
        if size <= self._remaining:
            self._offset += size
            return
        if self._stream is None:
            raise GridLibError("End of file reached.")
        size -= self._remaining
        self._clear_buffer()
        start = self._stream.tell()
        end = self._stream.seek(0, io.SEEK_END)
        if start + size > end:
            raise GridLibError("End of file reached.")
        self._stream.seek(start + size, io.SEEK_SET)

    def remaining_buffer_size(self) -> int:
        """Number of bytes buffered but not yet consumed."""
        return self._remaining

    def fill_buffer(self, size: int) -> bool:
        """Make sure at least *size* bytes are buffered if the stream allows.

        Returns True if enough data was already buffered or if more data
        could be read.
        """
        if self._stream is None:
            return False
        if self._remaining >= size:
            return True
        if self._at_end:
            return False
        self._capacity = max(self._capacity, size)
        pending = self._buffer[self._offset:]
        wanted = self._capacity - len(pending)
        data = self._stream.read(wanted) or b""
        if len(data) < wanted:
            self._at_end = True
        self._buffer = pending + data
        self._offset = 0
        return bool(data)

    def seek(self, pos: int, whence: int = io.SEEK_SET) -> bool:
        """Move to a new position; returns False if the stream refuses."""
        if self._stream is None:
            return False
        if whence == io.SEEK_CUR:
            if 0 <= pos <= self._remaining:
                self._offset += pos
                return True
            pos -= self._remaining
        self._clear_buffer()
        self._at_end = False
        try:
            self._stream.seek(pos, whence)
        except (OSError, ValueError):
            return False
        return True

    def tell(self) -> int:
        """Position of the next unread byte in the stream."""
        if self._stream is None:
            raise GridLibError("No input stream.")
        return self._stream.tell() - self._remaining