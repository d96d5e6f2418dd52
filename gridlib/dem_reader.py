"""Sequential reader for the records of a DEM file."""

from __future__ import annotations

import io
from typing import BinaryIO, Iterator, Optional

from .fortran_reader import FortranReader, GridLibError
from .records import RecordA, RecordB, RecordC, read_record_a, read_record_b, read_record_c

__all__ = ["DemReader"]

_BLOCK_SIZE = 1024


class DemReader:
    """Reads record A, the optional record C and then the B records of a DEM file.

    Record A is read on construction. If its data validation flag is set,
    record C is read from the final 1024 bytes of the stream. The B records
    are then returned one at a time by :meth:`next_record_b`, or by
    iterating over the reader.
    """

    def __init__(self, stream: BinaryIO) -> None:
        if stream is None:
            raise GridLibError("No input stream.")
        self._reader = FortranReader(stream)
        self.record_a: RecordA = self._read_record_a()
        self.record_c: Optional[RecordC] = self._read_record_c()

    @property
    def _has_record_c(self) -> bool:
        return (self.record_a.data_validation_flag or 0) != 0

    def _read_record_a(self) -> RecordA:
        try:
            return read_record_a(self._reader)
        except (GridLibError, ValueError) as ex:
            raise GridLibError(
                "The stream doesn't contain a valid record of type A.\n    " + str(ex)
            ) from ex

    def _read_record_c(self) -> Optional[RecordC]:
        if not self._has_record_c:
            return None
        if not self._reader.seek(-_BLOCK_SIZE, io.SEEK_END):
            raise GridLibError(
                "The stream doesn't contain a valid record of type C.\n    "
                "Unable to seek to the end of the stream."
            )
        try:
            record = read_record_c(self._reader)
        except (GridLibError, ValueError) as ex:
            raise GridLibError(
                "The stream doesn't contain a valid record of type C.\n    " + str(ex)
            ) from ex
        self._reader.seek(_BLOCK_SIZE, io.SEEK_SET)
        return record

    def next_record_b(self) -> Optional[RecordB]:
        """Return the next record of type B, or None when there are no more."""
        self._reader.fill_buffer(_BLOCK_SIZE)
        if self._reader.remaining_buffer_size() == 0:
            return None

        if self._has_record_c:
            self._reader.fill_buffer(2 * _BLOCK_SIZE)
            if self._reader.remaining_buffer_size() == _BLOCK_SIZE:
                # The final block of the stream holds record C.
                return None

        try:
            return read_record_b(self._reader)
        except (GridLibError, ValueError) as ex:
            raise GridLibError("Invalid record of type B.\n    " + str(ex)) from ex

    def __iter__(self) -> Iterator[RecordB]:
        while (record := self.next_record_b()) is not None:
            yield record