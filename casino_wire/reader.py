from __future__ import annotations

import struct
from typing import Optional

_U64 = struct.Struct(">Q")
_I64 = struct.Struct(">q")


class InsufficientData(ValueError):
    """Raised when a read would run past the end of the buffer."""

    def __init__(self, label: str, needed: int, remaining: int) -> None:
        super().__init__(
            f"SafeReader: insufficient data for {label} (need {needed}, have {remaining})"
        )
        self.label = label
        self.needed = needed
        self.remaining = remaining


class SafeReader:
    """Bounds-checked cursor over bytes received from the engine.

    The offset only ever moves forward. Instances are single-owner: share the
    bytes, not the reader.
    """

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._offset = 0

    @property
    def offset(self) -> int:
        return self._offset

    def __len__(self) -> int:
        return len(self._data)

    def remaining(self) -> int:
        return len(self._data) - self._offset

    def _require(self, count: int, label: str) -> None:
        if count < 0 or count > self.remaining():
            raise InsufficientData(label, count, self.remaining())

    def read_u8(self, label: str) -> int:
        self._require(1, label)
        value = self._data[self._offset]
        self._offset += 1
        return value

    def read_u8_at(self, offset: int, label: str) -> int:
        if offset < 0 or offset + 1 > len(self._data):
            raise InsufficientData(label, 1, max(len(self._data) - max(offset, 0), 0))
        return self._data[offset]

    def read_bytes(self, count: int, label: str) -> bytes:
        self._require(count, label)
        chunk = self._data[self._offset : self._offset + count]
        self._offset += count
        return chunk

    def skip(self, count: int, label: str) -> None:
        self._require(count, label)
        self._offset += count

    def read_u64_be(self, label: str) -> int:
        return _U64.unpack(self.read_bytes(8, label))[0]

    def read_i64_be(self, label: str) -> int:
        return _I64.unpack(self.read_bytes(8, label))[0]


def read_u64_be(data: bytes, offset: int) -> int:
    return _U64.unpack_from(data, offset)[0]


def safe_slice(data: bytes, offset: int, length: int) -> Optional[bytes]:
    if offset < 0 or length < 0 or offset + length > len(data):
        return None
    return bytes(data[offset : offset + length])
