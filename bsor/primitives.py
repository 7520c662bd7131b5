"""Fixed-width primitive reads over a BSOR byte buffer.

All multi-byte values are little-endian:

  byte / bool  1 byte   (bool is true for any nonzero byte)
  i32 / u32    4 bytes
  i64          8 bytes
  f32          4 bytes, IEEE-754 single precision bit pattern
  string       u32 length ``L`` followed by ``L`` bytes of UTF-8
  vector3      3 x f32  (x, y, z)
  quaternion   4 x f32  (real, i, j, k)
"""

from __future__ import annotations

import struct
from typing import NamedTuple

from .errors import TruncatedInputError


class Vector3(NamedTuple):
    x: float
    y: float
    z: float

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"


class Quaternion(NamedTuple):
    real: float
    i: float
    j: float
    k: float

    def __str__(self) -> str:
        return f"({self.real:g}, {self.i:g}, {self.j:g}, {self.k:g})"


class ByteReader:
    """Forward-only cursor over a bytes-like buffer.

    Every ``read_*`` call either consumes exactly the bytes it needs and
    advances :attr:`offset`, or raises :class:`TruncatedInputError` and
    leaves the offset untouched.
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = memoryview(data).cast("B")
        self.offset = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self.offset

    def _require(self, size: int) -> int:
        if size > self.remaining:
            raise TruncatedInputError(self.offset, size, self.remaining)
        pos = self.offset
        self.offset += size
        return pos

    def _unpack(self, fmt: str, size: int):
        pos = self._require(size)
        return struct.unpack_from(fmt, self._data, pos)[0]

    def read_bytes(self, size: int) -> bytes:
        pos = self._require(size)
        return self._data[pos : pos + size].tobytes()

    def read_byte(self) -> int:
        return self._unpack("<B", 1)

    def read_bool(self) -> bool:
        return self.read_byte() != 0

    def read_i32(self) -> int:
        return self._unpack("<i", 4)

    def read_u32(self) -> int:
        return self._unpack("<I", 4)

    def read_i64(self) -> int:
        return self._unpack("<q", 8)

    def read_f32(self) -> float:
        # struct's "f" reinterprets the bit pattern; no integer conversion.
        return self._unpack("<f", 4)

    def read_string(self) -> str:
        start = self.offset
        length = self.read_u32()
        if length > self.remaining:
            error = TruncatedInputError(self.offset, length, self.remaining)
            self.offset = start
            raise error
        return self.read_bytes(length).decode("utf-8", errors="replace")

    def read_vector3(self) -> Vector3:
        self._check_ahead(12)
        return Vector3(self.read_f32(), self.read_f32(), self.read_f32())

    def read_quaternion(self) -> Quaternion:
        self._check_ahead(16)
        return Quaternion(
            self.read_f32(), self.read_f32(), self.read_f32(), self.read_f32()
        )

    def _check_ahead(self, size: int) -> None:
        """Fail before a compound read starts, so no partial value is consumed."""

        if size > self.remaining:
            raise TruncatedInputError(self.offset, size, self.remaining)
