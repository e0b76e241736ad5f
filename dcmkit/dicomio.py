"""Low level reading and writing of DICOM binary data."""

from __future__ import annotations

import contextlib
import enum
import struct
import sys
from typing import BinaryIO

from dcmkit.charset import CodingSystem

# Special limit meaning there is no hard limit: read until EOF.
LIMIT_READ_UNTIL_EOF = -9999

_SKIP_CHUNK = 1 << 16


class ByteOrder(enum.Enum):
    """Byte order of binary values, as a struct format prefix."""

    LITTLE = "<"
    BIG = ">"


class InsufficientBytesLeftError(EOFError):
    """Raised when fewer bytes remain before the limit than an operation needs."""


class Reader:
    """Reads DICOM primitives from a binary stream, honouring nested read limits."""

    def __init__(
        self,
        stream: BinaryIO,
        byte_order: ByteOrder = ByteOrder.LITTLE,
        limit: int = LIMIT_READ_UNTIL_EOF,
    ) -> None:
        self._stream = stream
        self._pending = b""
        self.byte_order = byte_order
        self.implicit = False
        self.limit = limit
        self.bytes_read = 0
        self._limit_stack: list[int] = []
        self.coding_system = CodingSystem()

    def bytes_left_until_limit(self) -> int:
        """Bytes remaining before the current limit."""
        if self.limit == LIMIT_READ_UNTIL_EOF:
            return sys.maxsize
        return self.limit - self.bytes_read

    def _raw_read(self, n: int) -> bytes:
        chunks = []
        if self._pending:
            taken = self._pending[:n]
            self._pending = self._pending[n:]
            chunks.append(taken)
            n -= len(taken)
        while n > 0:
            chunk = self._stream.read(n)
            if not chunk:
                break
            chunks.append(chunk)
            n -= len(chunk)
        return b"".join(chunks)

    def read(self, n: int) -> bytes:
        """Read up to ``n`` bytes; empty at the limit or at end of stream."""
        left = self.bytes_left_until_limit()
        if left <= 0 or n <= 0:
            return b""
        data = self._raw_read(min(n, left))
        self.bytes_read += len(data)
        return data

    def _read_exact(self, n: int) -> bytes:
        data = self.read(n)
        if len(data) < n:
            raise EOFError(f"expected {n} bytes, got {len(data)}")
        return data

    def _unpack(self, fmt: str) -> int | float:
        size = struct.calcsize(fmt)
        return struct.unpack(self.byte_order.value + fmt, self._read_exact(size))[0]

    def read_uint8(self) -> int:
        return int(self._unpack("B"))

    def read_uint16(self) -> int:
        return int(self._unpack("H"))

    def read_uint32(self) -> int:
        return int(self._unpack("I"))

    def read_int16(self) -> int:
        return int(self._unpack("h"))

    def read_int32(self) -> int:
        return int(self._unpack("i"))

    def read_float32(self) -> float:
        return float(self._unpack("f"))

    def read_float64(self) -> float:
        return float(self._unpack("d"))

    def read_string(self, n: int) -> str:
        """Read ``n`` bytes and decode them with the current coding system."""
        return self.coding_system.decode(self._read_exact(n))

    def skip(self, n: int) -> None:
        """Advance past ``n`` bytes."""
        if self.bytes_left_until_limit() < n:
            raise InsufficientBytesLeftError(
                "not enough bytes left until buffer limit to complete this operation"
            )
        remaining = n
        while remaining > 0:
            data = self.read(min(remaining, _SKIP_CHUNK))
            if not data:
                raise EOFError(f"stream ended with {remaining} bytes left to skip")
            remaining -= len(data)

    def peek(self, n: int) -> bytes:
        """Return the next ``n`` bytes without advancing; ignores limits."""
        while len(self._pending) < n:
            chunk = self._stream.read(n - len(self._pending))
            if not chunk:
                break
            self._pending += chunk
        if len(self._pending) < n:
            raise EOFError(f"only {len(self._pending)} bytes available to peek")
        return self._pending[:n]

    def push_limit(self, n: int) -> None:
        """Set a limit ``n`` bytes past the current position."""
        new_limit = self.bytes_read + n
        if self.limit != LIMIT_READ_UNTIL_EOF and new_limit > self.limit:
            raise ValueError(
                "new limit exceeds current limit of buffer, "
                f"new limit: {new_limit}, limit: {self.limit}"
            )
        self._limit_stack.append(self.limit)
        self.limit = new_limit

    def pop_limit(self) -> None:
        """Skip to the current limit and restore the previous one."""
        if not self._limit_stack:
            raise IndexError("pop_limit called with no limit pushed")
        if self.limit != LIMIT_READ_UNTIL_EOF and self.bytes_read < self.limit:
            with contextlib.suppress(EOFError):
                self.skip(self.limit - self.bytes_read)
        self.limit = self._limit_stack.pop()

    def is_limit_exhausted(self) -> bool:
        return self.limit != LIMIT_READ_UNTIL_EOF and self.bytes_left_until_limit() <= 0

    def set_transfer_syntax(self, byte_order: ByteOrder, implicit: bool) -> None:
        self.byte_order = byte_order
        self.implicit = implicit

    def set_coding_system(self, coding_system: CodingSystem) -> None:
        self.coding_system = coding_system


class Writer:
    """Writes DICOM primitives to a binary stream."""

    def __init__(
        self,
        out: BinaryIO,
        byte_order: ByteOrder = ByteOrder.LITTLE,
        implicit: bool = False,
    ) -> None:
        self._out = out
        self.byte_order = byte_order
        self.implicit = implicit

    @property
    def transfer_syntax(self) -> tuple[ByteOrder, bool]:
        return self.byte_order, self.implicit

    def set_transfer_syntax(self, byte_order: ByteOrder, implicit: bool) -> None:
        self.byte_order = byte_order
        self.implicit = implicit

    def _pack(self, fmt: str, value: int | float) -> None:
        self._out.write(struct.pack(self.byte_order.value + fmt, value))

    def write_zeros(self, length: int) -> None:
        self._out.write(bytes(length))

    def write_string(self, value: str) -> None:
        self._out.write(value.encode("utf-8"))

    def write_byte(self, value: int) -> None:
        self._pack("B", value)

    def write_bytes(self, value: bytes) -> None:
        self._out.write(bytes(value))

    def write_uint16(self, value: int) -> None:
        self._pack("H", value)

    def write_uint32(self, value: int) -> None:
        self._pack("I", value)

    def write_float32(self, value: float) -> None:
        self._pack("f", value)

    def write_float64(self, value: float) -> None:
        self._pack("d", value)