"""Byte buffer with independent read and write positions.

Integers are stored little-endian. Errors do not raise: they set a sticky
flag (see :attr:`Buffer.err` and :attr:`Buffer.valid`) and every later read
or write fails until :meth:`Buffer.clear` is called.
"""

from __future__ import annotations

import enum
import struct
from typing import Optional, Union

BytesLike = Union[bytes, bytearray, memoryview]

BUF_MAX = (1 << 64) - 1 - 4096
"""Largest size a buffer may ever reach; also the default limit."""

NULL_LEN = BUF_MAX
"""Length marker that encodes a missing (None) string."""

_PAGE = 4096
_U64_MASK = (1 << 64) - 1


class ErrorFlag(enum.IntFlag):
    """Bits of :attr:`Buffer.err`."""

    CORRUPT = 1
    OOM = 3


class WrapFlag(enum.IntFlag):
    """Options for :meth:`Buffer.wrap`."""

    NONE = 0
    REF = 8
    DATA = 16
    READ = REF | DATA


def _round_page(n: int) -> int:
    return ((n + _PAGE - 1) // _PAGE) * _PAGE


class Buffer:
    """Growable byte buffer with typed put/get/peek/set accessors."""

    def __init__(self, cap: int = 0) -> None:
        if cap < 0:
            raise ValueError("cap must not be negative")
        self._mem = bytearray(cap)
        self._cap = cap
        self._limit = BUF_MAX
        self._rpos = 0
        self._wpos = 0
        self._err = 0
        self._ref = False

    @classmethod
    def wrap(cls, data: BytesLike, flags: int = WrapFlag.NONE) -> "Buffer":
        """Build a buffer over ``data``.

        With ``WrapFlag.REF`` a ``bytearray`` is used in place and the buffer
        never grows. With ``WrapFlag.DATA`` the write position is set to the
        end of ``data`` so its contents can be read back.
        """
        mem = data if isinstance(data, bytearray) else bytearray(data)
        buf = cls.__new__(cls)
        buf._mem = mem
        buf._cap = len(mem)
        buf._ref = bool(flags & WrapFlag.REF)
        buf._limit = buf._cap if buf._ref else BUF_MAX
        buf._wpos = buf._cap if flags & WrapFlag.DATA else 0
        buf._rpos = 0
        buf._err = 0
        return buf

    # -- state ---------------------------------------------------------

    @property
    def limit(self) -> int:
        """Upper bound on capacity; growth past it sets ``OOM``."""
        return self._limit

    @limit.setter
    def limit(self, value: int) -> None:
        self._limit = value

    @property
    def cap(self) -> int:
        """Current capacity in bytes."""
        return self._cap

    @property
    def rpos(self) -> int:
        """Read position. Setting it past the write position sets ``CORRUPT``."""
        return self._rpos

    @rpos.setter
    def rpos(self, pos: int) -> None:
        if pos > self._wpos:
            self._err |= ErrorFlag.CORRUPT
            return
        self._rpos = pos

    @property
    def wpos(self) -> int:
        """Write position. Setting it past the capacity sets ``CORRUPT``."""
        return self._wpos

    @wpos.setter
    def wpos(self, pos: int) -> None:
        if pos > self._cap:
            self._err |= ErrorFlag.CORRUPT
            return
        self._wpos = pos

    @property
    def err(self) -> int:
        """Error bits, a combination of :class:`ErrorFlag` values."""
        return self._err

    @err.setter
    def err(self, value: int) -> None:
        self._err = int(value)

    @property
    def valid(self) -> bool:
        """True while no error has been recorded."""
        return self._err == 0

    @property
    def quota(self) -> int:
        """Bytes that can be written without growing."""
        return self._cap - self._wpos

    @property
    def size(self) -> int:
        """Bytes written but not yet read."""
        return self._wpos - self._rpos

    def __repr__(self) -> str:
        return (
            f"Buffer(cap={self._cap}, rpos={self._rpos}, "
            f"wpos={self._wpos}, err={self._err})"
        )

    # -- memory management -----------------------------------------------

    def at(self, pos: int) -> memoryview:
        """View of the memory from ``pos`` to the end of the capacity."""
        return memoryview(self._mem)[pos : self._cap]

    def rbuf(self) -> memoryview:
        """View of the unread bytes."""
        return memoryview(self._mem)[self._rpos : self._wpos]

    def wbuf(self) -> memoryview:
        """Writable view of the free space; call :meth:`mark_write` after filling it.

        The view refers to the current memory; it is not updated if the
        buffer later grows or shrinks.
        """
        return memoryview(self._mem)[self._wpos : self._cap]

    def _resize(self, size: int) -> None:
        new = bytearray(size)
        keep = min(size, self._cap)
        new[:keep] = self._mem[:keep]
        self._mem = new
        self._cap = size

    def reserve(self, length: int) -> bool:
        """Ensure ``length`` bytes fit after the write position.

        Returns False and sets ``OOM`` if the buffer cannot grow enough.
        """
        if self._wpos + length > self._cap:
            if self._ref:
                self._err |= ErrorFlag.OOM
                return False
            size = _round_page(self._cap + length)
            if size > self._limit or self._cap >= BUF_MAX - _PAGE:
                self._err |= ErrorFlag.OOM
                return False
            self._resize(size)
        return True

    def shrink(self, length: int) -> bool:
        """Compact, then reduce capacity to ``length`` rounded up to a page.

        Nothing is reallocated if ``length`` exceeds the capacity or the
        unread data would not fit.
        """
        self.compact()
        if length > self._cap or self._wpos >= length:
            return True
        if self._ref:
            return True
        self._resize(_round_page(length))
        return True

    def clear(self) -> None:
        """Reset both positions and the error flag."""
        self._rpos = 0
        self._wpos = 0
        self._err = 0

    def compact(self) -> None:
        """Move unread bytes to the start of the memory."""
        if self._rpos == self._wpos:
            self._rpos = 0
            self._wpos = 0
        if self._rpos != 0:
            count = self._wpos - self._rpos
            self._mem[0:count] = self._mem[self._rpos : self._wpos]
            self._rpos = 0
            self._wpos = count

    def mark_read(self, length: int) -> None:
        """Advance the read position by ``length``."""
        self._rpos += length

    def mark_write(self, length: int) -> None:
        """Advance the write position by ``length``."""
        self._wpos += length

    def move_from(self, src: "Buffer") -> None:
        """Copy as many unread bytes of ``src`` as fit without growing."""
        count = min(self.quota, src.size)
        self.put_raw(bytes(src._mem[src._rpos : src._rpos + count]))
        src._rpos += count

    # -- low level access ------------------------------------------------

    def _peek(self, pos: int, width: int) -> tuple[int, int]:
        if self._err != 0 or pos + width > self._wpos:
            self._err |= ErrorFlag.CORRUPT
            return 0, 0
        return int.from_bytes(self._mem[pos : pos + width], "little"), width

    def _set(self, pos: int, width: int, value: int) -> int:
        if self._err != 0 or pos + width > self._cap:
            self._err |= ErrorFlag.CORRUPT
            return 0
        mask = (1 << (8 * width)) - 1
        self._mem[pos : pos + width] = (value & mask).to_bytes(width, "little")
        return width

    def _peek_data(self, pos: int, length: int) -> tuple[bytes, int]:
        if self._err != 0 or pos + length > self._wpos:
            self._err |= ErrorFlag.CORRUPT
            return bytes(length), 0
        return bytes(self._mem[pos : pos + length]), length

    # -- peek --------------------------------------------------------------

    def peek_8(self, pos: Optional[int] = None) -> int:
        """Read a byte at ``pos`` (default: read position) without consuming it."""
        return self._peek(self._rpos if pos is None else pos, 1)[0]

    def peek_16(self, pos: Optional[int] = None) -> int:
        """Read a 16-bit value without consuming it."""
        return self._peek(self._rpos if pos is None else pos, 2)[0]

    def peek_32(self, pos: Optional[int] = None) -> int:
        """Read a 32-bit value without consuming it."""
        return self._peek(self._rpos if pos is None else pos, 4)[0]

    def peek_64(self, pos: Optional[int] = None) -> int:
        """Read a 64-bit value without consuming it."""
        return self._peek(self._rpos if pos is None else pos, 8)[0]

    def peek_data(self, pos: int, length: int) -> bytes:
        """Return ``length`` bytes at ``pos``; zeros and ``CORRUPT`` if unavailable."""
        return self._peek_data(pos, length)[0]

    # -- set -----------------------------------------------------------------

    def set_8(self, value: int, pos: Optional[int] = None) -> None:
        """Write a byte at ``pos`` (default: write position) without advancing."""
        self._set(self._wpos if pos is None else pos, 1, value)

    def set_16(self, value: int, pos: Optional[int] = None) -> None:
        """Write a 16-bit value without advancing or growing."""
        self._set(self._wpos if pos is None else pos, 2, value)

    def set_32(self, value: int, pos: Optional[int] = None) -> None:
        """Write a 32-bit value without advancing or growing."""
        self._set(self._wpos if pos is None else pos, 4, value)

    def set_64(self, value: int, pos: Optional[int] = None) -> None:
        """Write a 64-bit value without advancing or growing."""
        self._set(self._wpos if pos is None else pos, 8, value)

    def set_data(self, pos: int, data: BytesLike) -> int:
        """Copy ``data`` to ``pos`` without growing; return the bytes written."""
        raw = memoryview(data).tobytes()
        if self._err != 0 or pos + len(raw) > self._cap:
            self._err |= ErrorFlag.CORRUPT
            return 0
        if not raw:
            return 0
        self._mem[pos : pos + len(raw)] = raw
        return len(raw)

    # -- get -----------------------------------------------------------------

    def _get(self, width: int) -> int:
        value, n = self._peek(self._rpos, width)
        self._rpos += n
        return value

    def get_bool(self) -> bool:
        """Consume a byte and return it as a bool."""
        return bool(self._get(1))

    def get_8(self) -> int:
        """Consume an 8-bit value."""
        return self._get(1)

    def get_16(self) -> int:
        """Consume a 16-bit value."""
        return self._get(2)

    def get_32(self) -> int:
        """Consume a 32-bit value."""
        return self._get(4)

    def get_64(self) -> int:
        """Consume a 64-bit value."""
        return self._get(8)

    def get_double(self) -> float:
        """Consume a double stored as its 64-bit pattern."""
        return struct.unpack("<d", struct.pack("<Q", self._get(8)))[0]

    def get_data(self, length: int) -> bytes:
        """Consume ``length`` bytes; zeros and ``CORRUPT`` if unavailable."""
        if self._rpos + length > self._wpos:
            self._err |= ErrorFlag.CORRUPT
            return bytes(length)
        data, n = self._peek_data(self._rpos, length)
        self._rpos += n
        return data

    # -- put -----------------------------------------------------------------

    def put_raw(self, data: BytesLike) -> None:
        """Append raw bytes, growing if needed."""
        raw = memoryview(data).tobytes()
        if not self.reserve(len(raw)):
            return
        self._wpos += self.set_data(self._wpos, raw)

    def _put(self, width: int, value: int) -> None:
        if not self.reserve(width):
            return
        self._wpos += self._set(self._wpos, width, value)

    def put_bool(self, value: bool) -> None:
        """Append a bool as one byte."""
        self._put(1, 1 if value else 0)

    def put_8(self, value: int) -> None:
        """Append an 8-bit value."""
        self._put(1, value)

    def put_16(self, value: int) -> None:
        """Append a 16-bit value."""
        self._put(2, value)

    def put_32(self, value: int) -> None:
        """Append a 32-bit value."""
        self._put(4, value)

    def put_64(self, value: int) -> None:
        """Append a 64-bit value."""
        self._put(8, value)

    def put_double(self, value: float) -> None:
        """Append a double as its 64-bit pattern."""
        self._put(8, struct.unpack("<Q", struct.pack("<d", value))[0] & _U64_MASK)