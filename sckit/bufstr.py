"""Length-prefixed strings, blobs and formatted text on top of :class:`Buffer`.

A string is stored as an 8-byte little-endian length, the bytes, then a NUL
byte. ``None`` is stored as the length marker :data:`NULL_LEN` alone. A blob
is an 8-byte length followed by the bytes. Text written with
:func:`put_text` is a plain NUL-terminated string that later calls extend.
"""

from __future__ import annotations

from typing import Optional, Union

from sckit.buffer import BUF_MAX, NULL_LEN, Buffer, ErrorFlag

StrLike = Union[str, bytes, bytearray, memoryview]

_LEN_BYTES = 8


def _encode(value: StrLike) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8", errors="surrogateescape")
    return memoryview(value).tobytes()


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="surrogateescape")


def str_len(value: Optional[StrLike]) -> int:
    """Encoded size of ``value`` as written by :func:`put_str`."""
    if value is None:
        return _LEN_BYTES
    return _LEN_BYTES + 1 + len(_encode(value))


def blob_len(data: StrLike) -> int:
    """Encoded size of ``data`` as written by :func:`put_blob`."""
    return _LEN_BYTES + len(_encode(data))


def put_str(buf: Buffer, value: Optional[StrLike]) -> None:
    """Append a length-prefixed, NUL-terminated string; ``None`` is allowed."""
    if value is None:
        buf.put_64(NULL_LEN)
        return
    data = _encode(value)
    if len(data) >= BUF_MAX:
        buf.err |= ErrorFlag.CORRUPT
        return
    buf.put_64(len(data))
    buf.put_raw(data + b"\0")


def put_str_len(buf: Buffer, value: Optional[StrLike], length: int) -> None:
    """Append the first ``length`` bytes of ``value`` as a string."""
    if value is None:
        buf.put_64(NULL_LEN)
        return
    data = _encode(value)
    if length < 0 or length > len(data):
        raise ValueError("length exceeds the size of the string")
    buf.put_64(length)
    buf.put_raw(data[:length])
    buf.put_8(0)


def get_str(buf: Buffer) -> Optional[str]:
    """Consume a string written by :func:`put_str`.

    Returns None for a stored ``None`` or when the buffer holds too little
    data, in which case the buffer is marked corrupt.
    """
    length = buf.get_64()
    if length == NULL_LEN:
        return None
    if not buf.valid:
        return None
    if buf.rpos + length + 1 > buf.wpos:
        buf.err |= ErrorFlag.CORRUPT
        return None
    raw = bytes(buf.rbuf()[:length])
    buf.mark_read(length + 1)
    return _decode(raw)


def put_fmt(buf: Buffer, fmt: str, *args: object) -> None:
    """Append ``fmt % args`` as a length-prefixed string."""
    data = _encode(fmt % args)
    pos = buf.wpos
    written = len(data)
    quota = max(buf.quota - _LEN_BYTES, 0)

    if written >= quota:
        if not buf.reserve(written + _LEN_BYTES):
            return
        quota = buf.quota - _LEN_BYTES
        if written >= quota:
            buf.err |= ErrorFlag.OOM
            return

    buf.set_data(pos + _LEN_BYTES, data + b"\0")
    buf.set_64(written, pos)
    buf.mark_write(written + _LEN_BYTES + 1)


def put_text(buf: Buffer, fmt: str, *args: object) -> None:
    """Append ``fmt % args`` to the NUL-terminated text already in ``buf``.

    On failure the write position is reset to zero.
    """
    data = _encode(fmt % args)
    off = 1 if buf.size > 0 else 0
    written = len(data)

    if written >= buf.quota:
        if not buf.reserve(written + 1):
            buf.wpos = 0
            return
        if written >= buf.quota:
            buf.err = ErrorFlag.OOM
            buf.wpos = 0
            return

    buf.set_data(buf.wpos - off, data + b"\0")
    buf.mark_write(written - off + 1)


def put_blob(buf: Buffer, data: StrLike) -> None:
    """Append an 8-byte length followed by ``data``."""
    raw = _encode(data)
    buf.put_64(len(raw))
    buf.put_raw(raw)


def get_blob(buf: Buffer, length: int) -> Optional[bytes]:
    """Consume ``length`` bytes; None for zero length or missing data."""
    if length == 0:
        return None
    if buf.rpos + length > buf.wpos:
        buf.err |= ErrorFlag.CORRUPT
        return None
    raw = bytes(buf.rbuf()[:length])
    buf.mark_read(length)
    return raw