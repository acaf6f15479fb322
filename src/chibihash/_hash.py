"""ChibiHash v1: small, fast, seeded 64-bit non-cryptographic hash."""

from __future__ import annotations

import struct

from ._errors import ChibiHashError

P1: int = 0x2B7E151628AED2A5
P2: int = 0x9E3793492EEDC3F7
P3: int = 0x3243F6A8885A308D
MOREMUR_M1: int = 0x3C79AC492BA7B653
MOREMUR_M2: int = 0x1C69B3F74AC4AE35
_MASK64: int = 0xFFFFFFFFFFFFFFFF

_LE64 = struct.Struct("<Q")

BytesLike = bytes | bytearray | memoryview


def _as_buffer(data: object) -> BytesLike:
    if isinstance(data, (bytes, bytearray)):
        return data
    # any other buffer-protocol object (memoryview, array.array, ...)
    try:
        view = memoryview(data)  # type: ignore[arg-type]
    except TypeError:
        raise TypeError(
            f"expected a bytes-like object, got {type(data).__name__}"
        ) from None
    return view.cast("B")


def _load(buf: BytesLike, offset: int) -> int:
    return _LE64.unpack_from(buf, offset)[0]


def load_le64(data: BytesLike, offset: int = 0) -> int:
    """Read 8 bytes at ``offset`` as an unsigned little-endian 64-bit int.

    Raises ChibiHashError if fewer than 8 bytes are available.
    """
    buf = _as_buffer(data)
    if offset < 0 or offset + 8 > len(buf):
        raise ChibiHashError(
            f"load_le64 needs 8 bytes at offset {offset}, "
            f"buffer has {len(buf)}"
        )
    return _load(buf, offset)


def hash64(data: BytesLike | str | None, seed: int = 0) -> int:
    """Compute the ChibiHash64 digest of ``data`` under ``seed``.

    ``str`` input is hashed as its UTF-8 bytes and ``None`` as empty input.
    The seed is reduced modulo 2**64.
    """
    if data is None:
        data = b""
    elif isinstance(data, str):
        data = data.encode("utf-8")
    k = _as_buffer(data)
    if not isinstance(seed, int):
        raise TypeError(f"seed must be an int, got {type(seed).__name__}")
    seed &= _MASK64

    n = len(k)
    remaining = n
    pos = 0
    h = [P1, P2, P3, seed]

    # Bulk: 4 lanes x 8 bytes per block
    while remaining >= 32:
        for i in range(4):
            lane = _load(k, pos + i * 8)
            h[i] ^= lane
            h[i] = (h[i] * P1) & _MASK64
            h[(i + 1) & 3] ^= ((lane << 40) & _MASK64) | (lane >> 24)
        pos += 32
        remaining -= 32

    h[0] = (h[0] + (((n << 32) & _MASK64) | (n >> 32))) & _MASK64

    if remaining & 1:
        h[0] ^= k[pos]
        pos += 1
        remaining -= 1

    h[0] = (h[0] * P2) & _MASK64
    h[0] ^= h[0] >> 31

    # remaining <= 30 here, so at most three 8-byte chunks
    i = 1
    while remaining >= 8:
        assert i < 4, "lane index out of range"
        h[i] ^= _load(k, pos)
        h[i] = (h[i] * P2) & _MASK64
        h[i] ^= h[i] >> 31
        pos += 8
        remaining -= 8
        i += 1

    i = 0
    while remaining > 0:
        assert i < 3, "lane index out of range"
        if remaining >= 2:
            h[i] ^= k[pos] | (k[pos + 1] << 8)
            pos += 2
            remaining -= 2
        else:
            h[i] ^= k[pos]
            pos += 1
            remaining -= 1
        h[i] = (h[i] * P3) & _MASK64
        h[i] ^= h[i] >> 31
        i += 1

    x = seed
    x ^= (h[0] * ((h[2] >> 32) | 1)) & _MASK64
    x ^= (h[1] * ((h[3] >> 32) | 1)) & _MASK64
    x ^= (h[2] * ((h[0] >> 32) | 1)) & _MASK64
    x ^= (h[3] * ((h[1] >> 32) | 1)) & _MASK64

    # moremur
    x ^= x >> 27
    x = (x * MOREMUR_M1) & _MASK64
    x ^= x >> 33
    x = (x * MOREMUR_M2) & _MASK64
    x ^= x >> 27
    return x
