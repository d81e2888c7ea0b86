"""Jenkins hash (lookup3) over byte strings and sequences of 32-bit words."""

from collections.abc import Iterable

JHASH_INITVAL = 0xDEADBEEF

_MASK = 0xFFFFFFFF


def _rot(x: int, k: int) -> int:
    return ((x << k) | (x >> (32 - k))) & _MASK


def _mix(a: int, b: int, c: int) -> tuple[int, int, int]:
    """Reversibly mix three 32-bit values."""
    a = (a - c) & _MASK
    a ^= _rot(c, 4)
    c = (c + b) & _MASK
    b = (b - a) & _MASK
    b ^= _rot(a, 6)
    a = (a + c) & _MASK
    c = (c - b) & _MASK
    c ^= _rot(b, 8)
    b = (b + a) & _MASK
    a = (a - c) & _MASK
    a ^= _rot(c, 16)
    c = (c + b) & _MASK
    b = (b - a) & _MASK
    b ^= _rot(a, 19)
    a = (a + c) & _MASK
    c = (c - b) & _MASK
    c ^= _rot(b, 4)
    b = (b + a) & _MASK
    return a, b, c


def _final(a: int, b: int, c: int) -> int:
    """Final mixing of three 32-bit values into the returned hash."""
    c ^= b
    c = (c - _rot(b, 14)) & _MASK
    a ^= c
    a = (a - _rot(c, 11)) & _MASK
    b ^= a
    b = (b - _rot(a, 25)) & _MASK
    c ^= b
    c = (c - _rot(b, 16)) & _MASK
    a ^= c
    a = (a - _rot(c, 4)) & _MASK
    b ^= a
    b = (b - _rot(a, 14)) & _MASK
    c ^= b
    c = (c - _rot(b, 24)) & _MASK
    return c


def jhash8(key: bytes, initval: int = 0) -> int:
    """Hash an arbitrary byte string into a 32-bit value.

    Every block but the last contributes only the first byte of each of its
    three 4-byte lanes; the last block contributes all of its bytes.
    """
    data = bytes(key)
    length = len(data)
    a = b = c = (JHASH_INITVAL + length + initval) & _MASK

    offset = 0
    remaining = length
    while remaining > 12:
        a = (a + data[offset]) & _MASK
        b = (b + data[offset + 4]) & _MASK
        c = (c + data[offset + 8]) & _MASK
        a, b, c = _mix(a, b, c)
        remaining -= 12
        offset += 12

    if remaining == 0:
        return c

    tail = data[offset:offset + remaining].ljust(12, b"\x00")
    a = (a + int.from_bytes(tail[0:4], "little")) & _MASK
    b = (b + int.from_bytes(tail[4:8], "little")) & _MASK
    c = (c + int.from_bytes(tail[8:12], "little")) & _MASK
    return _final(a, b, c)


def jhash32(words: Iterable[int], initval: int = 0) -> int:
    """Hash a sequence of unsigned 32-bit integers into a 32-bit value."""
    values = list(words)
    for value in values:
        if not 0 <= value <= _MASK:
            raise ValueError(f"word out of 32-bit range: {value}")

    length = len(values)
    a = b = c = (JHASH_INITVAL + ((length << 2) & _MASK) + initval) & _MASK

    rest = values
    while len(rest) > 3:
        a = (a + rest[0]) & _MASK
        b = (b + rest[1]) & _MASK
        c = (c + rest[2]) & _MASK
        a, b, c = _mix(a, b, c)
        rest = rest[3:]

    if not rest:
        return c

    padded = rest + [0] * (3 - len(rest))
    a = (a + padded[0]) & _MASK
    b = (b + padded[1]) & _MASK
    c = (c + padded[2]) & _MASK
    return _final(a, b, c)