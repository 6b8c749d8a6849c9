"""Integer/byte conversions, hex dumps and a small two-value container."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]

_HEX_DIGITS = b"0123456789ABCDEF"


@dataclass
class Pair:
    """Two numbers held together, with element-wise arithmetic."""

    first: Number = 0
    second: Number = 0

    def __add__(self, other: object) -> "Pair":
        if not isinstance(other, Pair):
            return NotImplemented
        return Pair(self.first + other.first, self.second + other.second)

    def __iadd__(self, other: object) -> "Pair":
        if not isinstance(other, Pair):
            return NotImplemented
        self.first += other.first
        self.second += other.second
        return self

    def __isub__(self, other: object) -> "Pair":
        if not isinstance(other, Pair):
            return NotImplemented
        self.first -= other.first
        self.second -= other.second
        return self

    def __truediv__(self, divisor: Number) -> "Pair":
        return Pair(self.first / divisor, self.second / divisor)

    @staticmethod
    def _check_index(index: int) -> None:
        if index not in (0, 1):
            raise IndexError(f"Pair index out of range: {index}")

    def __getitem__(self, index: int) -> Number:
        self._check_index(index)
        return self.first if index == 0 else self.second

    def __setitem__(self, index: int, value: Number) -> None:
        self._check_index(index)
        if index == 0:
            self.first = value
        else:
            self.second = value

    def __iter__(self) -> Iterator[Number]:
        yield self.first
        yield self.second

    def diff(self) -> Number:
        """Return second minus first."""
        return self.second - self.first

    def diff_abs(self) -> Number:
        """Return the absolute difference of the two values."""
        return abs(self.second - self.first)


def _take(data: bytes, size: int) -> bytes:
    raw = bytes(data)
    if len(raw) < size:
        raise ValueError(f"need at least {size} bytes, got {len(raw)}")
    return raw[:size]


def bytes_to_uint16(data: bytes) -> int:
    """Read an unsigned 16-bit value, most significant byte first."""
    return int.from_bytes(_take(data, 2), "big")


def bytes_to_uint32(data: bytes) -> int:
    """Read an unsigned 32-bit value, most significant byte first."""
    return int.from_bytes(_take(data, 4), "big")


def uint16_to_bytes(value: int) -> bytes:
    """Write the low 16 bits of ``value`` as two bytes, most significant first."""
    return (value & 0xFFFF).to_bytes(2, "big")


def ascii_to_int(c: Union[str, int]) -> int:
    """Return the value of a hexadecimal digit character, or 0 if it is not one."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        c = ord(c)
    if ord("0") <= c <= ord("9"):
        return c - ord("0")
    if ord("A") <= c <= ord("F"):
        return c - ord("A") + 10
    if ord("a") <= c <= ord("f"):
        return c - ord("a") + 10
    return 0


def hex_dump(data: bytes) -> bytes:
    """Return the upper-case ASCII hex dump of ``data``, two characters per byte."""
    out = bytearray()
    for byte in bytes(data):
        out.append(_HEX_DIGITS[byte >> 4])
        out.append(_HEX_DIGITS[byte & 0x0F])
    return bytes(out)


def division45(elements: int, denominator: int) -> int:
    """Divide non-negative integers, rounding halves up."""
    if elements < 0 or denominator < 0:
        raise ValueError("division45 accepts non-negative arguments only")
    return (elements + denominator // 2) // denominator