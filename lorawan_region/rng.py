"""Seedable pseudorandom number generator based on wyrand.

The generator is used for two things only: producing DevNonces for join
requests and picking random channels for uplinks. Neither needs
cryptographic randomness, so a fast PRNG seeded from a true random
source is enough.
"""

from __future__ import annotations

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1
_WY_CONST_0 = 0x2D358DCCAA6C78A5
_WY_CONST_1 = 0x8BB84B93962EACC9


class Prng:
    """A wyrand generator producing 32- and 64-bit unsigned integers."""

    __slots__ = ("_state",)

    def __init__(self, seed: int) -> None:
        self._state = seed & _MASK64

    def __repr__(self) -> str:
        return f"{type(self).__name__}(state={self._state:#018x})"

    def __copy__(self) -> Prng:
        clone = type(self).__new__(type(self))
        clone._state = self._state
        return clone

    def __deepcopy__(self, memo: dict) -> Prng:
        return self.__copy__()

    def next_u64(self) -> int:
        """Return the next 64-bit unsigned value."""
        self._state = (self._state + _WY_CONST_0) & _MASK64
        product = self._state * (self._state ^ _WY_CONST_1)
        return (product & _MASK64) ^ (product >> 64)

    def next_u32(self) -> int:
        """Return the next 32-bit unsigned value."""
        return self.next_u64() & _MASK32

    def random_bytes(self, size: int) -> bytes:
        """Return ``size`` random bytes.

        Whole 8-byte chunks come from :meth:`next_u64` in little-endian
        order; a tail of up to four bytes comes from :meth:`next_u32`,
        a longer tail from :meth:`next_u64`.
        """
        if size < 0:
            raise ValueError("size must not be negative")
        out = bytearray()
        full, tail = divmod(size, 8)
        for _ in range(full):
            out += self.next_u64().to_bytes(8, "little")
        if tail > 4:
            out += self.next_u64().to_bytes(8, "little")[:tail]
        elif tail > 0:
            out += self.next_u32().to_bytes(4, "little")[:tail]
        return bytes(out)