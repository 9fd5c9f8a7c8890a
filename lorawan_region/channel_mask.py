"""Bit mask of enabled channels, one bit per channel in banks of eight."""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_SIZE = 9


class ChannelMask:
    """A fixed-size channel mask.

    Byte ``i`` (a bank) holds channels ``8*i`` to ``8*i + 7``, lowest bit
    first. Without data, every channel is enabled.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Iterable[int] | None = None, size: int | None = None) -> None:
        if data is None:
            self._data = bytearray(b"\xff" * (DEFAULT_SIZE if size is None else size))
            return
        raw = bytes(data)
        if size is None:
            size = len(raw)
        if len(raw) < size:
            raise ValueError(
                f"channel mask needs {size} bytes, got {len(raw)}"
            )
        self._data = bytearray(raw[:size])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({bytes(self._data)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChannelMask):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # mutable

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __len__(self) -> int:
        """Number of channels the mask covers."""
        return len(self._data) * 8

    def __copy__(self) -> ChannelMask:
        return ChannelMask(self._data)

    def __deepcopy__(self, memo: dict) -> ChannelMask:
        return self.__copy__()

    def _check_channel(self, channel: int) -> None:
        if not 0 <= channel < len(self):
            raise IndexError(f"channel {channel} outside mask of {len(self)} channels")

    def set_bank(self, index: int, value: int) -> None:
        """Set a whole bank of eight channels from one byte."""
        if not 0 <= index < len(self._data):
            raise IndexError(f"bank {index} outside mask of {len(self._data)} banks")
        if not 0 <= value <= 0xFF:
            raise ValueError(f"bank value {value} does not fit in a byte")
        self._data[index] = value

    def get_index(self, index: int) -> int:
        """Return the byte of bank ``index``."""
        if not 0 <= index < len(self._data):
            raise IndexError(f"bank {index} outside mask of {len(self._data)} banks")
        return self._data[index]

    def is_enabled(self, channel: int) -> bool:
        """Return whether ``channel`` is enabled."""
        self._check_channel(channel)
        bank, bit = divmod(channel, 8)
        return bool(self._data[bank] & (1 << bit))

    def set_channel(self, channel: int, enabled: bool) -> None:
        """Enable or disable a single channel."""
        self._check_channel(channel)
        bank, bit = divmod(channel, 8)
        if enabled:
            self._data[bank] |= 1 << bit
        else:
            self._data[bank] &= ~(1 << bit) & 0xFF

    def statuses(self) -> list[bool]:
        """Return the enabled state of every channel, in channel order."""
        return [bool(byte & (1 << bit)) for byte in self._data for bit in range(8)]

    def is_cleared(self) -> bool:
        """Return whether no channel is enabled."""
        return not any(self._data)