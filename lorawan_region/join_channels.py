"""Join channel selection for fixed channel plans (US915, AU915).

Join attempts step through the 72 uplink channels bank by bank. One
channel is tried in each bank of eight, and a channel is not reused
until every channel has been tried. A preferred subband can be tried
first.
"""

from __future__ import annotations

from enum import IntEnum

from .channel_mask import ChannelMask

NUM_CHANNELS = 72
_CHANNELS_PER_BANK = 8


class Subband(IntEnum):
    """A subband of eight 125 kHz channels: subband 1 is channels 0-7, and so on."""

    SB_1 = 1
    SB_2 = 2
    SB_3 = 3
    SB_4 = 4
    SB_5 = 5
    SB_6 = 6
    SB_7 = 7
    SB_8 = 8

    @property
    def first_channel(self) -> int:
        return (self.value - 1) * _CHANNELS_PER_BANK


class AvailableChannels:
    """Channels not yet tried in the current round of join attempts."""

    def __init__(self) -> None:
        self.mask = ChannelMask()
        self.previous: int | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mask={self.mask!r}, previous={self.previous})"

    def is_exhausted(self) -> bool:
        """Return whether every channel has been tried."""
        return self.mask.is_cleared()

    def get_next(self, rng) -> int:
        """Pick the next channel to try and mark it as used."""
        if self.is_exhausted():
            self.reset()
        channel = self._pick(rng)
        self.mask.set_channel(channel, False)
        self.previous = channel
        return channel

    def reset(self) -> None:
        """Make every channel available again."""
        self.mask = ChannelMask()
        self.previous = None

    def _pick(self, rng) -> int:
        if self.previous is None:
            # Any channel among the bottom 64; all of them are available.
            return rng.next_u32() & 0b111111

        following = (self.previous + _CHANNELS_PER_BANK) % NUM_CHANNELS
        if self.mask.is_enabled(following):
            return following

        # Back at the starting bank: pick another random channel in it.
        bank_start = (following // _CHANNELS_PER_BANK) * _CHANNELS_PER_BANK
        if not any(
            self.mask.is_enabled(bank_start + offset) for offset in range(_CHANNELS_PER_BANK)
        ):
            raise RuntimeError(f"bank starting at channel {bank_start} has no channel left")
        entropy = rng.next_u32()
        entropy_used = 1
        channel = (entropy & 0b111) + bank_start
        while not self.mask.is_enabled(channel):
            # 30 of the 32 bits have been used: draw fresh entropy.
            if entropy_used == 10:
                entropy = rng.next_u32()
                entropy_used = 0
            entropy >>= 3
            entropy_used += 1
            channel = (entropy & 0b111) + bank_start
        return channel


class JoinChannels:
    """Join channel state, with an optional bias towards one subband."""

    def __init__(self) -> None:
        self.max_retries = 0
        self.num_retries = 0
        self.preferred_subband: Subband | None = None
        self.available_channels = AvailableChannels()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(preferred_subband={self.preferred_subband!r}, "
            f"max_retries={self.max_retries}, num_retries={self.num_retries})"
        )

    def set_join_bias(self, subband: Subband | int, max_retries: int) -> None:
        """Try ``subband`` for the first ``max_retries`` join attempts."""
        if max_retries < 0:
            raise ValueError("max_retries must not be negative")
        self.preferred_subband = Subband(subband)
        self.max_retries = max_retries

    def clear_join_bias(self) -> None:
        """Drop the preferred subband."""
        self.preferred_subband = None
        self.max_retries = 0

    def reset(self) -> None:
        """Reset the state after a join accept, ready for a later join."""
        self.num_retries = 0
        self.available_channels = AvailableChannels()

    def get_next_channel(self, rng) -> int:
        """Return the channel for the next join attempt."""
        if self.preferred_subband is not None and self.num_retries < self.max_retries:
            self.num_retries += 1
            # 500 kHz channels are not used for biased attempts.
            channel = rng.next_u32() % _CHANNELS_PER_BANK + self.preferred_subband.first_channel
            if self.num_retries == self.max_retries:
                # Last biased try: continue the standard sequence from here.
                self.available_channels.previous = channel
                self.available_channels.mask.set_channel(channel, False)
            return channel
        return self.available_channels.get_next(rng)