"""Dynamic channel plans: EU868, EU433, IN865 and the AS923 variants.

A dynamic plan has a few fixed join channels plus up to five extra
channels that the network hands out in the CFList of a join accept.
"""

from __future__ import annotations

from collections.abc import Iterable

from .channel_mask import ChannelMask
from .radio import (
    DEFAULT_CODING_RATE,
    DEFAULT_DBM,
    DR,
    Bandwidth,
    CodingRate,
    Datarate,
    Frame,
    SpreadingFactor,
    Window,
)

NUM_ADDITIONAL_CHANNELS = 5

_BASE_DATARATES: tuple[Datarate, ...] = (
    Datarate(Bandwidth.KHZ_125, SpreadingFactor.SF12),
    Datarate(Bandwidth.KHZ_125, SpreadingFactor.SF11),
    Datarate(Bandwidth.KHZ_125, SpreadingFactor.SF10),
    Datarate(Bandwidth.KHZ_125, SpreadingFactor.SF9),
    Datarate(Bandwidth.KHZ_125, SpreadingFactor.SF8),
    Datarate(Bandwidth.KHZ_125, SpreadingFactor.SF7),
    Datarate(Bandwidth.KHZ_250, SpreadingFactor.SF7),
    # FSK is not supported.
)


class DynamicChannelPlan:
    """Channel state for a dynamic-channel region.

    Subclasses set ``JOIN_CHANNELS``, ``DATARATES`` and ``DEFAULT_RX2``.
    """

    JOIN_CHANNELS: tuple[int, ...] = ()
    DATARATES: tuple[Datarate | None, ...] = ()
    DEFAULT_RX2: int = 0

    def __init__(self) -> None:
        if not self.JOIN_CHANNELS:
            raise TypeError(f"{type(self).__name__} defines no join channels")
        self.additional_channels: list[int | None] = [None] * NUM_ADDITIONAL_CHANNELS
        self.channel_mask = ChannelMask()
        self.last_tx_channel = 0
        self.rx1_offset = 0
        self.rx2_dr = 0

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(additional_channels={self.additional_channels!r}, "
            f"channel_mask={self.channel_mask!r}, last_tx_channel={self.last_tx_channel})"
        )

    @property
    def num_join_channels(self) -> int:
        return len(self.JOIN_CHANNELS)

    def get_channel(self, channel: int) -> int | None:
        """Return the frequency of ``channel``, or None if it is not defined."""
        if channel < 0:
            raise IndexError(f"negative channel {channel}")
        if channel < self.num_join_channels:
            return self.JOIN_CHANNELS[channel]
        index = channel - self.num_join_channels
        if index >= len(self.additional_channels):
            return None
        return self.additional_channels[index]

    def _datarate(self, index: int) -> Datarate:
        if 0 <= index < len(self.DATARATES):
            datarate = self.DATARATES[index]
            if datarate is not None:
                return datarate
        raise ValueError(f"data rate {index} is not available in {type(self).__name__}")

    def _highest_additional_channel_index_plus_one(self) -> int:
        return max(
            (i + 1 for i, freq in enumerate(self.additional_channels) if freq is not None),
            default=0,
        )

    def _random_channel_mask_bits(self) -> int:
        span = self._highest_additional_channel_index_plus_one() + self.num_join_channels
        if span > 16:
            return 0b11111
        if span > 8:
            return 0b1111
        return 0b111

    def _is_usable(self, channel: int) -> bool:
        return self.channel_mask.is_enabled(channel) and self.get_channel(channel) is not None

    def process_join_accept(self, cf_list: Iterable[int] | ChannelMask | None) -> None:
        """Apply the CFList of a join accept.

        A list of frequencies defines the additional channels; a zero
        frequency marks the channel unused. A channel-mask CFList is
        ignored by dynamic plans.
        """
        if cf_list is None or isinstance(cf_list, ChannelMask):
            return
        frequencies = list(cf_list)
        if len(frequencies) > NUM_ADDITIONAL_CHANNELS:
            raise ValueError(
                f"CFList holds at most {NUM_ADDITIONAL_CHANNELS} frequencies, "
                f"got {len(frequencies)}"
            )
        for index, freq in enumerate(frequencies):
            self.additional_channels[index] = freq if freq != 0 else None

    def handle_link_adr_channel_mask(
        self, channel_mask_control: int, channel_mask: ChannelMask
    ) -> None:
        """Apply the channel mask of a LinkADRReq."""
        if 0 <= channel_mask_control <= 4:
            base_index = channel_mask_control * 2
            self.channel_mask.set_bank(base_index, channel_mask.get_index(0))
            self.channel_mask.set_bank(base_index + 1, channel_mask.get_index(1))
        elif channel_mask_control == 5:
            bits = channel_mask.get_index(0) | (channel_mask.get_index(1) << 8)
            for bank in range(9):
                self.channel_mask.set_bank(bank, ((bits & (1 << bank)) * 0xFF) & 0xFF)
        elif channel_mask_control == 6:
            for bank in range(8):
                self.channel_mask.set_bank(bank, 0xFF)
        # Other values are reserved for future use.

    def get_tx_dr_and_frequency(self, rng, datarate: DR, frame: Frame) -> tuple[Datarate, int]:
        """Pick a channel for an uplink; return its data rate and frequency."""
        if frame is Frame.JOIN:
            channel = rng.next_u32() & 0b111
            while channel >= self.num_join_channels:
                channel = rng.next_u32() & 0b111
            self.last_tx_channel = channel
            return self._datarate(int(datarate)), self.JOIN_CHANNELS[channel]

        dr = self._datarate(int(datarate))
        bits = self._random_channel_mask_bits()
        if not any(self._is_usable(channel) for channel in range(bits + 1)):
            raise RuntimeError("no enabled channel is available for a data uplink")
        while True:
            channel = rng.next_u32() & bits
            if self._is_usable(channel):
                self.last_tx_channel = channel
                return dr, self.get_channel(channel)

    def get_rx_frequency(self, frame: Frame, window: Window) -> int:
        """Return the downlink frequency for a receive window."""
        if window is Window.RX1:
            freq = self.get_channel(self.last_tx_channel)
            if freq is None:
                raise RuntimeError(f"channel {self.last_tx_channel} is not defined")
            return freq
        return self.DEFAULT_RX2

    def get_rx_datarate(self, datarate: DR, frame: Frame, window: Window) -> Datarate:
        """Return the downlink data rate for a receive window."""
        if window is Window.RX1:
            index = int(datarate) + self.rx1_offset
        else:
            index = self.rx2_dr
        return self._datarate(index)

    def get_default_datarate(self) -> DR:
        return DR.DR_0

    def get_dbm(self) -> int:
        return DEFAULT_DBM

    def get_coding_rate(self) -> CodingRate:
        return DEFAULT_CODING_RATE


class EU868(DynamicChannelPlan):
    """EU 863-870 MHz."""

    JOIN_CHANNELS = (868_100_000, 868_300_000, 868_500_000)
    DATARATES = _BASE_DATARATES
    DEFAULT_RX2 = 869_525_000


class EU433(DynamicChannelPlan):
    """EU 433 MHz."""

    JOIN_CHANNELS = (433_175_000, 433_375_000, 433_575_000)
    DATARATES = _BASE_DATARATES
    DEFAULT_RX2 = 434_665_000


class IN865(DynamicChannelPlan):
    """India 865-867 MHz."""

    JOIN_CHANNELS = (865_062_500, 865_402_500, 865_985_000)
    DATARATES = _BASE_DATARATES[:6]
    DEFAULT_RX2 = 866_550_000


_AS923_JOIN_CHANNELS = (923_200_000, 923_200_000)


def _as923_join_channels(offset: int) -> tuple[int, ...]:
    return tuple(freq + offset for freq in _AS923_JOIN_CHANNELS)


class AS923_1(DynamicChannelPlan):  # noqa: N801
    """AS923 group 1."""

    JOIN_CHANNELS = _as923_join_channels(0)
    DATARATES = _BASE_DATARATES
    DEFAULT_RX2 = 923_200_000


class AS923_2(DynamicChannelPlan):  # noqa: N801
    """AS923 group 2."""

    JOIN_CHANNELS = _as923_join_channels(1_800_000)
    DATARATES = _BASE_DATARATES
    DEFAULT_RX2 = 921_400_000


class AS923_3(DynamicChannelPlan):  # noqa: N801
    """AS923 group 3."""

    JOIN_CHANNELS = _as923_join_channels(6_600_000)
    DATARATES = _BASE_DATARATES
    DEFAULT_RX2 = 916_600_000


class AS923_4(DynamicChannelPlan):  # noqa: N801
    """AS923 group 4."""

    JOIN_CHANNELS = _as923_join_channels(5_900_000)
    DATARATES = _BASE_DATARATES
    DEFAULT_RX2 = 917_300_000