"""Fixed channel plans: 64 channels of 125 kHz plus 8 of 500 kHz."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .channel_mask import ChannelMask
from .join_channels import NUM_CHANNELS, JoinChannels, Subband
from .radio import (
    DEFAULT_CODING_RATE,
    DR,
    Bandwidth,
    CodingRate,
    Datarate,
    Frame,
    Window,
)


class FixedChannelPlan:
    """Channel state for a fixed-channel region.

    Subclasses set ``DATARATES``, ``UPLINK_CHANNELS`` (72 frequencies),
    ``DOWNLINK_CHANNELS`` (8 frequencies), ``DEFAULT_RX2``, ``DBM``,
    ``RX1_DATARATES`` (TX data rate to RX1 data rate) and ``RX2_DATARATE``.
    """

    DATARATES: tuple[Datarate | None, ...] = ()
    UPLINK_CHANNELS: tuple[int, ...] = ()
    DOWNLINK_CHANNELS: tuple[int, ...] = ()
    DEFAULT_RX2: int = 0
    DBM: int = 0
    RX1_DATARATES: Mapping[DR, DR] = {}
    RX2_DATARATE: DR = DR.DR_8

    def __init__(self) -> None:
        if len(self.UPLINK_CHANNELS) != NUM_CHANNELS or len(self.DOWNLINK_CHANNELS) != 8:
            raise TypeError(f"{type(self).__name__} does not define a full channel plan")
        self.last_tx_channel = 0
        self.channel_mask = ChannelMask()
        self.join_channels = JoinChannels()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(channel_mask={self.channel_mask!r}, "
            f"last_tx_channel={self.last_tx_channel})"
        )

    def _datarate(self, index: int) -> Datarate:
        if 0 <= index < len(self.DATARATES):
            datarate = self.DATARATES[index]
            if datarate is not None:
                return datarate
        raise ValueError(f"data rate {index} is not available in {type(self).__name__}")

    def set_125k_channels(self, enabled: bool) -> None:
        """Enable or disable all 64 channels of 125 kHz."""
        value = 0xFF if enabled else 0x00
        for bank in range(8):
            self.channel_mask.set_bank(bank, value)

    def set_join_bias(self, subband: Subband | int) -> None:
        """Make the first join attempt on ``subband``."""
        self.join_channels.set_join_bias(subband, 1)

    def set_join_bias_and_noncompliant_retries(
        self, subband: Subband | int, max_retries: int
    ) -> None:
        """Make the first ``max_retries`` join attempts on ``subband``.

        More than one attempt is not compliant with the specification; a
        network that uses other channels would never be joined if this
        were the only strategy, so keep the number low.
        """
        self.join_channels.set_join_bias(subband, max_retries)

    def clear_join_bias(self) -> None:
        self.join_channels.clear_join_bias()

    def process_join_accept(self, cf_list: Iterable[int] | ChannelMask | None) -> None:
        """Reset join state and apply a channel-mask CFList if present."""
        self.join_channels.reset()
        if isinstance(cf_list, ChannelMask):
            if len(cf_list) != NUM_CHANNELS:
                raise ValueError(
                    f"CFList channel mask must cover {NUM_CHANNELS} channels, "
                    f"got {len(cf_list)}"
                )
            self.channel_mask = ChannelMask(bytes(cf_list))

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
            self.set_125k_channels(True)
        elif channel_mask_control == 7:
            self.set_125k_channels(False)
        # Other values are reserved for future use.

    def _random_enabled_channel(self, rng, bits: int) -> int:
        if not any(self.channel_mask.is_enabled(c) for c in range(bits + 1)):
            raise RuntimeError("no enabled channel is available for a data uplink")
        channel = rng.next_u32() & bits
        while not self.channel_mask.is_enabled(channel):
            channel = rng.next_u32() & bits
        return channel

    def get_tx_dr_and_frequency(self, rng, datarate: DR, frame: Frame) -> tuple[Datarate, int]:
        """Pick a channel for an uplink; return its data rate and frequency."""
        if frame is Frame.JOIN:
            channel = self.join_channels.get_next_channel(rng)
            dr = DR.DR_0 if channel < 64 else DR.DR_4
            return self._datarate(dr), self.UPLINK_CHANNELS[channel]

        # 500 kHz data rates use channels 64-71, the others channels 0-63.
        dr = self._datarate(int(datarate))
        if dr.bandwidth == Bandwidth.KHZ_500:
            channel = self._random_enabled_channel(rng, 0b111)
            self.last_tx_channel = channel
            return dr, self.UPLINK_CHANNELS[64 + channel]
        channel = self._random_enabled_channel(rng, 0b111111)
        self.last_tx_channel = channel
        return dr, self.UPLINK_CHANNELS[channel]

    def get_rx_frequency(self, frame: Frame, window: Window) -> int:
        """Return the downlink frequency for a receive window."""
        if window is Window.RX1:
            return self.DOWNLINK_CHANNELS[self.last_tx_channel % 8]
        return self.DEFAULT_RX2

    def get_rx_datarate(self, datarate: DR, frame: Frame, window: Window) -> Datarate:
        """Return the downlink data rate for a receive window."""
        if window is Window.RX1:
            try:
                rx_dr = self.RX1_DATARATES[DR(datarate)]
            except (KeyError, ValueError):
                raise ValueError(f"invalid TX data rate {datarate!r}") from None
        else:
            rx_dr = self.RX2_DATARATE
        return self._datarate(rx_dr)

    def get_default_datarate(self) -> DR:
        return DR.DR_0

    def get_dbm(self) -> int:
        return self.DBM

    def get_coding_rate(self) -> CodingRate:
        return DEFAULT_CODING_RATE