"""The US 902-928 MHz fixed channel plan."""

from __future__ import annotations

from .fixed import FixedChannelPlan
from .radio import DR, Bandwidth, Datarate, Frame, SpreadingFactor, Window

DBM = 21
DEFAULT_RX2 = 923_300_000

DATARATES: tuple[Datarate | None, ...] = (
    Datarate(Bandwidth.KHZ_125, SpreadingFactor.SF10),
    Datarate(Bandwidth.KHZ_125, SpreadingFactor.SF9),
    Datarate(Bandwidth.KHZ_125, SpreadingFactor.SF8),
    Datarate(Bandwidth.KHZ_125, SpreadingFactor.SF7),
    Datarate(Bandwidth.KHZ_500, SpreadingFactor.SF8),
    None,
    None,
    None,
    Datarate(Bandwidth.KHZ_500, SpreadingFactor.SF12),
    Datarate(Bandwidth.KHZ_500, SpreadingFactor.SF11),
    Datarate(Bandwidth.KHZ_500, SpreadingFactor.SF10),
    Datarate(Bandwidth.KHZ_500, SpreadingFactor.SF9),
    Datarate(Bandwidth.KHZ_500, SpreadingFactor.SF8),
    Datarate(Bandwidth.KHZ_500, SpreadingFactor.SF7),
)

# Channels 0-63 are 125 kHz wide, channels 64-71 are 500 kHz wide.
UPLINK_CHANNELS: tuple[int, ...] = tuple(
    [902_300_000 + 200_000 * i for i in range(64)]
    + [903_000_000 + 1_600_000 * i for i in range(8)]
)

DOWNLINK_CHANNELS: tuple[int, ...] = tuple(923_300_000 + 600_000 * i for i in range(8))

# No support for an RX1 data rate offset.
RX1_DATARATES: dict[DR, DR] = {
    DR.DR_0: DR.DR_10,
    DR.DR_1: DR.DR_11,
    DR.DR_2: DR.DR_12,
    DR.DR_3: DR.DR_13,
    DR.DR_4: DR.DR_13,
}


class US915(FixedChannelPlan):
    """State of the US915 region.

    Create it directly to bias the join process towards a subband, then
    wrap it with ``Configuration.from_plan``.
    """

    DATARATES = DATARATES
    UPLINK_CHANNELS = UPLINK_CHANNELS
    DOWNLINK_CHANNELS = DOWNLINK_CHANNELS
    DEFAULT_RX2 = DEFAULT_RX2
    DBM = DBM
    RX1_DATARATES = RX1_DATARATES
    RX2_DATARATE = DR.DR_8

    def get_rx_datarate(self, datarate: DR, frame: Frame, window: Window) -> Datarate:
        """Return the downlink data rate for a receive window."""
        if window is Window.RX1:
            try:
                rx_dr = RX1_DATARATES[DR(datarate)]
            except (KeyError, ValueError):
                raise ValueError(f"invalid TX data rate {datarate!r}") from None
        else:
            rx_dr = self.RX2_DATARATE
        return self._datarate(rx_dr)