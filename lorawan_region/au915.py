"""The Australian 915-928 MHz fixed channel plan."""

from __future__ import annotations

from .fixed import FixedChannelPlan
from .radio import DR, Bandwidth, Datarate, Frame, SpreadingFactor, Window

DBM = 21
DEFAULT_RX2 = 923_300_000

DATARATES: tuple[Datarate | None, ...] = (
    Datarate(Bandwidth.KHZ_125, SpreadingFactor.SF12),
    Datarate(Bandwidth.KHZ_125, SpreadingFactor.SF11),
    Datarate(Bandwidth.KHZ_125, SpreadingFactor.SF10),
    Datarate(Bandwidth.KHZ_125, SpreadingFactor.SF9),
    Datarate(Bandwidth.KHZ_125, SpreadingFactor.SF8),
    Datarate(Bandwidth.KHZ_125, SpreadingFactor.SF7),
    Datarate(Bandwidth.KHZ_500, SpreadingFactor.SF8),
    None,  # LR-FHSS is not supported
    Datarate(Bandwidth.KHZ_500, SpreadingFactor.SF12),
    Datarate(Bandwidth.KHZ_500, SpreadingFactor.SF11),
    Datarate(Bandwidth.KHZ_500, SpreadingFactor.SF10),
    Datarate(Bandwidth.KHZ_500, SpreadingFactor.SF9),
    Datarate(Bandwidth.KHZ_500, SpreadingFactor.SF8),
    Datarate(Bandwidth.KHZ_500, SpreadingFactor.SF7),
    None,  # RFU
    None,
)

# Channels 0-63 are 125 kHz wide, channels 64-71 are 500 kHz wide.
UPLINK_CHANNELS: tuple[int, ...] = tuple(
    [915_200_000 + 200_000 * i for i in range(64)]
    + [915_900_000 + 1_600_000 * i for i in range(8)]
)

DOWNLINK_CHANNELS: tuple[int, ...] = (
    922_300_000,
    923_900_000,
    924_500_000,
    925_100_000,
    925_700_000,
    926_300_000,
    926_900_000,
    927_500_000,
)

# No support for an RX1 data rate offset.
RX1_DATARATES: dict[DR, DR] = {
    DR.DR_0: DR.DR_8,
    DR.DR_1: DR.DR_9,
    DR.DR_2: DR.DR_10,
    DR.DR_3: DR.DR_11,
    DR.DR_4: DR.DR_12,
    DR.DR_5: DR.DR_13,
    DR.DR_6: DR.DR_13,
    DR.DR_7: DR.DR_9,
}


class AU915(FixedChannelPlan):
    """State of the AU915 region.

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