"""Region selection and the radio configuration derived from it."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from .au915 import AU915
from .channel_mask import ChannelMask
from .dynamic import AS923_1, AS923_2, AS923_3, AS923_4, EU433, EU868, IN865
from .fixed import FixedChannelPlan
from .dynamic import DynamicChannelPlan
from .radio import DR, CodingRate, Datarate, Frame, RfConfig, TxConfig, Window
from .us915 import US915


class Region(Enum):
    """Supported LoRaWAN regions."""

    AS923_1 = "AS923_1"
    AS923_2 = "AS923_2"
    AS923_3 = "AS923_3"
    AS923_4 = "AS923_4"
    AU915 = "AU915"
    EU868 = "EU868"
    EU433 = "EU433"
    IN865 = "IN865"
    US915 = "US915"


_PLANS: dict[Region, type] = {
    Region.AS923_1: AS923_1,
    Region.AS923_2: AS923_2,
    Region.AS923_3: AS923_3,
    Region.AS923_4: AS923_4,
    Region.AU915: AU915,
    Region.EU868: EU868,
    Region.EU433: EU433,
    Region.IN865: IN865,
    Region.US915: US915,
}

Plan = DynamicChannelPlan | FixedChannelPlan


class Configuration:
    """Regional radio configuration: channels, data rates and power."""

    def __init__(self, region: Region | str) -> None:
        region = Region(region)
        self._region = region
        self._plan: Plan = _PLANS[region]()

    @classmethod
    def from_plan(cls, plan: Plan) -> Configuration:
        """Wrap an already set-up region plan, such as a biased ``US915``."""
        for region, plan_type in _PLANS.items():
            if isinstance(plan, plan_type):
                config = cls.__new__(cls)
                config._region = region
                config._plan = plan
                return config
        raise TypeError(f"{type(plan).__name__} is not a supported region plan")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._region.value!r})"

    @property
    def plan(self) -> Plan:
        """The region plan holding the channel state."""
        return self._plan

    def region(self) -> Region:
        """Return the region in use."""
        return self._region

    def create_tx_config(self, rng, datarate: DR, frame: Frame) -> TxConfig:
        """Pick a channel for an uplink and return the full transmit settings."""
        dr, frequency = self._plan.get_tx_dr_and_frequency(rng, datarate, frame)
        return TxConfig(
            power=self.get_dbm(),
            rf=RfConfig(
                frequency=frequency,
                bandwidth=dr.bandwidth,
                spreading_factor=dr.spreading_factor,
                coding_rate=self.get_coding_rate(),
            ),
        )

    def get_rx_config(self, datarate: DR, frame: Frame, window: Window) -> RfConfig:
        """Return the receive settings for a window after an uplink."""
        dr = self.get_rx_datarate(datarate, frame, window)
        return RfConfig(
            frequency=self.get_rx_frequency(frame, window),
            bandwidth=dr.bandwidth,
            spreading_factor=dr.spreading_factor,
            coding_rate=self.get_coding_rate(),
        )

    def process_join_accept(self, cf_list: Iterable[int] | ChannelMask | None) -> None:
        """Apply the CFList of a join accept."""
        self._plan.process_join_accept(cf_list)

    def set_channel_mask(self, channel_mask_control: int, channel_mask: ChannelMask) -> None:
        """Apply the channel mask of a LinkADRReq."""
        self._plan.handle_link_adr_channel_mask(channel_mask_control, channel_mask)

    def get_rx_frequency(self, frame: Frame, window: Window) -> int:
        return self._plan.get_rx_frequency(frame, window)

    def get_default_datarate(self) -> DR:
        return self._plan.get_default_datarate()

    def get_rx_datarate(self, datarate: DR, frame: Frame, window: Window) -> Datarate:
        return self._plan.get_rx_datarate(datarate, frame, window)

    def get_dbm(self) -> int:
        return self._plan.get_dbm()

    def get_coding_rate(self) -> CodingRate:
        return self._plan.get_coding_rate()