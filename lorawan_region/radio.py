"""Radio parameter types and regional defaults."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class Bandwidth(IntEnum):
    """LoRa channel bandwidth, valued in Hz."""

    KHZ_125 = 125_000
    KHZ_250 = 250_000
    KHZ_500 = 500_000


class SpreadingFactor(IntEnum):
    """LoRa spreading factor."""

    SF5 = 5
    SF6 = 6
    SF7 = 7
    SF8 = 8
    SF9 = 9
    SF10 = 10
    SF11 = 11
    SF12 = 12


class CodingRate(IntEnum):
    """LoRa coding rate 4/x, valued by its denominator."""

    CR_4_5 = 5
    CR_4_6 = 6
    CR_4_7 = 7
    CR_4_8 = 8


class DR(IntEnum):
    """Data rate index. Not every index is valid in every region."""

    DR_0 = 0
    DR_1 = 1
    DR_2 = 2
    DR_3 = 3
    DR_4 = 4
    DR_5 = 5
    DR_6 = 6
    DR_7 = 7
    DR_8 = 8
    DR_9 = 9
    DR_10 = 10
    DR_11 = 11
    DR_12 = 12
    DR_13 = 13
    DR_14 = 14
    DR_15 = 15


class Frame(Enum):
    """Kind of uplink frame being sent."""

    JOIN = "join"
    DATA = "data"


class Window(Enum):
    """Receive window following an uplink."""

    RX1 = 1
    RX2 = 2


@dataclass(frozen=True)
class Datarate:
    """Bandwidth and spreading factor behind a regional data rate."""

    bandwidth: Bandwidth
    spreading_factor: SpreadingFactor


@dataclass(frozen=True)
class RfConfig:
    """Radio settings for a single transmission or reception."""

    frequency: int
    bandwidth: Bandwidth
    spreading_factor: SpreadingFactor
    coding_rate: CodingRate


@dataclass(frozen=True)
class TxConfig:
    """Transmit power in dBm together with the radio settings."""

    power: int
    rf: RfConfig


RECEIVE_DELAY1 = 1000
RECEIVE_DELAY2 = RECEIVE_DELAY1 + 1000
JOIN_ACCEPT_DELAY1 = 5000
JOIN_ACCEPT_DELAY2 = 6000
MAX_FCNT_GAP = 16384
ADR_ACK_LIMIT = 64
ADR_ACK_DELAY = 32
ACK_TIMEOUT = 2

DEFAULT_BANDWIDTH = Bandwidth.KHZ_125
DEFAULT_SPREADING_FACTOR = SpreadingFactor.SF7
DEFAULT_CODING_RATE = CodingRate.CR_4_5
DEFAULT_DBM = 14