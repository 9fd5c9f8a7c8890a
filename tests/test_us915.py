import pytest

from lorawan_region.channel_mask import ChannelMask
from lorawan_region.join_channels import Subband
from lorawan_region.radio import DR, Bandwidth, Datarate, Frame, SpreadingFactor, Window
from lorawan_region.rng import Prng
from lorawan_region.us915 import DOWNLINK_CHANNELS, UPLINK_CHANNELS, US915


def _plan_with_only(control, low, high):
    plan = US915()
    plan.set_125k_channels(False)
    plan.handle_link_adr_channel_mask(control, ChannelMask([low, high]))
    return plan


def test_edge_channels_give_plan_frequencies():
    plan = _plan_with_only(0, 0x01, 0x00)
    _, freq = plan.get_tx_dr_and_frequency(Prng(0), DR.DR_0, Frame.DATA)
    assert freq == 902_300_000
    _, freq = plan.get_tx_dr_and_frequency(Prng(0), DR.DR_4, Frame.DATA)
    assert freq == 903_000_000
    assert plan.get_rx_frequency(Frame.DATA, Window.RX1) == 923_300_000

    plan = _plan_with_only(3, 0x00, 0x80)
    _, freq = plan.get_tx_dr_and_frequency(Prng(1), DR.DR_0, Frame.DATA)
    assert freq == 914_900_000
    assert plan.get_rx_frequency(Frame.DATA, Window.RX1) == 927_500_000

    plan = _plan_with_only(0, 0x80, 0x00)
    _, freq = plan.get_tx_dr_and_frequency(Prng(2), DR.DR_4, Frame.DATA)
    assert freq == 914_200_000
    assert len(UPLINK_CHANNELS) == 72


def test_rx1_datarate_mapping():
    plan = US915()
    assert plan.get_rx_datarate(DR.DR_0, Frame.DATA, Window.RX1) == Datarate(
        Bandwidth.KHZ_500, SpreadingFactor.SF10
    )
    assert plan.get_rx_datarate(DR.DR_4, Frame.DATA, Window.RX1) == Datarate(
        Bandwidth.KHZ_500, SpreadingFactor.SF7
    )
    assert plan.get_rx_datarate(DR.DR_3, Frame.DATA, Window.RX1) == plan.get_rx_datarate(
        DR.DR_4, Frame.DATA, Window.RX1
    )


@pytest.mark.parametrize("datarate", [DR.DR_5, DR.DR_8, DR.DR_15])
def test_rx1_datarate_invalid(datarate):
    with pytest.raises(ValueError):
        US915().get_rx_datarate(datarate, Frame.DATA, Window.RX1)


def test_rx2_datarate_is_dr8():
    plan = US915()
    for dr in (DR.DR_0, DR.DR_3, DR.DR_15):
        assert plan.get_rx_datarate(dr, Frame.DATA, Window.RX2) == Datarate(
            Bandwidth.KHZ_500, SpreadingFactor.SF12
        )


def test_dbm_and_rx2_frequency():
    plan = US915()
    assert plan.get_dbm() == 21
    assert plan.get_rx_frequency(Frame.DATA, Window.RX2) == 923_300_000


@pytest.mark.parametrize("seed", range(20))
def test_join_frequency_is_uplink_channel(seed):
    plan = US915()
    datarate, freq = plan.get_tx_dr_and_frequency(Prng(seed), DR.DR_0, Frame.JOIN)
    channel = UPLINK_CHANNELS.index(freq)
    if channel < 64:
        assert datarate == Datarate(Bandwidth.KHZ_125, SpreadingFactor.SF10)
    else:
        assert datarate == Datarate(Bandwidth.KHZ_500, SpreadingFactor.SF8)


@pytest.mark.parametrize("seed", range(20))
def test_join_bias_uses_subband(seed):
    plan = US915()
    plan.set_join_bias(Subband.SB_2)
    _, freq = plan.get_tx_dr_and_frequency(Prng(seed), DR.DR_0, Frame.JOIN)
    assert freq in UPLINK_CHANNELS[8:16]


@pytest.mark.parametrize("seed", range(20))
def test_data_500khz_uses_upper_channels(seed):
    plan = US915()
    datarate, freq = plan.get_tx_dr_and_frequency(Prng(seed), DR.DR_4, Frame.DATA)
    assert datarate.bandwidth == Bandwidth.KHZ_500
    assert freq in UPLINK_CHANNELS[64:]
    assert plan.last_tx_channel < 8
    assert plan.get_rx_frequency(Frame.DATA, Window.RX1) == DOWNLINK_CHANNELS[
        plan.last_tx_channel
    ]


def test_data_uses_only_enabled_channel():
    plan = US915()
    plan.set_125k_channels(False)
    plan.handle_link_adr_channel_mask(0, ChannelMask([0x08, 0x00]))
    rng = Prng(7)
    for _ in range(10):
        _, freq = plan.get_tx_dr_and_frequency(rng, DR.DR_0, Frame.DATA)
        assert freq == UPLINK_CHANNELS[3]
    assert plan.get_rx_frequency(Frame.DATA, Window.RX1) == DOWNLINK_CHANNELS[3]


def test_data_without_enabled_channel_fails():
    plan = US915()
    plan.handle_link_adr_channel_mask(7, ChannelMask([0x00, 0x00]))
    with pytest.raises(RuntimeError):
        plan.get_tx_dr_and_frequency(Prng(1), DR.DR_0, Frame.DATA)


def test_data_with_unsupported_datarate_fails():
    with pytest.raises(ValueError):
        US915().get_tx_dr_and_frequency(Prng(1), DR.DR_5, Frame.DATA)