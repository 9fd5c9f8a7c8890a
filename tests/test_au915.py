import pytest

from lorawan_region.au915 import AU915, DOWNLINK_CHANNELS, UPLINK_CHANNELS
from lorawan_region.channel_mask import ChannelMask
from lorawan_region.join_channels import Subband
from lorawan_region.radio import DR, Bandwidth, Datarate, Frame, SpreadingFactor, Window
from lorawan_region.rng import Prng


def _plan_with_only(control, low, high):
    plan = AU915()
    plan.set_125k_channels(False)
    plan.handle_link_adr_channel_mask(control, ChannelMask([low, high]))
    return plan


def test_edge_channels_give_plan_frequencies():
    plan = _plan_with_only(0, 0x01, 0x00)
    _, freq = plan.get_tx_dr_and_frequency(Prng(0), DR.DR_0, Frame.DATA)
    assert freq == 915_200_000
    _, freq = plan.get_tx_dr_and_frequency(Prng(0), DR.DR_6, Frame.DATA)
    assert freq == 915_900_000

    plan = _plan_with_only(3, 0x00, 0x80)
    _, freq = plan.get_tx_dr_and_frequency(Prng(1), DR.DR_0, Frame.DATA)
    assert freq == 927_800_000

    plan = _plan_with_only(0, 0x80, 0x00)
    _, freq = plan.get_tx_dr_and_frequency(Prng(2), DR.DR_6, Frame.DATA)
    assert freq == 927_100_000
    assert len(UPLINK_CHANNELS) == 72


def test_rx1_frequencies_follow_downlink_table():
    expected = (
        922_300_000,
        923_900_000,
        924_500_000,
        925_100_000,
        925_700_000,
        926_300_000,
        926_900_000,
        927_500_000,
    )
    observed = []
    for bit in range(8):
        plan = _plan_with_only(0, 1 << bit, 0x00)
        plan.get_tx_dr_and_frequency(Prng(bit), DR.DR_0, Frame.DATA)
        observed.append(plan.get_rx_frequency(Frame.DATA, Window.RX1))
    assert tuple(observed) == expected


def test_rx1_datarate_mapping():
    plan = AU915()
    assert plan.get_rx_datarate(DR.DR_0, Frame.DATA, Window.RX1) == Datarate(
        Bandwidth.KHZ_500, SpreadingFactor.SF12
    )
    assert plan.get_rx_datarate(DR.DR_5, Frame.DATA, Window.RX1) == Datarate(
        Bandwidth.KHZ_500, SpreadingFactor.SF7
    )
    assert plan.get_rx_datarate(DR.DR_7, Frame.DATA, Window.RX1) == plan.get_rx_datarate(
        DR.DR_1, Frame.DATA, Window.RX1
    )


@pytest.mark.parametrize("datarate", [DR.DR_8, DR.DR_13, DR.DR_15])
def test_rx1_datarate_invalid(datarate):
    with pytest.raises(ValueError):
        AU915().get_rx_datarate(datarate, Frame.DATA, Window.RX1)


def test_rx2_datarate_and_frequency():
    plan = AU915()
    assert plan.get_rx_datarate(DR.DR_2, Frame.DATA, Window.RX2) == Datarate(
        Bandwidth.KHZ_500, SpreadingFactor.SF12
    )
    assert plan.get_rx_frequency(Frame.JOIN, Window.RX2) == 923_300_000
    assert plan.get_dbm() == 21


@pytest.mark.parametrize("seed", range(20))
def test_join_bias_uses_subband(seed):
    plan = AU915()
    plan.set_join_bias_and_noncompliant_retries(Subband.SB_3, 3)
    rng = Prng(seed)
    for _ in range(3):
        datarate, freq = plan.get_tx_dr_and_frequency(rng, DR.DR_0, Frame.JOIN)
        assert freq in UPLINK_CHANNELS[16:24]
        assert datarate == Datarate(Bandwidth.KHZ_125, SpreadingFactor.SF12)


@pytest.mark.parametrize("seed", range(20))
def test_data_dr6_uses_500khz_channels(seed):
    plan = AU915()
    datarate, freq = plan.get_tx_dr_and_frequency(Prng(seed), DR.DR_6, Frame.DATA)
    assert datarate.bandwidth == Bandwidth.KHZ_500
    assert freq == UPLINK_CHANNELS[64 + plan.last_tx_channel]


@pytest.mark.parametrize("seed", range(20))
def test_data_dr0_uses_125khz_channels(seed):
    plan = AU915()
    _, freq = plan.get_tx_dr_and_frequency(Prng(seed), DR.DR_0, Frame.DATA)
    assert freq == UPLINK_CHANNELS[plan.last_tx_channel]
    assert plan.last_tx_channel < 64
    assert plan.get_rx_frequency(Frame.DATA, Window.RX1) == DOWNLINK_CHANNELS[
        plan.last_tx_channel % 8
    ]


def test_join_accept_channel_mask_limits_data_channels():
    plan = AU915()
    plan.process_join_accept(ChannelMask([0x00, 0xFF, 0, 0, 0, 0, 0, 0, 0]))
    rng = Prng(3)
    for _ in range(20):
        _, freq = plan.get_tx_dr_and_frequency(rng, DR.DR_2, Frame.DATA)
        assert freq in UPLINK_CHANNELS[8:16]


def test_lr_fhss_datarate_not_supported():
    with pytest.raises(ValueError):
        AU915().get_tx_dr_and_frequency(Prng(1), DR.DR_7, Frame.DATA)