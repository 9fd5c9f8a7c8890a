import dataclasses

import pytest

from lorawan_region import radio
from lorawan_region.radio import (
    DR,
    Bandwidth,
    CodingRate,
    Datarate,
    Frame,
    RfConfig,
    SpreadingFactor,
    TxConfig,
    Window,
)


def test_defaults_build_expected_rf_config():
    rf = RfConfig(
        868_100_000,
        radio.DEFAULT_BANDWIDTH,
        radio.DEFAULT_SPREADING_FACTOR,
        radio.DEFAULT_CODING_RATE,
    )
    expected = RfConfig(868_100_000, Bandwidth.KHZ_125, SpreadingFactor.SF7, CodingRate.CR_4_5)
    assert rf == expected
    tx = TxConfig(power=radio.DEFAULT_DBM, rf=rf)
    assert tx == TxConfig(power=14, rf=expected)


def test_dr_has_sixteen_indices():
    assert [int(d) for d in DR] == list(range(16))
    assert DR(5) is DR.DR_5


def test_dr_out_of_range():
    with pytest.raises(ValueError):
        DR(16)


def test_spreading_factor_by_value():
    assert SpreadingFactor(12) is SpreadingFactor.SF12
    with pytest.raises(ValueError):
        SpreadingFactor(13)


def test_datarate_equality_and_hashing():
    a = Datarate(Bandwidth.KHZ_125, SpreadingFactor.SF12)
    b = Datarate(bandwidth=Bandwidth.KHZ_125, spreading_factor=SpreadingFactor.SF12)
    c = Datarate(Bandwidth.KHZ_250, SpreadingFactor.SF7)
    assert a == b
    assert len({a, b, c}) == 2


def test_datarate_is_immutable():
    dr = Datarate(Bandwidth.KHZ_125, SpreadingFactor.SF7)
    with pytest.raises(dataclasses.FrozenInstanceError):
        dr.bandwidth = Bandwidth.KHZ_500
    assert dr.bandwidth is Bandwidth.KHZ_125


def test_tx_config_holds_rf_config():
    rf = RfConfig(868_100_000, Bandwidth.KHZ_125, SpreadingFactor.SF9, CodingRate.CR_4_5)
    tx = TxConfig(power=14, rf=rf)
    assert tx.rf.frequency == 868_100_000
    assert tx.rf.spreading_factor is SpreadingFactor.SF9
    assert tx.power == 14
    assert dataclasses.replace(rf, frequency=869_525_000).frequency == 869_525_000


def test_frame_and_window_members():
    assert {f.name for f in Frame} == {"JOIN", "DATA"}
    assert Window(1) is Window.RX1
    assert Window(2) is Window.RX2