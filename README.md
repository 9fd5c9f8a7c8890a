# lorawan-region

Regional channel plans for LoRaWAN end devices. Given a region, the package
picks uplink channels and data rates, and tells you which frequency and data
rate to listen on in each receive window.

Supported regions: AS923-1 to AS923-4, AU915, EU433, EU868, IN865 and US915.

## Installation

```
pip install .
```

## Usage

```python
from lorawan_region.configuration import Configuration, Region
from lorawan_region.radio import DR, Frame, Window
from lorawan_region.rng import Prng

config = Configuration(Region.EU868)
rng = Prng(42)

tx = config.create_tx_config(rng, DR.DR_0, Frame.JOIN)
print(tx.power, tx.rf.frequency, tx.rf.bandwidth, tx.rf.spreading_factor)

rx1 = config.get_rx_config(DR.DR_0, Frame.JOIN, Window.RX1)
rx2 = config.get_rx_config(DR.DR_0, Frame.JOIN, Window.RX2)
```

`Configuration` also accepts the region name as a string, for example
`Configuration("US915")`. `config.region()` returns the `Region` in use and
`config.plan` gives the underlying plan object that holds the channel state.

The radio types live in `lorawan_region.radio`: `Bandwidth`,
`SpreadingFactor`, `CodingRate`, `DR`, `Frame`, `Window`, and the frozen
dataclasses `Datarate`, `RfConfig` and `TxConfig`.

### Plans

- Dynamic plans (`lorawan_region.dynamic`): `EU868`, `EU433`, `IN865`,
  `AS923_1` to `AS923_4`, all subclasses of `DynamicChannelPlan`.
- Fixed plans: `US915` (`lorawan_region.us915`) and `AU915`
  (`lorawan_region.au915`), subclasses of `FixedChannelPlan`
  (`lorawan_region.fixed`). They use 64 channels of 125 kHz and 8 of 500 kHz;
  a 500 kHz data rate sends on channels 64-71, the others on 0-63.

### Fixed channel plans and join bias

`US915` and `AU915` can be set up directly, for example to favour one
subband while joining, and then wrapped in a `Configuration`:

```python
from lorawan_region.configuration import Configuration
from lorawan_region.join_channels import Subband
from lorawan_region.us915 import US915

us915 = US915()
us915.set_join_bias(Subband.SB_2)
config = Configuration.from_plan(us915)
```

Only the first join attempt uses the preferred subband. After that one channel
is tried in each bank of eight in turn, and no channel is reused until all 72
have been tried. `set_join_bias_and_noncompliant_retries(subband, max_retries)`
lets more attempts use the preferred subband. That does not comply with the
specification, so keep the number of retries low. `clear_join_bias()` removes
the bias.

### Network parameters

- `Configuration.process_join_accept(cf_list)` applies the CFList of a join
  accept. Dynamic plans take a list of up to five frequencies in Hz (0 marks
  an unused channel) and ignore a `ChannelMask`. Fixed plans reset their join
  state and take a `ChannelMask` covering 72 channels. `None` means no CFList.
- `Configuration.set_channel_mask(control, mask)` applies the channel mask
  control value and two-byte channel mask from a LinkADRReq.

`lorawan_region.channel_mask.ChannelMask(data=None, size=None)` is a bit mask
of channels in banks of eight. Without data it holds nine banks with every
channel enabled; `ChannelMask([0x03, 0x10])` builds a two-byte mask. It offers
`set_bank`, `get_index`, `is_enabled`, `set_channel`, `statuses`,
`is_cleared` and `bytes(mask)`.

### Errors

- `ValueError` when a data rate is not defined in the region, or when a TX data
  rate has no RX1 mapping in US915/AU915.
- `RuntimeError` when no enabled channel is left for a data uplink.

### Randomness

`lorawan_region.rng.Prng(seed)` is a seeded wyrand generator with
`next_u32()`, `next_u64()` and `random_bytes(size)`, which is enough to pick
channels. Any object with a `next_u32()` method returning an unsigned 32-bit
integer can be used in its place.

## What this package does not do

It only handles regional channel and data-rate selection. It does not encode
or decode LoRaWAN frames, parse join accepts or MAC commands from bytes, run a
MAC state machine or talk to a radio: the caller passes in already decoded
CFList values and channel masks, and uses the returned settings with its own
radio.

## Tests

```
pip install .[test]
pytest
```