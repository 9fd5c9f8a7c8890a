"""LoRaWAN regional channel plans: uplink channel selection, data rates and receive window settings."""

__version__ = "0.1.0"