"""Personal finance planning calculators and an interactive console menu."""

__version__ = "0.1.0"