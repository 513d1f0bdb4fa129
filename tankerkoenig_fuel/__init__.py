"""Tankerkönig fuel prices, filtered and ordered by price and by distance."""

from __future__ import annotations

from .api import TankerkoenigApi
from .config import FuelConfig, config_from_env
from .exceptions import NoFuelDataError, TankerkoenigError, TankerkoenigTransportError
from .provider import FuelPriceProvider, create_provider

__all__ = [
    "FuelConfig",
    "FuelPriceProvider",
    "NoFuelDataError",
    "TankerkoenigApi",
    "TankerkoenigError",
    "TankerkoenigTransportError",
    "config_from_env",
    "create_provider",
]
