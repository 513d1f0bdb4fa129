from __future__ import annotations


class TankerkoenigError(Exception):
    """Base error for the fuel price pipeline."""


class NoFuelDataError(TankerkoenigError):
    """The service answered with ok=false."""


class TankerkoenigTransportError(TankerkoenigError):
    """HTTP error status or an unreadable response body."""
