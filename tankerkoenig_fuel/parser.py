from __future__ import annotations

from typing import Any, Dict, Iterable, List, Tuple

from .config import FuelConfig
from .const import FUEL_TYPES


def station_price(station: Dict[str, Any], fueltype: str) -> float:
    """Price for one fuel type; missing, null and false prices read as 0."""
    value = station.get(fueltype)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    return float(value)


def keep_station(station: Dict[str, Any], config: FuelConfig) -> bool:
    if config.show_open_only and not station.get("isOpen"):
        return False
    return all(station_price(station, fueltype) > 0 for fueltype in config.types)


def format_address(station: Dict[str, Any]) -> str:
    post_code = station.get("postCode")
    post_code = "" if post_code is None else str(post_code)
    return (
        f"{post_code.rjust(5, '0')[-5:]} {station.get('place')} - "
        f"{station.get('street')} {station.get('houseNumber')}"
    )


def normalize_station(station: Dict[str, Any]) -> Dict[str, Any]:
    """Add ``prices``, ``distance`` and ``address`` to a raw station in place."""
    station["prices"] = {fueltype: station.get(fueltype) for fueltype in FUEL_TYPES}
    station["distance"] = station.get("dist")
    station["address"] = format_address(station)
    return station


def price_sort_key(station: Dict[str, Any], sort_by: str) -> Tuple[bool, float]:
    price = station_price(station, sort_by)
    if price <= 0:
        return (True, 0.0)
    return (False, price)


def sort_by_price(stations: Iterable[Dict[str, Any]], sort_by: str) -> List[Dict[str, Any]]:
    """Return a new list ordered by ascending price on ``sort_by``.

    Stations without a price on that field go last, keeping their input order.
    """
    return sorted(stations, key=lambda s: price_sort_key(s, sort_by))
