from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List

from .config import FuelConfig
from .const import CURRENCY, FUEL_TYPES, UNIT
from .exceptions import NoFuelDataError
from .geo import distance_km
from .parser import keep_station, normalize_station, sort_by_price
from .urls import build_area_url, build_detail_url

_LOGGER = logging.getLogger(__name__)

Fetch = Callable[[str], Awaitable[Dict[str, Any]]]


class FuelPriceProvider:
    """Queries Tankerkönig and shapes the answer for a price display.

    Holds the config and the fetch callable only; every ``get_data`` call
    starts from scratch, so one provider may be awaited concurrently.
    """

    def __init__(self, config: FuelConfig, fetch: Fetch) -> None:
        self._config = config
        self._fetch = fetch

    @property
    def config(self) -> FuelConfig:
        return self._config

    async def _area_stations(self) -> List[Dict[str, Any]]:
        payload = await self._fetch(build_area_url(self._config))
        if payload.get("ok") is not True:
            raise NoFuelDataError("Error no fuel data")
        stations = [dict(s) for s in payload.get("stations") or []]
        kept = [s for s in stations if keep_station(s, self._config)]
        _LOGGER.debug("Area search returned %d stations, kept %d", len(stations), len(kept))
        return kept

    async def _fetch_detail(self, station_id: str) -> Dict[str, Any]:
        payload = await self._fetch(build_detail_url(self._config, station_id))
        if payload.get("ok") is not True or not payload.get("station"):
            raise NoFuelDataError("Error no fuel data or station id not found")
        return dict(payload["station"])

    async def _detail_payloads(self) -> List[Dict[str, Any]]:
        station_ids = self._config.only_stations
        if not self._config.parallel_detail:
            return [await self._fetch_detail(station_id) for station_id in station_ids]

        tasks = [asyncio.ensure_future(self._fetch_detail(sid)) for sid in station_ids]
        try:
            # gather keeps input order regardless of completion order.
            return list(await asyncio.gather(*tasks))
        except Exception:
            for task in tasks:
                task.cancel()
            raise

    async def _detail_stations(self) -> List[Dict[str, Any]]:
        stations: List[Dict[str, Any]] = []
        for station in await self._detail_payloads():
            if not keep_station(station, self._config):
                _LOGGER.debug("Skipping station %s", station.get("id"))
                continue
            station["dist"] = round(distance_km(self._config.origin, station), 1)
            stations.append(station)
        return stations

    async def get_data(self) -> Dict[str, Any]:
        try:
            if self._config.detail_mode:
                stations = await self._detail_stations()
            else:
                stations = await self._area_stations()
        except Exception as err:
            _LOGGER.error("Fuel price request failed: %s", err)
            raise

        for station in stations:
            normalize_station(station)

        return {
            "types": list(FUEL_TYPES),
            "unit": UNIT,
            "currency": CURRENCY,
            "byPrice": sort_by_price(stations, self._config.sort_by),
            "byDistance": stations,
        }


def create_provider(config: FuelConfig, fetch: Fetch) -> FuelPriceProvider:
    return FuelPriceProvider(config, fetch)
