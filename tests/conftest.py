from __future__ import annotations

from typing import Any, Dict, List

import pytest

from tankerkoenig_fuel.config import FuelConfig

API_KEY = "00000000-0000-0000-0000-000000000002"
HOME = {"lat": 52.521, "lng": 13.438}


class FakeFetch:
    """Answers URLs from a list of canned payloads, in call order."""

    def __init__(self, payloads: List[Dict[str, Any]]) -> None:
        self._payloads = list(payloads)
        self.urls: List[str] = []

    async def __call__(self, url: str) -> Dict[str, Any]:
        self.urls.append(url)
        payload = self._payloads.pop(0)
        if isinstance(payload, Exception):
            raise payload
        return payload


def _station(station_id: str, diesel: float, e5: float, e10: float, **extra: Any) -> Dict[str, Any]:
    station = {
        "id": station_id,
        "name": f"Station {station_id}",
        "brand": "ARAL",
        "street": "Hauptstrasse",
        "houseNumber": "1",
        "postCode": 10115,
        "place": "Berlin",
        "lat": 52.53,
        "lng": 13.44,
        "isOpen": True,
        "diesel": diesel,
        "e5": e5,
        "e10": e10,
    }
    station.update(extra)
    return station


@pytest.fixture
def make_station():
    return _station


@pytest.fixture
def area_config() -> FuelConfig:
    return FuelConfig(
        lat=HOME["lat"],
        lng=HOME["lng"],
        api_key=API_KEY,
        radius=5,
        sort_by="diesel",
        types=("diesel",),
    )


@pytest.fixture
def detail_config() -> FuelConfig:
    return FuelConfig(
        lat=HOME["lat"],
        lng=HOME["lng"],
        api_key=API_KEY,
        sort_by="e5",
        types=("e5",),
        only_stations=("a-1", "b-2"),
    )


@pytest.fixture
def sample_area_payload() -> Dict[str, Any]:
    return {
        "ok": True,
        "status": "ok",
        "stations": [
            _station("near", 1.759, 1.829, 1.769, dist=0.4),
            _station("no-diesel", 0, 1.799, 1.739, dist=1.1),
            _station("far", 1.689, 1.859, 1.799, dist=3.27),
        ],
    }


@pytest.fixture
def sample_detail_payloads() -> List[Dict[str, Any]]:
    return [
        {"ok": True, "station": _station("a-1", 1.7, 1.9, 1.8, lat=52.6, lng=13.438)},
        {"ok": True, "station": _station("b-2", 1.6, 1.85, 1.75, lat=52.521, lng=13.5)},
    ]


@pytest.fixture
def fake_fetch():
    return FakeFetch
