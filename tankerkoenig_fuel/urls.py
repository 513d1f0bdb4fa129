from __future__ import annotations

from urllib.parse import urlencode

from .config import FuelConfig
from .const import BASE_URL, BASE_URL_DETAIL


def build_area_url(config: FuelConfig) -> str:
    params = {
        "lat": config.lat,
        "lng": config.lng,
        "rad": config.radius,
        "type": "all",
        "apikey": config.api_key,
        "sort": "dist",
    }
    return f"{BASE_URL}?{urlencode(params)}"


def build_detail_url(config: FuelConfig, station_id: str) -> str:
    params = {"id": station_id, "apikey": config.api_key}
    return f"{BASE_URL_DETAIL}?{urlencode(params)}"


def redact_url(url: str) -> str:
    """Mask the api key so URLs can be logged."""
    head, sep, query = url.partition("?")
    if not sep:
        return url
    parts = []
    for pair in query.split("&"):
        key, eq, _value = pair.partition("=")
        parts.append(f"{key}=***" if key == "apikey" and eq else pair)
    return f"{head}?{'&'.join(parts)}"
