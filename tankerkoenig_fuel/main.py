from __future__ import annotations

import asyncio
import logging
import os
from typing import Any, Dict, List

import voluptuous as vol
from aiohttp import ClientSession, ClientTimeout
from dotenv import load_dotenv

from .api import TankerkoenigApi
from .config import FuelConfig, config_from_env
from .provider import create_provider

REQUEST_TIMEOUT_SECONDS = 30


def _format_station(station: Dict[str, Any], sort_by: str, currency: str, unit: str) -> str:
    return (
        f"{station['prices'].get(sort_by)} {currency} | {station.get('distance')} {unit} | "
        f"{station.get('brand')} | {station.get('name')} | {station.get('address')}"
    )


async def fetch_current_data(config: FuelConfig) -> Dict[str, Any]:
    timeout = ClientTimeout(total=REQUEST_TIMEOUT_SECONDS)
    async with ClientSession(timeout=timeout) as session:
        provider = create_provider(config, TankerkoenigApi(session))
        return await provider.get_data()


def main() -> None:
    load_dotenv()
    logging.basicConfig(
        level=os.environ.get("TANKERKOENIG_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not os.environ.get("TANKERKOENIG_API_KEY"):
        raise SystemExit("Missing TANKERKOENIG_API_KEY in environment.")
    if not os.environ.get("TANKERKOENIG_LAT") or not os.environ.get("TANKERKOENIG_LNG"):
        raise SystemExit("Missing TANKERKOENIG_LAT/LNG.")
    try:
        config = config_from_env()
    except vol.Invalid as err:
        raise SystemExit(f"Invalid configuration: {err}") from err
    limit = max(int(os.environ.get("TANKERKOENIG_RESULTS_LIMIT", "10")), 0)

    data = asyncio.run(fetch_current_data(config))

    sections: List[tuple[str, List[Dict[str, Any]]]] = [
        ("by price", data["byPrice"]),
        ("by distance", data["byDistance"]),
    ]
    total = len(data["byDistance"])
    print(f"Retrieved {total} stations; showing {min(limit, total)}.")
    for title, stations in sections:
        print(f"{config.sort_by} {title}:")
        for station in stations[:limit]:
            print(_format_station(station, config.sort_by, data["currency"], data["unit"]))


if __name__ == "__main__":
    main()
