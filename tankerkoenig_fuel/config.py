from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

import voluptuous as vol

from .const import (
    CONF_API_KEY,
    CONF_LAT,
    CONF_LNG,
    CONF_ONLY_STATIONS,
    CONF_PARALLEL_DETAIL,
    CONF_RADIUS,
    CONF_SHOW_OPEN_ONLY,
    CONF_SORT_BY,
    CONF_TYPES,
    DEFAULT_PARALLEL_DETAIL,
    DEFAULT_RADIUS,
    DEFAULT_SHOW_OPEN_ONLY,
    DEFAULT_SORT_BY,
    DEFAULT_TYPES,
    FUEL_TYPES,
    MAX_RADIUS,
    MIN_RADIUS,
)

ENV_PREFIX = "TANKERKOENIG_"

_ENV_KEYS = {
    CONF_API_KEY: "API_KEY",
    CONF_LAT: "LAT",
    CONF_LNG: "LNG",
    CONF_RADIUS: "RADIUS",
    CONF_SORT_BY: "SORT_BY",
    CONF_TYPES: "TYPES",
    CONF_SHOW_OPEN_ONLY: "SHOW_OPEN_ONLY",
    CONF_ONLY_STATIONS: "ONLY_STATIONS",
    CONF_PARALLEL_DETAIL: "PARALLEL_DETAIL",
}


def _split_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v).strip() for v in value if str(v).strip()]
    return [v.strip() for v in str(value).replace(",", "|").split("|") if v.strip()]


CONFIG_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_API_KEY): vol.All(str, vol.Length(min=1)),
        vol.Required(CONF_LAT): vol.All(vol.Coerce(float), vol.Range(min=-90, max=90)),
        vol.Required(CONF_LNG): vol.All(vol.Coerce(float), vol.Range(min=-180, max=180)),
        vol.Optional(CONF_RADIUS, default=DEFAULT_RADIUS): vol.All(
            vol.Coerce(float), vol.Range(min=MIN_RADIUS, max=MAX_RADIUS)
        ),
        vol.Optional(CONF_SORT_BY, default=DEFAULT_SORT_BY): vol.In(FUEL_TYPES),
        vol.Optional(CONF_TYPES, default=DEFAULT_TYPES): vol.All(
            _split_list, vol.Length(min=1), [vol.In(FUEL_TYPES)]
        ),
        vol.Optional(CONF_SHOW_OPEN_ONLY, default=DEFAULT_SHOW_OPEN_ONLY): vol.Boolean(),
        vol.Optional(CONF_ONLY_STATIONS, default=list): _split_list,
        vol.Optional(CONF_PARALLEL_DETAIL, default=DEFAULT_PARALLEL_DETAIL): vol.Boolean(),
    }
)


@dataclass(frozen=True)
class FuelConfig:
    lat: float
    lng: float
    api_key: str
    radius: float = DEFAULT_RADIUS
    sort_by: str = DEFAULT_SORT_BY
    types: Tuple[str, ...] = (DEFAULT_TYPES,)
    show_open_only: bool = DEFAULT_SHOW_OPEN_ONLY
    only_stations: Tuple[str, ...] = ()
    parallel_detail: bool = DEFAULT_PARALLEL_DETAIL

    @property
    def origin(self) -> dict[str, float]:
        return {"lat": self.lat, "lng": self.lng}

    @property
    def detail_mode(self) -> bool:
        return len(self.only_stations) > 0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FuelConfig":
        """Validate a raw options mapping and build the immutable config.

        Raises ``voluptuous.MultipleInvalid`` when an option is missing or out
        of range.
        """
        validated = CONFIG_SCHEMA(dict(data))
        return cls(
            lat=validated[CONF_LAT],
            lng=validated[CONF_LNG],
            api_key=validated[CONF_API_KEY],
            radius=validated[CONF_RADIUS],
            sort_by=validated[CONF_SORT_BY],
            types=tuple(validated[CONF_TYPES]),
            show_open_only=validated[CONF_SHOW_OPEN_ONLY],
            only_stations=tuple(validated[CONF_ONLY_STATIONS]),
            parallel_detail=validated[CONF_PARALLEL_DETAIL],
        )


def config_from_env(environ: Optional[Mapping[str, str]] = None) -> FuelConfig:
    """Build a config from TANKERKOENIG_* environment variables.

    Empty variables count as unset so the schema defaults apply.
    """
    env = os.environ if environ is None else environ
    raw: dict[str, Any] = {}
    for conf_key, suffix in _ENV_KEYS.items():
        value = env.get(f"{ENV_PREFIX}{suffix}", "")
        if value:
            raw[conf_key] = value
    return FuelConfig.from_mapping(raw)
