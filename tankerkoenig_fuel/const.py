from __future__ import annotations

BASE_URL = "https://creativecommons.tankerkoenig.de/json/list.php"
BASE_URL_DETAIL = "https://creativecommons.tankerkoenig.de/json/detail.php"

CONF_LAT = "lat"
CONF_LNG = "lng"
CONF_RADIUS = "radius"
CONF_API_KEY = "api_key"
CONF_SORT_BY = "sortBy"
CONF_TYPES = "types"
CONF_SHOW_OPEN_ONLY = "showOpenOnly"
CONF_ONLY_STATIONS = "onlyStations"
CONF_PARALLEL_DETAIL = "parallelDetail"

FUEL_TYPES = ("diesel", "e5", "e10")

DEFAULT_RADIUS = 5
DEFAULT_SORT_BY = "diesel"
DEFAULT_TYPES = "diesel"
DEFAULT_SHOW_OPEN_ONLY = False
DEFAULT_PARALLEL_DETAIL = False

# list.php rejects larger search radii.
MIN_RADIUS = 1
MAX_RADIUS = 25

EARTH_RADIUS_M = 6371e3

UNIT = "km"
CURRENCY = "EUR"
