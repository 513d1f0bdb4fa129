from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

from tankerkoenig_fuel.const import BASE_URL, BASE_URL_DETAIL
from tankerkoenig_fuel.urls import build_area_url, build_detail_url, redact_url


def test_area_url_carries_search_parameters(area_config):
    url = build_area_url(area_config)
    parts = urlsplit(url)
    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == BASE_URL
    assert parse_qs(parts.query) == {
        "lat": ["52.521"],
        "lng": ["13.438"],
        "rad": ["5"],
        "type": ["all"],
        "apikey": [area_config.api_key],
        "sort": ["dist"],
    }


def test_detail_url_carries_id_and_key(area_config):
    url = build_detail_url(area_config, "005056ba-7cb6-1ed2-bceb-82ea369c0d2d")
    assert url == (
        f"{BASE_URL_DETAIL}?id=005056ba-7cb6-1ed2-bceb-82ea369c0d2d"
        f"&apikey={area_config.api_key}"
    )


def test_redact_url_hides_api_key(area_config):
    redacted = redact_url(build_detail_url(area_config, "abc"))
    assert area_config.api_key not in redacted
    assert redacted.endswith("?id=abc&apikey=***")
