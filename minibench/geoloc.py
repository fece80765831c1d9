"""Location of the current machine, looked up from its public IP address."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from typing import Any, Mapping
from urllib.error import HTTPError
from urllib.request import urlopen

API_ENDPOINT = "https://ipapi.co/json/"

FETCH_ERROR = "unable to get data from ipapi.co"
PARSE_ERROR = "unable to parse ipapi.co data"


class GeoLocError(Exception):
    """Location data could not be fetched or parsed."""


@dataclass
class GeoLocationInfo:
    """What the lookup service reports about an IP address; fields are named as its JSON keys."""

    ip: str = ""
    network: str = ""
    version: str = ""
    city: str = ""
    region: str = ""
    region_code: str = ""
    country: str = ""
    country_name: str = ""
    country_code: str = ""
    country_code_iso3: str = ""
    country_capital: str = ""
    country_tld: str = ""
    continent_code: str = ""
    in_eu: bool = False
    postal: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    timezone: str = ""
    utc_offset: str = ""
    country_calling_code: str = ""
    currency: str = ""
    currency_name: str = ""
    languages: str = ""
    country_area: float = 0.0
    country_population: int = 0
    asn: str = ""
    org: str = ""


def _convert(value: Any, default: Any) -> Any:
    kind = type(default)
    if value is None:
        return default
    if kind is float and type(value) is int:
        return float(value)
    if type(value) is not kind:
        raise GeoLocError(PARSE_ERROR)
    return value


def parse_geolocation(data: str | bytes | Mapping[str, Any]) -> GeoLocationInfo:
    """Build location info from JSON text or its decoded object."""
    if isinstance(data, (str, bytes, bytearray)):
        try:
            data = json.loads(data)
        except ValueError:
            raise GeoLocError(PARSE_ERROR) from None
    if not isinstance(data, Mapping):
        raise GeoLocError(PARSE_ERROR)
    return GeoLocationInfo(**{
        f.name: _convert(data[f.name], f.default) for f in fields(GeoLocationInfo) if f.name in data
    })


def fetch_data(url: str = API_ENDPOINT) -> GeoLocationInfo:
    """Look up the location of this machine."""
    try:
        response = urlopen(url, timeout=30)
    except HTTPError as exc:
        response = exc
    except (OSError, ValueError):
        raise GeoLocError(FETCH_ERROR) from None
    with response:
        try:
            body = response.read()
        except OSError:
            raise GeoLocError(PARSE_ERROR) from None
    return parse_geolocation(body)