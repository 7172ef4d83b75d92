from typing import Optional
from urllib.parse import quote, urlencode

from vpic_lookup.config import Settings, settings as default_settings
from vpic_lookup.models.vehicle import DecodeQuery, RecallQuery


def _segment(value) -> str:
    return quote(str(value), safe="")


def decode_url(query: DecodeQuery, config: Optional[Settings] = None) -> str:
    """decodevin/{VIN}?format=json, plus &modelyear= only when a year is given"""
    config = config or default_settings
    params = {"format": "json"}
    if query.model_year:
        params["modelyear"] = query.model_year
    return (
        f"{config.decode_base_url}/decodevin/{_segment(query.vin.upper())}"
        f"?{urlencode(params)}"
    )


def recalls_url(query: RecallQuery, config: Optional[Settings] = None) -> str:
    config = config or default_settings
    return (
        f"{config.recalls_base_url}"
        f"/modelyear/{_segment(query.model_year)}"
        f"/make/{_segment(query.make.upper())}"
        f"/model/{_segment(query.model.upper())}"
        f"?{urlencode({'format': 'json'})}"
    )
