"""
Decode Normalizer
Collapses a decoded attribute map into Year / Make / Model / Trim / Engine.
"""

import logging
import re
from typing import Dict, Optional

from vpic_lookup.models.result import LookupResult
from vpic_lookup.models.vehicle import NormalizedVehicle
from vpic_lookup.services.engine import compose_engine
from vpic_lookup.services.reducers import is_empty_value

logger = logging.getLogger(__name__)

# Numeric strings such as "2019", " 2019" or "2019.0"
_NUMERIC = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def _text(attributes: Dict[str, str], key: str) -> Optional[str]:
    value = attributes.get(key)
    if is_empty_value(value):
        return None
    return str(value).upper()


def _model_year(attributes: Dict[str, str]) -> Optional[str]:
    value = attributes.get("Model Year")
    if value is None:
        return None
    value = str(value)
    return value if _NUMERIC.match(value) else None


def normalize(attributes: Optional[Dict[str, str]]) -> Optional[NormalizedVehicle]:
    """
    Build the descriptor for a decoded VIN.

    Returns None for an empty map, or when none of the recognised
    attributes yield a value.
    """
    if not attributes:
        return None

    vehicle = NormalizedVehicle(
        model_year=_model_year(attributes),
        make=_text(attributes, "Make"),
        model=_text(attributes, "Model"),
        trim=_text(attributes, "Trim"),
        engine=compose_engine(attributes),
    )

    if vehicle.is_empty:
        logger.debug("No recognised attributes in decode result")
        return None
    return vehicle


def normalize_result(attributes: Optional[Dict[str, str]]) -> LookupResult:
    vehicle = normalize(attributes)
    if vehicle is None:
        return LookupResult.no_data("No recognised vehicle attributes")
    return LookupResult.ok(vehicle)
