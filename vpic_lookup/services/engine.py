"""
Engine descriptor composition.

The Engine field is assembled from an ordered list of fragment producers.
Each producer looks at the decoded attributes and returns a fragment or
None. Order is fixed:

    displacement  ->  "3.5L"
    cylinders     ->  "6-Cyl"
    diesel        ->  "(Diesel)"
    engine model  ->  "(VR30DDTT)"  or, failing that, "(2,997cc)"

The joined string has whitespace runs collapsed and is upper-cased:
"3.5L 6-CYL (DIESEL) (VR30DDTT)".
"""

import logging
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Callable, Dict, Optional, Tuple

from vpic_lookup.services.reducers import is_empty_value

logger = logging.getLogger(__name__)

DISPLACEMENT_L = "Displacement (L)"
DISPLACEMENT_CC = "Displacement (CC)"
CYLINDERS = "Engine Number of Cylinders"
FUEL_TYPE = "Fuel Type - Primary"
ENGINE_MODEL = "Engine Model"

_WHITESPACE_RUN = re.compile(r"\s{2,}")

Fragment = Callable[[Dict[str, str]], Optional[str]]


def _present(attributes: Dict[str, str], key: str) -> Optional[str]:
    value = attributes.get(key)
    if is_empty_value(value):
        return None
    return str(value)


def _to_decimal(value: str) -> Optional[Decimal]:
    try:
        number = Decimal(value.strip())
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


def _round(number: Decimal, places: str) -> Optional[Decimal]:
    try:
        return number.quantize(Decimal(places), rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # Too many digits for the decimal context
        return None


def displacement_fragment(attributes: Dict[str, str]) -> Optional[str]:
    value = _present(attributes, DISPLACEMENT_L)
    if value is None:
        return None
    number = _to_decimal(value)
    rounded = _round(number, "0.1") if number is not None else None
    if rounded is None:
        logger.debug(f"Ignoring unusable displacement {value!r}")
        return None
    return f"{rounded}L"


def cylinders_fragment(attributes: Dict[str, str]) -> Optional[str]:
    value = _present(attributes, CYLINDERS)
    return f"{value}-Cyl" if value is not None else None


def diesel_fragment(attributes: Dict[str, str]) -> Optional[str]:
    value = _present(attributes, FUEL_TYPE)
    if value is not None and value.lower() == "diesel":
        return "(Diesel)"
    return None


def engine_model_fragment(attributes: Dict[str, str]) -> Optional[str]:
    """Engine Model wins; Displacement (CC) is only used without one"""
    model = _present(attributes, ENGINE_MODEL)
    if model is not None:
        return f"({model})"

    cc = _present(attributes, DISPLACEMENT_CC)
    if cc is None:
        return None
    number = _to_decimal(cc)
    rounded = _round(number, "1") if number is not None else None
    if rounded is None:
        logger.debug(f"Ignoring unusable displacement {cc!r}")
        return None
    return f"({int(rounded):,}cc)"


ENGINE_FRAGMENTS: Tuple[Fragment, ...] = (
    displacement_fragment,
    cylinders_fragment,
    diesel_fragment,
    engine_model_fragment,
)


def compose_engine(
    attributes: Dict[str, str],
    fragments: Tuple[Fragment, ...] = ENGINE_FRAGMENTS,
) -> Optional[str]:
    """Build the Engine descriptor, or None when no fragment applies"""
    pieces = [piece for piece in (fragment(attributes) for fragment in fragments) if piece]
    if not pieces:
        return None
    engine = _WHITESPACE_RUN.sub(" ", " ".join(pieces)).strip()
    return engine.upper() or None
