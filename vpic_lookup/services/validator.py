"""
Input Validator
Gates which inputs are sent to NHTSA at all. Pure checks, never raise.
"""

from datetime import date
from typing import Optional

from vpic_lookup.config import Settings, settings as default_settings


def current_year() -> int:
    """Read at call time so the upper bound moves forward every January"""
    return date.today().year


def max_model_year(config: Optional[Settings] = None) -> int:
    config = config or default_settings
    return current_year() + config.years_ahead


def is_valid_model_year(model_year, config: Optional[Settings] = None) -> bool:
    config = config or default_settings
    if not isinstance(model_year, int) or isinstance(model_year, bool):
        return False
    return config.minimum_year <= model_year <= max_model_year(config)


def is_valid_vin(vin, config: Optional[Settings] = None) -> bool:
    config = config or default_settings
    return isinstance(vin, str) and len(vin) == config.vin_length


def _is_unfiltered(model_year) -> bool:
    return model_year is None or (type(model_year) is int and model_year == 0)


def _year_range_message(config: Settings) -> str:
    return (
        f"Model year must be between {config.minimum_year} "
        f"and {max_model_year(config)}"
    )


def decode_rejection(vin, model_year=0, config: Optional[Settings] = None) -> Optional[str]:
    """Reason a decode request would be rejected, or None if eligible"""
    config = config or default_settings
    if not is_valid_vin(vin, config):
        return f"VIN must be exactly {config.vin_length} characters"
    if not _is_unfiltered(model_year) and not is_valid_model_year(model_year, config):
        return _year_range_message(config)
    return None


def recall_rejection(model_year, make, model, config: Optional[Settings] = None) -> Optional[str]:
    """Reason a recall lookup would be rejected, or None if eligible"""
    config = config or default_settings
    if not is_valid_model_year(model_year, config):
        return _year_range_message(config)
    if not isinstance(make, str) or len(make) < config.minimum_make_length:
        return f"Make must be at least {config.minimum_make_length} characters"
    if not isinstance(model, str) or len(model) < config.minimum_model_length:
        return f"Model must be at least {config.minimum_model_length} characters"
    return None


def can_decode(vin, model_year=0, config: Optional[Settings] = None) -> bool:
    return decode_rejection(vin, model_year, config) is None


def can_lookup_recalls(model_year, make, model, config: Optional[Settings] = None) -> bool:
    return recall_rejection(model_year, make, model, config) is None
