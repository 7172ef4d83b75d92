"""
Response reducers for the decode and recall endpoints.

Both endpoints answer with {"Count": int, "Results": [...]}. The no-data
decision is driven by Count alone: a decode with a positive Count whose
values are all empty still yields an (empty) attribute map.
"""

import logging
from typing import Any, Dict

from vpic_lookup.models.result import LookupResult

logger = logging.getLogger(__name__)


def is_empty_value(value) -> bool:
    """None, "" and "0" all count as empty"""
    return value is None or str(value) in ("", "0")


def _count(payload: Dict[str, Any]):
    count = payload.get("Count")
    if not isinstance(count, int) or isinstance(count, bool):
        return None
    return count


def reduce_decode(payload) -> LookupResult:
    """Turn a decodevin payload into {Variable: Value}, dropping empty values ("0" included)"""
    if not isinstance(payload, dict):
        return LookupResult.failure("Malformed decode response")

    count = _count(payload)
    if not count or count < 0:
        logger.debug(f"Decode response reported Count={payload.get('Count')!r}")
        return LookupResult.no_data("Decode service returned no results")

    results = payload.get("Results")
    if not isinstance(results, list):
        return LookupResult.failure("Malformed decode response: Results is not a list")

    attributes: Dict[str, str] = {}
    for item in results:
        if not isinstance(item, dict):
            continue
        variable = item.get("Variable")
        value = item.get("Value")
        if not isinstance(variable, str) or not variable or is_empty_value(value):
            continue
        # Later duplicates win
        attributes[variable] = value

    return LookupResult.ok(attributes)


def reduce_recalls(payload) -> LookupResult:
    """Return the recall records verbatim when Count > 0"""
    if not isinstance(payload, dict):
        return LookupResult.failure("Malformed recall response")

    count = _count(payload)
    if not count or count < 0:
        logger.debug(f"Recall response reported Count={payload.get('Count')!r}")
        return LookupResult.no_data("Recall service returned no results")

    results = payload.get("Results")
    if not isinstance(results, list):
        return LookupResult.failure("Malformed recall response: Results is not a list")

    return LookupResult.ok(results)
