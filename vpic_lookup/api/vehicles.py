from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Any, Dict, List

from vpic_lookup.models.result import LookupResult, LookupStatus
from vpic_lookup.services.nhtsa import NHTSAService, nhtsa_service

router = APIRouter()

_STATUS_CODES = {
    LookupStatus.INPUT_INVALID: 400,
    LookupStatus.NO_DATA: 404,
    LookupStatus.TRANSPORT_FAILURE: 502,
}


def get_nhtsa_service() -> NHTSAService:
    return nhtsa_service


def _unwrap_or_raise(result: LookupResult):
    if not result.success:
        raise HTTPException(
            status_code=_STATUS_CODES[result.status],
            detail=result.error or "Lookup failed",
        )
    return result.data


@router.get("/decode-vin")
def decode_vin(
    vin: str = Query(..., description="17-character Vehicle Identification Number"),
    model_year: int = Query(0, description="Optional model year filter, 0 for none"),
    service: NHTSAService = Depends(get_nhtsa_service),
) -> Dict[str, str]:
    """
    Decode a VIN into the raw vPIC attribute map.
    Uses NHTSA vPIC API (Free, Official).
    """
    return _unwrap_or_raise(service.decode_vin_result(vin, model_year))


@router.get("/describe-vin")
def describe_vin(
    vin: str = Query(..., description="17-character Vehicle Identification Number"),
    model_year: int = Query(0, description="Optional model year filter, 0 for none"),
    service: NHTSAService = Depends(get_nhtsa_service),
) -> Dict[str, Any]:
    """Decode a VIN and return the Year/Make/Model/Trim/Engine descriptor"""
    vehicle = _unwrap_or_raise(service.describe_vin_result(vin, model_year))
    return vehicle.model_dump(by_alias=True)


@router.get("/recalls")
def recalls(
    model_year: int = Query(..., description="Model year"),
    make: str = Query(..., description="Vehicle make, e.g. FORD"),
    model: str = Query(..., description="Vehicle model, e.g. F-150"),
    service: NHTSAService = Depends(get_nhtsa_service),
) -> List[Any]:
    """Manufacturer recalls for a model year / make / model"""
    return _unwrap_or_raise(service.get_recalls_result(model_year, make, model))
