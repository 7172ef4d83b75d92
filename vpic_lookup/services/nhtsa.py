"""
NHTSA vPIC + Recalls Integration
FREE, no key - VIN decode, vehicle descriptor, recalls by year/make/model
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from vpic_lookup.config import Settings, settings as default_settings
from vpic_lookup.models.result import LookupResult
from vpic_lookup.models.vehicle import DecodeQuery, NormalizedVehicle, RecallQuery
from vpic_lookup.services import validator
from vpic_lookup.services.normalizer import normalize, normalize_result
from vpic_lookup.services.query_builder import decode_url, recalls_url
from vpic_lookup.services.reducers import reduce_decode, reduce_recalls
from vpic_lookup.services.transport import HttpTransport

logger = logging.getLogger(__name__)


class NHTSAService:
    def __init__(
        self,
        config: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config or default_settings
        self.http = HttpTransport(self.config, transport=transport)

    def decode_vin_result(self, vin: str, model_year: Optional[int] = 0) -> LookupResult:
        """Decode a VIN into {Variable: Value} via the vPIC decodevin endpoint"""
        rejection = validator.decode_rejection(vin, model_year, self.config)
        if rejection:
            logger.info(f"Decode rejected for {str(vin)[:8]!r}: {rejection}")
            return LookupResult.invalid(rejection)

        query = DecodeQuery(vin=vin, model_year=model_year or 0)
        fetched = self.http.get_json(decode_url(query, self.config))
        if not fetched.success:
            return fetched

        result = reduce_decode(fetched.data)
        if result.success:
            logger.debug(f"Decoded {len(result.data)} attributes for VIN {vin[:8]}...")
        return result

    def get_recalls_result(self, model_year: int, make: str, model: str) -> LookupResult:
        """Fetch recall records for a model year / make / model"""
        rejection = validator.recall_rejection(model_year, make, model, self.config)
        if rejection:
            logger.info(f"Recall lookup rejected: {rejection}")
            return LookupResult.invalid(rejection)

        query = RecallQuery(model_year=model_year, make=make, model=model)
        fetched = self.http.get_json(recalls_url(query, self.config))
        if not fetched.success:
            return fetched

        return reduce_recalls(fetched.data)

    def describe_vin_result(self, vin: str, model_year: Optional[int] = 0) -> LookupResult:
        """Decode a VIN and reduce it straight to a NormalizedVehicle"""
        decoded = self.decode_vin_result(vin, model_year)
        if not decoded.success:
            return decoded
        result = normalize_result(decoded.data)
        if result.success:
            logger.info(f"VIN {vin[:8]}... described as {result.data.label}")
        return result

    # Null-collapsing API: every failure comes back as None

    def decode_vin(self, vin: str, model_year: Optional[int] = 0) -> Optional[Dict[str, str]]:
        return self.decode_vin_result(vin, model_year).unwrap()

    def parse_decode(self, attributes: Optional[Dict[str, str]]) -> Optional[NormalizedVehicle]:
        return normalize(attributes)

    def get_recalls(self, model_year: int, make: str, model: str) -> Optional[List[Any]]:
        return self.get_recalls_result(model_year, make, model).unwrap()

    def describe_vin(self, vin: str, model_year: Optional[int] = 0) -> Optional[NormalizedVehicle]:
        return self.describe_vin_result(vin, model_year).unwrap()

    def close(self):
        self.http.close()


nhtsa_service = NHTSAService()
