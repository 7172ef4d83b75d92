from pydantic import BaseModel, Field
from typing import Optional


class DecodeQuery(BaseModel):
    vin: str
    model_year: int = 0  # 0 means no year filter

    class Config:
        frozen = True
        protected_namespaces = ()


class RecallQuery(BaseModel):
    model_year: int
    make: str
    model: str

    class Config:
        frozen = True
        protected_namespaces = ()


class NormalizedVehicle(BaseModel):
    """Compact Year/Make/Model/Trim/Engine descriptor built from a VIN decode"""

    model_year: Optional[str] = Field(default=None, alias="Model_Year")
    make: Optional[str] = Field(default=None, alias="Make")
    model: Optional[str] = Field(default=None, alias="Model")
    trim: Optional[str] = Field(default=None, alias="Trim")
    engine: Optional[str] = Field(default=None, alias="Engine")

    class Config:
        frozen = True
        populate_by_name = True
        protected_namespaces = ()

    @property
    def is_empty(self) -> bool:
        return not any(
            (self.model_year, self.make, self.model, self.trim, self.engine)
        )

    @property
    def label(self) -> str:
        """Human-readable one-liner, e.g. '2019 FORD F-150 XLT 3.5L 6-CYL'"""
        parts = [self.model_year, self.make, self.model, self.trim, self.engine]
        return " ".join(p for p in parts if p)
