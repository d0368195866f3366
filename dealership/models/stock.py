from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..core.enums import BodyType, FuelType, StockStatus, Transmission
from .validators import MAX_MILEAGE_KM, check_vehicle_year


class StockVehicleBase(BaseModel):
    marca: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    an: int
    km: int = Field(..., ge=0, le=MAX_MILEAGE_KM)
    pret: float = Field(..., gt=0)
    combustibil: FuelType
    transmisie: Transmission
    caroserie: BodyType
    culoare: Optional[str] = None
    vin: Optional[str] = Field(default=None, max_length=17)
    negociabil: bool = False
    images: list[str] = Field(default_factory=list)
    descriere: Optional[str] = None
    status: StockStatus = StockStatus.ACTIVE
    openlane_url: Optional[str] = None
    badges: list[str] = Field(default_factory=list)

    @field_validator("an")
    @classmethod
    def validate_year(cls, value: int) -> int:
        return check_vehicle_year(value)


class StockVehicleCreate(StockVehicleBase):
    pass


class StockVehicleUpdate(BaseModel):
    """Partial update; only fields that were sent are written."""

    marca: Optional[str] = Field(default=None, min_length=1)
    model: Optional[str] = Field(default=None, min_length=1)
    an: Optional[int] = None
    km: Optional[int] = Field(default=None, ge=0, le=MAX_MILEAGE_KM)
    pret: Optional[float] = Field(default=None, gt=0)
    combustibil: Optional[FuelType] = None
    transmisie: Optional[Transmission] = None
    caroserie: Optional[BodyType] = None
    culoare: Optional[str] = None
    vin: Optional[str] = Field(default=None, max_length=17)
    negociabil: Optional[bool] = None
    images: Optional[list[str]] = None
    descriere: Optional[str] = None
    status: Optional[StockStatus] = None
    openlane_url: Optional[str] = None
    badges: Optional[list[str]] = None

    @field_validator("an")
    @classmethod
    def validate_year(cls, value: Optional[int]) -> Optional[int]:
        return check_vehicle_year(value) if value is not None else value


class StockStatusUpdate(BaseModel):
    status: StockStatus
