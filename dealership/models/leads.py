"""Request bodies for the public lead forms and the admin lead triage."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from ..core.enums import (
    BodyType,
    ContactPreference,
    ContractType,
    CreditHistory,
    FuelType,
    LeadStatus,
    Transmission,
)
from .validators import (
    EMAIL_PATTERN,
    MAX_MILEAGE_KM,
    PHONE_PATTERN,
    check_vehicle_year,
    require_consent,
)


class SellLeadCreate(BaseModel):
    """Customer wants to sell us their car."""

    # Car details
    marca: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    an: int
    km: int = Field(..., ge=1, le=MAX_MILEAGE_KM)
    combustibil: FuelType
    transmisie: Transmission
    caroserie: BodyType
    culoare: Optional[str] = None
    vin: Optional[str] = None
    pret: Optional[float] = None
    negociabil: bool = False

    # Location
    judet: str = Field(..., min_length=1)
    oras: str = Field(..., min_length=1)

    images: list[str] = Field(..., min_length=3)

    # Contact
    nume: str = Field(..., min_length=2)
    telefon: str = Field(..., pattern=PHONE_PATTERN)
    email: str = Field(..., pattern=EMAIL_PATTERN)
    preferinta_contact: ContactPreference = ContactPreference.PHONE
    interval_orar: Optional[str] = None

    gdpr: bool

    @field_validator("an")
    @classmethod
    def validate_year(cls, value: int) -> int:
        return check_vehicle_year(value)

    @field_validator("gdpr")
    @classmethod
    def validate_gdpr(cls, value: bool) -> bool:
        return require_consent(value)


class FinanceLeadCreate(BaseModel):
    """Customer asks for a car loan. Stores the calculator inputs, not the quote."""

    pret: float = Field(..., ge=1000, le=500_000)
    avans: float = Field(..., ge=0)
    perioada: int = Field(..., ge=12, le=84)
    dobanda: float = Field(..., ge=1, le=25)

    nume: str = Field(..., min_length=2)
    email: str = Field(..., pattern=EMAIL_PATTERN)
    telefon: str = Field(..., pattern=PHONE_PATTERN)
    venit_lunar: Optional[float] = Field(default=None, ge=1000)
    tip_contract: Optional[ContractType] = None
    istoric_creditare: Optional[CreditHistory] = None

    link_stoc: Optional[str] = Field(default=None, pattern=r"^(https?://\S+)?$")
    mesaj: Optional[str] = None

    @model_validator(mode="after")
    def down_payment_below_price(self) -> "FinanceLeadCreate":
        if self.avans >= self.pret:
            raise ValueError("Avansul trebuie să fie mai mic decât prețul vehiculului")
        return self


class OrderLeadCreate(BaseModel):
    """Customer asks us to source a specific car."""

    marca: str = Field(..., min_length=1)
    model: Optional[str] = None
    an_min: Optional[int] = None
    an_max: Optional[int] = None
    km_max: Optional[int] = Field(default=None, ge=0)
    combustibil: Optional[FuelType] = None
    transmisie: Optional[Transmission] = None
    caroserie: Optional[BodyType] = None
    culoare: Optional[str] = None
    pret_min: Optional[float] = Field(default=None, ge=0)
    pret_max: Optional[float] = Field(default=None, ge=0)
    caracteristici_speciale: list[str] = Field(default_factory=list)
    urgent: bool = False
    observatii: Optional[str] = None

    nume: str = Field(..., min_length=2)
    telefon: str = Field(..., pattern=PHONE_PATTERN)
    email: str = Field(..., pattern=EMAIL_PATTERN)
    preferinta_contact: ContactPreference = ContactPreference.PHONE
    interval_orar: Optional[str] = None

    gdpr: bool

    @field_validator("gdpr")
    @classmethod
    def validate_gdpr(cls, value: bool) -> bool:
        return require_consent(value)

    @model_validator(mode="after")
    def ranges_are_ordered(self) -> "OrderLeadCreate":
        if self.an_min is not None and self.an_max is not None and self.an_min > self.an_max:
            raise ValueError("an_min must not exceed an_max")
        if (
            self.pret_min is not None
            and self.pret_max is not None
            and self.pret_min > self.pret_max
        ):
            raise ValueError("pret_min must not exceed pret_max")
        return self


class ContactMessageCreate(BaseModel):
    nume: str = Field(..., min_length=2)
    email: str = Field(..., pattern=EMAIL_PATTERN)
    telefon: Optional[str] = Field(default=None, pattern=PHONE_PATTERN)
    subiect: str = Field(..., min_length=5, max_length=100)
    mesaj: str = Field(..., min_length=20, max_length=2000)

    gdpr: bool

    @field_validator("gdpr")
    @classmethod
    def validate_gdpr(cls, value: bool) -> bool:
        return require_consent(value)


class LeadStatusUpdate(BaseModel):
    status: LeadStatus
