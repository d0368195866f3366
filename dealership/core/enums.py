"""Enums for dealership-related constants."""

from enum import Enum


class LeadStatus(str, Enum):
    """Lifecycle status shared by every lead table."""

    NEW = "new"
    PROCESSED = "processed"
    # Accepted by the admin filters; nothing writes it automatically
    ARCHIVED = "archived"


class LeadKind(str, Enum):
    """Customer request types, one table each."""

    SELL = "sell"
    FINANCE = "finance"
    ORDER = "order"
    CONTACT = "contact"

    @property
    def table(self) -> str:
        return LEAD_TABLES[self]


LEAD_TABLES: dict[LeadKind, str] = {
    LeadKind.SELL: "lead_sell",
    LeadKind.FINANCE: "lead_finance",
    LeadKind.ORDER: "lead_order",
    LeadKind.CONTACT: "contact_messages",
}


class StockStatus(str, Enum):
    """Listing status of a vehicle in stock."""

    ACTIVE = "active"
    RESERVED = "reserved"
    SOLD = "sold"
    INACTIVE = "inactive"


class FuelType(str, Enum):
    PETROL = "benzina"
    DIESEL = "motorina"
    HYBRID = "hibrid"
    ELECTRIC = "electric"
    LPG = "gpl"


class Transmission(str, Enum):
    MANUAL = "manuala"
    AUTOMATIC = "automata"
    CVT = "cvt"


class BodyType(str, Enum):
    SEDAN = "berlina"
    ESTATE = "break"
    SUV = "suv"
    COUPE = "coupe"
    CABRIOLET = "cabriolet"
    HATCHBACK = "hatchback"
    MPV = "monovolum"


class ContactPreference(str, Enum):
    PHONE = "telefon"
    EMAIL = "email"


class ContractType(str, Enum):
    PERMANENT = "permanent"
    FIXED_TERM = "determinate"
    FREELANCER = "freelancer"
    RETIRED = "pensionar"
    OTHER = "other"


class CreditHistory(str, Enum):
    VERY_GOOD = "foarte_bun"
    GOOD = "bun"
    AVERAGE = "mediu"
    POOR = "slab"
    FIRST_CREDIT = "primul_credit"


class SettingsTable(str, Enum):
    """Admin-editable configuration tables."""

    FORM_OPTIONS = "form_options"
    FORM_TEXTS = "form_texts"
    SITE_SETTINGS = "site_settings"


class SortField(str, Enum):
    PRICE = "price"
    YEAR = "year"
    MILEAGE = "mileage"
    DATE_ADDED = "date_added"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


# Localized message shown when a form submission fails against the data store
SUBMIT_ERROR_MESSAGE = "Eroare la trimiterea datelor. Vă rugăm încercați din nou."
