"""Field rules shared by the public lead forms."""

from datetime import datetime

# Romanian phone numbers: +40 / 0040 / 0 prefix followed by 9 digits
PHONE_PATTERN = r"^(\+40|0040|0)[0-9]{9}$"
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

MIN_VEHICLE_YEAR = 1995
MAX_MILEAGE_KM = 500_000


def current_year() -> int:
    return datetime.now().year


def require_consent(value: bool) -> bool:
    if value is not True:
        raise ValueError("Trebuie să accepți termenii și condițiile")
    return value


def check_vehicle_year(value: int) -> int:
    if value < MIN_VEHICLE_YEAR:
        raise ValueError(f"Anul trebuie să fie minim {MIN_VEHICLE_YEAR}")
    if value > current_year():
        raise ValueError(f"Anul trebuie să fie maxim {current_year()}")
    return value
