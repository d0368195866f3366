"""Curated brand -> models catalog.

Shared by the form dropdowns and the brand/model reconciler. Order matters:
popular brands come first, and the reconciler breaks ties (and picks its
fallback) by this order.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CarBrand:
    brand: str
    models: tuple[str, ...]


CAR_BRANDS: tuple[CarBrand, ...] = (
    # Popular
    CarBrand("BMW", ("116", "118", "120", "125", "218", "220", "318", "320", "330", "340",
                     "X1", "X3", "X5", "X7", "Z4", "i3", "i4", "iX", "M2", "M3", "M4", "M5")),
    CarBrand("Mercedes-Benz", ("A-Class", "B-Class", "C-Class", "E-Class", "S-Class", "GLA",
                               "GLC", "GLE", "GLS", "AMG GT", "AMG C63", "AMG E63", "CLA",
                               "CLS", "G-Class")),
    CarBrand("Audi", ("A1", "A3", "A4", "A5", "A6", "A7", "A8", "Q3", "Q5", "Q7", "Q8",
                      "e-tron", "RS3", "RS4", "RS6", "TT", "R8")),
    CarBrand("Volkswagen", ("Polo", "Golf", "Passat", "T-Roc", "Tiguan", "Touareg", "ID.3",
                            "ID.4", "ID.5", "Arteon", "T-Cross", "Taigo")),
    CarBrand("Toyota", ("Yaris", "Corolla", "Camry", "C-HR", "RAV4", "Prius", "Hilux",
                        "Land Cruiser", "Highlander", "bZ4X")),
    # Premium
    CarBrand("Porsche", ("911", "Cayenne", "Macan", "Panamera", "Taycan", "Cayman", "Boxster",
                         "Carrera")),
    CarBrand("Tesla", ("Model 3", "Model S", "Model X", "Model Y", "Cybertruck")),
    CarBrand("Range Rover", ("Evoque", "Velar", "Sport", "Autobiography", "Defender",
                             "Discovery")),
    CarBrand("Lexus", ("ES", "LS", "NX", "RX", "UX", "LC", "RC", "IS")),
    CarBrand("Volvo", ("S60", "S90", "V60", "V90", "XC40", "XC60", "XC90", "C40")),
    # Mainstream
    CarBrand("Ford", ("Fiesta", "Focus", "Mondeo", "Kuga", "Puma", "Mustang", "Explorer",
                      "Edge", "Ranger")),
    CarBrand("Renault", ("Clio", "Megane", "Captur", "Kadjar", "Zoe", "Austral", "Arkana",
                         "Talisman")),
    CarBrand("Peugeot", ("208", "308", "508", "2008", "3008", "5008", "408", "508 SW")),
    CarBrand("Opel", ("Corsa", "Astra", "Insignia", "Mokka", "Crossland", "Grandland", "Combo")),
    CarBrand("Skoda", ("Fabia", "Octavia", "Superb", "Kamiq", "Karoq", "Kodiaq", "Scala",
                       "Enyaq")),
    # Asian
    CarBrand("Hyundai", ("i20", "i30", "Tucson", "Santa Fe", "Kona", "Elantra", "IONIQ",
                         "Staria", "Bayon")),
    CarBrand("Kia", ("Picanto", "Rio", "Ceed", "Sportage", "Sorento", "EV6", "Niro", "Stonic",
                     "Soul")),
    CarBrand("Honda", ("Civic", "CR-V", "Jazz", "HR-V", "Accord", "e:Ny1", "ZR-V")),
    CarBrand("Nissan", ("Micra", "Juke", "Qashqai", "X-Trail", "Leaf", "Ariya", "Note",
                        "Pulsar")),
    # European
    CarBrand("Alfa Romeo", ("Giulia", "Giulietta", "Stelvio", "MiTo", "4C", "Tonale",
                            "Brennero")),
    CarBrand("Citroën", ("C3", "C3 Aircross", "C4", "C4 Cactus", "C5 Aircross", "Berlingo",
                         "C5 X")),
    CarBrand("Seat", ("Ibiza", "Leon", "Arona", "Ateca", "Tarraco", "Alhambra")),
    # Romanian
    CarBrand("Dacia", ("Sandero", "Logan", "Duster", "Spring", "Jogger", "Jogger Hybrid")),
    CarBrand("Fiat", ("500", "Panda", "Tipo", "500X", "Doblo", "Pulse", "Fastback")),
    # American
    CarBrand("Chevrolet", ("Spark", "Cruze", "Malibu", "Equinox", "Traverse", "Camaro",
                           "Corvette")),
    CarBrand("Jeep", ("Renegade", "Compass", "Cherokee", "Grand Cherokee", "Wrangler",
                      "Gladiator")),
    # Chinese
    CarBrand("MG", ("MG3", "MG4", "MG5", "MG ZS", "MG HS", "Marvel R")),
    CarBrand("BYD", ("Atto 3", "Dolphin", "Seal", "Tang", "Han")),
    # Japanese
    CarBrand("Mazda", ("Mazda2", "Mazda3", "Mazda6", "CX-3", "CX-30", "CX-5", "CX-60",
                       "MX-30")),
    CarBrand("Subaru", ("Impreza", "XV", "Forester", "Outback", "BRZ", "Solterra")),
    # Italian
    CarBrand("Ferrari", ("F8", "SF90", "296", "Roma", "Portofino", "Purosangue")),
    CarBrand("Lamborghini", ("Huracan", "Aventador", "Urus", "Revuelto")),
    CarBrand("Maserati", ("Ghibli", "Quattroporte", "Levante", "Grecale", "MC20")),
)


def get_brands(catalog: tuple[CarBrand, ...] = CAR_BRANDS) -> list[str]:
    """Brand names in catalog order."""
    return [entry.brand for entry in catalog]


def get_models_for_brand(
    brand: str, catalog: tuple[CarBrand, ...] = CAR_BRANDS
) -> list[str]:
    """Models for an exact brand name, or an empty list."""
    for entry in catalog:
        if entry.brand == brand:
            return list(entry.models)
    return []
