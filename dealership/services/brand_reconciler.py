"""Brand/model reconciliation against the curated catalog.

Maps free-text (brand, model) pairs, as typed into old stock rows, onto a
canonical catalog entry. Strategies run in a fixed order and the first hit
wins:

1. ExactMatch     - case-insensitive equality on brand, then on model
2. SubstringMatch - either string contains the other, for brand and model
3. Fallback       - first catalog brand and its first model

Ties inside a tier are broken by catalog order, so re-running the cleanup on
the same data always produces the same answer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Sequence

from ..data.car_brands import CAR_BRANDS, CarBrand


class MatchKind(str, Enum):
    EXACT = "exact"
    SUBSTRING = "substring"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class BrandModelMatch:
    brand: str
    model: str
    kind: MatchKind

    def differs_from(self, brand: str, model: str) -> bool:
        return self.brand != brand or self.model != model


@dataclass(frozen=True)
class CatalogCompatibility:
    brand_exists: bool
    model_exists: bool

    @property
    def compatible(self) -> bool:
        return self.brand_exists and self.model_exists


class MatchStrategy(Protocol):
    kind: MatchKind

    def match(
        self, brand: str, model: str, catalog: Sequence[CarBrand]
    ) -> BrandModelMatch | None: ...


def _overlaps(a: str, b: str) -> bool:
    """True when either lowercased string contains the other."""
    return a in b or b in a


class ExactMatch:
    kind = MatchKind.EXACT

    def match(
        self, brand: str, model: str, catalog: Sequence[CarBrand]
    ) -> BrandModelMatch | None:
        brand_lower = brand.lower()
        model_lower = model.lower()
        for entry in catalog:
            if entry.brand.lower() != brand_lower:
                continue
            for candidate in entry.models:
                if candidate.lower() == model_lower:
                    return BrandModelMatch(entry.brand, candidate, self.kind)
        return None


class SubstringMatch:
    kind = MatchKind.SUBSTRING

    def match(
        self, brand: str, model: str, catalog: Sequence[CarBrand]
    ) -> BrandModelMatch | None:
        brand_lower = brand.lower()
        model_lower = model.lower()
        for entry in catalog:
            if not _overlaps(entry.brand.lower(), brand_lower):
                continue
            for candidate in entry.models:
                if _overlaps(candidate.lower(), model_lower):
                    return BrandModelMatch(entry.brand, candidate, self.kind)
        return None


class Fallback:
    kind = MatchKind.FALLBACK

    def match(
        self, brand: str, model: str, catalog: Sequence[CarBrand]
    ) -> BrandModelMatch | None:
        first = catalog[0]
        return BrandModelMatch(first.brand, first.models[0], self.kind)


# Evaluation order is the tie-break contract
MATCH_STRATEGIES: tuple[MatchStrategy, ...] = (ExactMatch(), SubstringMatch(), Fallback())


def find_closest_brand_and_model(
    brand: str | None,
    model: str | None,
    catalog: Sequence[CarBrand] = CAR_BRANDS,
    strategies: Sequence[MatchStrategy] = MATCH_STRATEGIES,
) -> BrandModelMatch:
    """Find the canonical catalog pair closest to a free-text brand/model.

    Args:
        brand: Brand as stored on the row (any casing, may be misspelled)
        model: Model as stored on the row
        catalog: Ordered catalog to match against

    Returns:
        A pair that always exists in the catalog, tagged with the tier that
        produced it

    Raises:
        ValueError: if the catalog is empty or its first brand has no models
    """
    if not catalog or not catalog[0].models:
        raise ValueError("catalog must contain at least one brand with one model")

    brand = brand or ""
    model = model or ""
    for strategy in strategies:
        result = strategy.match(brand, model, catalog)
        if result is not None:
            return result

    # Only reachable with a custom strategy list lacking Fallback
    return Fallback().match(brand, model, catalog)  # type: ignore[return-value]


def check_catalog_compatibility(
    brand: str, model: str, catalog: Sequence[CarBrand] = CAR_BRANDS
) -> CatalogCompatibility:
    """Exact, case-sensitive check that a stored pair is already canonical."""
    for entry in catalog:
        if entry.brand == brand:
            return CatalogCompatibility(brand_exists=True, model_exists=model in entry.models)
    return CatalogCompatibility(brand_exists=False, model_exists=False)
