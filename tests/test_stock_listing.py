"""Tests for stock filtering, sorting and pagination."""

import pytest

from dealership.core.enums import SortDirection, SortField
from dealership.services.stock_listing import (
    VehicleFilters,
    filter_vehicles,
    get_ranges,
    paginate,
    search_stock,
    sort_vehicles,
)

from fakes import make_vehicle

STOCK = [
    make_vehicle(id="a", marca="BMW", model="X5", an=2021, km=45000, pret=52000,
                 created_at="2025-01-03T00:00:00+00:00"),
    make_vehicle(id="b", marca="Dacia", model="Duster", an=2019, km=98000, pret=11500,
                 combustibil="benzina", transmisie="manuala",
                 descriere="Un singur proprietar", created_at="2025-01-05T00:00:00+00:00"),
    make_vehicle(id="c", marca="Audi", model="A4", an=2017, km=150000, pret=16900,
                 caroserie="break", descriere="Quattro, carte service",
                 created_at="2025-01-01T00:00:00+00:00"),
    make_vehicle(id="d", marca="BMW", model="320", an=2020, km=61000, pret=24900,
                 caroserie="berlina", created_at="2025-01-04T00:00:00+00:00"),
]


def _ids(rows):
    return [row["id"] for row in rows]


class TestFilterVehicles:
    def test_no_filters_keeps_everything(self):
        assert len(filter_vehicles(STOCK, VehicleFilters())) == 4

    def test_brand(self):
        assert _ids(filter_vehicles(STOCK, VehicleFilters(brand="BMW"))) == ["a", "d"]

    def test_brand_is_partial_and_case_insensitive(self):
        rows = [make_vehicle(id="m", marca="Mercedes-Benz", model="C-Class")]
        assert _ids(filter_vehicles(rows, VehicleFilters(brand="mercedes"))) == ["m"]
        assert _ids(filter_vehicles(rows, VehicleFilters(brand="audi"))) == []

    def test_model_is_partial_and_case_insensitive(self):
        rows = [make_vehicle(id="m", marca="Mercedes-Benz", model="C-Class")]
        assert _ids(filter_vehicles(rows, VehicleFilters(model="c-class"))) == ["m"]
        assert _ids(filter_vehicles(STOCK, VehicleFilters(model="x"))) == ["a"]

    def test_row_without_model_never_matches_model_filter(self):
        rows = [make_vehicle(id="n", model=None)]
        assert filter_vehicles(rows, VehicleFilters(model="x5")) == []

    def test_body_type_and_fuel(self):
        filters = VehicleFilters(body_type="suv", fuel_type="benzina")
        assert _ids(filter_vehicles(STOCK, filters)) == ["b"]

    def test_bounds_are_inclusive(self):
        filters = VehicleFilters(year_min=2019, year_max=2020)
        assert _ids(filter_vehicles(STOCK, filters)) == ["b", "d"]
        filters = VehicleFilters(price_min=16900, price_max=24900)
        assert _ids(filter_vehicles(STOCK, filters)) == ["c", "d"]

    def test_mileage_max(self):
        assert _ids(filter_vehicles(STOCK, VehicleFilters(mileage_max=61000))) == ["a", "d"]

    def test_search_matches_description_case_insensitive(self):
        assert _ids(filter_vehicles(STOCK, VehicleFilters(search="QUATTRO"))) == ["c"]

    def test_search_matches_brand_and_model(self):
        assert _ids(filter_vehicles(STOCK, VehicleFilters(search="dust"))) == ["b"]
        assert _ids(filter_vehicles(STOCK, VehicleFilters(search="bmw"))) == ["a", "d"]


class TestSortVehicles:
    def test_default_is_newest_first(self):
        assert _ids(sort_vehicles(STOCK)) == ["b", "d", "a", "c"]

    def test_price_ascending(self):
        rows = sort_vehicles(STOCK, SortField.PRICE, SortDirection.ASC)
        assert _ids(rows) == ["b", "c", "d", "a"]

    def test_mileage_descending(self):
        rows = sort_vehicles(STOCK, SortField.MILEAGE, SortDirection.DESC)
        assert _ids(rows) == ["c", "b", "d", "a"]

    def test_stable_on_ties(self):
        rows = [make_vehicle(id=str(i), pret=10000) for i in range(5)]
        ordered = sort_vehicles(rows, SortField.PRICE, SortDirection.ASC)
        assert _ids(ordered) == ["0", "1", "2", "3", "4"]


class TestPaginate:
    def test_first_page(self):
        page = paginate(list(range(25)), page=1, limit=12)
        assert page["vehicles"] == list(range(12))
        assert page["total"] == 25
        assert page["total_pages"] == 3

    def test_last_partial_page(self):
        assert paginate(list(range(25)), page=3, limit=12)["vehicles"] == [24]

    def test_page_past_the_end(self):
        page = paginate(list(range(5)), page=4, limit=2)
        assert page["vehicles"] == []
        assert page["total_pages"] == 3

    def test_empty_listing(self):
        page = paginate([], page=1, limit=12)
        assert page["total"] == 0
        assert page["total_pages"] == 0

    @pytest.mark.parametrize("page, limit", [(0, 12), (1, 0), (-1, 5)])
    def test_rejects_non_positive(self, page, limit):
        with pytest.raises(ValueError):
            paginate([], page=page, limit=limit)


class TestSearchStock:
    def test_filter_sort_and_page(self):
        result = search_stock(
            STOCK,
            VehicleFilters(price_max=30000),
            SortField.YEAR,
            SortDirection.DESC,
            page=1,
            limit=2,
        )
        assert _ids(result["vehicles"]) == ["d", "b"]
        assert result["total"] == 3
        assert result["total_pages"] == 2


class TestRanges:
    def test_min_max(self):
        ranges = get_ranges(STOCK)
        assert ranges["price"] == {"min": 11500, "max": 52000}
        assert ranges["year"] == {"min": 2017, "max": 2021}
        assert ranges["mileage"] == {"min": 45000, "max": 150000}

    def test_empty(self):
        assert get_ranges([]) == {"price": None, "year": None, "mileage": None}
