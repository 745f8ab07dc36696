"""Tests for the catalog filter/sort engine."""

from __future__ import annotations

import pytest

from conftest import make_car
from rentacar.domain.car import Car, CarType, CatalogFilters, FilterValidationError, FuelType, SortKey, Transmission
from rentacar.domain.catalog import apply_catalog_filters, featured_cars, matches, similar_cars


@pytest.fixture()
def fleet() -> list[Car]:
    """Four cars, newest-created first."""
    return [
        make_car(id="a", name="Toyota Avanza", brand="Toyota", type=CarType.MPV, price_per_day=400_000,
                 seats=7, rating=4.5, reviews=120, year=2021, featured=True),
        make_car(id="b", name="Honda Brio", brand="Honda", type=CarType.HATCHBACK, price_per_day=300_000,
                 seats=5, rating=4.8, reviews=45, year=2023, transmission=Transmission.MANUAL),
        make_car(id="c", name="Mitsubishi Xpander", brand="Mitsubishi", type=CarType.MPV, price_per_day=550_000,
                 seats=7, rating=4.2, reviews=120, year=2022, location="Bandung", available=False, featured=True),
        make_car(id="d", name="Hyundai Ioniq 5", brand="Hyundai", type=CarType.ELECTRIC, price_per_day=1_200_000,
                 seats=5, rating=4.9, reviews=8, year=2024, fuel=FuelType.ELECTRIC, featured=True),
    ]


def ids(cars: list[Car]) -> list[str]:
    return [car.id for car in cars]


# ==============================================================================
# Filtering
# ==============================================================================


def test_empty_filters_keep_every_car(fleet: list[Car]) -> None:
    result = apply_catalog_filters(fleet, CatalogFilters())

    assert sorted(ids(result)) == ["a", "b", "c", "d"]


def test_search_matches_name_or_brand_case_insensitively(fleet: list[Car]) -> None:
    assert ids(apply_catalog_filters(fleet, CatalogFilters(search="AVANZA"))) == ["a"]
    assert ids(apply_catalog_filters(fleet, CatalogFilters(search="hyun"))) == ["d"]


def test_type_filter_is_case_insensitive(fleet: list[Car]) -> None:
    result = apply_catalog_filters(fleet, CatalogFilters(type="mpv"))

    assert sorted(ids(result)) == ["a", "c"]


def test_brand_filter_is_exact(fleet: list[Car]) -> None:
    assert ids(apply_catalog_filters(fleet, CatalogFilters(brand="Honda"))) == ["b"]
    assert apply_catalog_filters(fleet, CatalogFilters(brand="honda")) == []


def test_min_seats_is_inclusive(fleet: list[Car]) -> None:
    result = apply_catalog_filters(fleet, CatalogFilters(min_seats=7))

    assert sorted(ids(result)) == ["a", "c"]


def test_price_bounds_are_inclusive(fleet: list[Car]) -> None:
    result = apply_catalog_filters(fleet, CatalogFilters(price_min=300_000, price_max=550_000))

    assert sorted(ids(result)) == ["a", "b", "c"]


def test_filters_compose_with_and(fleet: list[Car]) -> None:
    filters = CatalogFilters(type="MPV", min_seats=7, price_max=450_000)

    assert ids(apply_catalog_filters(fleet, filters)) == ["a"]


def test_transmission_fuel_and_location_filters(fleet: list[Car]) -> None:
    assert ids(apply_catalog_filters(fleet, CatalogFilters(transmission="Manual"))) == ["b"]
    assert ids(apply_catalog_filters(fleet, CatalogFilters(fuel="Electric"))) == ["d"]
    assert ids(apply_catalog_filters(fleet, CatalogFilters(location="Bandung"))) == ["c"]


def test_matches_single_car(fleet: list[Car]) -> None:
    assert matches(fleet[0], CatalogFilters(search="toyota", type="MPV"))
    assert not matches(fleet[0], CatalogFilters(price_min=500_000))


def test_unavailable_cars_stay_in_search_results(fleet: list[Car]) -> None:
    assert "c" in ids(apply_catalog_filters(fleet, CatalogFilters()))


# ==============================================================================
# Sorting
# ==============================================================================


def test_sort_price_low(fleet: list[Car]) -> None:
    result = apply_catalog_filters(fleet, CatalogFilters(sort=SortKey.PRICE_LOW))

    assert ids(result) == ["b", "a", "c", "d"]


def test_sort_price_high(fleet: list[Car]) -> None:
    result = apply_catalog_filters(fleet, CatalogFilters(sort=SortKey.PRICE_HIGH))

    assert ids(result) == ["d", "c", "a", "b"]


def test_sort_rating_and_newest(fleet: list[Car]) -> None:
    assert ids(apply_catalog_filters(fleet, CatalogFilters(sort=SortKey.RATING))) == ["d", "b", "a", "c"]
    assert ids(apply_catalog_filters(fleet, CatalogFilters(sort=SortKey.NEWEST))) == ["d", "b", "c", "a"]


def test_popular_ties_keep_input_order(fleet: list[Car]) -> None:
    """a and c both have 120 reviews; a comes first in the source."""
    result = apply_catalog_filters(fleet, CatalogFilters(sort=SortKey.POPULAR))

    assert ids(result) == ["a", "c", "b", "d"]


def test_price_ties_keep_input_order() -> None:
    cars = [make_car(id=str(i), price_per_day=500_000) for i in range(4)]

    assert ids(apply_catalog_filters(cars, CatalogFilters(sort=SortKey.PRICE_HIGH))) == ["0", "1", "2", "3"]
    assert ids(apply_catalog_filters(cars, CatalogFilters(sort=SortKey.PRICE_LOW))) == ["0", "1", "2", "3"]


def test_engine_never_mutates_input(fleet: list[Car]) -> None:
    before = list(fleet)

    result = apply_catalog_filters(fleet, CatalogFilters(sort=SortKey.PRICE_LOW))

    assert fleet == before
    assert result is not fleet


@pytest.mark.parametrize("sort", list(SortKey))
def test_same_filters_give_same_result(fleet: list[Car], sort: SortKey) -> None:
    filters = CatalogFilters(search="a", min_seats=4, sort=sort)

    first = apply_catalog_filters(fleet, filters)
    second = apply_catalog_filters(fleet, filters)

    assert first == second
    assert ids(first) == ids(second)


# ==============================================================================
# Featured / similar
# ==============================================================================


def test_featured_cars_are_featured_and_available(fleet: list[Car]) -> None:
    assert ids(featured_cars(fleet)) == ["a", "d"]


def test_featured_cars_respects_limit(fleet: list[Car]) -> None:
    assert ids(featured_cars(fleet, limit=1)) == ["a"]


def test_similar_cars_share_type_and_exclude_reference(fleet: list[Car]) -> None:
    assert ids(similar_cars(fleet[0], fleet)) == ["c"]


def test_similar_cars_respects_limit() -> None:
    cars = [make_car(id=str(i)) for i in range(6)]

    assert ids(similar_cars(cars[0], cars)) == ["1", "2", "3"]


# ==============================================================================
# Filter validation
# ==============================================================================


def test_price_min_above_max_is_rejected() -> None:
    with pytest.raises(FilterValidationError, match="price_min cannot be greater than price_max"):
        CatalogFilters(price_min=600_000, price_max=500_000).validate()


@pytest.mark.parametrize("field", ["price_min", "price_max"])
def test_float_prices_are_rejected(field: str) -> None:
    with pytest.raises(FilterValidationError):
        CatalogFilters(**{field: 100.5}).validate()


def test_negative_seats_are_rejected() -> None:
    with pytest.raises(FilterValidationError, match="min_seats"):
        CatalogFilters(min_seats=-1).validate()
