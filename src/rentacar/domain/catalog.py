"""Catalog filter/sort engine.

Pure functions over an in-memory car collection. Inputs are never mutated;
every call returns a fresh list.
"""

from __future__ import annotations

from typing import Callable, Iterable

from rentacar.domain.car import Car, CatalogFilters, SortKey

FEATURED_LIMIT = 6
SIMILAR_LIMIT = 3

# (sort key, descending). sorted() stays stable with reverse=True,
# so ties keep their input order for every key.
_SORT_KEYS: dict[SortKey, tuple[Callable[[Car], float | int], bool]] = {
    SortKey.PRICE_LOW: (lambda car: car.price_per_day, False),
    SortKey.PRICE_HIGH: (lambda car: car.price_per_day, True),
    SortKey.RATING: (lambda car: car.rating, True),
    SortKey.NEWEST: (lambda car: car.year, True),
    SortKey.POPULAR: (lambda car: car.reviews, True),
}


def matches(car: Car, filters: CatalogFilters) -> bool:
    """AND-composition of every non-empty predicate in ``filters``."""
    if filters.search:
        needle = filters.search.lower()
        if needle not in car.name.lower() and needle not in car.brand.lower():
            return False
    if filters.type and car.type.value.lower() != filters.type.lower():
        return False
    if filters.brand and car.brand != filters.brand:
        return False
    if filters.transmission and car.transmission.value != filters.transmission:
        return False
    if filters.fuel and car.fuel.value != filters.fuel:
        return False
    if filters.min_seats and car.seats < filters.min_seats:
        return False
    if filters.price_min is not None and car.price_per_day < filters.price_min:
        return False
    if filters.price_max is not None and car.price_per_day > filters.price_max:
        return False
    if filters.location and car.location != filters.location:
        return False
    return True


def apply_catalog_filters(cars: Iterable[Car], filters: CatalogFilters) -> list[Car]:
    """
    Filter and sort a car collection.

    Args:
        cars: Source collection (left untouched)
        filters: Filter criteria and sort key, pre-validated by the caller

    Returns:
        New list of matching cars in sort order
    """
    key, descending = _SORT_KEYS.get(filters.sort, _SORT_KEYS[SortKey.POPULAR])
    return sorted((car for car in cars if matches(car, filters)), key=key, reverse=descending)


def featured_cars(cars: Iterable[Car], limit: int = FEATURED_LIMIT) -> list[Car]:
    """Featured and currently available cars, in input order."""
    return [car for car in cars if car.featured and car.available][:limit]


def similar_cars(car: Car, cars: Iterable[Car], limit: int = SIMILAR_LIMIT) -> list[Car]:
    """Other cars of the same type, in input order."""
    return [other for other in cars if other.type == car.type and other.id != car.id][:limit]
