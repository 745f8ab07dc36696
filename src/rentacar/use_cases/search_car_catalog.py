from __future__ import annotations

from dataclasses import dataclass

from rentacar.domain.car import Car, CatalogFilters
from rentacar.domain.catalog import apply_catalog_filters
from rentacar.ports.car_repository import CarRepository


@dataclass(frozen=True, slots=True)
class SearchCarCatalogRequest:
    filters: CatalogFilters


@dataclass(frozen=True, slots=True)
class SearchCarCatalogResponse:
    cars: list[Car]
    total_count: int


class SearchCarCatalog:
    """
    Car catalog search with filters and sorting.

    Loads the full collection from the repository and runs the in-memory
    filter/sort engine over it; the repository never filters.
    """

    def __init__(self, car_repository: CarRepository) -> None:
        self._repository = car_repository

    def execute(self, request: SearchCarCatalogRequest) -> SearchCarCatalogResponse:
        """
        Execute catalog search.

        Args:
            request: Filter criteria and sort key

        Returns:
            Response containing matching cars in sort order

        Raises:
            FilterValidationError: If filter parameters are invalid
            PersistenceError: If the catalog could not be loaded
        """
        # Validate before touching storage
        request.filters.validate()

        cars = apply_catalog_filters(self._repository.list_all(), request.filters)

        return SearchCarCatalogResponse(cars=cars, total_count=len(cars))
