from __future__ import annotations

from rentacar.domain.car import Car, CatalogFilters
from rentacar.entrypoints.http.dtos.catalog_search import (
    CarResponseDTO,
    CarsSearchQueryDTO,
    CatalogSearchResponseDTO,
)
from rentacar.use_cases.search_car_catalog import (
    SearchCarCatalogRequest,
    SearchCarCatalogResponse,
)


class CatalogSearchMapper:
    """Maps between REST DTOs and domain models for the car catalog."""

    @staticmethod
    def to_domain_filters(dto: CarsSearchQueryDTO) -> CatalogFilters:
        """
        Converts query params to domain filters.

        Blank strings are treated as "no filter", like an unset query param.
        """
        return CatalogFilters(
            search=dto.search or None,
            type=dto.type or None,
            brand=dto.brand or None,
            transmission=dto.transmission or None,
            fuel=dto.fuel or None,
            min_seats=dto.seats,  # DTO uses 'seats', domain uses 'min_seats'
            price_min=dto.price_min,
            price_max=dto.price_max,
            location=dto.location or None,
            sort=dto.sort,
        )

    @staticmethod
    def to_domain_request(dto: CarsSearchQueryDTO) -> SearchCarCatalogRequest:
        return SearchCarCatalogRequest(filters=CatalogSearchMapper.to_domain_filters(dto))

    @staticmethod
    def to_car_response(car: Car) -> CarResponseDTO:
        """Converts a domain Car to its REST representation (enums → values, tuples → lists)."""
        return CarResponseDTO(
            id=car.id,
            name=car.name,
            brand=car.brand,
            type=car.type.value,
            year=car.year,
            price_per_day=car.price_per_day,
            price_per_week=car.price_per_week,
            price_per_month=car.price_per_month,
            transmission=car.transmission.value,
            fuel=car.fuel.value,
            seats=car.seats,
            rating=car.rating,
            reviews=car.reviews,
            available=car.available,
            featured=car.featured,
            images=list(car.images),
            features=list(car.features),
            description=car.description,
            location=car.location,
            created_at=car.created_at,
        )

    @staticmethod
    def to_response(result: SearchCarCatalogResponse) -> CatalogSearchResponseDTO:
        return CatalogSearchMapper.to_list_response(result.cars)

    @staticmethod
    def to_list_response(cars: list[Car]) -> CatalogSearchResponseDTO:
        return CatalogSearchResponseDTO(
            cars=[CatalogSearchMapper.to_car_response(car) for car in cars],
            total=len(cars),
        )
