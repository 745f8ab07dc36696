from fastapi import APIRouter, Depends, Query

from rentacar.domain.catalog import FEATURED_LIMIT, SIMILAR_LIMIT
from rentacar.entrypoints.http.dependencies import (
    get_featured_cars_use_case,
    get_get_car_by_id_use_case,
    get_search_catalog_use_case,
    get_similar_cars_use_case,
)
from rentacar.entrypoints.http.dtos.catalog_search import (
    CarResponseDTO,
    CarsSearchQueryDTO,
    CatalogSearchResponseDTO,
)
from rentacar.entrypoints.http.error_responses import ErrorResponse
from rentacar.entrypoints.http.mappers.catalog_search_mapper import CatalogSearchMapper
from rentacar.use_cases.get_car_by_id import GetCarById, GetCarByIdRequest
from rentacar.use_cases.get_featured_cars import GetFeaturedCars
from rentacar.use_cases.get_similar_cars import GetSimilarCars, GetSimilarCarsRequest
from rentacar.use_cases.search_car_catalog import SearchCarCatalog

router = APIRouter(tags=["Cars"])


@router.get(
    "/cars",
    response_model=CatalogSearchResponseDTO,
    summary="Search car catalog",
    description="""
    Search the rental catalog with optional filters and a sort key.

    ## Filters
    - All filters use AND semantics; unset filters match everything
    - search: case-insensitive substring of name or brand
    - type: case-insensitive; brand/transmission/fuel/location: exact
    - seats: minimum seat count; price_min/price_max: inclusive daily rate

    ## Sorting
    - popular (default, most reviews), price-low, price-high, rating, newest
    - Ties keep the catalog's newest-first order

    ## Example
    ```
    GET /v1/cars?type=MPV&seats=7&price_max=800000&sort=price-low
    ```
    """,
    responses={422: {"model": ErrorResponse, "description": "Invalid filter parameters"}},
)
def get_cars(
    query: CarsSearchQueryDTO = Depends(),
    use_case: SearchCarCatalog = Depends(get_search_catalog_use_case),
) -> CatalogSearchResponseDTO:
    """Search cars endpoint following parse → execute → map → return pattern."""
    request = CatalogSearchMapper.to_domain_request(query)
    result = use_case.execute(request)
    return CatalogSearchMapper.to_response(result)


@router.get(
    "/cars/featured",
    response_model=CatalogSearchResponseDTO,
    summary="Featured cars",
    description="Featured cars that are currently available, newest first.",
)
def get_featured_cars(
    limit: int = Query(default=FEATURED_LIMIT, ge=1, le=50),
    use_case: GetFeaturedCars = Depends(get_featured_cars_use_case),
) -> CatalogSearchResponseDTO:
    return CatalogSearchMapper.to_list_response(use_case.execute(limit=limit))


@router.get(
    "/cars/{car_id}",
    response_model=CarResponseDTO,
    summary="Get car details",
    responses={
        404: {"model": ErrorResponse, "description": "Car not found"},
        422: {"model": ErrorResponse, "description": "car_id is not a valid UUID"},
    },
)
def get_car(
    car_id: str,
    use_case: GetCarById = Depends(get_get_car_by_id_use_case),
) -> CarResponseDTO:
    result = use_case.execute(GetCarByIdRequest(car_id=car_id))
    return CatalogSearchMapper.to_car_response(result.car)


@router.get(
    "/cars/{car_id}/similar",
    response_model=CatalogSearchResponseDTO,
    summary="Similar cars",
    description="Other cars of the same type as the given car.",
    responses={404: {"model": ErrorResponse, "description": "Car not found"}},
)
def get_similar_cars(
    car_id: str,
    limit: int = Query(default=SIMILAR_LIMIT, ge=1, le=20),
    use_case: GetSimilarCars = Depends(get_similar_cars_use_case),
) -> CatalogSearchResponseDTO:
    cars = use_case.execute(GetSimilarCarsRequest(car_id=car_id, limit=limit))
    return CatalogSearchMapper.to_list_response(cars)
