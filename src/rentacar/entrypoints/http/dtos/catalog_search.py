from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from rentacar.domain.car import SortKey


class CarResponseDTO(BaseModel):
    id: str
    name: str
    brand: str
    type: str
    year: int
    price_per_day: int = Field(description="Daily rate in whole rupiah")
    price_per_week: int
    price_per_month: int
    transmission: str
    fuel: str
    seats: int
    rating: float
    reviews: int
    available: bool
    featured: bool
    images: list[str]
    features: list[str]
    description: str
    location: str | None = None
    created_at: datetime | None = None


class CarsSearchQueryDTO(BaseModel):
    """Query parameters for searching cars in the catalog."""

    search: str | None = Field(
        default=None,
        description="Case-insensitive substring of name or brand",
        examples=["avanza"],
    )
    type: str | None = Field(
        default=None,
        description="Car type (case-insensitive exact match)",
        examples=["MPV"],
    )
    brand: str | None = Field(
        default=None,
        description="Brand (exact match)",
        examples=["Toyota"],
    )
    transmission: str | None = Field(
        default=None,
        description="Transmission (exact match)",
        examples=["Automatic"],
    )
    fuel: str | None = Field(
        default=None,
        description="Fuel type (exact match)",
        examples=["Bensin"],
    )
    seats: int | None = Field(
        default=None,
        description="Minimum number of seats (inclusive)",
        examples=[7],
        ge=0,
    )
    price_min: int | None = Field(
        default=None,
        description="Minimum daily price in rupiah (inclusive)",
        examples=[300000],
        ge=0,
    )
    price_max: int | None = Field(
        default=None,
        description="Maximum daily price in rupiah (inclusive)",
        examples=[800000],
        ge=0,
    )
    location: str | None = Field(
        default=None,
        description="Pickup location (exact match)",
        examples=["Jakarta"],
    )
    sort: SortKey = Field(
        default=SortKey.POPULAR,
        description="Sort order: popular, price-low, price-high, rating, newest",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "search": "avanza",
                "type": "MPV",
                "seats": 7,
                "price_max": 800000,
                "sort": "price-low",
            }
        }
    )


class CatalogSearchResponseDTO(BaseModel):
    cars: list[CarResponseDTO]
    total: int
