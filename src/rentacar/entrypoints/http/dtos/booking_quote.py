from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class BookingQuoteRequestDTO(BaseModel):
    """Request payload for pricing a prospective booking."""

    car_id: str = Field(description="Catalog car id", examples=["550e8400-e29b-41d4-a716-446655440000"])
    start_date: date = Field(description="Pickup date", examples=["2023-01-01"])
    end_date: date = Field(description="Return date", examples=["2023-01-04"])
    with_driver: bool = Field(default=False, description="Add a driver for every rental day")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "car_id": "550e8400-e29b-41d4-a716-446655440000",
                "start_date": "2023-01-01",
                "end_date": "2023-01-04",
                "with_driver": True,
            }
        }
    )


class BookingQuoteResponseDTO(BaseModel):
    """Booking price breakdown; every amount is whole rupiah."""

    days: int = Field(description="Rental days, partial days rounded up", examples=[3])
    subtotal: int = Field(description="days × daily rate", examples=[1500000])
    driver_fee: int = Field(description="days × driver rate, 0 without a driver", examples=[450000])
    total: int = Field(description="subtotal + driver_fee", examples=[1950000])
