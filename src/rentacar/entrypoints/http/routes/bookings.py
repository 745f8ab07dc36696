from fastapi import APIRouter, Depends

from rentacar.entrypoints.http.dependencies import get_booking_quote_use_case
from rentacar.entrypoints.http.dtos.booking_quote import (
    BookingQuoteRequestDTO,
    BookingQuoteResponseDTO,
)
from rentacar.entrypoints.http.error_responses import ErrorResponse
from rentacar.entrypoints.http.mappers.booking_quote_mapper import BookingQuoteMapper
from rentacar.use_cases.calculate_booking_quote import CalculateBookingQuote

router = APIRouter(tags=["Bookings"])


@router.post(
    "/bookings/quote",
    response_model=BookingQuoteResponseDTO,
    summary="Price a booking",
    description="""
    Price a prospective booking without creating it.

    ## Calculation
    - days = whole days between the dates, a partial day counts as a full day
    - subtotal = days × car daily rate
    - driver_fee = days × driver rate (site settings), only with a driver
    - total = subtotal + driver_fee

    A return date on or before the pickup date yields an all-zero quote.

    ## Example
    ```
    POST /v1/bookings/quote
    {"car_id": "...", "start_date": "2023-01-01", "end_date": "2023-01-04", "with_driver": true}
    ```
    """,
    responses={
        404: {"model": ErrorResponse, "description": "Car not found"},
        422: {"model": ErrorResponse, "description": "Invalid request body"},
    },
)
def quote_booking(
    payload: BookingQuoteRequestDTO,
    use_case: CalculateBookingQuote = Depends(get_booking_quote_use_case),
) -> BookingQuoteResponseDTO:
    quote = use_case.execute(BookingQuoteMapper.to_domain(payload))
    return BookingQuoteMapper.to_response(quote)
