from __future__ import annotations

from rentacar.domain.pricing import BookingQuote
from rentacar.entrypoints.http.dtos.booking_quote import (
    BookingQuoteRequestDTO,
    BookingQuoteResponseDTO,
)
from rentacar.use_cases.calculate_booking_quote import BookingQuoteRequest


class BookingQuoteMapper:
    """Maps between REST DTOs and domain models for booking quotes."""

    @staticmethod
    def to_domain(dto: BookingQuoteRequestDTO) -> BookingQuoteRequest:
        return BookingQuoteRequest(
            car_id=dto.car_id,
            start_date=dto.start_date,
            end_date=dto.end_date,
            with_driver=dto.with_driver,
        )

    @staticmethod
    def to_response(quote: BookingQuote) -> BookingQuoteResponseDTO:
        return BookingQuoteResponseDTO(
            days=quote.days,
            subtotal=quote.subtotal,
            driver_fee=quote.driver_fee,
            total=quote.total,
        )
