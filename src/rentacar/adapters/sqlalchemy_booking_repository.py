"""SQLAlchemy implementation of BookingRepository."""

from __future__ import annotations

import uuid

from sqlalchemy import case, func, select
from sqlalchemy.orm import Session

from rentacar.adapters.sqlalchemy_errors import as_utc, parse_uuid, storage_call
from rentacar.domain.booking import (
    Booking,
    BookingStats,
    BookingStatus,
    BookingUpdate,
    CarSummary,
    NewBooking,
    PaymentStatus,
    UserSummary,
)
from rentacar.domain.errors import NotFoundError
from rentacar.infra.db.models.booking import BookingRow
from rentacar.ports.booking_repository import BookingRepository


class SqlAlchemyBookingRepository(BookingRepository):
    """
    SQLAlchemy implementation of BookingRepository.

    - Car and user rows are eager-loaded with the booking (joined)
    - Stats are aggregated in a single GROUP BY query
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Booking]:
        query = select(BookingRow).order_by(BookingRow.created_at.desc())
        with storage_call("bookings.list_all"):
            rows = self._session.execute(query).unique().scalars().all()
        return [to_domain_booking(row, with_user=True) for row in rows]

    def list_for_user(self, user_id: str) -> list[Booking]:
        key = parse_uuid(user_id)
        if key is None:
            return []
        query = (
            select(BookingRow)
            .where(BookingRow.user_id == key)
            .order_by(BookingRow.created_at.desc())
        )
        with storage_call("bookings.list_for_user"):
            rows = self._session.execute(query).unique().scalars().all()
        return [to_domain_booking(row) for row in rows]

    def get_by_id(self, booking_id: str) -> Booking | None:
        row = self._get_row(booking_id)
        return to_domain_booking(row, with_user=True) if row else None

    def create(self, new_booking: NewBooking) -> Booking:
        row = BookingRow(
            user_id=uuid.UUID(new_booking.user_id),
            car_id=uuid.UUID(new_booking.car_id),
            start_date=new_booking.start_date,
            end_date=new_booking.end_date,
            days=new_booking.days,
            with_driver=new_booking.with_driver,
            subtotal=new_booking.subtotal,
            driver_fee=new_booking.driver_fee,
            total_price=new_booking.total_price,
            status=new_booking.status.value,
            payment_status=new_booking.payment_status.value,
            notes=new_booking.notes,
        )
        with storage_call("bookings.create"):
            self._session.add(row)
            self._session.flush()
        return to_domain_booking(row)

    def update(self, booking_id: str, update: BookingUpdate) -> Booking:
        row = self._get_row(booking_id)
        if row is None:
            raise NotFoundError(resource="Booking", identifier=booking_id)

        if update.status is not None:
            row.status = update.status.value
        if update.payment_status is not None:
            row.payment_status = update.payment_status.value

        with storage_call("bookings.update"):
            self._session.flush()
        return to_domain_booking(row, with_user=True)

    def delete(self, booking_id: str) -> None:
        row = self._get_row(booking_id)
        if row is None:
            return
        with storage_call("bookings.delete"):
            self._session.delete(row)
            self._session.flush()

    def get_stats(self) -> BookingStats:
        revenue = func.sum(
            case((BookingRow.status != BookingStatus.CANCELLED.value, BookingRow.total_price), else_=0)
        )
        query = select(BookingRow.status, func.count(), revenue).group_by(BookingRow.status)
        with storage_call("bookings.get_stats"):
            rows = self._session.execute(query).all()

        counts = {status: 0 for status in BookingStatus}
        total_revenue = 0
        for status, count, status_revenue in rows:
            counts[BookingStatus(status)] = count
            total_revenue += int(status_revenue or 0)

        return BookingStats(
            total=sum(counts.values()),
            pending=counts[BookingStatus.PENDING],
            confirmed=counts[BookingStatus.CONFIRMED],
            completed=counts[BookingStatus.COMPLETED],
            cancelled=counts[BookingStatus.CANCELLED],
            revenue=total_revenue,
        )

    def _get_row(self, booking_id: str) -> BookingRow | None:
        key = parse_uuid(booking_id)
        if key is None:
            return None
        with storage_call("bookings.get_by_id"):
            return self._session.get(BookingRow, key)


def to_domain_booking(row: BookingRow, with_user: bool = False) -> Booking:
    car = row.car
    user = row.user if with_user else None
    return Booking(
        id=str(row.id),
        user_id=str(row.user_id),
        car_id=str(row.car_id),
        start_date=row.start_date,
        end_date=row.end_date,
        days=row.days,
        subtotal=row.subtotal,
        driver_fee=row.driver_fee,
        total_price=row.total_price,
        with_driver=row.with_driver,
        status=BookingStatus(row.status),
        payment_status=PaymentStatus(row.payment_status),
        notes=row.notes,
        created_at=as_utc(row.created_at),
        car=(
            CarSummary(
                id=str(car.id),
                name=car.name,
                brand=car.brand,
                price_per_day=car.price_per_day,
                images=tuple(car.images or ()),
            )
            if car is not None
            else None
        ),
        user=(
            UserSummary(id=str(user.id), name=user.name, email=user.email, phone=user.phone)
            if user is not None
            else None
        ),
    )
