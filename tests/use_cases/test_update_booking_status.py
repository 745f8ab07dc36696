"""Test suite for UpdateBookingStatus and MarkBookingPaid use cases."""

from __future__ import annotations

from datetime import date

import pytest

from conftest import ADMIN_ID, CAR_ID, USER_ID, make_account
from rentacar.adapters.in_memory_booking_repository import InMemoryBookingRepository
from rentacar.adapters.in_memory_user_repository import InMemoryUserRepository
from rentacar.domain.booking import Booking, BookingStatus, PaymentStatus
from rentacar.domain.errors import ForbiddenError, InvalidTransitionError, NotFoundError
from rentacar.domain.user import Role
from rentacar.use_cases.update_booking_status import (
    MarkBookingPaid,
    MarkBookingPaidRequest,
    UpdateBookingStatus,
    UpdateBookingStatusRequest,
)

OTHER_USER_ID = "3f0b8d6e-2c1a-4e9f-8b7d-5a4c3b2a1f00"


def make_booking(
    booking_id: str = "b-1",
    status: BookingStatus = BookingStatus.PENDING,
    payment_status: PaymentStatus = PaymentStatus.UNPAID,
    user_id: str = USER_ID,
) -> Booking:
    return Booking(
        id=booking_id,
        user_id=user_id,
        car_id=CAR_ID,
        start_date=date(2023, 1, 1),
        end_date=date(2023, 1, 4),
        days=3,
        subtotal=1_500_000,
        driver_fee=0,
        total_price=1_500_000,
        status=status,
        payment_status=payment_status,
    )


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository(
        [
            make_account(),
            make_account(user_id=OTHER_USER_ID, email="siti@example.com"),
            make_account(user_id=ADMIN_ID, email="admin@rentacar.id", role=Role.ADMIN),
        ]
    )


def status_use_case(users: InMemoryUserRepository, *bookings: Booking) -> tuple[UpdateBookingStatus, InMemoryBookingRepository]:
    repository = InMemoryBookingRepository(list(bookings))
    return UpdateBookingStatus(users, repository), repository


# ==============================================================================
# Administrator transitions
# ==============================================================================


@pytest.mark.parametrize(
    ("current", "requested"),
    [
        (BookingStatus.PENDING, BookingStatus.CONFIRMED),
        (BookingStatus.PENDING, BookingStatus.CANCELLED),
        (BookingStatus.CONFIRMED, BookingStatus.COMPLETED),
        (BookingStatus.CONFIRMED, BookingStatus.CANCELLED),
    ],
)
def test_admin_applies_allowed_transition(
    users: InMemoryUserRepository, current: BookingStatus, requested: BookingStatus
) -> None:
    use_case, repository = status_use_case(users, make_booking(status=current))

    updated = use_case.execute(UpdateBookingStatusRequest(actor_id=ADMIN_ID, booking_id="b-1", status=requested))

    assert updated.status == requested
    assert repository.get_by_id("b-1").status == requested  # type: ignore[union-attr]


def test_pending_to_completed_is_rejected_and_status_kept(users: InMemoryUserRepository) -> None:
    use_case, repository = status_use_case(users, make_booking())

    with pytest.raises(InvalidTransitionError) as exc_info:
        use_case.execute(
            UpdateBookingStatusRequest(actor_id=ADMIN_ID, booking_id="b-1", status=BookingStatus.COMPLETED)
        )

    assert exc_info.value.context["current"] == "pending"
    assert exc_info.value.context["requested"] == "completed"
    assert repository.get_by_id("b-1").status == BookingStatus.PENDING  # type: ignore[union-attr]


@pytest.mark.parametrize("terminal", [BookingStatus.COMPLETED, BookingStatus.CANCELLED])
def test_terminal_bookings_cannot_change(users: InMemoryUserRepository, terminal: BookingStatus) -> None:
    use_case, _ = status_use_case(users, make_booking(status=terminal))

    with pytest.raises(InvalidTransitionError):
        use_case.execute(
            UpdateBookingStatusRequest(actor_id=ADMIN_ID, booking_id="b-1", status=BookingStatus.PENDING)
        )


# ==============================================================================
# Renter transitions
# ==============================================================================


def test_owner_can_cancel_pending_booking(users: InMemoryUserRepository) -> None:
    use_case, _ = status_use_case(users, make_booking())

    updated = use_case.execute(
        UpdateBookingStatusRequest(actor_id=USER_ID, booking_id="b-1", status=BookingStatus.CANCELLED)
    )

    assert updated.status == BookingStatus.CANCELLED


def test_owner_cannot_confirm_own_booking(users: InMemoryUserRepository) -> None:
    use_case, _ = status_use_case(users, make_booking())

    with pytest.raises(ForbiddenError):
        use_case.execute(
            UpdateBookingStatusRequest(actor_id=USER_ID, booking_id="b-1", status=BookingStatus.CONFIRMED)
        )


def test_owner_cannot_cancel_confirmed_booking(users: InMemoryUserRepository) -> None:
    use_case, _ = status_use_case(users, make_booking(status=BookingStatus.CONFIRMED))

    with pytest.raises(ForbiddenError):
        use_case.execute(
            UpdateBookingStatusRequest(actor_id=USER_ID, booking_id="b-1", status=BookingStatus.CANCELLED)
        )


def test_other_users_booking_is_not_found(users: InMemoryUserRepository) -> None:
    use_case, _ = status_use_case(users, make_booking())

    with pytest.raises(NotFoundError):
        use_case.execute(
            UpdateBookingStatusRequest(actor_id=OTHER_USER_ID, booking_id="b-1", status=BookingStatus.CANCELLED)
        )


def test_missing_booking_is_not_found(users: InMemoryUserRepository) -> None:
    use_case, _ = status_use_case(users)

    with pytest.raises(NotFoundError):
        use_case.execute(
            UpdateBookingStatusRequest(actor_id=ADMIN_ID, booking_id="missing", status=BookingStatus.CONFIRMED)
        )


# ==============================================================================
# Payment
# ==============================================================================


def test_admin_marks_booking_paid(users: InMemoryUserRepository) -> None:
    repository = InMemoryBookingRepository([make_booking(status=BookingStatus.CONFIRMED)])

    updated = MarkBookingPaid(users, repository).execute(MarkBookingPaidRequest(actor_id=ADMIN_ID, booking_id="b-1"))

    assert updated.payment_status == PaymentStatus.PAID
    assert updated.status == BookingStatus.CONFIRMED


@pytest.mark.parametrize(
    "booking",
    [
        make_booking(status=BookingStatus.CANCELLED),
        make_booking(payment_status=PaymentStatus.PAID),
    ],
)
def test_cancelled_or_paid_booking_cannot_be_paid(users: InMemoryUserRepository, booking: Booking) -> None:
    repository = InMemoryBookingRepository([booking])

    with pytest.raises(InvalidTransitionError):
        MarkBookingPaid(users, repository).execute(MarkBookingPaidRequest(actor_id=ADMIN_ID, booking_id="b-1"))


def test_renter_cannot_mark_paid(users: InMemoryUserRepository) -> None:
    repository = InMemoryBookingRepository([make_booking()])

    with pytest.raises(ForbiddenError):
        MarkBookingPaid(users, repository).execute(MarkBookingPaidRequest(actor_id=USER_ID, booking_id="b-1"))
