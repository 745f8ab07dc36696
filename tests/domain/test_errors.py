"""Tests for domain errors."""

import pytest

from rentacar.domain.errors import (
    ConflictError,
    DomainError,
    DuplicateEmailError,
    ForbiddenError,
    InactiveAccountError,
    InternalError,
    InvalidCredentialError,
    InvalidTransitionError,
    NotFoundError,
    PersistenceError,
    UnauthorizedError,
    ValidationError,
)


class TestDomainError:
    def test_keeps_message_and_context(self) -> None:
        error = DomainError("Booking could not be created", car_id="c-1", user_id="u-1")

        assert str(error) == "Booking could not be created"
        assert error.context == {"car_id": "c-1", "user_id": "u-1"}

    def test_to_dict_flattens_context(self) -> None:
        error = DomainError("Booking could not be created", car_id="c-1")

        assert error.to_dict() == {
            "message": "Booking could not be created",
            "code": "DOMAIN_ERROR",
            "car_id": "c-1",
        }

    @pytest.mark.parametrize(
        "error_type",
        [ValidationError, NotFoundError, ConflictError, UnauthorizedError, ForbiddenError, InternalError],
    )
    def test_every_error_is_a_domain_error(self, error_type: type[DomainError]) -> None:
        assert issubclass(error_type, DomainError)


class TestValidationError:
    def test_field_errors_get_default_message(self) -> None:
        error = ValidationError(
            errors=[{"field": "end_date", "message": "Must be after start_date", "code": "INVALID_RANGE"}]
        )

        assert error.message == "Validation failed"
        assert error.to_dict() == {
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": [{"field": "end_date", "message": "Must be after start_date", "code": "INVALID_RANGE"}],
        }

    def test_message_only(self) -> None:
        error = ValidationError("limit must be > 0")

        assert error.errors is None
        assert "errors" not in error.to_dict()

    def test_without_anything(self) -> None:
        assert ValidationError().message == "Validation error"

    def test_empty_error_list_is_no_field_errors(self) -> None:
        assert ValidationError(errors=[]).errors is None


class TestNotFoundError:
    def test_message_names_resource_and_identifier(self) -> None:
        error = NotFoundError(resource="Car", identifier="550e8400")

        assert error.message == "Car with identifier '550e8400' not found"
        assert error.error_code == "NOT_FOUND"
        assert error.context == {"resource": "Car", "identifier": "550e8400"}

    def test_without_identifier(self) -> None:
        assert NotFoundError("Settings").message == "Settings not found"


class TestAccountErrors:
    def test_invalid_credential_is_unauthorized(self) -> None:
        error = InvalidCredentialError()

        assert isinstance(error, UnauthorizedError)
        assert error.message == "Incorrect password"
        assert error.error_code == "INVALID_CREDENTIALS"

    def test_inactive_account_is_forbidden(self) -> None:
        error = InactiveAccountError()

        assert isinstance(error, ForbiddenError)
        assert error.error_code == "INACTIVE_ACCOUNT"
        assert "inactive" in error.message

    def test_duplicate_email_carries_email(self) -> None:
        error = DuplicateEmailError("budi@example.com")

        assert isinstance(error, ConflictError)
        assert error.error_code == "DUPLICATE_EMAIL"
        assert error.context == {"email": "budi@example.com"}
        assert "budi@example.com" in error.message


class TestInvalidTransitionError:
    def test_message_names_both_statuses(self) -> None:
        error = InvalidTransitionError(current="pending", requested="completed", booking_id="b-1")

        assert isinstance(error, ConflictError)
        assert error.message == "Cannot change booking status from 'pending' to 'completed'"
        assert error.to_dict() == {
            "message": "Cannot change booking status from 'pending' to 'completed'",
            "code": "INVALID_TRANSITION",
            "current": "pending",
            "requested": "completed",
            "booking_id": "b-1",
        }


class TestPersistenceError:
    def test_default_message_is_retryable(self) -> None:
        error = PersistenceError("cars.list_all")

        assert error.error_code == "PERSISTENCE_ERROR"
        assert error.message == "Storage is unavailable, try again"
        assert error.context == {"operation": "cars.list_all"}

    def test_can_be_caught_as_domain_error(self) -> None:
        with pytest.raises(DomainError):
            raise PersistenceError("bookings.create", booking_id="b-1")
