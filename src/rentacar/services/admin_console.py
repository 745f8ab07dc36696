"""Administrator back-office operations."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from rentacar.domain.booking import Booking, BookingStats, BookingStatus
from rentacar.domain.car import Car
from rentacar.domain.errors import ForbiddenError, NotFoundError, PersistenceError
from rentacar.domain.location import Location
from rentacar.domain.settings import SiteSettings
from rentacar.domain.user import User, UserUpdate
from rentacar.ports.booking_repository import BookingRepository
from rentacar.ports.car_repository import CarRepository
from rentacar.ports.image_storage import ImageStorage
from rentacar.ports.location_repository import LocationRepository
from rentacar.ports.settings_repository import SettingsRepository
from rentacar.ports.user_repository import UserRepository
from rentacar.services.session_manager import SessionManager
from rentacar.use_cases.get_site_settings import GetSiteSettings
from rentacar.use_cases.list_bookings import GetBookingStats, ListAllBookings
from rentacar.use_cases.update_booking_status import (
    MarkBookingPaid,
    MarkBookingPaidRequest,
    UpdateBookingStatus,
    UpdateBookingStatusRequest,
)
from rentacar.use_cases.update_profile import AdminUpdateUser

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DashboardSummary:
    total_cars: int
    total_users: int
    bookings: BookingStats


class AdminConsole:
    """
    Back-office for cars, users, locations, settings and bookings.

    Every operation re-verifies the session user as an active administrator
    against the user store before touching data.
    """

    def __init__(
        self,
        session: SessionManager,
        user_repository: UserRepository,
        car_repository: CarRepository,
        booking_repository: BookingRepository,
        location_repository: LocationRepository,
        settings_repository: SettingsRepository,
        image_storage: ImageStorage,
    ) -> None:
        self._session = session
        self._users = user_repository
        self._cars = car_repository
        self._locations = location_repository
        self._settings = settings_repository
        self._images = image_storage
        self._get_settings = GetSiteSettings(settings_repository)
        self._update_user = AdminUpdateUser(user_repository)
        self._update_status = UpdateBookingStatus(user_repository, booking_repository)
        self._mark_paid = MarkBookingPaid(user_repository, booking_repository)
        self._list_bookings = ListAllBookings(user_repository, booking_repository)
        self._booking_stats = GetBookingStats(user_repository, booking_repository)

    def dashboard(self) -> DashboardSummary:
        admin = self._session.verify_admin()
        return DashboardSummary(
            total_cars=len(self._cars.list_all()),
            total_users=len(self._users.list_all()),
            bookings=self._booking_stats.execute(actor_id=admin.id),
        )

    # Cars

    def list_cars(self) -> list[Car]:
        self._session.verify_admin()
        return self._cars.list_all()

    def create_car(self, car: Car) -> Car:
        """
        Raises:
            ValidationError: If the car record is invalid
        """
        admin = self._session.verify_admin()
        car.validate()
        created = self._cars.create(car)
        logger.info("Car created", extra={"car_id": created.id, "actor_id": admin.id})
        return created

    def update_car(self, car: Car) -> Car:
        admin = self._session.verify_admin()
        car.validate()
        updated = self._cars.update(car)
        logger.info("Car updated", extra={"car_id": car.id, "actor_id": admin.id})
        return updated

    def delete_car(self, car_id: str) -> None:
        admin = self._session.verify_admin()
        self._cars.delete(car_id)
        logger.info("Car deleted", extra={"car_id": car_id, "actor_id": admin.id})

    def upload_car_image(self, car_id: str, filename: str, content: bytes) -> Car:
        """
        Store an image and append its URL to the car's gallery.

        Raises:
            NotFoundError: If the car doesn't exist
            ValidationError: If the file type is not an accepted image
        """
        self._session.verify_admin()
        car = self._cars.get_by_id(car_id)
        if car is None:
            raise NotFoundError(resource="Car", identifier=car_id)

        url = self._images.upload(filename, content, owner_id=car_id)
        try:
            return self._cars.update(replace(car, images=(*car.images, url)))
        except Exception:
            self._discard_image(url)
            raise

    def _discard_image(self, url: str) -> None:
        try:
            self._images.delete(url)
        except PersistenceError:
            logger.warning("Could not remove orphaned image", extra={"url": url})

    # Users

    def list_users(self) -> list[User]:
        self._session.verify_admin()
        return self._users.list_all()

    def update_user(self, user_id: str, update: UserUpdate) -> User:
        admin = self._session.verify_admin()
        updated = self._update_user.execute(actor_id=admin.id, user_id=user_id, update=update)
        logger.info("User updated", extra={"user_id": user_id, "actor_id": admin.id})
        return updated

    def delete_user(self, user_id: str) -> None:
        admin = self._session.verify_admin()
        if admin.id == user_id:
            raise ForbiddenError("Administrators cannot delete their own account", user_id=user_id)
        self._users.delete(user_id)
        logger.info("User deleted", extra={"user_id": user_id, "actor_id": admin.id})

    # Locations

    def list_locations(self) -> list[Location]:
        self._session.verify_admin()
        return self._locations.list_all()

    def create_location(self, location: Location) -> Location:
        self._session.verify_admin()
        location.validate()
        return self._locations.create(location)

    def update_location(self, location: Location) -> Location:
        self._session.verify_admin()
        location.validate()
        return self._locations.update(location)

    def delete_location(self, location_id: str) -> None:
        self._session.verify_admin()
        self._locations.delete(location_id)

    # Settings

    def get_settings(self) -> SiteSettings:
        self._session.verify_admin()
        return self._get_settings.execute()

    def update_settings(self, settings: SiteSettings) -> SiteSettings:
        admin = self._session.verify_admin()
        settings.validate()
        saved = self._settings.update(settings)
        logger.info("Site settings updated", extra={"actor_id": admin.id})
        return saved

    # Bookings

    def list_bookings(self) -> list[Booking]:
        admin = self._session.verify_admin()
        return self._list_bookings.execute(actor_id=admin.id)

    def update_booking_status(self, booking_id: str, status: BookingStatus) -> Booking:
        admin = self._session.verify_admin()
        return self._update_status.execute(
            UpdateBookingStatusRequest(actor_id=admin.id, booking_id=booking_id, status=status)
        )

    def mark_booking_paid(self, booking_id: str) -> Booking:
        admin = self._session.verify_admin()
        return self._mark_paid.execute(MarkBookingPaidRequest(actor_id=admin.id, booking_id=booking_id))

    def booking_stats(self) -> BookingStats:
        admin = self._session.verify_admin()
        return self._booking_stats.execute(actor_id=admin.id)
