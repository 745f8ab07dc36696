from rentacar.infra.db.models.base import Base
from rentacar.infra.db.models.booking import BookingRow
from rentacar.infra.db.models.car import CarRow
from rentacar.infra.db.models.favorite import FavoriteRow
from rentacar.infra.db.models.location import LocationRow
from rentacar.infra.db.models.settings import SettingsRow
from rentacar.infra.db.models.user import UserRow

__all__ = [
    "Base",
    "BookingRow",
    "CarRow",
    "FavoriteRow",
    "LocationRow",
    "SettingsRow",
    "UserRow",
]
