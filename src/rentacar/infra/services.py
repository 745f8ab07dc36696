"""
Builds the client-side services over real storage.

Repositories share the caller's SQLAlchemy session and only flush, so the
caller decides when to commit (usually through ``get_session()``). The
identity file and the image directory come from the environment.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from rentacar.adapters.file_identity_store import FileIdentityStore
from rentacar.adapters.local_image_storage import LocalImageStorage
from rentacar.adapters.sqlalchemy_booking_repository import SqlAlchemyBookingRepository
from rentacar.adapters.sqlalchemy_car_repository import SqlAlchemyCarRepository
from rentacar.adapters.sqlalchemy_favorite_repository import SqlAlchemyFavoriteRepository
from rentacar.adapters.sqlalchemy_location_repository import SqlAlchemyLocationRepository
from rentacar.adapters.sqlalchemy_settings_repository import SqlAlchemySettingsRepository
from rentacar.adapters.sqlalchemy_user_repository import SqlAlchemyUserRepository
from rentacar.infra.config import identity_file, image_base_url, image_dir
from rentacar.ports.identity_store import IdentityStore
from rentacar.ports.image_storage import ImageStorage
from rentacar.services.admin_console import AdminConsole
from rentacar.services.client_context import ClientContext


def build_client_context(db: Session, identity_store: IdentityStore | None = None) -> ClientContext:
    return ClientContext.create(
        user_repository=SqlAlchemyUserRepository(session=db),
        car_repository=SqlAlchemyCarRepository(session=db),
        booking_repository=SqlAlchemyBookingRepository(session=db),
        favorite_repository=SqlAlchemyFavoriteRepository(session=db),
        settings_repository=SqlAlchemySettingsRepository(session=db),
        identity_store=identity_store or FileIdentityStore(identity_file()),
    )


def build_admin_console(
    db: Session,
    context: ClientContext,
    image_storage: ImageStorage | None = None,
) -> AdminConsole:
    """Admin operations acting as whoever is logged into ``context``."""
    return AdminConsole(
        context.session,
        SqlAlchemyUserRepository(session=db),
        SqlAlchemyCarRepository(session=db),
        SqlAlchemyBookingRepository(session=db),
        SqlAlchemyLocationRepository(session=db),
        SqlAlchemySettingsRepository(session=db),
        image_storage or LocalImageStorage(image_dir(), image_base_url()),
    )
