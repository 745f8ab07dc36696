"""
Dependency injection for FastAPI routes.

Database sessions are per-request, never cached. Each use case factory
builds fresh repositories over the request's session.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from rentacar.adapters.sqlalchemy_car_repository import SqlAlchemyCarRepository
from rentacar.adapters.sqlalchemy_settings_repository import SqlAlchemySettingsRepository
from rentacar.adapters.sqlalchemy_user_repository import SqlAlchemyUserRepository
from rentacar.infra.db.session import get_session
from rentacar.use_cases.authenticate_user import AuthenticateUser
from rentacar.use_cases.calculate_booking_quote import CalculateBookingQuote
from rentacar.use_cases.get_car_by_id import GetCarById
from rentacar.use_cases.get_featured_cars import GetFeaturedCars
from rentacar.use_cases.get_similar_cars import GetSimilarCars
from rentacar.use_cases.register_user import RegisterUser
from rentacar.use_cases.search_car_catalog import SearchCarCatalog


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() commits on success, rolls back on
    exception and always closes the session.
    """
    with get_session() as session:
        yield session


def get_search_catalog_use_case(db: Session = Depends(get_db)) -> SearchCarCatalog:
    return SearchCarCatalog(car_repository=SqlAlchemyCarRepository(session=db))


def get_get_car_by_id_use_case(db: Session = Depends(get_db)) -> GetCarById:
    return GetCarById(car_repository=SqlAlchemyCarRepository(session=db))


def get_featured_cars_use_case(db: Session = Depends(get_db)) -> GetFeaturedCars:
    return GetFeaturedCars(car_repository=SqlAlchemyCarRepository(session=db))


def get_similar_cars_use_case(db: Session = Depends(get_db)) -> GetSimilarCars:
    return GetSimilarCars(car_repository=SqlAlchemyCarRepository(session=db))


def get_booking_quote_use_case(db: Session = Depends(get_db)) -> CalculateBookingQuote:
    return CalculateBookingQuote(
        car_repository=SqlAlchemyCarRepository(session=db),
        settings_repository=SqlAlchemySettingsRepository(session=db),
    )


def get_authenticate_user_use_case(db: Session = Depends(get_db)) -> AuthenticateUser:
    return AuthenticateUser(user_repository=SqlAlchemyUserRepository(session=db))


def get_register_user_use_case(db: Session = Depends(get_db)) -> RegisterUser:
    return RegisterUser(user_repository=SqlAlchemyUserRepository(session=db))
