"""
Unit tests for FastAPI dependency injection functions.

- get_db() yields one session per request from get_session()
- Use case factories wire fresh SQLAlchemy repositories over that session

Tests use mocks to verify wiring without requiring a real database.
"""

from __future__ import annotations

from types import GeneratorType
from unittest.mock import MagicMock, Mock, patch

import pytest

from rentacar.adapters.sqlalchemy_car_repository import SqlAlchemyCarRepository
from rentacar.adapters.sqlalchemy_settings_repository import SqlAlchemySettingsRepository
from rentacar.adapters.sqlalchemy_user_repository import SqlAlchemyUserRepository
from rentacar.entrypoints.http.dependencies import (
    get_authenticate_user_use_case,
    get_booking_quote_use_case,
    get_db,
    get_featured_cars_use_case,
    get_get_car_by_id_use_case,
    get_register_user_use_case,
    get_search_catalog_use_case,
    get_similar_cars_use_case,
)
from rentacar.use_cases.authenticate_user import AuthenticateUser
from rentacar.use_cases.calculate_booking_quote import CalculateBookingQuote
from rentacar.use_cases.get_car_by_id import GetCarById
from rentacar.use_cases.get_featured_cars import GetFeaturedCars
from rentacar.use_cases.get_similar_cars import GetSimilarCars
from rentacar.use_cases.register_user import RegisterUser
from rentacar.use_cases.search_car_catalog import SearchCarCatalog


# ==============================================================================
# get_db() - Database Session Provider
# ==============================================================================


def test_get_db_yields_session_from_get_session() -> None:
    mock_session = Mock()
    mock_context_manager = MagicMock()
    mock_context_manager.__enter__.return_value = mock_session
    mock_context_manager.__exit__.return_value = None

    with patch("rentacar.entrypoints.http.dependencies.get_session") as mock_get_session:
        mock_get_session.return_value = mock_context_manager

        generator = get_db()
        assert next(generator) is mock_session

        with pytest.raises(StopIteration):
            next(generator)

    mock_context_manager.__enter__.assert_called_once()
    mock_context_manager.__exit__.assert_called_once()


def test_get_db_is_generator() -> None:
    with patch("rentacar.entrypoints.http.dependencies.get_session"):
        assert isinstance(get_db(), GeneratorType)


# ==============================================================================
# Use case factories
# ==============================================================================


@pytest.mark.parametrize(
    ("factory", "use_case_type"),
    [
        (get_search_catalog_use_case, SearchCarCatalog),
        (get_get_car_by_id_use_case, GetCarById),
        (get_featured_cars_use_case, GetFeaturedCars),
        (get_similar_cars_use_case, GetSimilarCars),
    ],
)
def test_catalog_factories_use_car_repository(factory, use_case_type) -> None:
    session = Mock()

    use_case = factory(db=session)

    assert isinstance(use_case, use_case_type)
    assert isinstance(use_case._repository, SqlAlchemyCarRepository)
    assert use_case._repository._session is session


def test_quote_factory_wires_cars_and_settings() -> None:
    session = Mock()

    use_case = get_booking_quote_use_case(db=session)

    assert isinstance(use_case, CalculateBookingQuote)
    assert isinstance(use_case._cars, SqlAlchemyCarRepository)
    assert isinstance(use_case._settings._repository, SqlAlchemySettingsRepository)


@pytest.mark.parametrize(
    ("factory", "use_case_type"),
    [
        (get_authenticate_user_use_case, AuthenticateUser),
        (get_register_user_use_case, RegisterUser),
    ],
)
def test_auth_factories_use_user_repository(factory, use_case_type) -> None:
    use_case = factory(db=Mock())

    assert isinstance(use_case, use_case_type)
    assert isinstance(use_case._repository, SqlAlchemyUserRepository)


def test_factories_create_new_instances() -> None:
    session = Mock()

    assert get_search_catalog_use_case(db=session) is not get_search_catalog_use_case(db=session)
