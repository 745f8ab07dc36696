from __future__ import annotations

from pathlib import Path

import pytest

from rentacar.domain.pricing import DEFAULT_DRIVER_DAILY_RATE
from rentacar.infra import config
from rentacar.infra.db.config import database_echo, database_url


def test_driver_rate_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("RENTACAR_DRIVER_DAILY_RATE", raising=False)

    assert config.driver_daily_rate() == DEFAULT_DRIVER_DAILY_RATE


def test_driver_rate_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RENTACAR_DRIVER_DAILY_RATE", "175000")

    assert config.driver_daily_rate() == 175_000


def test_negative_driver_rate_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RENTACAR_DRIVER_DAILY_RATE", "-1")

    with pytest.raises(RuntimeError, match=">= 0"):
        config.driver_daily_rate()


def test_identity_file_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("RENTACAR_IDENTITY_FILE", str(tmp_path / "me.json"))

    assert config.identity_file() == tmp_path / "me.json"


def test_log_level_is_upper_case(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RENTACAR_LOG_LEVEL", "debug")

    assert config.log_level() == "DEBUG"


def test_database_url_prefers_rentacar_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql+psycopg://generic")
    monkeypatch.setenv("RENTACAR_DATABASE_URL", "sqlite://")

    assert database_url() == "sqlite://"


def test_missing_database_url_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("RENTACAR_DATABASE_URL", raising=False)

    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        database_url()


@pytest.mark.parametrize(("raw", "expected"), [("1", True), ("true", True), ("", False), ("no", False)])
def test_database_echo(monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
    monkeypatch.setenv("RENTACAR_DATABASE_ECHO", raw)

    assert database_echo() is expected
