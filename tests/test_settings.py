"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from config.settings import Settings

USERINFO = "https://keycloak.test/userinfo"


def test_allowed_origins_are_split_and_trimmed() -> None:
    settings = Settings(
        _env_file=None,
        kc_userinfo_endpoint=USERINFO,
        cors_allowed_list="http://localhost:3000, https://recipes.example.com,,",
    )

    assert settings.allowed_origins == ["http://localhost:3000", "https://recipes.example.com"]


def test_empty_origin_list_allows_nothing() -> None:
    settings = Settings(_env_file=None, kc_userinfo_endpoint=USERINFO, cors_allowed_list="")

    assert settings.allowed_origins == []


def test_default_timeout_is_ten_seconds(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("REQUEST_TIMEOUT_SECONDS", raising=False)

    assert Settings(_env_file=None, kc_userinfo_endpoint=USERINFO).request_timeout_seconds == 10.0


@pytest.mark.parametrize("timeout", [0, -1])
def test_timeout_must_be_positive(timeout: float) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, kc_userinfo_endpoint=USERINFO, request_timeout_seconds=timeout)


def test_userinfo_endpoint_is_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KC_USERINFO_ENDPOINT", "https://idp.example.com/userinfo")
    monkeypatch.setenv("MONGO_URI", "mongodb://mongo:27017")

    settings = Settings(_env_file=None)

    assert settings.kc_userinfo_endpoint == "https://idp.example.com/userinfo"
    assert settings.mongo_uri == "mongodb://mongo:27017"


@pytest.mark.parametrize(
    ("environment", "expected"),
    [("production", True), ("Production", True), ("development", False), ("staging", False)],
)
def test_is_production(environment: str, expected: bool) -> None:
    settings = Settings(_env_file=None, kc_userinfo_endpoint=USERINFO, environment=environment)

    assert settings.is_production is expected
