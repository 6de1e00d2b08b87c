"""Tests for store call bounding and error translation."""

from __future__ import annotations

import asyncio

import pytest
from pymongo.errors import OperationFailure

from recipes_api.database.stores import BeanieUserFavoritesStore, run_bounded
from recipes_api.errors import (
    RecordAlreadyExistsError,
    RecordNotFoundError,
    StoreError,
    StoreTimeoutError,
)
from recipes_api.models import UserFavoritesDocument


@pytest.mark.asyncio
async def test_run_bounded_returns_result() -> None:
    async def lookup() -> str:
        return "value"

    assert await run_bounded("lookup", lookup(), timeout=1.0) == "value"


@pytest.mark.asyncio
async def test_run_bounded_times_out() -> None:
    with pytest.raises(StoreTimeoutError) as excinfo:
        await run_bounded("slow", asyncio.sleep(5), timeout=0.01)

    assert excinfo.value.operation == "slow"
    assert excinfo.value.timeout_seconds == 0.01


@pytest.mark.asyncio
async def test_run_bounded_translates_driver_errors() -> None:
    async def unauthorized() -> None:
        raise OperationFailure("not authorized on table_recipes")

    with pytest.raises(StoreError) as excinfo:
        await run_bounded("find", unauthorized(), timeout=1.0)

    assert not isinstance(excinfo.value, StoreTimeoutError)
    assert "not authorized" in excinfo.value.reason


@pytest.mark.asyncio
async def test_run_bounded_keeps_store_errors() -> None:
    async def conflict() -> None:
        raise RecordAlreadyExistsError("create", "u1")

    with pytest.raises(RecordAlreadyExistsError):
        await run_bounded("create", conflict(), timeout=1.0)


@pytest.mark.asyncio
async def test_favorites_get_missing_document_raises_not_found(monkeypatch: pytest.MonkeyPatch) -> None:
    async def get_nothing(document_id: str) -> None:
        return None

    monkeypatch.setattr(UserFavoritesDocument, "get", get_nothing)

    with pytest.raises(RecordNotFoundError) as excinfo:
        await BeanieUserFavoritesStore(timeout=1.0).get("u1")

    assert excinfo.value.key == "u1"
