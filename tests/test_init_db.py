"""Tests for startup bootstrap."""

import pytest
from fastapi.testclient import TestClient
from httpx import AsyncClient

from items_svc.db import init_db as init_db_module
from items_svc.db.init_db import init_db
from items_svc.main import app


@pytest.mark.anyio
async def test_bootstrap_empties_existing_rows(client: AsyncClient):
    for n in range(3):
        await client.post("/api/items", json={"name": f"Old {n}", "price": 1})
    assert len((await client.get("/api/items")).json()) == 3

    await init_db()

    assert (await client.get("/api/items")).json() == []


@pytest.mark.anyio
async def test_bootstrap_is_repeatable(client: AsyncClient):
    await init_db()
    await init_db()
    assert (await client.get("/api/items")).json() == []


@pytest.mark.anyio
async def test_bootstrap_failure_propagates(anyio_backend, monkeypatch):
    """A failing bootstrap raises so the server never starts serving."""

    class BrokenEngine:
        def begin(self):
            raise ConnectionRefusedError("database unreachable")

    monkeypatch.setattr(init_db_module, "engine", BrokenEngine())

    with pytest.raises(ConnectionRefusedError):
        await init_db()


def test_app_refuses_to_start_when_bootstrap_fails(monkeypatch):
    """The startup hook propagates a bootstrap failure, so the server never accepts traffic."""

    class BrokenEngine:
        def begin(self):
            raise ConnectionRefusedError("database unreachable")

    monkeypatch.setattr(init_db_module, "engine", BrokenEngine())

    with pytest.raises(ConnectionRefusedError):
        with TestClient(app):
            pass
