import asyncio
import hashlib

import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.adapter.repositories.admin_reset_token_store import InMemoryAdminResetTokenStore
from src.domain.entities import AdminResetToken
from tests.fixtures.accounts import ADMIN_EMAIL


def token_hash(token):
    return hashlib.sha256(token.encode()).hexdigest()


@pytest.fixture
def admin_token_store():
    return InMemoryAdminResetTokenStore()


@pytest.mark.asyncio
async def test_reset_with_memory_store(
    client: AsyncClient, admin, expose_tokens, admin_token_store, session_factory
):
    token = (
        await client.post("/admin/forgot-password", json={"email": ADMIN_EMAIL})
    ).json()["token"]

    assert await admin_token_store.get(token_hash(token)) is not None
    assert await admin_token_store.get(token) is None
    async with session_factory() as session:
        assert (await session.exec(select(AdminResetToken))).all() == []

    verify = await client.get("/admin/reset-password/verify", params={"token": token})
    assert verify.status_code == 200
    assert verify.json()["email"] == ADMIN_EMAIL

    first = await client.post(
        "/admin/reset-password", json={"token": token, "new_password": "newpass"}
    )
    second = await client.post(
        "/admin/reset-password", json={"token": token, "new_password": "again"}
    )
    assert first.status_code == 200
    assert second.status_code == 400
    assert await admin_token_store.get(token_hash(token)) is None


@pytest.mark.asyncio
async def test_memory_store_verify_drops_expired_token(
    client: AsyncClient, admin, expose_tokens, admin_token_store, clock
):
    token = (
        await client.post("/admin/forgot-password", json={"email": ADMIN_EMAIL})
    ).json()["token"]

    clock.advance(hours=2)
    verify = await client.get("/admin/reset-password/verify", params={"token": token})

    assert verify.status_code == 400
    assert await admin_token_store.get(token_hash(token)) is None


@pytest.mark.asyncio
async def test_memory_store_concurrent_resets(
    client: AsyncClient, admin, expose_tokens
):
    token = (
        await client.post("/admin/forgot-password", json={"email": ADMIN_EMAIL})
    ).json()["token"]

    responses = await asyncio.gather(
        *[
            client.post(
                "/admin/reset-password", json={"token": token, "new_password": f"pass-{i}"}
            )
            for i in range(3)
        ]
    )

    assert sorted(r.status_code for r in responses) == [200, 400, 400]


@pytest.mark.asyncio
async def test_reset_tokens_listing_reports_memory(
    client: AsyncClient, admin, admin_headers, expose_tokens
):
    await client.post("/admin/forgot-password", json={"email": ADMIN_EMAIL})

    response = await client.get("/admin/reset-tokens", headers=admin_headers)

    assert response.json()["admin_storage"] == "memory"
    assert [t["kind"] for t in response.json()["tokens"]] == ["admin"]
