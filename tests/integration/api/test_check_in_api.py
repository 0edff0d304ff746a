import pytest
from httpx import AsyncClient
from sqlmodel import select

from src.domain.entities import CheckInCode
from tests.fixtures.fakes import SequenceTokenGenerator


@pytest.fixture
def token_generator():
    return SequenceTokenGenerator("XYZ", "QRS", "TUV")


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_check_in_scenario(client: AsyncClient, clinic, clock):
    """Code verifies within its 8 hour window and fails after it"""
    response = await client.post(f"/clinics/{clinic.id}/codes")
    assert response.status_code == 201
    data = response.json()
    assert data["code"]["code"] == "PETXYZ"
    assert data["code"]["clinic_id"] == str(clinic.id)
    assert data["deactivated_count"] == 0

    clock.advance(hours=1)
    response = await client.post("/check-in/verify", json={"code": "PETXYZ"})
    assert response.status_code == 200
    assert response.json()["clinic_id"] == str(clinic.id)

    clock.advance(hours=8)
    response = await client.post("/check-in/verify", json={"code": "PETXYZ"})
    assert response.status_code == 400
    assert response.json()["error"] == {
        "code": "INVALID_OR_EXPIRED_CODE",
        "message": "Invalid or expired code",
    }


@pytest.mark.asyncio
async def test_verify_is_case_insensitive(client: AsyncClient, clinic):
    await client.post(f"/clinics/{clinic.id}/codes")

    response = await client.post("/check-in/verify", json={"code": " petxyz "})

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_expiry_boundary(client: AsyncClient, clinic, clock):
    await client.post(f"/clinics/{clinic.id}/codes")

    clock.advance(hours=8)
    response = await client.post("/check-in/verify", json={"code": "PETXYZ"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_OR_EXPIRED_CODE"


@pytest.mark.asyncio
async def test_generate_twice_leaves_one_active(client: AsyncClient, clinic, clock, session_factory):
    await client.post(f"/clinics/{clinic.id}/codes")
    clock.advance(minutes=5)
    response = await client.post(f"/clinics/{clinic.id}/codes")
    assert response.json()["deactivated_count"] == 1

    async with session_factory() as session:
        result = await session.exec(select(CheckInCode).where(CheckInCode.clinic_id == clinic.id))
        codes = {c.code: c.active for c in result.all()}
    assert codes == {"PETXYZ": False, "PETQRS": True}

    old = await client.post("/check-in/verify", json={"code": "PETXYZ"})
    new = await client.post("/check-in/verify", json={"code": "PETQRS"})
    assert old.status_code == 400
    assert new.status_code == 200

    active = await client.get(f"/clinics/{clinic.id}/codes/active")
    assert active.status_code == 200
    assert active.json()["code"] == "PETQRS"


@pytest.mark.asyncio
async def test_failure_responses_are_indistinguishable(client: AsyncClient, clinic, clock):
    await client.post(f"/clinics/{clinic.id}/codes")
    clock.advance(minutes=1)
    await client.post(f"/clinics/{clinic.id}/codes")
    clock.advance(minutes=1)
    created = await client.post(f"/clinics/{clinic.id}/codes")
    await client.post(f"/codes/{created.json()['code']['id']}/deactivate")

    unknown = await client.post("/check-in/verify", json={"code": "PET000"})
    inactive = await client.post("/check-in/verify", json={"code": "PETXYZ"})
    deactivated = await client.post("/check-in/verify", json={"code": "PETTUV"})

    assert unknown.status_code == inactive.status_code == deactivated.status_code == 400
    assert unknown.json() == inactive.json() == deactivated.json()


@pytest.mark.asyncio
async def test_generate_for_unknown_clinic(client: AsyncClient):
    response = await client.post("/clinics/00000000-0000-0000-0000-000000000000/codes")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_list_and_delete_codes(client: AsyncClient, clinic, clock):
    await client.post(f"/clinics/{clinic.id}/codes")
    clock.advance(minutes=1)
    await client.post(f"/clinics/{clinic.id}/codes")

    listing = await client.get(f"/clinics/{clinic.id}/codes")
    assert listing.status_code == 200
    codes = listing.json()["codes"]
    assert [(c["code"], c["status"]) for c in codes] == [
        ("PETQRS", "active"),
        ("PETXYZ", "inactive"),
    ]

    deleted = await client.delete(f"/codes/{codes[1]['id']}")
    assert deleted.status_code == 200

    again = await client.delete(f"/codes/{codes[1]['id']}")
    assert again.status_code == 404

    listing = await client.get(f"/clinics/{clinic.id}/codes")
    assert len(listing.json()["codes"]) == 1


@pytest.mark.asyncio
async def test_no_active_code(client: AsyncClient, clinic):
    response = await client.get(f"/clinics/{clinic.id}/codes/active")

    assert response.status_code == 404
