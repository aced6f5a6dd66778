"""
HTTP surface tests — admission, show/see next patient, listings and clearing.
The autouse fixture in conftest.py gives every test a fresh queue of capacity 7.
"""
import pytest
from httpx import AsyncClient, ASGITransport
from main import app, app_state, CLOSED_MSG


async def admit(client, age, gender, triage):
    return await client.post(
        "/v1/patients",
        json={"age": age, "gender": gender, "triage": triage}
    )


@pytest.mark.asyncio
async def test_admit_patient():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await admit(client, 27, "x", "green")

        assert response.status_code == 201
        data = response.json()
        assert data["case_number"] == 32701
        assert data["gender"] == "X"
        assert data["triage"] == "GREEN"
        assert data["arrival_order"] == 1
        assert data["seen"] is False
        assert data["display"] == "32701: 27X (GREEN) - not seen"

        assert app_state["admissions"].size() == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    {"age": -1, "gender": "F", "triage": "RED"},
    {"age": 20, "gender": "FF", "triage": "RED"},
    {"age": 20, "gender": "F", "triage": "BLUE"},
    {"gender": "F", "triage": "RED"},
])
async def test_admit_rejects_invalid_payload(payload):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/v1/patients", json=payload)

        assert response.status_code == 422
        assert app_state["admissions"].is_empty()


@pytest.mark.asyncio
async def test_admit_into_full_queue():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        for i in range(7):
            response = await admit(client, 20 + i, "F", "GREEN")
            assert response.status_code == 201

        response = await admit(client, 60, "M", "RED")
        assert response.status_code == 409
        assert response.json()["detail"] == "Warning: Full Admissions Queue!"

        status = (await client.get("/v1/queue/status")).json()
        assert status["size"] == 7
        assert status["capacity"] == 7


@pytest.mark.asyncio
async def test_show_next_patient_does_not_remove():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        await admit(client, 40, "M", "YELLOW")
        await admit(client, 8, "F", "RED")

        response = await client.get("/v1/patients/next")
        assert response.status_code == 200
        assert response.json()["display"] == "10802: 8F (RED) - not seen"
        assert app_state["admissions"].size() == 2


@pytest.mark.asyncio
async def test_empty_queue_returns_404():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        for response in (
            await client.get("/v1/patients/next"),
            await client.post("/v1/patients/next/see"),
        ):
            assert response.status_code == 404
            assert response.json()["detail"] == "Warning: Empty Admissions Queue!"


@pytest.mark.asyncio
async def test_see_next_patient_moves_to_seen_history():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        await admit(client, 40, "M", "GREEN")
        await admit(client, 35, "F", "RED")
        await admit(client, 70, "X", "RED")

        first = (await client.post("/v1/patients/next/see")).json()
        second = (await client.post("/v1/patients/next/see")).json()

        assert first["display"] == "13502: 35F (RED) - seen"
        assert second["display"] == "37003: 70X (RED) - seen"

        seen = (await client.get("/v1/patients/seen")).json()
        assert seen["count"] == 2
        assert [p["case_number"] for p in seen["patients"]] == [37003, 13502]

        unseen = (await client.get("/v1/patients")).json()
        assert unseen["count"] == 1
        assert unseen["patients"][0]["display"] == "24001: 40M (GREEN) - not seen"


@pytest.mark.asyncio
async def test_listing_in_priority_order():
    """Capacity 7 scenario through the HTTP surface."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        for triage in ["RED", "YELLOW", "YELLOW", "GREEN", "RED", "RED", "RED"]:
            await admit(client, 30, "X", triage)

        first = (await client.post("/v1/patients/next/see")).json()
        assert first["arrival_order"] == 1

        listing = (await client.get("/v1/patients")).json()
        assert [p["arrival_order"] for p in listing["patients"]] == [5, 6, 7, 2, 3, 4]

        # Listing twice gives the same answer and leaves the queue untouched
        again = (await client.get("/v1/patients")).json()
        assert again == listing
        assert app_state["admissions"].size() == 6


@pytest.mark.asyncio
async def test_clear_queue():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        await admit(client, 30, "X", "RED")
        await admit(client, 31, "X", "GREEN")
        await client.post("/v1/patients/next/see")

        response = await client.delete("/v1/patients")
        assert response.status_code == 200
        assert response.json() == {"status": "cleared", "message": CLOSED_MSG, "dropped": 1}

        status = (await client.get("/v1/queue/status")).json()
        assert status == {"size": 0, "capacity": 7, "is_empty": True, "seen_count": 1}

        # Clearing an empty queue is fine
        response = await client.delete("/v1/patients")
        assert response.json()["dropped"] == 0


@pytest.mark.asyncio
async def test_arrival_sequence_survives_clear():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        await admit(client, 30, "X", "RED")
        await client.delete("/v1/patients")

        response = await admit(client, 30, "X", "RED")
        assert response.json()["arrival_order"] == 2


@pytest.mark.asyncio
async def test_health():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/health")
        assert response.json() == {"status": "healthy"}
