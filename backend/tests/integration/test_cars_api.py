"""
Integration tests for the car endpoints.

Exercises the full stack (routes, service, repository, SQLite) through
an httpx client. Tests follow the AAA pattern (Arrange, Act, Assert).
"""

from datetime import datetime

import pytest
from httpx import AsyncClient


CARS_URL = "/api/cars"


async def create_car(client: AsyncClient, reg_number: str, model: str = "Civic", **fields) -> dict:
    response = await client.post(CARS_URL, json={"regNumber": reg_number, "model": model, **fields})
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateCar:

    @pytest.mark.anyio
    async def test_create_returns_201_with_generated_fields(self, client: AsyncClient):
        # Arrange
        payload = {
            "regNumber": "A123BC",
            "model": "Civic",
            "mileage": 120000,
            "releaseYear": 2012,
            "owner": "Alex",
        }

        # Act
        response = await client.post(CARS_URL, json=payload)

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert isinstance(data["id"], int)
        assert data["regNumber"] == "A123BC"
        assert data["model"] == "Civic"
        assert data["mileage"] == 120000
        assert data["releaseYear"] == 2012
        assert data["owner"] == "Alex"
        created_at = datetime.fromisoformat(data["createdAt"].replace("Z", "+00:00"))
        assert created_at.utcoffset() is not None

    @pytest.mark.anyio
    async def test_create_duplicate_reg_number_returns_409(self, client: AsyncClient):
        await create_car(client, "DUP100")

        response = await client.post(CARS_URL, json={"regNumber": "DUP100", "model": "Other"})

        assert response.status_code == 409
        assert response.json()["detail"] == "Car with regNumber already exists"

    @pytest.mark.anyio
    @pytest.mark.parametrize("payload", [
        {"model": "Civic"},
        {"regNumber": " ", "model": "Civic"},
        {"regNumber": "A1", "model": "Civic", "mileage": -5},
        {"regNumber": "A1", "model": "Civic", "releaseYear": 1850},
    ])
    async def test_create_invalid_body_returns_422(self, client: AsyncClient, payload):
        response = await client.post(CARS_URL, json=payload)

        assert response.status_code == 422

        # Nothing was stored
        listing = await client.get(CARS_URL)
        assert listing.json() == []


class TestReadCars:

    @pytest.mark.anyio
    async def test_get_returns_car(self, client: AsyncClient):
        created = await create_car(client, "B777OP", model="Accord", owner="Mia")

        response = await client.get(f"{CARS_URL}/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    @pytest.mark.anyio
    async def test_get_unknown_id_returns_404(self, client: AsyncClient):
        response = await client.get(f"{CARS_URL}/424242")

        assert response.status_code == 404
        assert response.json()["detail"] == "Car not found"

    @pytest.mark.anyio
    async def test_list_returns_newest_first(self, client: AsyncClient):
        # Arrange
        first = await create_car(client, "L1")
        second = await create_car(client, "L2")
        third = await create_car(client, "L3")

        # Act
        response = await client.get(CARS_URL)

        # Assert
        assert response.status_code == 200
        ids = [car["id"] for car in response.json()]
        assert ids == [third["id"], second["id"], first["id"]]


class TestUpdateCar:

    @pytest.mark.anyio
    async def test_partial_update_keeps_unset_fields(self, client: AsyncClient):
        # Arrange
        created = await create_car(
            client, "F123FF", model="Focus", mileage=90000, releaseYear=2014, owner="Paul"
        )

        # Act
        response = await client.put(
            f"{CARS_URL}/{created['id']}",
            json={"regNumber": "F777FF", "model": "Fiesta", "mileage": 95000, "owner": None},
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["regNumber"] == "F777FF"
        assert data["model"] == "Fiesta"
        assert data["mileage"] == 95000
        assert data["releaseYear"] == 2014
        assert data["owner"] == "Paul"
        assert data["id"] == created["id"]
        assert data["createdAt"] == created["createdAt"]

        fetched = await client.get(f"{CARS_URL}/{created['id']}")
        assert fetched.json() == data

    @pytest.mark.anyio
    async def test_update_with_own_reg_number_succeeds(self, client: AsyncClient):
        created = await create_car(client, "E999EE", model="Octavia")

        response = await client.put(
            f"{CARS_URL}/{created['id']}",
            json={"regNumber": "E999EE", "model": "Octavia RS"},
        )

        assert response.status_code == 200
        assert response.json()["model"] == "Octavia RS"

    @pytest.mark.anyio
    async def test_update_to_taken_reg_number_returns_409(self, client: AsyncClient):
        # Arrange
        await create_car(client, "D222DD", model="V40")
        target = await create_car(client, "D111DD", model="S60")

        # Act
        response = await client.put(
            f"{CARS_URL}/{target['id']}",
            json={"regNumber": "D222DD", "model": "S60 Cross"},
        )

        # Assert
        assert response.status_code == 409
        unchanged = (await client.get(f"{CARS_URL}/{target['id']}")).json()
        assert unchanged["regNumber"] == "D111DD"
        assert unchanged["model"] == "S60"

    @pytest.mark.anyio
    async def test_update_unknown_id_returns_404(self, client: AsyncClient):
        response = await client.put(f"{CARS_URL}/777", json={"model": "Model X"})

        assert response.status_code == 404

    @pytest.mark.anyio
    async def test_update_invalid_body_returns_422(self, client: AsyncClient):
        created = await create_car(client, "U1")

        response = await client.put(f"{CARS_URL}/{created['id']}", json={"releaseYear": 1000})

        assert response.status_code == 422


class TestDeleteCar:

    @pytest.mark.anyio
    async def test_delete_returns_204_and_removes_car(self, client: AsyncClient):
        # Arrange
        created = await create_car(client, "DEL200")

        # Act
        response = await client.delete(f"{CARS_URL}/{created['id']}")

        # Assert
        assert response.status_code == 204
        assert response.content == b""
        follow_up = await client.get(f"{CARS_URL}/{created['id']}")
        assert follow_up.status_code == 404

    @pytest.mark.anyio
    async def test_delete_unknown_id_returns_404(self, client: AsyncClient):
        response = await client.delete(f"{CARS_URL}/31337")

        assert response.status_code == 404
        assert response.json()["detail"] == "Car not found"

    @pytest.mark.anyio
    async def test_deleted_reg_number_can_be_reused_with_new_id(self, client: AsyncClient):
        created = await create_car(client, "REUSE1")
        await client.delete(f"{CARS_URL}/{created['id']}")

        recreated = await create_car(client, "REUSE1")

        assert recreated["id"] != created["id"]


class TestRequestCorrelation:

    @pytest.mark.anyio
    async def test_request_id_is_echoed(self, client: AsyncClient):
        response = await client.get(CARS_URL, headers={"X-Request-ID": "trace-123"})

        assert response.headers["X-Request-ID"] == "trace-123"
