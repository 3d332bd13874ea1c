"""
Integration tests for rental property, revenue rate, contract and tenant routes.
"""

import pytest

pytestmark = pytest.mark.integration


@pytest.fixture
def rental_property(client, lookups):
    response = client.post("/api/rental-properties", json={
        "pId": "RP-100",
        "uom": "sqft",
        "area": 250.75,
        "location": "Hangar Road",
        "remarks": "Corner plot",
        "status": True,
        **lookups,
    })
    assert response.status_code == 201
    return response.json()


class TestRentalProperties:
    """Test /api/rental-properties."""

    def test_create(self, client, lookups):
        response = client.post("/api/rental-properties", json={"PId": "RP-1", "Area": "12.5", **lookups})

        assert response.status_code == 201
        data = response.json()
        assert data["p_id"] == "RP-1"
        assert data["area"] == 12.5
        assert data["is_deleted"] is False
        assert response.headers["location"] == f"/api/rental-properties/{data['id']}"

    def test_list_is_paginated_newest_first(self, client):
        ids = [client.post("/api/rental-properties", json={"pId": f"RP-{i}"}).json()["id"] for i in range(3)]

        response = client.get("/api/rental-properties", params={"page_number": 1, "page_size": 2})

        assert response.status_code == 200
        assert [p["id"] for p in response.json()] == [ids[2], ids[1]]
        assert response.headers["x-total-count"] == "3"
        assert response.headers["x-page-number"] == "1"
        assert response.headers["x-page-size"] == "2"

    def test_paging_defaults_and_cap(self, client):
        response = client.get("/api/rental-properties", params={"page_number": 0, "page_size": 1000})

        assert response.headers["x-page-number"] == "1"
        assert response.headers["x-page-size"] == "200"

        response = client.get("/api/rental-properties", params={"page_size": -1})
        assert response.headers["x-page-size"] == "50"

    def test_list_is_enriched(self, client, rental_property):
        data = client.get("/api/rental-properties").json()[0]

        assert data["cmd_name"] == "Northern Command"
        assert data["base_name"] == "Base One"
        assert data["class_name"] == "Commercial"

    def test_get(self, client, rental_property):
        response = client.get(f"/api/rental-properties/{rental_property['id']}")

        assert response.status_code == 200
        assert response.json()["location"] == "Hangar Road"

    def test_update_replaces_fields(self, client, rental_property):
        response = client.put(
            f"/api/rental-properties/{rental_property['id']}",
            json={"id": rental_property["id"], "pId": "RP-100", "location": "Apron"},
        )

        assert response.status_code == 204
        data = client.get(f"/api/rental-properties/{rental_property['id']}").json()
        assert data["location"] == "Apron"
        # omitted fields take their defaults
        assert data["remarks"] is None
        assert data["cmd_id"] == 0
        assert data["action"] == "UPDATE"

    def test_update_id_mismatch(self, client, rental_property):
        response = client.put(
            f"/api/rental-properties/{rental_property['id']}",
            json={"id": rental_property["id"] + 10, "location": "Apron"},
        )
        assert response.status_code == 400

    def test_invalid_payload_is_bad_request(self, client):
        response = client.post("/api/rental-properties", json={"cmdId": "not-a-number"})
        assert response.status_code == 400

    def test_delete(self, client, rental_property):
        url = f"/api/rental-properties/{rental_property['id']}"

        assert client.delete(url).status_code == 204
        assert client.get(url).status_code == 404
        assert client.put(url, json={"location": "x"}).status_code == 404
        assert client.delete(url).status_code == 404
        assert client.get("/api/rental-properties").headers["x-total-count"] == "0"


class TestRevenueRates:
    """Test /api/revenue-rates."""

    def test_rate_carries_property_details(self, client, rental_property):
        created = client.post("/api/revenue-rates", json={
            "propertyId": rental_property["id"],
            "applicableDate": "2024-07-01T00:00:00",
            "rate": "45.25",
        })
        assert created.status_code == 201

        data = client.get(f"/api/revenue-rates/{created.json()['id']}").json()

        assert data["rate"] == 45.25
        assert data["property_identifier"] == "RP-100"
        assert data["uom"] == "sqft"
        assert data["area"] == 250.75
        assert data["location"] == "Hangar Road"
        assert data["remarks"] == "Corner plot"
        assert data["cmd_name"] == "Northern Command"
        assert data["class_id"] == rental_property["class_id"]

    def test_rate_of_deleted_property(self, client, rental_property):
        created = client.post("/api/revenue-rates", json={"property_id": rental_property["id"], "rate": 10}).json()
        client.delete(f"/api/rental-properties/{rental_property['id']}")

        data = client.get("/api/revenue-rates").json()[0]

        assert data["id"] == created["id"]
        assert data["property_identifier"] is None
        assert data["cmd_id"] is None
        assert data["cmd_name"] == ""


class TestContracts:
    """Test /api/contracts."""

    def test_contract_gets_group_name(self, client, lookups):
        group = client.post("/api/property-groups", json={"gId": "GRP-7", **lookups}).json()["property_group"]

        created = client.post("/api/contracts", json={
            "contractNo": "C-001",
            "grpId": group["id"],
            "tenantNo": "T-9",
            "businessName": "Cafe",
            "initialRentPM": 1000,
            "initialRentPA": 12000,
            "paymentTermMonths": 12,
            "status": True,
            **lookups,
        })
        assert created.status_code == 201

        data = client.get("/api/contracts").json()[0]
        assert data["contract_no"] == "C-001"
        assert data["grp_name"] == "GRP-7"
        assert data["cmd_name"] == "Northern Command"
        assert data["initial_rent_pa"] == 12000

    def test_contract_without_group(self, client):
        created = client.post("/api/contracts", json={"contract_no": "C-002"}).json()

        data = client.get(f"/api/contracts/{created['id']}").json()
        assert data["grp_name"] == ""


class TestTenants:
    """Test /api/tenants."""

    def test_crud(self, client):
        created = client.post("/api/tenants", json={"tenantNo": "T-1", "ownerName": "Ali", "city": "Lahore"})
        assert created.status_code == 201
        tenant_id = created.json()["id"]

        listed = client.get("/api/tenants")
        assert listed.status_code == 200
        assert "x-total-count" not in listed.headers
        assert [t["tenant_no"] for t in listed.json()] == ["T-1"]

        assert client.put(f"/api/tenants/{tenant_id}", json={"tenantNo": "T-1", "ownerName": "Ali Khan"}).status_code == 204
        assert client.get(f"/api/tenants/{tenant_id}").json()["owner_name"] == "Ali Khan"

        assert client.delete(f"/api/tenants/{tenant_id}").status_code == 204
        assert client.get("/api/tenants").json() == []
