"""
Integration tests for /api/property-groups and property linking.
"""

import pytest
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from propman.models import PropertyGroup, PropertyGroupLinking
from propman.repositories import GenericRepository

pytestmark = pytest.mark.integration


@pytest.fixture
def properties(client):
    return [
        client.post("/api/rental-properties", json={"pId": f"RP-{i}"}).json()["id"]
        for i in range(3)
    ]


class TestCreateWithLinks:
    """Test POST /api/property-groups."""

    def test_creates_group_and_links(self, client, db, properties):
        response = client.post("/api/property-groups", json={
            "gId": "GRP-1",
            "area": 300,
            "propertyGroupLinkings": properties + [0, -4],
        })

        assert response.status_code == 201
        data = response.json()
        assert data["linked_properties_count"] == 3
        assert data["property_group"]["g_id"] == "GRP-1"
        assert data["property_group"]["action_by"] == "System"

        links = db.scalars(select(PropertyGroupLinking)).all()
        assert sorted(link.prop_id for link in links) == sorted(properties)
        assert all(link.grp_id == data["property_group"]["id"] for link in links)
        assert all(link.status is True for link in links)
        assert all(float(link.area) == 300 for link in links)
        assert all(link.action == "CREATE" for link in links)

    def test_creates_group_without_links(self, client):
        response = client.post("/api/property-groups", json={"gId": "GRP-2"})

        assert response.status_code == 201
        assert response.json()["linked_properties_count"] == 0

    def test_link_failure_rolls_back_group(self, client, db, properties, monkeypatch):
        add = GenericRepository.add
        link_adds = []

        def failing_add(self, entity, actor=None, commit=True):
            if isinstance(entity, PropertyGroupLinking):
                link_adds.append(entity)
                if len(link_adds) == 2:
                    raise SQLAlchemyError("link insert failed")
            return add(self, entity, actor, commit)

        monkeypatch.setattr(GenericRepository, "add", failing_add)

        response = client.post("/api/property-groups", json={
            "gId": "GRP-X",
            "propertyGroupLinkings": properties,
        })

        assert response.status_code == 500
        assert response.json() == {
            "message": "An error occurred while processing the request.",
            "error": "link insert failed",
        }
        db.expire_all()
        assert db.scalars(select(PropertyGroup)).all() == []
        assert db.scalars(select(PropertyGroupLinking)).all() == []

    def test_list_and_get_are_enriched(self, client, lookups):
        created = client.post("/api/property-groups", json={"gId": "GRP-3", **lookups}).json()
        group_id = created["property_group"]["id"]

        listed = client.get("/api/property-groups")
        assert listed.headers["x-total-count"] == "1"
        assert listed.json()[0]["cmd_name"] == "Northern Command"

        assert client.get(f"/api/property-groups/{group_id}").json()["class_name"] == "Commercial"


class TestByGroup:
    """Test GET /api/property-groups/by-group/{grp_id}."""

    def test_lists_links_with_names(self, client, properties):
        group_id = client.post("/api/property-groups", json={
            "gId": "GRP-1", "propertyGroupLinkings": properties,
        }).json()["property_group"]["id"]

        response = client.get(f"/api/property-groups/by-group/{group_id}")

        assert response.status_code == 200
        assert response.headers["x-total-count"] == "3"
        assert response.headers["x-page-size"] == "100"
        items = response.json()
        assert [item["prop_id"] for item in items] == list(reversed(properties))
        assert all(item["group_name"] == "GRP-1" for item in items)
        assert items[-1]["property_name"] == "RP-0"

    def test_page_size_cap(self, client):
        response = client.get("/api/property-groups/by-group/1", params={"page_size": 900})
        assert response.headers["x-page-size"] == "500"

    def test_invalid_group_id(self, client):
        assert client.get("/api/property-groups/by-group/0").status_code == 400


class TestLinking:
    """Test POST and DELETE /api/property-groups/linking."""

    def test_create_link(self, client, properties):
        response = client.post("/api/property-groups/linking", json={"grpId": 1, "propId": properties[0]})

        assert response.status_code == 201
        data = response.json()
        assert data["status"] is True
        assert data["action"] == "CREATE"

    @pytest.mark.parametrize("payload", [{"grpId": 0, "propId": 1}, {"grpId": 1}, {}])
    def test_create_link_requires_ids(self, client, payload):
        assert client.post("/api/property-groups/linking", json=payload).status_code == 400

    def test_delete_link(self, client, db, properties):
        link_id = client.post("/api/property-groups/linking", json={"grpId": 1, "propId": properties[0]}).json()["id"]

        assert client.delete(f"/api/property-groups/linking/{link_id}").status_code == 204
        assert client.delete(f"/api/property-groups/linking/{link_id}").status_code == 404
        assert client.get("/api/property-groups/by-group/1").json() == []

        row = db.get(PropertyGroupLinking, link_id, execution_options={"include_deleted": True})
        assert row.is_deleted is True

    def test_delete_invalid_link_id(self, client):
        assert client.delete("/api/property-groups/linking/0").status_code == 400
