"""
Integration tests for the /api/{entity_name} routes.
"""

import pytest

from propman.models import Command, User

pytestmark = pytest.mark.integration


class TestRouteCatalogue:
    """Test GET / and /health."""

    def test_root_lists_generic_routes(self, client):
        response = client.get("/")

        assert response.status_code == 200
        lines = response.text.split("\n")
        assert "/api/Commands" in lines
        assert "/api/RentalProperties" in lines
        assert lines == sorted(lines)

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestGenericCreate:
    """Test POST /api/{entity_name}."""

    def test_create_returns_201_with_location(self, client):
        response = client.post("/api/Commands", json={"Name": "Southern Command"})

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "Southern Command"
        assert data["action"] == "CREATE"
        assert data["action_by"] == "System"
        assert data["is_deleted"] is False
        assert response.headers["location"] == f"/api/Commands/{data['id']}"

    def test_entity_name_is_case_and_separator_insensitive(self, client):
        response = client.post("/api/rental-properties-x", json={})
        assert response.status_code == 404

        response = client.post("/api/natures", json={"name": "Shop", "rentalVal": "1500.50"})
        assert response.status_code == 201
        assert response.json()["rental_val"] == 1500.5

    def test_unparseable_decimal_becomes_null(self, client):
        response = client.post("/api/Natures", json={"name": "Kiosk", "annual_rent": "n/a"})

        assert response.status_code == 201
        assert response.json()["annual_rent"] is None

    def test_missing_body_is_bad_request(self, client):
        response = client.post("/api/Commands")
        assert response.status_code == 400

    def test_invalid_json_is_bad_request(self, client):
        response = client.post(
            "/api/Commands",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400

    def test_validation_failure_is_bad_request(self, client):
        response = client.post("/api/Users", json={"name": "No username"})
        assert response.status_code == 400

    def test_unknown_entity(self, client):
        response = client.get("/api/Spaceships")

        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND_ERROR"

    def test_action_by_from_bearer_token(self, client, test_user):
        login = client.post("/api/login", json={"username": "jdoe", "password": "Secret123!"})
        token = login.json()["access_token"]

        response = client.post(
            "/api/Commands",
            json={"name": "Central Command"},
            headers={"Authorization": f"Bearer {token}"},
        )
        assert response.json()["action_by"] == "jdoe"

    def test_invalid_bearer_token_falls_back_to_system(self, client):
        response = client.post(
            "/api/Commands",
            json={"name": "Central Command"},
            headers={"Authorization": "Bearer not-a-token"},
        )
        assert response.status_code == 201
        assert response.json()["action_by"] == "System"


class TestGenericReadUpdateDelete:
    """Test GET, PUT and DELETE on a single entity."""

    def test_get_and_list(self, client):
        created = client.post("/api/Commands", json={"name": "A"}).json()

        assert client.get(f"/api/Commands/{created['id']}").json()["name"] == "A"
        assert [c["id"] for c in client.get("/api/commands").json()] == [created["id"]]

    def test_get_missing(self, client):
        assert client.get("/api/Commands/999").status_code == 404

    def test_update_with_zero_body_id_uses_route_id(self, client):
        created = client.post("/api/Commands", json={"name": "Old"}).json()

        response = client.put(f"/api/Commands/{created['id']}", json={"id": 0, "name": "New"})

        assert response.status_code == 204
        fetched = client.get(f"/api/Commands/{created['id']}").json()
        assert fetched["name"] == "New"
        assert fetched["action"] == "UPDATE"

    def test_update_with_mismatched_id(self, client):
        created = client.post("/api/Commands", json={"name": "Old"}).json()

        response = client.put(f"/api/Commands/{created['id']}", json={"id": created["id"] + 1, "name": "New"})

        assert response.status_code == 400
        assert response.json()["message"] == "ID mismatch."

    def test_update_missing(self, client):
        assert client.put("/api/Commands/999", json={"name": "New"}).status_code == 404

    def test_delete_is_soft(self, client, db):
        created = client.post("/api/Commands", json={"name": "Doomed"}).json()

        response = client.delete(f"/api/Commands/{created['id']}")

        assert response.status_code == 204
        assert client.get(f"/api/Commands/{created['id']}").status_code == 404
        assert client.get("/api/Commands").json() == []
        assert client.delete(f"/api/Commands/{created['id']}").status_code == 404

        row = db.get(Command, created["id"], execution_options={"include_deleted": True})
        assert row is not None
        assert row.is_deleted is True
        assert row.action == "DELETE"

    def test_update_deleted_is_not_found(self, client):
        created = client.post("/api/Commands", json={"name": "Doomed"}).json()
        client.delete(f"/api/Commands/{created['id']}")

        assert client.put(f"/api/Commands/{created['id']}", json={"name": "Back"}).status_code == 404


class TestGenericEnrichment:
    """Test name enrichment on generic reads."""

    def test_rental_property_names(self, client, lookups):
        created = client.post("/api/RentalProperties", json={"pId": "RP-1", **lookups}).json()

        data = client.get(f"/api/RentalProperties/{created['id']}").json()

        assert data["cmd_name"] == "Northern Command"
        assert data["base_name"] == "Base One"
        assert data["class_name"] == "Commercial"

    def test_missing_lookup_gives_empty_name(self, client):
        created = client.post("/api/RentalProperties", json={"cmd_id": 404}).json()

        data = client.get(f"/api/RentalProperties/{created['id']}").json()

        assert data["cmd_name"] == ""
        assert data["base_name"] == ""

    def test_deleted_lookup_gives_empty_name(self, client, lookups):
        client.delete(f"/api/Commands/{lookups['cmd_id']}")
        created = client.post("/api/RentalProperties", json=lookups).json()

        data = client.get(f"/api/RentalProperties/{created['id']}").json()

        assert data["cmd_name"] == ""
        assert data["class_name"] == "Commercial"


class TestGenericUsers:
    """Test the password hook on /api/Users."""

    def test_create_hashes_password(self, client, db):
        response = client.post("/api/Users", json={"username": "newbie", "password": "Pa55word!"})

        assert response.status_code == 201
        data = response.json()
        assert "password" not in data
        assert "password_salt" not in data
        assert "refresh_token" not in data

        user = db.get(User, data["id"])
        assert user.password is not None
        assert user.password != b"Pa55word!"
        assert len(user.password_salt) == 16

        login = client.post("/api/login", json={"username": "newbie", "password": "Pa55word!"})
        assert login.status_code == 200

    def test_update_without_password_keeps_credentials(self, client, db, test_user):
        before = (test_user.password, test_user.password_salt)

        response = client.put(f"/api/Users/{test_user.id}", json={"username": "jdoe", "name": "Renamed"})

        assert response.status_code == 204
        db.expire_all()
        user = db.get(User, test_user.id)
        assert user.name == "Renamed"
        assert (user.password, user.password_salt) == before

        login = client.post("/api/login", json={"username": "jdoe", "password": "Secret123!"})
        assert login.status_code == 200

    def test_duplicate_username_on_create_is_conflict(self, client, db, test_user):
        response = client.post("/api/Users", json={"username": "jdoe", "password": "x1"})

        assert response.status_code == 409
        data = response.json()
        assert data["error"] == "CONFLICT_ERROR"
        assert data["message"] == "User with this username already exists."
        assert "INSERT" not in data["detail"]
        assert db.query(User).filter(User.username == "jdoe").count() == 1

    def test_duplicate_username_on_update_is_conflict(self, client, test_user, user_factory):
        other = user_factory("asmith")

        response = client.put(f"/api/Users/{other.id}", json={"username": "jdoe"})

        assert response.status_code == 409
        assert response.json()["error"] == "CONFLICT_ERROR"

    def test_soft_deleted_user_still_holds_username(self, client, test_user):
        assert client.delete(f"/api/Users/{test_user.id}").status_code == 204

        response = client.post("/api/Users", json={"username": "jdoe"})

        assert response.status_code == 409
