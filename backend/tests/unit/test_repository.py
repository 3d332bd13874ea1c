"""
Unit tests for the generic repository and the global soft delete filter.
"""

from decimal import Decimal

import pytest
from sqlalchemy import select

from propman.db.session import INCLUDE_DELETED
from propman.models import RentalProperty, Tenant, User, UserNote
from propman.repositories import GenericRepository, SYSTEM_ACTOR

pytestmark = pytest.mark.unit


def add_property(repo, **fields):
    return repo.add(RentalProperty(**{"p_id": "P-1", "area": Decimal("10.50"), **fields}))


class TestAdd:
    """Test inserts and CREATE stamping."""

    def test_assigns_id_and_stamps_create(self, db):
        repo = GenericRepository(db, RentalProperty)
        prop = repo.add(RentalProperty(p_id="P-1"), actor="alice")

        assert prop.id is not None
        assert prop.action == "CREATE"
        assert prop.action_by == "alice"
        assert prop.action_date is not None
        assert prop.is_deleted is False

    def test_forces_is_deleted_false(self, db):
        repo = GenericRepository(db, RentalProperty)
        prop = repo.add(RentalProperty(p_id="P-1", is_deleted=True))

        assert prop.is_deleted is False

    def test_actor_defaults_to_system(self, db):
        repo = GenericRepository(db, RentalProperty)
        assert repo.add(RentalProperty()).action_by == SYSTEM_ACTOR

    def test_existing_action_by_kept_without_actor(self, db):
        repo = GenericRepository(db, RentalProperty)
        assert repo.add(RentalProperty(action_by="bob")).action_by == "bob"


class TestRead:
    """Test reads hide soft deleted rows."""

    def test_get_all_excludes_deleted(self, db):
        repo = GenericRepository(db, RentalProperty)
        live = add_property(repo, p_id="LIVE")
        gone = add_property(repo, p_id="GONE")
        repo.delete(gone)

        assert [p.id for p in repo.get_all()] == [live.id]
        assert {p.id for p in repo.get_all(include_deleted=True)} == {live.id, gone.id}

    def test_null_flag_counts_as_live(self, db):
        db.add(Tenant(tenant_no="T-1", owner_name="Owner", is_deleted=None))
        db.commit()

        assert len(GenericRepository(db, Tenant).get_all()) == 1

    def test_get_by_id_of_deleted_returns_none(self, db):
        repo = GenericRepository(db, RentalProperty)
        prop = add_property(repo)
        repo.delete(prop)

        assert repo.get_by_id(prop.id) is None
        assert repo.get_by_id(prop.id, include_deleted=True) is not None

    def test_get_by_id_missing(self, db):
        assert GenericRepository(db, RentalProperty).get_by_id(999) is None

    def test_global_filter_applies_to_plain_selects(self, db):
        repo = GenericRepository(db, RentalProperty)
        repo.delete(add_property(repo))

        assert db.scalars(select(RentalProperty)).all() == []
        stmt = select(RentalProperty).execution_options(**{INCLUDE_DELETED: True})
        assert len(db.scalars(stmt).all()) == 1

    def test_get_page_newest_first_with_live_total(self, db):
        repo = GenericRepository(db, RentalProperty)
        ids = [add_property(repo, p_id=f"P-{i}").id for i in range(5)]
        repo.delete(repo.get_by_id(ids[0]))

        items, total = repo.get_page(1, 2)

        assert total == 4
        assert [p.id for p in items] == [ids[4], ids[3]]

        items, _ = repo.get_page(2, 2)
        assert [p.id for p in items] == [ids[2], ids[1]]


class TestUpdate:
    """Test updates and protected attributes."""

    def test_copies_values_and_stamps_update(self, db):
        repo = GenericRepository(db, RentalProperty)
        prop = add_property(repo)

        repo.update(prop, {"location": "Hangar 4", "area": Decimal("20")}, actor="carol")

        assert prop.location == "Hangar 4"
        assert prop.area == Decimal("20")
        assert prop.action == "UPDATE"
        assert prop.action_by == "carol"

    def test_key_and_audit_fields_not_overwritten(self, db):
        repo = GenericRepository(db, RentalProperty)
        prop = add_property(repo)
        original_id = prop.id

        repo.update(prop, {"id": 999, "is_deleted": True, "action": "HACK"})

        assert prop.id == original_id
        assert prop.is_deleted is False
        assert prop.action == "UPDATE"

    def test_user_credentials_are_protected(self, db):
        repo = GenericRepository(db, User)
        user = repo.add(User(username="jdoe", password=b"hash", password_salt=b"salt", password_iterations=1000))

        repo.update(user, {"name": "Jane", "password": None, "password_salt": None, "refresh_token": "x"})

        assert user.name == "Jane"
        assert user.password == b"hash"
        assert user.password_salt == b"salt"
        assert user.refresh_token is None

    def test_writable_attributes(self, db):
        writable = GenericRepository(db, User).writable_attributes()

        assert "username" in writable
        assert "id" not in writable
        assert "password" not in writable
        assert "action_by" not in writable


class TestDelete:
    """Test soft and hard deletes."""

    def test_soft_delete_keeps_row(self, db):
        repo = GenericRepository(db, RentalProperty)
        prop = add_property(repo)

        repo.delete(prop, actor="dave")

        row = repo.get_by_id(prop.id, include_deleted=True)
        assert row.is_deleted is True
        assert row.action == "DELETE"
        assert row.action_by == "dave"

    def test_model_without_flag_is_hard_deleted(self, db):
        repo = GenericRepository(db, UserNote)
        note = repo.add(UserNote(user_id="7", content="hello"))
        note_id = note.id

        repo.delete(note)

        assert repo.get_by_id(note_id) is None
        assert db.get(UserNote, note_id) is None
