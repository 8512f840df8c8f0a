"""Tests for FilterableMixin / TimestampMixin — statement construction."""

from types import SimpleNamespace

from sqlalchemy import select

from datafiltering.domain.models.filtering import FilterRequest
from sample_models import Note, User


def _sql(stmt) -> str:
    return str(stmt.compile())


def test_filterable_columns_lists_mapped_columns():
    assert {"id", "name", "email", "team", "created_at", "updated_at"} <= User.filterable_columns()


def test_timestamp_columns_are_added():
    assert User.__table__.c["created_at"].nullable is False
    assert User.__table__.c["updated_at"].nullable is True


def test_no_filters_orders_by_primary_key_only():
    sql = _sql(User.filter(FilterRequest()))
    assert "WHERE" not in sql
    assert "ORDER BY users.id" in sql


def test_equality_filter_on_known_column():
    sql = _sql(User.filter(FilterRequest(filters={"team": "blue"})))
    assert "users.team = " in sql


def test_list_value_becomes_in_clause():
    sql = _sql(User.filter(FilterRequest(filters={"team": ["blue", "red"]})))
    assert "users.team IN" in sql


def test_none_value_becomes_is_null():
    sql = _sql(User.filter(FilterRequest(filters={"email": None})))
    assert "users.email IS NULL" in sql


def test_unknown_filter_keys_are_ignored():
    sql = _sql(User.filter(FilterRequest(filters={"q": "ali", "nope": 1})))
    assert "WHERE" not in sql


def test_sort_descending_then_primary_key():
    sql = _sql(User.filter(FilterRequest(sort="-name")))
    assert "ORDER BY users.name DESC, users.id" in sql


def test_unknown_sort_fields_are_ignored():
    sql = _sql(User.filter(FilterRequest(sort="password")))
    assert "password" not in sql


def test_starts_from_callers_query():
    query = select(User).where(User.name.startswith("A"))
    sql = _sql(User.filter(FilterRequest(filters={"team": "blue"}), query=query))
    assert "users.name LIKE" in sql
    assert "users.team = " in sql


def test_actor_scope_is_identity_by_default():
    sql = _sql(User.filter(FilterRequest(), actor=SimpleNamespace(id=1)))
    assert "WHERE" not in sql


def test_actor_scope_override_restricts_rows():
    sql = _sql(Note.filter(FilterRequest(), actor=SimpleNamespace(id=1)))
    assert "notes.owner_id = " in sql


def test_actor_scope_override_skipped_without_actor():
    sql = _sql(Note.filter(FilterRequest()))
    assert "WHERE" not in sql
