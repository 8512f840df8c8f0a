"""Tests for datafiltering/domain/repositories/base.py."""

import pytest

from datafiltering.domain.errors import NotFoundError
from datafiltering.domain.models.pagination import SimplePage
from datafiltering.domain.repositories.base import Repository


class _InMemory(Repository):
    def __init__(self):
        self.rows = {}
        self.next_id = 1

    async def find(self, id):
        return self.rows.get(id)

    async def list(self, request, actor=None, query=None, extras=None):
        return SimplePage(items=list(self.rows.values()), per_page=request.per_page or 15)

    async def create(self, attributes):
        row = {"id": self.next_id, **attributes}
        self.rows[self.next_id] = row
        self.next_id += 1
        return row

    async def update_entity(self, entity, attributes):
        entity.update(attributes)
        return entity

    async def delete_entity(self, entity):
        return self.rows.pop(entity["id"], None) is not None


def test_repository_cannot_be_instantiated_directly():
    with pytest.raises(TypeError):
        Repository()  # type: ignore[abstract]


def test_repository_concrete_subclass_must_implement_all_methods():
    class _Partial(Repository):
        async def find(self, id): return None
        # missing list, create, update_entity, delete_entity

    with pytest.raises(TypeError):
        _Partial()  # type: ignore[abstract]


def test_repository_full_concrete_subclass_instantiates():
    assert _InMemory() is not None


def test_entity_name_defaults_to_class_name():
    assert _InMemory().entity_name == "_InMemory"


async def test_get_returns_entity_when_found():
    repo = _InMemory()
    created = await repo.create({"name": "Alice"})
    assert await repo.get(created["id"]) == created


async def test_get_raises_not_found_when_missing():
    with pytest.raises(NotFoundError) as exc_info:
        await _InMemory().get(99)
    assert exc_info.value.id == 99


async def test_update_by_id_applies_attributes():
    repo = _InMemory()
    created = await repo.create({"name": "Alice", "team": "red"})
    updated = await repo.update(created["id"], {"name": "Bob"})
    assert updated == {"id": created["id"], "name": "Bob", "team": "red"}


async def test_update_raises_not_found_for_missing_id():
    with pytest.raises(NotFoundError):
        await _InMemory().update(7, {"name": "Bob"})


async def test_delete_by_id_returns_true():
    repo = _InMemory()
    created = await repo.create({"name": "Alice"})
    assert await repo.delete(created["id"]) is True
    assert await repo.find(created["id"]) is None


async def test_delete_raises_not_found_for_missing_id():
    repo = _InMemory()
    await repo.create({"name": "Alice"})
    with pytest.raises(NotFoundError):
        await repo.delete(99)
    assert len(repo.rows) == 1
