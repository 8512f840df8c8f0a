"""Resolve the ORM model a repository manages.

Resolution order:
  1. a model passed explicitly to the repository constructor;
  2. the ``model`` class attribute of the repository subclass;
  3. naming convention: ``UserRepository`` / ``SqlUserRepository`` -> ``User``
     looked up in Settings.models_module.

A model may be given as a class or as a dotted import path
("app.models.User").  The result must be a mapped class.
"""

from __future__ import annotations

import importlib
from typing import Any

from sqlalchemy import inspect
from sqlalchemy.orm import Mapper

from datafiltering.domain.errors import ConfigurationError

REPOSITORY_SUFFIX = "Repository"
IMPLEMENTATION_PREFIX = "Sql"


def guess_model_name(repository_name: str) -> str:
    """Derive a model class name from a repository class name."""
    name = repository_name
    if name.endswith(REPOSITORY_SUFFIX):
        name = name[: -len(REPOSITORY_SUFFIX)]
    if (
        name.startswith(IMPLEMENTATION_PREFIX)
        and len(name) > len(IMPLEMENTATION_PREFIX)
        and name[len(IMPLEMENTATION_PREFIX)].isupper()
    ):
        name = name[len(IMPLEMENTATION_PREFIX):]
    return name


def import_string(path: str) -> Any:
    """Import "package.module.Attr" and return Attr."""
    module_path, _, attr = path.rpartition(".")
    if not module_path:
        raise ConfigurationError(f"{path!r} is not a dotted import path")
    try:
        module = importlib.import_module(module_path)
    except ImportError as exc:
        raise ConfigurationError(f"Cannot import module {module_path!r}: {exc}") from exc
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        raise ConfigurationError(f"Module {module_path!r} has no attribute {attr!r}") from exc


def _ensure_mapped(candidate: Any) -> type:
    mapper = inspect(candidate, raiseerr=False) if isinstance(candidate, type) else None
    if not isinstance(mapper, Mapper):
        raise ConfigurationError(f"{candidate!r} is not a mapped SQLAlchemy model")
    return candidate


def resolve_model(
    repository_cls: type,
    models_module: str,
    explicit: type | str | None = None,
) -> type:
    candidate = explicit if explicit is not None else getattr(repository_cls, "model", None)

    if candidate is None:
        name = guess_model_name(repository_cls.__name__)
        if not name:
            raise ConfigurationError(
                f"Cannot guess a model for {repository_cls.__name__}; set its model attribute"
            )
        candidate = f"{models_module}.{name}"

    if isinstance(candidate, str):
        candidate = import_string(candidate)

    return _ensure_mapped(candidate)
