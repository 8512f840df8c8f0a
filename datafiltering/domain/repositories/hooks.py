"""Lifecycle hook policy.

A RepositoryHooks value bundles optional callbacks that run around create
and update.  Callbacks may be plain functions or coroutine functions.

  before_create(attributes) -> attributes
  after_created(entity, attributes) -> None
  before_update(entity, attributes) -> attributes
  after_updated(entity, attributes) -> None

before_* callbacks return the attributes to persist.  A callback that edits
its argument in place and returns None keeps the edited attributes.  A
callback that raises aborts the operation.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

Attributes = dict[str, Any]

BeforeCreate = Callable[[Attributes], "Attributes | Awaitable[Attributes]"]
AfterCreated = Callable[[Any, Attributes], "None | Awaitable[None]"]
BeforeUpdate = Callable[[Any, Attributes], "Attributes | Awaitable[Attributes]"]
AfterUpdated = Callable[[Any, Attributes], "None | Awaitable[None]"]


async def call_hook(hook: Callable[..., Any], *args: Any) -> Any:
    """Call a sync or async hook and return its (awaited) result."""
    result = hook(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


def hook_attributes(result: Any, attributes: Attributes) -> Attributes:
    """Attributes returned by a before_* hook; None means "as edited in place"."""
    return attributes if result is None else dict(result)


@dataclass(frozen=True)
class RepositoryHooks:
    """Optional callbacks invoked by SqlRepository; every field defaults to a no-op."""

    before_create: BeforeCreate | None = None
    after_created: AfterCreated | None = None
    before_update: BeforeUpdate | None = None
    after_updated: AfterUpdated | None = None

    async def run_before_create(self, attributes: Attributes) -> Attributes:
        if self.before_create is None:
            return attributes
        return hook_attributes(await call_hook(self.before_create, attributes), attributes)

    async def run_after_created(self, entity: Any, attributes: Attributes) -> None:
        if self.after_created is not None:
            await call_hook(self.after_created, entity, attributes)

    async def run_before_update(self, entity: Any, attributes: Attributes) -> Attributes:
        if self.before_update is None:
            return attributes
        return hook_attributes(
            await call_hook(self.before_update, entity, attributes), attributes
        )

    async def run_after_updated(self, entity: Any, attributes: Attributes) -> None:
        if self.after_updated is not None:
            await call_hook(self.after_updated, entity, attributes)
