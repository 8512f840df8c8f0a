"""Domain repository interfaces.

The abstraction is defined here with abc.ABC and @abstractmethod.
The concrete SQLAlchemy implementation lives in
datafiltering/infrastructure/persistence/ and is wired at the application
boundary via dependency injection.
"""

from .base import Repository
from .hooks import RepositoryHooks, call_hook, hook_attributes

__all__ = [
    "Repository",
    "RepositoryHooks",
    "call_hook",
    "hook_attributes",
]
