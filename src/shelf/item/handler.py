"""Base class for shelf action handlers."""

from abc import ABC, abstractmethod

from protean.utils.globals import current_domain

from shelf.cache.port import CachePort
from shelf.clock import Clock
from shelf.item.item import ShelfItem
from shelf.result import ExecutionResult


class ShelfActionHandler(ABC):
    """Implements the business transition for one action variant.

    ``execute`` runs inside the dispatcher's unit of work and never lets an
    exception escape: every outcome comes back as an ExecutionResult.
    ``after_commit`` runs only once the unit of work has committed.
    """

    action_type: type

    def __init__(self, clock: Clock, cache: CachePort, store=None):
        self.clock = clock
        self.cache = cache
        self._store = store

    @property
    def store(self):
        """The injected record store, or the domain's ShelfItem repository."""
        if self._store is not None:
            return self._store
        return current_domain.repository_for(ShelfItem)

    def is_applicable(self, action) -> bool:
        return isinstance(action, self.action_type)

    @abstractmethod
    def execute(self, action) -> ExecutionResult: ...

    def after_commit(self, value) -> None:
        """Post-commit side effects. Nothing by default."""
