"""Action dispatcher: routes a shelf action to its handler.

Handlers are tried in registration order and the first applicable one runs
inside a single unit of work: everything it reads and writes commits or
rolls back together. Post-commit steps (cache writes) run afterwards and are
best-effort.
"""

import structlog
from protean.core.unit_of_work import UnitOfWork

from shelf.errors import NoHandlerForAction, StoreFailure
from shelf.item.handler import ShelfActionHandler
from shelf.result import ExecutionResult, Failure

logger = structlog.get_logger(__name__)


class ShelfActionDispatcher:
    def __init__(self, handlers: list[ShelfActionHandler]):
        self._handlers = tuple(handlers)

    @property
    def handlers(self) -> tuple[ShelfActionHandler, ...]:
        return self._handlers

    def handler_for(self, action) -> ShelfActionHandler:
        for handler in self._handlers:
            if handler.is_applicable(action):
                return handler
        raise NoHandlerForAction(action)

    def dispatch(self, action) -> ExecutionResult:
        """Run the action through its handler.

        Raises:
            NoHandlerForAction: no registered handler accepts the action.
        """
        action_name = type(action).__name__
        logger.info("dispatching_action", action=action_name)
        handler = self.handler_for(action)

        uow = UnitOfWork()
        uow.start()
        try:
            result = handler.execute(action)
        except Exception:
            uow.rollback()
            raise

        if result.is_failure:
            uow.rollback()
            return result

        try:
            uow.commit()
        except Exception as exc:
            logger.error("action_commit_failed", action=action_name, exc_info=True)
            if uow.in_progress:
                uow.rollback()
            return Failure(StoreFailure("Commit", exc))

        try:
            handler.after_commit(result.value)
        except Exception:
            # The next write or an explicit eviction corrects the cache.
            logger.warning("post_commit_step_failed", action=action_name, exc_info=True)

        return result
