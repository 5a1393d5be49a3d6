"""Failure causes raised or reported by the shelf core.

Three families:

- Configuration faults (``NoHandlerForAction``) surface immediately from the
  dispatcher; they point at a wiring defect.
- Business-rule violations (``DuplicateItem``, ``ItemNotFound``,
  ``InsufficientStock``) are expected and always delivered inside a
  ``Failure`` result.
- Infrastructure faults (``StoreFailure``) wrap whatever the store or cache
  raised, keeping the original exception as ``__cause__``.
"""


class ShelfError(Exception):
    """Base class for every failure cause the shelf core exposes."""

    kind = "ShelfError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": self.message}


class NoHandlerForAction(ShelfError):
    kind = "NoHandlerForAction"

    def __init__(self, action):
        super().__init__(f"Missing configuration for the following action: {type(action).__name__}")
        self.action = action


class DuplicateItem(ShelfError):
    kind = "DuplicateItem"

    def __init__(self, item_id: int):
        super().__init__(f"Menu item {item_id} already exists on shelf")
        self.item_id = item_id


class ItemNotFound(ShelfError):
    kind = "ItemNotFound"

    def __init__(self, item_id: int):
        super().__init__(f"Menu item {item_id} is not on shelf")
        self.item_id = item_id


class InsufficientStock(ShelfError):
    kind = "InsufficientStock"

    def __init__(self, item_id: int, requested: int, available: int):
        self.item_id = item_id
        self.requested = requested
        self.available = available
        self.shortfall = requested - available
        super().__init__(f"Missing {self.shortfall} item(s) of {item_id} from shelf")

    def to_dict(self) -> dict:
        return {**super().to_dict(), "item_id": self.item_id, "shortfall": self.shortfall}


class StoreFailure(ShelfError):
    """An unexpected error from the record store, cache or unit of work."""

    kind = "StoreFailure"

    def __init__(self, operation: str, cause: BaseException):
        super().__init__(f"{operation} failed: {type(cause).__name__}: {cause}")
        self.operation = operation
        self.__cause__ = cause
