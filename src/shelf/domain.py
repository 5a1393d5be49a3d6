"""Shelf bounded context: ready menu items stocked in the kitchen.

Tracks how many portions of each menu item sit on the shelf. Items are
created with an initial quantity and then increased or decreased through
typed actions routed by the ShelfActionDispatcher (CQRS, not event sourced).
"""

import structlog
from protean.domain import Domain

shelf = Domain(name="shelf")

logger = structlog.get_logger(__name__)
