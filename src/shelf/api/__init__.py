from shelf.api.errors import register_shelf_exception_handlers
from shelf.api.routes import get_shelf, shelf_router

__all__ = ["get_shelf", "register_shelf_exception_handlers", "shelf_router"]
