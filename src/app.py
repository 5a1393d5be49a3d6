"""Kitchen Shelf FastAPI application.

Processes shelf actions synchronously via HTTP. Every request under /shelf
runs inside the shelf domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV controls which domain.toml overlay is applied.
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from shelf.domain import shelf
from shelf.utils.logging import add_context, clear_context, configure_logging

configure_logging()
shelf.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Kitchen Shelf API",
    description="Stock of ready menu items on the kitchen shelf",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the shelf domain context for shelf requests."""
    if request.url.path.startswith("/shelf"):
        add_context(method=request.method, path=request.url.path)
        try:
            with shelf.domain_context():
                return await call_next(request)
        finally:
            clear_context()
    # Health check, docs, etc.
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from shelf.api import register_shelf_exception_handlers, shelf_router  # noqa: E402
from shelf.service import build_shelf  # noqa: E402

app.state.shelf = build_shelf()
app.include_router(shelf_router)
register_shelf_exception_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": shelf.name})
