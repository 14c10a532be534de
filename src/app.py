"""Storefront FastAPI application.

Single-domain web server that processes commands synchronously via HTTP.
Every request runs inside the storefront domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# init_domain() imports every element module before Domain.init().
# PROTEAN_ENV selects the config overlay (memory by default, "sqlite",
# "production").
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from storefront.registry import init_domain
from storefront.utils.logging import add_context, clear_context, get_logger

storefront = init_domain()

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="Online shop API for the catalogue, checkout, reviews, customers and back-office analytics",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def unhandled_error_middleware(request: Request, call_next):
    """Log anything the exception handlers did not claim and answer with a bare 500."""
    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception(
            "unhandled_error",
            method=request.method,
            path=request.url.path,
            error=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={"error": "internal_error", "message": "An unexpected error occurred."},
        )


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the storefront domain context and tag log lines with the request."""
    add_context(method=request.method, path=request.url.path)
    try:
        with storefront.domain_context():
            return await call_next(request)
    finally:
        clear_context()


register_exception_handlers(app)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from storefront.analytics.api.routes import router as analytics_router  # noqa: E402
from storefront.catalogue.api import category_router, product_router  # noqa: E402
from storefront.identity.api import age_gate_router  # noqa: E402
from storefront.identity.api import router as identity_router  # noqa: E402
from storefront.ordering.api.routes import cart_router, order_router  # noqa: E402
from storefront.reviews.api.routes import review_router  # noqa: E402

app.include_router(category_router)
app.include_router(product_router)
app.include_router(cart_router)
app.include_router(order_router)
app.include_router(review_router)
app.include_router(identity_router)
app.include_router(age_gate_router)
app.include_router(analytics_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": storefront.name})
