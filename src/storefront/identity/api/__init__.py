"""Identity domain API package."""

from storefront.identity.api.age_gate import age_gate_router
from storefront.identity.api.routes import router

__all__ = ["router", "age_gate_router"]
