from .login import router as login_router
from .rental_properties import router as rental_properties_router
from .revenue_rates import router as revenue_rates_router
from .contracts import router as contracts_router
from .tenants import router as tenants_router
from .property_groups import router as property_groups_router
from .user_notes import router as user_notes_router
from .uploads import router as uploads_router
from .generic import router as generic_router

__all__ = [
    "login_router",
    "rental_properties_router",
    "revenue_rates_router",
    "contracts_router",
    "tenants_router",
    "property_groups_router",
    "user_notes_router",
    "uploads_router",
    "generic_router",
]
