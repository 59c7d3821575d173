from revcat.presentation.api.routers.audit import router as audit_router
from revcat.presentation.api.routers.categories import router as categories_router
from revcat.presentation.api.routers.classifications import (
    router as classifications_router,
)
from revcat.presentation.api.routers.subscriptions import (
    router as subscriptions_router,
)

__all__ = [
    "audit_router",
    "categories_router",
    "classifications_router",
    "subscriptions_router",
]
