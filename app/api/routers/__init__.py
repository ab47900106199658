"""
app/api/routers package marker.
"""

from app.api.routers.companies import router as companies_router
from app.api.routers.users import router as users_router

__all__ = [
    "companies_router",
    "users_router",
]
