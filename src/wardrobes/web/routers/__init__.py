"""API routers for the REST API."""

from wardrobes.web.routers.cut_list import router as cut_list_router
from wardrobes.web.routers.doors import router as doors_router
from wardrobes.web.routers.quote import router as quote_router
from wardrobes.web.routers.rules import router as rules_router

__all__ = [
    "cut_list_router",
    "doors_router",
    "quote_router",
    "rules_router",
]
