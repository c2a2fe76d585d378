"""
API routers for endpoint organization.
"""
from .health import router as health_router
from .session import router as session_router
from .students import router as students_router
from .donors import router as donors_router
from .documents import router as documents_router

__all__ = [
    "health_router",
    "session_router",
    "students_router",
    "donors_router",
    "documents_router",
]
