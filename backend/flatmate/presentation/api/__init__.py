"""
API Routers - FastAPI endpoint definitions.
"""

from flatmate.presentation.api.chat import router as chat_router
from flatmate.presentation.api.conversations import router as conversations_router
from flatmate.presentation.api.listings import router as listings_router
from flatmate.presentation.api.appointments import router as appointments_router
from flatmate.presentation.api.leases import router as leases_router
from flatmate.presentation.api.metrics import router as metrics_router

__all__ = [
    "chat_router",
    "conversations_router",
    "listings_router",
    "appointments_router",
    "leases_router",
    "metrics_router",
]
