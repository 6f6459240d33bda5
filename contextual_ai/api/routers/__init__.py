"""API routers for contextual-ai."""

from contextual_ai.api.routers import (
    context_router,
    learning_models_router,
    learning_router,
    sessions_router,
)

__all__ = [
    "context_router",
    "learning_models_router",
    "learning_router",
    "sessions_router",
]
