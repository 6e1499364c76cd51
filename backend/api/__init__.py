"""API package that assembles FastAPI routers."""

from .routers.chat import router as chat_router

__all__ = ["chat_router"]
