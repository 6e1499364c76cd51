"""FastAPI routers for the support backend."""
