"""FastAPI service answering movie title searches over the catalog."""
from .app import create_app

__all__ = ["create_app"]
