"""Users presentation layer."""

from users.presentation.routes import router

__all__ = ["router"]
