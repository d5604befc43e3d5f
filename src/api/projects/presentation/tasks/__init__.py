"""Task routes."""

from projects.presentation.tasks.routes import router

__all__ = ["router"]
