"""Project routes."""

from projects.presentation.projects.routes import router

__all__ = ["router"]
