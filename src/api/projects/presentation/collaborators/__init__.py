"""Collaborator routes."""

from projects.presentation.collaborators.routes import router

__all__ = ["router"]
