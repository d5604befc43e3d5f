"""Outbox integration for the projects bounded context."""

from projects.infrastructure.outbox.serializer import ProjectsEventSerializer

__all__ = ["ProjectsEventSerializer"]
