"""Aggregates for the projects context."""

from projects.domain.aggregates.project import Project
from projects.domain.aggregates.task import Task

__all__ = ["Project", "Task"]
