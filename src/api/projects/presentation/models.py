"""Request and response models for the projects API."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from projects.application.results import TaskProfile
from projects.domain.aggregates import Project, Task
from projects.domain.value_objects import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    TaskStatus,
)


class CreateProjectRequest(BaseModel):
    """Request to create a project owned by the caller."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        description="Project title",
        examples=["Google"],
    )
    description: str = Field(
        default="",
        max_length=DESCRIPTION_MAX_LENGTH,
        description="Free-form description",
        examples=["Search System"],
    )


class UpdateProjectRequest(BaseModel):
    """Partial project update. Omitted fields are left unchanged."""

    title: str | None = Field(
        default=None, min_length=1, max_length=TITLE_MAX_LENGTH, description="New title"
    )
    description: str | None = Field(
        default=None, max_length=DESCRIPTION_MAX_LENGTH, description="New description"
    )


class ProjectResponse(BaseModel):
    """Project details."""

    id: UUID = Field(..., description="Project ID")
    title: str = Field(..., description="Project title")
    description: str = Field(..., description="Project description")
    owner: str = Field(..., description="Username of the owner")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @classmethod
    def from_domain(cls, project: Project) -> ProjectResponse:
        return cls(
            id=project.id,
            title=project.title,
            description=project.description,
            owner=project.owner,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )


class ProjectListResponse(BaseModel):
    projects: list[ProjectResponse] = Field(..., description="Projects, oldest first")
    count: int = Field(..., description="Number of projects")


class InviteCollaboratorRequest(BaseModel):
    """Request to give a registered user access to a project."""

    username: str = Field(
        ..., min_length=1, max_length=255, description="Username to invite"
    )


class CollaboratorListResponse(BaseModel):
    collaborators: list[str] = Field(..., description="Collaborator usernames")


class CreateTaskRequest(BaseModel):
    """Request to create a task in a project."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=TITLE_MAX_LENGTH,
        description="Task title",
        examples=["Google-1"],
    )
    description: str = Field(
        default="",
        max_length=DESCRIPTION_MAX_LENGTH,
        description="Task description",
    )
    assignee: str | None = Field(
        default=None,
        description="Username of the assignee; must have access to the project",
        examples=["a.elmurzaev95"],
    )


class CreateTaskResponse(BaseModel):
    number: int = Field(..., description="Number of the new task within its project")


class UpdateTaskRequest(BaseModel):
    """Partial task update. Omitted fields are left unchanged."""

    title: str | None = Field(
        default=None, min_length=1, max_length=TITLE_MAX_LENGTH, description="New title"
    )
    description: str | None = Field(
        default=None, max_length=DESCRIPTION_MAX_LENGTH, description="New description"
    )
    assignee: str | None = Field(default=None, description="New assignee")
    status: TaskStatus | None = Field(default=None, description="New status")


class TaskSummaryResponse(BaseModel):
    """Task as shown in lists."""

    number: int
    title: str
    assignee: str | None
    status: TaskStatus

    @classmethod
    def from_domain(cls, task: Task) -> TaskSummaryResponse:
        return cls(
            number=task.number,
            title=task.title,
            assignee=task.assignee,
            status=task.status,
        )


class TaskListResponse(BaseModel):
    tasks: list[TaskSummaryResponse] = Field(..., description="Tasks ordered by number")


class TaskProfileResponse(BaseModel):
    """Full view of one task."""

    number: int = Field(..., description="Task number within the project")
    title: str
    description: str
    project_title: str = Field(..., description="Title of the owning project")
    author: str = Field(..., description="Username of the task's creator")
    assignee: str | None
    status: TaskStatus
    created_at: datetime
    changed_at: datetime

    @classmethod
    def from_profile(cls, profile: TaskProfile) -> TaskProfileResponse:
        return cls(
            number=profile.number,
            title=profile.title,
            description=profile.description,
            project_title=profile.project_title,
            author=profile.author,
            assignee=profile.assignee,
            status=profile.status,
            created_at=profile.created_at,
            changed_at=profile.changed_at,
        )
