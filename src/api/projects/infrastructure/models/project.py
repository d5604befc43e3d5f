"""SQLAlchemy ORM model for the projects table."""

from uuid import UUID

from sqlalchemy import Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class ProjectModel(Base, TimestampMixin):
    """ORM model for the projects table.

    ``last_task_number`` is the per-project task counter. It only ever
    grows, so numbers of deleted tasks are never handed out again.
    """

    __tablename__ = "projects"

    id: Mapped[UUID] = mapped_column(PG_UUID(as_uuid=True), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    owner: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    last_task_number: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0"
    )

    def __repr__(self) -> str:
        return f"<ProjectModel(id={self.id}, title={self.title}, owner={self.owner})>"
