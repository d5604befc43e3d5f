"""SQLAlchemy ORM model for project collaborators."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.dialects.postgresql import UUID as PG_UUID
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, utc_now


class ProjectCollaboratorModel(Base):
    """A user granted access to a project by its owner.

    Rows go away with their project (ON DELETE CASCADE).
    """

    __tablename__ = "project_collaborators"

    project_id: Mapped[UUID] = mapped_column(
        PG_UUID(as_uuid=True),
        ForeignKey("projects.id", ondelete="CASCADE"),
        primary_key=True,
    )
    username: Mapped[str] = mapped_column(String(255), primary_key=True, index=True)
    invited_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, insert_default=utc_now
    )
