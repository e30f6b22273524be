import uuid
from datetime import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import DateTime, String, Text, Uuid, Enum as SQLEnum
from sqlalchemy.orm import Mapped, mapped_column

from sentences.db.base import Base, local_now


class RevisionAction(str, Enum):

    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class RevisionRecord(Base):
    """Append-only audit entry. Never updated once written."""

    __tablename__ = "revision_records"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    # Plain column, not a foreign key: a "deleted" tombstone outlives its document.
    document_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        nullable=False,
        index=True,
    )
    file_name: Mapped[str] = mapped_column(String(255), nullable=False)
    action: Mapped[RevisionAction] = mapped_column(
        SQLEnum(
            RevisionAction,
            name="revision_action",
            values_callable=lambda actions: [a.value for a in actions],
        ),
        nullable=False,
        index=True,
    )
    changed_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=local_now,
        nullable=False,
        index=True,
    )
    changed_by: Mapped[str] = mapped_column(String(255), nullable=False)
    change_description: Mapped[str] = mapped_column(Text, nullable=False)

    previous_data: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    new_data: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
