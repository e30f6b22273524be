"""
Document Model
==============

A named document owned by a single local user. A document holds either an
ordered list of sentences (kind ``items``) or a single free-text blob
(kind ``freeText``).

File Name as Natural Key:
-------------------------
file_name is unique and indexed. Uniqueness is validated by the repository
before every create/update; the database constraint is the last line.

Ownership:
----------
- sentences: owned, cascade delete, always loaded in ``order``
- history: revision records keyed by ``document_id``, cascade delete
"""

from __future__ import annotations
import uuid
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING
from sqlalchemy import DateTime, Enum as SQLEnum, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sentences.db.base import Base, TimestampMixin, local_now

if TYPE_CHECKING:
    from sentences.models.history import RevisionRecord
    from sentences.models.sentence import Sentence


class DocumentKind(str, Enum):

    ITEMS = "items"
    FREE_TEXT = "freeText"

    @property
    def display_name(self) -> str:
        return "Items" if self is DocumentKind.ITEMS else "Free Text"


class Document(Base, TimestampMixin):
    """
    A user-created document.

    Attributes:
        file_name: Unique display/export name (e.g. "2025-01-01_01")
        kind: Which content form is active
        free_text: Text blob, only meaningful for ``freeText`` documents
        created_by / updated_by: Actor identifiers
        last_updated_at: Time of the last saved edit

    Relationships:
        sentences: Ordered items of an ``items`` document (cascade delete)
        history: Revision records of this document (cascade delete)
    """
    __tablename__ = "documents"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    file_name: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    kind: Mapped[DocumentKind] = mapped_column(
        SQLEnum(
            DocumentKind,
            name="document_kind",
            values_callable=lambda kinds: [k.value for k in kinds],
        ),
        nullable=False,
    )
    free_text: Mapped[str | None] = mapped_column(Text)
    created_by: Mapped[str] = mapped_column(String(255), nullable=False)
    last_updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=local_now, nullable=False, index=True
    )
    updated_by: Mapped[str] = mapped_column(String(255), nullable=False)

    sentences: Mapped[list[Sentence]] = relationship(
        back_populates="document",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="Sentence.order",
    )

    history: Mapped[list[RevisionRecord]] = relationship(
        primaryjoin="Document.id == foreign(RevisionRecord.document_id)",
        cascade="all, delete-orphan",
        order_by="RevisionRecord.changed_at",
    )

    @classmethod
    def new(cls, file_name: str, kind: DocumentKind, actor: str) -> Document:
        """Build a transient document with identity and timestamps assigned."""
        now = local_now()
        return cls(
            id=uuid.uuid4(),
            file_name=file_name,
            kind=kind,
            free_text="" if kind is DocumentKind.FREE_TEXT else None,
            created_at=now,
            created_by=actor,
            last_updated_at=now,
            updated_by=actor,
            sentences=[],
        )
