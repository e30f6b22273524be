"""
Sentence Model
==============

One ordered text item of an ``items`` document. ``order`` is 0-indexed and
dense among siblings after every edit; edits rebuild the whole collection,
so a sentence id is not stable across saves.
"""

from __future__ import annotations
import uuid
from typing import TYPE_CHECKING
from sqlalchemy import ForeignKey, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from sentences.db.base import Base, TimestampMixin, local_now

if TYPE_CHECKING:
    from sentences.models.document import Document


class Sentence(Base, TimestampMixin):
    __tablename__ = "sentences"
    __table_args__ = (
        Index("ix_sentence_document_order", "document_id", "order"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    document_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("documents.id", ondelete="CASCADE"), index=True
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    order: Mapped[int] = mapped_column(default=0)

    document: Mapped[Document] = relationship(back_populates="sentences")

    @classmethod
    def new(cls, text: str, order: int) -> Sentence:
        return cls(id=uuid.uuid4(), text=text, order=order, created_at=local_now())
