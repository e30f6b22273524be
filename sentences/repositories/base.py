"""Document repository interface."""

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Sequence
from uuid import UUID

from sentences.models import Document, RevisionRecord, Sentence


class DocumentRepository(ABC):
    """
    Storage contract for documents and their revision records.

    Reads degrade gracefully: a storage failure yields an empty result or
    ``None``. Writes are atomic per call and raise ``StorageError`` on
    failure. A revision passed to a write is committed together with the
    document change. Name uniqueness is the caller's job
    (``is_file_name_unique``) before ``create``/``update``.
    """

    @abstractmethod
    async def fetch_all(self) -> Sequence[Document]:
        """All live documents, most recently updated first."""

    @abstractmethod
    async def fetch_by_date(self, value: date | datetime) -> Sequence[Document]:
        """Documents created on the local calendar day containing ``value``."""

    @abstractmethod
    async def fetch_by_id(self, document_id: UUID) -> Document | None:
        """Document with this id, or None."""

    @abstractmethod
    async def fetch_sentence(self, sentence_id: UUID) -> Sentence | None:
        """Sentence with this id, or None."""

    @abstractmethod
    async def create(
        self, document: Document, revision: RevisionRecord | None = None
    ) -> None:
        """Insert a new document with its sentences and, if given, its first record."""

    @abstractmethod
    async def update(
        self, document: Document, revision: RevisionRecord | None = None
    ) -> None:
        """Persist changes already applied to a fetched document, plus ``revision``."""

    @abstractmethod
    async def delete(
        self, document: Document, revision: RevisionRecord | None = None
    ) -> None:
        """
        Remove the document, its sentences and its revision records.

        ``revision`` (a tombstone) is stored in the same write and is not
        part of the cascade. Nothing is written when the document is gone.
        """

    @abstractmethod
    async def is_file_name_unique(
        self, file_name: str, excluding: UUID | None = None
    ) -> bool:
        """True iff no other live document has exactly this file name."""

    @abstractmethod
    async def append_revision(self, record: RevisionRecord) -> None:
        """Append one revision record. Records are never modified afterwards."""

    @abstractmethod
    async def fetch_revisions(
        self, document_id: UUID, limit: int | None = None
    ) -> Sequence[RevisionRecord]:
        """Revision records of a document, newest first."""

    @abstractmethod
    async def fetch_revision(self, record_id: UUID) -> RevisionRecord | None:
        """Revision record with this id, or None."""
