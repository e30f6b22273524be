"""
History Service - Revision Log
==============================

Every lifecycle transition of a document leaves exactly one immutable
RevisionRecord:

- created: "Document created", no snapshots
- updated: "Document updated", snapshot before and after the edit
- deleted: "Document deleted", no snapshots

Snapshots:
----------
A snapshot is a JSON object with a fixed key order:
    {"fileName": ..., "type": ..., "freeText": ..., "sentenceCount": ...,
     "sentences": [...]}
The description is static; comparing the two snapshots is how a history
view shows what changed.

Saving:
-------
The *_entry builders return unsaved records. DocumentService hands them to
the repository write (create/update/delete) so the document change and its
record are committed together. The record_* methods append a record on its
own, for callers that manage the document write themselves.

Deletion Tombstones:
--------------------
Deleting a document cascades to its revision records. The "deleted" record
is not part of that cascade, so when retain_deletion_records is on it is
the only record left for that document id. file_name is copied onto every
record for that reason.
"""

import json
import logging
import uuid
from typing import Sequence
from uuid import UUID

from sentences.config import settings
from sentences.db.base import local_now
from sentences.models import Document, RevisionAction, RevisionRecord
from sentences.repositories.base import DocumentRepository
from sentences.schemas.history import DocumentSnapshot

logger = logging.getLogger(__name__)


class HistoryService:
    """
    Service for the per-document revision log.

    Usage:
        history = HistoryService(repository)
        before = history.snapshot(document)
        ...  # mutate the document
        await repository.update(document, history.updated_entry(document, before, "jane.doe"))
    """

    CREATED_DESCRIPTION = "Document created"
    UPDATED_DESCRIPTION = "Document updated"
    DELETED_DESCRIPTION = "Document deleted"

    def __init__(
        self,
        repository: DocumentRepository,
        retain_deletion_records: bool | None = None,
        history_limit: int | None = None,
    ) -> None:
        self.repository = repository
        self.retain_deletion_records = (
            settings.retain_deletion_records
            if retain_deletion_records is None
            else retain_deletion_records
        )
        self.history_limit = (
            settings.history_limit if history_limit is None else history_limit
        )

    @staticmethod
    def snapshot(document: Document) -> str:
        """Serialize the parts of a document an edit can change."""
        texts = [s.text for s in sorted(document.sentences, key=lambda s: s.order)]
        return DocumentSnapshot(
            file_name=document.file_name,
            kind=document.kind,
            free_text=document.free_text or "",
            sentence_count=len(texts),
            sentences=texts,
        ).model_dump_json(by_alias=True)

    @staticmethod
    def format_snapshot(payload: str) -> str:
        """Pretty-print a snapshot for display; non-JSON is returned as is."""
        try:
            return json.dumps(json.loads(payload), indent=2, ensure_ascii=False)
        except (TypeError, ValueError):
            return payload

    @staticmethod
    def build_entry(
        document: Document,
        action: RevisionAction,
        actor: str,
        description: str,
        previous_data: str | None = None,
        new_data: str | None = None,
    ) -> RevisionRecord:
        """
        Build an unsaved revision record for ``document``.

        Args:
            document: The document the event happened to
            action: created, updated or deleted
            actor: Who performed the change
            description: Human-readable summary
            previous_data: Snapshot before the change (updates only)
            new_data: Snapshot after the change (updates only)

        Returns:
            A transient RevisionRecord
        """
        return RevisionRecord(
            id=uuid.uuid4(),
            document_id=document.id,
            file_name=document.file_name,
            action=action,
            changed_at=local_now(),
            changed_by=actor,
            change_description=description,
            previous_data=previous_data,
            new_data=new_data,
        )

    def created_entry(self, document: Document, actor: str) -> RevisionRecord:
        return self.build_entry(
            document, RevisionAction.CREATED, actor, self.CREATED_DESCRIPTION
        )

    def updated_entry(
        self, document: Document, previous_data: str, actor: str
    ) -> RevisionRecord:
        """Record for an edit; ``document`` must already hold the new state."""
        return self.build_entry(
            document,
            RevisionAction.UPDATED,
            actor,
            self.UPDATED_DESCRIPTION,
            previous_data=previous_data,
            new_data=self.snapshot(document),
        )

    def deleted_entry(self, document: Document, actor: str) -> RevisionRecord | None:
        """Deletion tombstone, or None when deletion records are disabled."""
        if not self.retain_deletion_records:
            logger.debug(f"Deletion records disabled, skipping '{document.file_name}'")
            return None
        return self.build_entry(
            document, RevisionAction.DELETED, actor, self.DELETED_DESCRIPTION
        )

    async def create_entry(self, entry: RevisionRecord) -> RevisionRecord:
        """Append an already built record on its own."""
        await self.repository.append_revision(entry)
        logger.debug(f"Recorded {entry.action.value} revision for '{entry.file_name}'")
        return entry

    async def record_created(self, document: Document, actor: str) -> RevisionRecord:
        return await self.create_entry(self.created_entry(document, actor))

    async def record_updated(
        self, document: Document, previous_data: str, actor: str
    ) -> RevisionRecord:
        return await self.create_entry(
            self.updated_entry(document, previous_data, actor)
        )

    async def record_deleted(
        self, document: Document, actor: str
    ) -> RevisionRecord | None:
        """Append the deletion tombstone. Call after the document is deleted."""
        entry = self.deleted_entry(document, actor)
        if entry is None:
            return None
        return await self.create_entry(entry)

    async def get_document_history(
        self, document_id: UUID, limit: int | None = None
    ) -> Sequence[RevisionRecord]:
        """
        Get revision history for a document, newest first.

        Capped at ``history_limit`` unless an explicit limit is given.
        """
        return await self.repository.fetch_revisions(
            document_id, limit=self.history_limit if limit is None else limit
        )
