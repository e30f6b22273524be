from sentences.services.document_list import DocumentListSync
from sentences.services.document_service import DocumentService
from sentences.services.history_service import HistoryService

__all__ = [
    "DocumentService",
    "DocumentListSync",
    "HistoryService",
]
