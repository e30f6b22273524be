from sentences.repositories.base import DocumentRepository
from sentences.repositories.document_repository import SQLDocumentRepository
from sentences.repositories.memory import InMemoryDocumentRepository

__all__ = [
    "DocumentRepository",
    "SQLDocumentRepository",
    "InMemoryDocumentRepository",
]
