from sentences.models.history import RevisionAction, RevisionRecord
from sentences.models.document import Document, DocumentKind
from sentences.models.sentence import Sentence


__all__ = [
    "Document",
    "DocumentKind",
    "Sentence",
    "RevisionRecord",
    "RevisionAction",
]
