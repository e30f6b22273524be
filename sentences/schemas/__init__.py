from sentences.schemas.document import DocumentDraft, DocumentResponse, SentenceResponse
from sentences.schemas.history import DocumentSnapshot, RevisionResponse

__all__ = [
    "DocumentDraft",
    "DocumentResponse",
    "SentenceResponse",
    "DocumentSnapshot",
    "RevisionResponse",
]
