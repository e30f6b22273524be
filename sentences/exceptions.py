"""Exceptions raised by the document store."""

from typing import Any
from uuid import UUID


class SentencesError(Exception):
    """Base exception for all document store errors."""

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class DocumentValidationError(SentencesError):
    """Raised before any mutation when a draft cannot be saved."""
    pass


class DuplicateFileNameError(DocumentValidationError):

    def __init__(self, file_name: str) -> None:
        super().__init__(
            "A document with this name already exists. Please choose a different name.",
            details={"file_name": file_name},
        )
        self.file_name = file_name


class EmptyFileNameError(DocumentValidationError):

    def __init__(self) -> None:
        super().__init__("File name cannot be empty.")


class EmptyContentError(DocumentValidationError):

    def __init__(self) -> None:
        super().__init__("Valid content is required.")


class ContentKindChangeError(DocumentValidationError):

    def __init__(self, current: str, requested: str) -> None:
        super().__init__(
            "Document type cannot be changed after creation.",
            details={"current": current, "requested": requested},
        )


class DocumentNotFoundError(SentencesError):

    def __init__(self, document_id: UUID) -> None:
        super().__init__(
            f"Document {document_id} not found",
            details={"document_id": str(document_id)},
        )
        self.document_id = document_id


class StorageError(SentencesError):
    """Raised when a write fails at the persistence layer."""
    pass
