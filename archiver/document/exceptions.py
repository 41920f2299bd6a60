class DocumentError(Exception):
    """Base exception for all document-related errors.

    Subclasses carry a user facing ``reason`` and ``recovery_suggestion`` so
    callers can explain what to do instead of showing a generic failure.
    """

    reason: str = "The document could not be processed."
    recovery_suggestion: str = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.reason)


class MissingDateError(DocumentError):
    """Raised when a document without a date should be renamed."""

    reason = "No date could be found for this document."
    recovery_suggestion = "Add a date to the document."


class MissingTagsError(DocumentError):
    """Raised when a document without tags should be renamed."""

    reason = "No tags could be found for this document."
    recovery_suggestion = "Add at least one tag to the document."


class MissingSpecificationError(DocumentError):
    """Raised when a document without a specification should be renamed."""

    reason = "No description could be found for this document."
    recovery_suggestion = "Add a description to the document."


class AlreadyExistsError(DocumentError):
    """Raised when the rename target is occupied by another file."""

    reason = "A file with this name already exists in the archive."
    recovery_suggestion = "Change the description or the tags of the document."


class FileOperationError(DocumentError):
    """Raised when the filesystem fails while a document is moved or tagged."""

    reason = "The document could not be moved in the filesystem."
    recovery_suggestion = "Check that the archive folder is available and writable."
