"""Exception hierarchy for the documentation server."""

from typing import Any


class DocsServerError(Exception):
    """Base class for all documentation server errors.

    Every error raised by the core is operational: the caller can recover by
    retrying or fixing its input.
    """

    status_code: int = 500
    is_operational: bool = True

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class DocumentationNotFoundError(DocsServerError):
    """Documentation directory or file does not exist."""

    status_code = 404

    def __init__(
        self,
        message: str = "Documentation files not found",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details=details)


class DocumentationReadError(DocsServerError):
    """Documentation file exists but could not be read."""

    status_code = 500

    def __init__(
        self,
        message: str = "Failed to read documentation files",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details=details)


class IndexBuildError(DocsServerError):
    """Search index could not be built because the documents failed to load."""

    status_code = 500

    def __init__(
        self,
        message: str = "Failed to build search index",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details=details)

    @classmethod
    def from_cause(cls, cause: Exception) -> "IndexBuildError":
        """Wrap a document load failure, keeping the cause as detail."""
        details: dict[str, Any] = {
            "cause": str(cause),
            "cause_type": type(cause).__name__,
        }
        if isinstance(cause, DocsServerError) and cause.details:
            details["cause_details"] = cause.details
        return cls(f"Failed to build search index: {cause}", details=details)


class ExampleNotFoundError(DocsServerError):
    """Requested example name is unknown or missing from the manual."""

    status_code = 404

    def __init__(self, example_name: str, available_examples: list[str]):
        message = (
            f'Example "{example_name}" not found. '
            f"Available examples: {', '.join(available_examples)}"
        )
        super().__init__(
            message,
            details={
                "example_name": example_name,
                "available_examples": available_examples,
            },
        )


class ValidationError(DocsServerError):
    """Invalid tool input."""

    status_code = 400


__all__ = [
    "DocsServerError",
    "DocumentationNotFoundError",
    "DocumentationReadError",
    "IndexBuildError",
    "ExampleNotFoundError",
    "ValidationError",
]
