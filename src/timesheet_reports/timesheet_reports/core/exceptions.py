class DomainError(Exception):
    """Base exception for business rule violations."""


class ConfigurationError(DomainError):
    """Raised when required settings are missing or invalid."""

    def __init__(self, problems: list[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


class TemplateError(DomainError):
    """Raised when the report template cannot be loaded."""


class DataAccessError(DomainError):
    """Raised when a data store query or update fails."""


class RenderError(DomainError):
    """Raised when a document cannot be rendered."""


class StorageError(DomainError):
    """Raised when a document cannot be written to object storage."""
