"""Custom exception classes for the query composer."""


class QueryComposerException(Exception):
    """Base exception for query composer errors."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ConfigurationError(QueryComposerException):
    """Raised when a filter, sort or composer is configured incorrectly."""

    def __init__(self, message: str, setting: str | None = None):
        super().__init__(message, status_code=500)
        self.setting = setting


class UnknownColumnError(QueryComposerException):
    """Raised when a query references a column the statement does not select."""

    def __init__(self, column: str, available: list[str] | None = None):
        message = f"Column '{column}' is not selected by the query"
        if available:
            message += f" (available: {', '.join(available)})"
        super().__init__(message, status_code=400)
        self.column = column
        self.available = available or []
