"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ValidationError(Exception):
    """Raised when request input is malformed or incomplete.

    Always raised before any transaction is opened.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class AuthorizationError(Exception):
    """Raised when the acting identity lacks the required privilege."""

    def __init__(self, message: str = "Unauthorized - Admin access required"):
        self.message = message
        super().__init__(message)


class TransactionError(Exception):
    """Raised when the transactional phase of a write fails.

    The transaction has already been rolled back when this is raised.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class CacheError(Exception):
    """Raised by key/value store adapters when the backing store fails.

    Callers in the application layer log and discard it (fail-open).
    """

    def __init__(self, operation: str, key: str, reason: str):
        self.operation = operation
        self.key = key
        self.reason = reason
        super().__init__(f"{operation} '{key}' failed: {reason}")
