"""Domain-specific exceptions: framework-independent."""


class ValidationError(Exception):
    """Raised when caller input is missing or malformed.

    Always raised before any persistence call is made.
    """

    def __init__(self, message: str | list[str]):
        if isinstance(message, list):
            message = ", ".join(message)
        self.message = message
        super().__init__(message)


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class PersistenceError(Exception):
    """Raised when the backing store is unreachable or returns malformed data.

    Store-agnostic: raised by the in-memory and SQL stores alike.
    """

    def __init__(self, operation: str, table: str, message: str):
        self.operation = operation
        self.table = table
        self.message = message
        super().__init__(f"[{table}] {operation} failed: {message}")
