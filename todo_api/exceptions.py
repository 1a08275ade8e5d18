from typing import Dict, List, Union

VALIDATION_FAILED = "Property validation failed."


class ValidationError(Exception):
    """Request input was rejected; carries ``{field: [messages]}``."""

    def __init__(self, message: str, errors: Dict[str, List[str]]):
        super().__init__(message)
        self.message = message
        self.errors = errors

    @classmethod
    def for_field(cls, field: str, error: str, message: str = VALIDATION_FAILED) -> "ValidationError":
        return cls(message, {field: [error]})


class NotFoundError(Exception):
    """The requested record does not exist."""

    def __init__(self, resource: str, resource_id: Union[int, str]):
        self.resource = resource
        self.resource_id = resource_id
        self.message = f"{resource} with ID {resource_id} was not found."
        super().__init__(self.message)
