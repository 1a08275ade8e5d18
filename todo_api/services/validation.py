"""Request-shape checks run before the lifecycle service is called."""

from typing import Optional

from ..exceptions import ValidationError
from ..models import TITLE_MAX_LENGTH
from ..schemas.task import CreateTaskRequest, UpdateTaskRequest

TITLE_EMPTY = "Title cannot be empty."
TITLE_TOO_LONG = f"Title cannot exceed {TITLE_MAX_LENGTH} characters."
ID_REQUIRED = "Id is required."
UPDATE_NEEDS_FIELD = "At least one field (title or isCompleted) must be provided for update."


def validate_title(title: Optional[str]) -> None:
    trimmed = (title or "").strip()
    if not trimmed:
        raise ValidationError.for_field("title", TITLE_EMPTY)
    if len(trimmed) > TITLE_MAX_LENGTH:
        raise ValidationError.for_field("title", TITLE_TOO_LONG)


def validate_create_request(request: CreateTaskRequest) -> None:
    validate_title(request.title)


def validate_update_request(request: UpdateTaskRequest) -> None:
    if request.id is None:
        raise ValidationError.for_field("id", ID_REQUIRED)
    if request.title is not None:
        validate_title(request.title)
    elif request.is_completed is None:
        raise ValidationError.for_field("request", UPDATE_NEEDS_FIELD)
