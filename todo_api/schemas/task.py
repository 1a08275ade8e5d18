from pydantic import BaseModel, Field, StrictBool, StrictInt, StrictStr, field_serializer
from datetime import datetime, timezone
from typing import Dict, List, Optional


def to_utc_iso(value: Optional[datetime]) -> Optional[str]:
    """ISO-8601 string with an explicit UTC offset."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


class CreateTaskRequest(BaseModel):
    """Schema for creating new tasks."""
    title: Optional[StrictStr] = None


class UpdateTaskRequest(BaseModel):
    """Schema for a partial task update; ``id`` travels in the body."""
    id: Optional[StrictInt] = None
    title: Optional[StrictStr] = None
    is_completed: Optional[StrictBool] = Field(default=None, alias="isCompleted")

    class Config:
        populate_by_name = True


class TaskResponse(BaseModel):
    """Task as it goes over the wire (camelCase, ``completedAt`` only when set)."""
    id: int
    title: str
    is_completed: bool = Field(alias="isCompleted")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")
    completed_at: Optional[datetime] = Field(default=None, alias="completedAt")

    class Config:
        from_attributes = True
        populate_by_name = True

    @field_serializer("created_at", "updated_at", "completed_at")
    def _serialize_timestamp(self, value: Optional[datetime]) -> Optional[str]:
        return to_utc_iso(value)


class ErrorInfo(BaseModel):
    code: str
    message: str
    details: Optional[Dict[str, List[str]]] = None


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""
    error: ErrorInfo
