from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Task(BaseModel):
    id: str
    text: str
    completed: bool
    created_at: datetime = Field(alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)


def validate_task_text(value: str) -> str:
    text = value.strip()
    if not text:
        raise ValueError("'text' must not be empty")
    return text


class CreateTaskRequest(BaseModel):
    text: str

    @field_validator("text")
    def validate_text(cls, value: str):
        return validate_task_text(value)


class UpdateTaskRequest(BaseModel):
    text: str

    @field_validator("text")
    def validate_text(cls, value: str):
        return validate_task_text(value)
