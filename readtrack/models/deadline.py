from datetime import UTC, datetime

from pydantic import BaseModel, Field, field_validator

from readtrack.models.enums import BookFormat, DeadlineStatus, Flexibility


class ProgressSnapshot(BaseModel):
    id: str
    current_progress: int = Field(ge=0)
    # Kept as the raw ISO string; the engine skips entries it cannot parse.
    created_at: str | None = None


class DeadlineStatusEntry(BaseModel):
    id: str
    status: DeadlineStatus
    created_at: str | None = None


class Deadline(BaseModel):
    id: str
    user_id: str | None = None
    book_title: str = ""
    author: str | None = None
    format: BookFormat
    source: str = "personal"
    flexibility: Flexibility = Flexibility.FLEXIBLE
    total_quantity: int = Field(gt=0)  # pages, or minutes for audio
    deadline_date: str
    created_at: str = Field(default_factory=lambda: datetime.now(UTC).isoformat())
    updated_at: str | None = None
    progress: list[ProgressSnapshot] = Field(default_factory=list)
    status: list[DeadlineStatusEntry] = Field(default_factory=list)

    @field_validator("progress", "status", mode="before")
    @classmethod
    def _none_is_empty(cls, value):
        return [] if value is None else value
