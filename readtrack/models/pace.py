from datetime import date

from pydantic import BaseModel, Field

from readtrack.models.enums import CalculationMethod, StatusColor, StatusLevel


class ReadingDay(BaseModel):
    date: date
    pages_read: float  # signed; corrections produce negative days


class ListeningDay(BaseModel):
    date: date
    minutes_listened: float


class UserPaceData(BaseModel):
    average_pace: float  # page-equivalents per day
    reading_days_count: int = Field(ge=0)
    is_reliable: bool
    calculation_method: CalculationMethod


class UserListeningPaceData(BaseModel):
    average_pace: float  # minutes per day
    listening_days_count: int = Field(ge=0)
    is_reliable: bool
    calculation_method: CalculationMethod


class PaceBasedStatus(BaseModel):
    color: StatusColor
    level: StatusLevel
    message: str


class DeadlineCalculations(BaseModel):
    current_progress: int
    total_quantity: int
    remaining: int
    progress_percentage: int
    days_left: int
    units_per_day: int
    required_pace: float
    unit: str
    status: PaceBasedStatus
    status_message: str
