from pydantic import BaseModel, Field


class CalendarDay(BaseModel):
    date: str
    count: int
    level: int = Field(ge=0, le=4)  # 0 = no activity, 4 = max activity


class WeekActivity(BaseModel):
    week: int
    percentage: int
