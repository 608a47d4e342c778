# backend/app/schemas/diary.py
import datetime
from pydantic import BaseModel, ConfigDict


class DiaryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    date: datetime.date
    weather: str
    icon: str
    temperature: float
    text: str
