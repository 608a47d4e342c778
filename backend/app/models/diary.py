# backend/app/models/diary.py
from sqlalchemy import Column, Integer, String, Float, Date, DateTime, Text
from sqlalchemy.sql import func
from backend.app.db.session import Base


class Diary(Base):
    __tablename__ = "diary"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, nullable=False, index=True) # Not unique, a day can hold many entries

    # Copied from the weather snapshot when the entry is written, never refreshed
    weather = Column(String(50), nullable=False) # E.g., 'Clouds', 'Rain' or 'NO DATA'
    icon = Column(String(50), nullable=False) # OpenWeather icon code, e.g. '04d'
    temperature = Column(Float, nullable=False)

    text = Column(Text, nullable=False)

    # Insert time, set by the database
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def apply_weather(self, snapshot):
        self.weather = snapshot.weather
        self.icon = snapshot.icon
        self.temperature = snapshot.temperature

    def __repr__(self):
        return (
            f"<Diary(id={self.id}, date={self.date}, "
            f"weather='{self.weather}', temp={self.temperature})>"
        )
