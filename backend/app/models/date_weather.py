# backend/app/models/date_weather.py
from sqlalchemy import Column, Integer, String, Float, Date, DateTime
from sqlalchemy.sql import func
from backend.app.db.session import Base

NO_DATA = "NO DATA"


class DateWeather(Base):
    __tablename__ = "date_weather"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Date, nullable=False, index=True) # Repeated refreshes on one day create duplicates

    weather = Column(String(50), nullable=False) # weather[0].main from OpenWeather
    icon = Column(String(50), nullable=False) # weather[0].icon from OpenWeather
    temperature = Column(Float, nullable=False) # main.temp from OpenWeather

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    @classmethod
    def no_data(cls, date):
        """Placeholder for a past day nobody recorded weather for. Never persisted."""
        return cls(date=date, weather=NO_DATA, icon=NO_DATA, temperature=0.0)

    def __repr__(self):
        return (
            f"<DateWeather(id={self.id}, date={self.date}, "
            f"weather='{self.weather}', icon='{self.icon}', temp={self.temperature})>"
        )
