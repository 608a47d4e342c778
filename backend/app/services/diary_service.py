# backend/app/services/diary_service.py
import datetime
import logging

from sqlalchemy import delete, select
from sqlalchemy.orm import Session, sessionmaker

from backend.app.core.errors import InvalidDate
from backend.app.models.date_weather import DateWeather
from backend.app.models.diary import Diary
from backend.app.services.clients.clock_client import ClockClient
from backend.app.services.clients.weather_client import WeatherClient

logger = logging.getLogger(__name__)

MINIMUM_DATE = datetime.date(1900, 1, 1)


class DiaryService:
    """
    Diary create/read/update/delete plus the daily weather refresh.

    Every operation checks the date against [1900-01-01, today] first,
    where "today" is asked from the clock API on each call.
    """

    def __init__(self, session_factory: sessionmaker, weather_client: WeatherClient, clock_client: ClockClient):
        self.session_factory = session_factory
        self.weather_client = weather_client
        self.clock_client = clock_client

    # --- Scheduled ---

    def save_weather_snapshot(self) -> DateWeather:
        """Fetches live weather and stores it for today. Does not dedupe."""
        current_date = self.clock_client.current_date()
        reading = self.weather_client.fetch_weather()
        with self.session_factory() as session, session.begin():
            snapshot = DateWeather(date=current_date, **reading.model_dump())
            session.add(snapshot)
        logger.info("Stored weather snapshot for %s: %s", current_date, snapshot.weather)
        return snapshot

    # --- Diary operations ---

    def create_diary(self, date: datetime.date, text: str) -> Diary:
        logger.info("Writing diary entry for %s", date)
        current_date = self.validate_date(date)

        with self.session_factory() as session, session.begin():
            session.connection(execution_options={"isolation_level": "SERIALIZABLE"})
            snapshot = self._resolve_weather(session, date, current_date)

            diary = Diary(date=date, text=text)
            diary.apply_weather(snapshot)
            session.add(diary)

        logger.info("Diary entry %s for %s written", diary.id, date)
        return diary

    def read_diary(self, date: datetime.date) -> list[Diary]:
        logger.info("Reading all diary entries for %s", date)
        self.validate_date(date)
        with self.session_factory() as session:
            stmt = select(Diary).where(Diary.date == date).order_by(Diary.id)
            return list(session.scalars(stmt).all())

    def read_diaries(self, start_date: datetime.date, end_date: datetime.date) -> list[Diary]:
        logger.info("Reading all diary entries from %s to %s", start_date, end_date)
        self.validate_date(start_date)
        self.validate_date(end_date)
        with self.session_factory() as session:
            stmt = (
                select(Diary)
                .where(Diary.date.between(start_date, end_date))
                .order_by(Diary.id)
            )
            return list(session.scalars(stmt).all())

    def update_diary(self, date: datetime.date, text: str) -> bool:
        """
        Replaces the text of the first entry written for the date.
        Returns False (and changes nothing) when the date has no entries.
        """
        logger.info("Updating the first diary entry for %s", date)
        self.validate_date(date)
        with self.session_factory() as session, session.begin():
            diary = self._first_diary(session, date)
            if diary is None:
                logger.info("No diary entry written on %s, nothing to update", date)
                return False
            diary.text = text
        logger.info("Diary entry %s updated", diary.id)
        return True

    def delete_diary(self, date: datetime.date) -> int:
        logger.info("Deleting all diary entries for %s", date)
        self.validate_date(date)
        with self.session_factory() as session, session.begin():
            result = session.execute(delete(Diary).where(Diary.date == date))
        logger.info("Deleted %d diary entries for %s", result.rowcount, date)
        return result.rowcount

    # --- Validation ---

    def validate_date(self, date: datetime.date) -> datetime.date:
        """Raises InvalidDate outside [1900-01-01, today]. Returns today."""
        if date < MINIMUM_DATE:
            logger.error("Diary dates before %s are not allowed (got %s)", MINIMUM_DATE, date)
            raise InvalidDate(f"Date {date} is before {MINIMUM_DATE}")

        current_date = self.clock_client.current_date()
        if date > current_date:
            logger.error("Diary date %s is after the current date %s", date, current_date)
            raise InvalidDate(f"Date {date} is after the current date {current_date}")
        return current_date

    # --- Helpers ---

    def _resolve_weather(self, session: Session, date: datetime.date, current_date: datetime.date) -> DateWeather:
        stmt = select(DateWeather).where(DateWeather.date == date).order_by(DateWeather.id).limit(1)
        cached = session.scalars(stmt).first()
        if cached is not None:
            return cached

        if date == current_date:
            # Nothing cached for today yet, fetch it now and keep it
            reading = self.weather_client.fetch_weather()
            snapshot = DateWeather(date=date, **reading.model_dump())
            session.add(snapshot)
            return snapshot

        logger.info("No weather stored for %s, using placeholder", date)
        return DateWeather.no_data(date)

    @staticmethod
    def _first_diary(session: Session, date: datetime.date) -> Diary | None:
        stmt = select(Diary).where(Diary.date == date).order_by(Diary.id).limit(1)
        return session.scalars(stmt).first()
