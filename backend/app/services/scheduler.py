# backend/app/services/scheduler.py
import datetime
import logging
import threading

import pytz

logger = logging.getLogger(__name__)


def next_run_after(now: datetime.datetime, hour: int, minute: int) -> datetime.datetime:
    """The first wall-clock hour:minute strictly after now, in now's timezone."""
    tz = now.tzinfo
    naive_now = now.replace(tzinfo=None)
    candidate = naive_now.replace(hour=hour, minute=minute, second=0, microsecond=0)
    if candidate <= naive_now:
        candidate += datetime.timedelta(days=1)
    if tz is None:
        return candidate
    # Localize after the day arithmetic so the offset is the target day's
    zone = pytz.timezone(tz.zone) if hasattr(tz, "zone") else None
    if zone is not None:
        return zone.localize(candidate)
    return candidate.replace(tzinfo=tz)


class DailyWeatherRefresher:
    """
    Background thread that stores today's weather once a day at a fixed
    time of day. Started and stopped by the application lifespan.
    """

    def __init__(self, diary_service, hour: int = 1, minute: int = 0, timezone: str = "Asia/Seoul"):
        self.diary_service = diary_service
        self.hour = hour
        self.minute = minute
        self.timezone = pytz.timezone(timezone)
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._loop, name="weather-refresher", daemon=True)
        self._thread.start()
        logger.info(
            "Weather refresher started, runs daily at %02d:%02d %s",
            self.hour, self.minute, self.timezone.zone,
        )

    def stop(self, timeout: float = 5.0) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        logger.info("Weather refresher stopped")

    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def run_once(self) -> bool:
        """Runs one refresh. Returns True on success; failures are logged, not raised."""
        try:
            self.diary_service.save_weather_snapshot()
            return True
        except Exception:
            logger.exception("Scheduled weather refresh failed")
            return False

    def _seconds_until_next_run(self) -> float:
        now = datetime.datetime.now(self.timezone)
        return (next_run_after(now, self.hour, self.minute) - now).total_seconds()

    def _loop(self) -> None:
        while not self._stop_event.is_set():
            wait = self._seconds_until_next_run()
            logger.debug("Next weather refresh in %.0fs", wait)
            # wait() returns True when stop() was called
            if self._stop_event.wait(wait):
                break
            self.run_once()
