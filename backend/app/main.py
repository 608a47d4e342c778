# backend/app/main.py
from contextlib import asynccontextmanager

from fastapi import FastAPI

from backend.app.api.routes import register_exception_handlers, router
from backend.app.core.config import Settings
from backend.app.core.logging_config import configure_logging
from backend.app.db.session import init_db, make_engine, make_session_factory
from backend.app.services.clients.clock_client import ClockClient
from backend.app.services.clients.weather_client import WeatherClient
from backend.app.services.diary_service import DiaryService
from backend.app.services.scheduler import DailyWeatherRefresher


def build_diary_service(settings: Settings) -> DiaryService:
    engine = make_engine(settings.database_url, echo=settings.sql_echo)
    init_db(engine)
    return DiaryService(
        session_factory=make_session_factory(engine),
        weather_client=WeatherClient(settings),
        clock_client=ClockClient(settings),
    )


def create_app(settings: Settings | None = None, diary_service: DiaryService | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    diary_service = diary_service or build_diary_service(settings)

    refresher = None
    if settings.scheduler_enabled:
        refresher = DailyWeatherRefresher(
            diary_service,
            hour=settings.weather_refresh_hour,
            minute=settings.weather_refresh_minute,
            timezone=settings.scheduler_timezone,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if refresher is not None:
            refresher.start()
        try:
            yield
        finally:
            if refresher is not None:
                refresher.stop()

    app = FastAPI(title="Weather Diary API", lifespan=lifespan)
    app.state.settings = settings
    app.state.diary_service = diary_service
    app.state.weather_refresher = refresher

    app.include_router(router)
    register_exception_handlers(app)

    @app.get("/")
    async def root():
        return {"message": "Welcome to Weather Diary API"}

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "message": "Weather Diary API is up and running!"}

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("backend.app.main:create_app", factory=True, host="0.0.0.0", port=8000)
