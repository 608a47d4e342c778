# backend/app/db/session.py
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

# Base class for declarative models
# All SQLAlchemy models will inherit from this Base
Base = declarative_base()


def make_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create the SQLAlchemy engine.
    echo=True will log all SQL queries, useful for debugging.
    """
    kwargs = {"echo": echo}
    if database_url.startswith("sqlite"):
        # Requests are served from a threadpool and the refresher has its own thread
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite+pysqlite://"):
            # One shared connection, otherwise every checkout sees an empty database
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def make_session_factory(engine: Engine) -> sessionmaker:
    # autoflush=False means objects are not automatically flushed to the database
    # expire_on_commit=False keeps returned rows readable after the session closes
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    # Importing the models registers their tables on Base.metadata
    from backend.app.models import date_weather, diary, memo  # noqa: F401

    Base.metadata.create_all(engine)
