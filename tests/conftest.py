"""Pytest fixtures for model finder tests."""

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from model_finder import EntityFinder, FinderConfig, MemoryCacheStore, SoleModelFinder
from tests.models import Base, Person


class FakeClock:
    """Controllable time source for TTL tests."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine)


@pytest.fixture()
def add_rows(session_factory):
    """Insert model instances and commit."""

    def _add(*rows):
        with session_factory() as session:
            session.add_all(rows)
            session.commit()

    return _add


@pytest.fixture()
def select_log(engine):
    """Record every SELECT sent to the database."""
    statements: list[str] = []

    @event.listens_for(engine, "before_cursor_execute")
    def _record(conn, cursor, statement, parameters, context, executemany):
        if statement.lstrip().upper().startswith("SELECT"):
            statements.append(statement)

    yield statements
    event.remove(engine, "before_cursor_execute", _record)


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def store(clock):
    return MemoryCacheStore(clock=clock)


@pytest.fixture()
def person_config():
    return FinderConfig(model=Person, columns=["name", "email"], global_tag="model-finder")


@pytest.fixture()
def person_finder(person_config, store, session_factory):
    return SoleModelFinder(
        config=person_config,
        store=store,
        entity_finder=EntityFinder(session_factory),
        cache_fallback=False,
    )
