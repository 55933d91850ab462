from collections.abc import AsyncIterator, Callable, Iterator

import pytest
import pytest_asyncio
import sqlalchemy as sa
import structlog
from fastapi import FastAPI
from sqlalchemy import URL, NullPool, make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy_utils import create_database, database_exists, drop_database

from posts_gateway.application import di
from posts_gateway.application.di import Container
from posts_gateway.application.settings import ApplicationSettings
from posts_gateway.data.postgres.database import PostgresSettings
from posts_gateway.data.postgres.models import metadata
from posts_gateway.fastapi import entrypoint as api_entrypoint
from tests.pytest_fixtures.db import postgres_is_reachable

logger = structlog.get_logger()

pytest_plugins = [
    "tests.pytest_fixtures.api",
    "tests.pytest_fixtures.db",
    "tests.pytest_fixtures.supabase",
]


@pytest.fixture(scope="session")
def db_settings() -> PostgresSettings:
    return PostgresSettings()


@pytest.fixture(scope="session")
def db_dsn(db_settings: PostgresSettings) -> URL:
    actual_dsn = make_url(str(db_settings.dsn))
    return actual_dsn.set(database=f"{actual_dsn.database}_test")


@pytest.fixture(scope="session")
def _setup_db(db_dsn: URL) -> Iterator[None]:
    sync_dsn = db_dsn.set(drivername="postgresql+psycopg")

    # database_exists() reports an unreachable server as a missing database
    if not postgres_is_reachable(sync_dsn):
        pytest.skip(f"postgres is not reachable at {sync_dsn.host}:{sync_dsn.port}")

    if database_exists(sync_dsn):
        logger.info("dropping test database", dsn=sync_dsn)
        drop_database(sync_dsn)

    logger.info("creating test database", dsn=sync_dsn)
    create_database(sync_dsn)

    sync_engine = sa.create_engine(sync_dsn, poolclass=NullPool)
    logger.info("creating tables in the test database", dsn=sync_dsn)
    metadata.create_all(sync_engine, checkfirst=False)
    sync_engine.dispose()

    yield

    logger.info("dropping test database", dsn=sync_dsn)
    drop_database(sync_dsn)


@pytest.fixture(scope="session")
def db_engine(_setup_db: None, db_dsn: URL) -> Iterator[AsyncEngine]:
    # connections are never shared, so the engine can be used from any event loop
    engine = create_async_engine(db_dsn, poolclass=NullPool)
    yield engine
    engine.sync_engine.dispose()


@pytest.fixture()
def clear_db(db_engine: AsyncEngine) -> Callable:
    async def clearer() -> None:
        async with db_engine.begin() as conn:
            for table in reversed(metadata.sorted_tables):
                await conn.execute(table.delete())

    return clearer


@pytest_asyncio.fixture()
async def db(db_engine: AsyncEngine, clear_db: Callable) -> AsyncIterator[AsyncEngine]:
    yield db_engine
    await clear_db()


@pytest.fixture(scope="session")
def container() -> Container:
    return di.init()


@pytest.fixture()
def app_settings_factory(container: Container) -> Callable[..., ApplicationSettings]:
    def factory(**overrides: object) -> ApplicationSettings:
        return ApplicationSettings(
            **{
                **container.settings.app().model_dump(exclude=set(overrides)),
                **overrides,
            }
        )

    return factory


@pytest.fixture()
def development_mode(
    container: Container,
    app_settings_factory: Callable[..., ApplicationSettings],
) -> Iterator[None]:
    with container.settings.app.override(app_settings_factory(environment="development")):
        yield


@pytest.fixture()
def postgres_database(
    container: Container,
    db: AsyncEngine,
    app_settings_factory: Callable[..., ApplicationSettings],
) -> Iterator[AsyncEngine]:
    app_settings = app_settings_factory(storage_backend="postgres")

    with container.settings.app.override(app_settings), container.database.engine.override(db):
        container.reset_singletons()
        yield db

    container.reset_singletons()


@pytest.fixture()
def fastapi_app(container: Container) -> Iterator[FastAPI]:
    app = api_entrypoint.init(container)
    yield app
    app.dependency_overrides.clear()
