import asyncio

import click
import structlog

from posts_gateway.application import di
from posts_gateway.application.di import Container
from posts_gateway.data.postgres.database import create_tables

logger = structlog.get_logger()


@click.command("init-db")
def init_db() -> None:
    """Create the posts table when running against the postgres backend."""
    container = di.init()

    if (backend := container.settings.app().storage_backend) != "postgres":
        raise click.ClickException(
            f"Tables are managed by the data store for the {backend!r} backend"
        )

    asyncio.run(run(container))
    click.echo("Posts table is ready")


async def run(container: Container) -> None:
    engine = container.database.engine()
    try:
        await create_tables(engine)
        logger.info("Created tables", backend="postgres")
    finally:
        await engine.dispose()
