import click
import uvicorn


@click.command(context_settings={"auto_envvar_prefix": "API"})
@click.option(
    "--host",
    default="0.0.0.0",  # noqa: S104
    help="Host to run API server on",
)
@click.option(
    "--port",
    default=5000,
    type=click.INT,
    envvar=["API_PORT", "PORT"],
    help="Port to run API server on",
)
@click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error", "critical"]),
)
@click.option(
    "--reload",
    default=False,
    is_flag=True,
    help="Instruct uvicorn to reload on code changes",
)
def api(
    host: str,
    port: int,
    log_level: str,
    reload: bool,  # noqa: FBT001
) -> None:
    click.echo(f"Running API server on {host}:{port} with logging level={log_level}")

    uvicorn.run(
        "posts_gateway.fastapi.entrypoint:get_asgi_app",
        factory=True,
        host=host,
        port=port,
        log_level=log_level,
        reload=reload,
        # exit right away on SIGINT/SIGTERM instead of waiting for open requests
        timeout_graceful_shutdown=0,
    )
