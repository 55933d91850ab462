import click

from posts_gateway.cli.api import api
from posts_gateway.cli.database import init_db


@click.group()
def main() -> None:
    ...


main.add_command(api)
main.add_command(init_db)
