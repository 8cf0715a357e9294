#!/usr/bin/env python3
"""
Main CLI entry point for the dogql server.
"""

import os
import sys

import click
import uvicorn
from uvicorn.supervisors import ChangeReload

from dogql import __version__
from dogql.config import Settings
from dogql.logging import configure_logging, get_logger
from dogql.server import DogqlServer

logger = get_logger(__name__)

APP_IMPORT_STRING = "dogql.api.app:app"


def from_settings(name: str):
    """Option default read from DOGQL_* variables and .env when the command runs."""
    return lambda: getattr(Settings(), name)


@click.group()
@click.version_option(version=__version__, prog_name="dogql")
def cli() -> None:
    """dogql CLI - run the GraphQL server and inspect its schema."""
    pass


@cli.command()
@click.option(
    "--host",
    default=from_settings("api_host"),
    show_default="DOGQL_API_HOST or 0.0.0.0",
    help="Host to bind to",
)
@click.option(
    "--port",
    default=from_settings("api_port"),
    type=int,
    show_default="DOGQL_API_PORT or 4000",
    help="Port to bind to",
)
@click.option(
    "--reload",
    is_flag=True,
    flag_value=True,
    default=from_settings("api_reload"),
    help="Enable auto-reload for development (DOGQL_API_RELOAD)",
)
@click.option(
    "--log-level",
    default=lambda: Settings().log_level.lower(),
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    show_default="DOGQL_LOG_LEVEL or info",
    help="Log level",
)
def serve(host: str, port: int, reload: bool, log_level: str) -> None:
    """Start the dogql API server."""
    log_level = log_level.lower()
    configure_logging(debug=(log_level == "debug"))

    logger.info(
        "Starting dogql API server",
        host=host,
        port=port,
        reload=reload,
        log_level=log_level,
    )

    # A reloaded worker re-imports the app and reads these from the environment
    if log_level == "debug":
        os.environ["DOGQL_DEBUG"] = "true"
        os.environ["DOGQL_LOG_LEVEL"] = "debug"
    else:
        os.environ.setdefault("DOGQL_DEBUG", "false")
        os.environ.setdefault("DOGQL_LOG_LEVEL", log_level)

    try:
        if reload:
            config = uvicorn.Config(
                APP_IMPORT_STRING,
                host=host,
                port=port,
                reload=True,
                log_level=log_level,
                access_log=True,
            )
            server = DogqlServer(config)
            sock = config.bind_socket()
            ChangeReload(config, target=server.run, sockets=[sock]).run()
        else:
            from dogql.api.app import create_app

            # Importing the app module configures logging from the environment defaults
            configure_logging(debug=(log_level == "debug"))
            app = create_app(Settings())

            config = uvicorn.Config(
                app,
                host=host,
                port=port,
                log_level=log_level,
                access_log=True,
            )
            DogqlServer(config).run()
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user")
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        sys.exit(1)


@cli.command()
def schema() -> None:
    """Print the GraphQL schema in SDL form."""
    from dogql.graphql.schema import print_schema

    click.echo(print_schema())


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
