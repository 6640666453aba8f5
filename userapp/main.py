"""
Process entry point
===================

Loads configuration, wires the DI container, then serves the FastAPI app
with uvicorn until a shutdown signal arrives.

Exit codes: 0 on normal shutdown, 1 on startup failure, 2 on usage errors.
"""
import logging
import sys
from typing import Optional, Sequence

import click
import uvicorn

from userapp.core.config import LOG_LEVELS, get_settings
from userapp.core.exceptions import StartupFailure
from userapp.core.logging_config import configure_logging
from userapp.di.container import build_container, shutdown_container
from userapp.server import create_application

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_STARTUP_FAILURE = 1


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option('--host', default=None, help='Host to bind to (default: APP_HOST)')
@click.option('--port', type=int, default=None, help='Port to listen on (default: APP_PORT)')
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False), default=None,
              help='Log level (default: LOG_LEVEL)')
@click.option('--env-file', type=click.Path(dir_okay=False), default=None, help='Path to a .env file')
def serve(host, port, log_level, env_file):
    """Run the user service"""
    configure_logging(log_level or "INFO")

    try:
        settings = get_settings(env_file)
        if log_level is None:
            configure_logging(settings.log_level)
        container = build_container(settings)
    except StartupFailure as e:
        logger.error("Startup failed: %s", e, exc_info=logger.isEnabledFor(logging.DEBUG))
        click.echo(f"Startup failed: {e}", err=True)
        return EXIT_STARTUP_FAILURE

    try:
        application = create_application(container)
        uvicorn.run(
            application,
            host=host if host is not None else settings.host,
            port=port if port is not None else settings.port,
            log_level=(log_level or settings.log_level).lower(),
        )
    finally:
        shutdown_container()

    logger.info("%s stopped", settings.app_name)
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Start the service and block until it stops.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    try:
        return serve.main(
            args=list(argv) if argv is not None else None,
            prog_name="userapp",
            standalone_mode=False,
        )
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return EXIT_STARTUP_FAILURE


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
