"""Command that runs the HTTP service."""

from typing import Annotated

import typer
from pydantic import ValidationError

from ipchecker.cli._helpers import print_validation_error
from ipchecker.config import Settings
from ipchecker.logging_config import setup_logging
from ipchecker.server import build_server


def serve(
    host: Annotated[
        str | None, typer.Option("--host", help="Bind address (default: HOST or 0.0.0.0)")
    ] = None,
    port: Annotated[
        int | None, typer.Option("--port", "-p", help="Listening port (default: PORT or 3000)")
    ] = None,
    trusted_hops: Annotated[
        int | None,
        typer.Option("--trusted-hops", help="Proxies appending to X-Forwarded-For"),
    ] = None,
):
    """Run the IP Checker HTTP service."""
    overrides = {
        key: value
        for key, value in {"host": host, "port": port, "trusted_hops": trusted_hops}.items()
        if value is not None
    }
    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        print_validation_error(e)
        raise typer.Exit(code=1) from e

    setup_logging(settings.log_level)
    build_server(settings).run()
