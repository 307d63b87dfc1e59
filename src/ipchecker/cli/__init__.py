"""IP Checker CLI - run the service and inspect address resolution."""

import typer

from ipchecker.cli.addresses import resolve
from ipchecker.cli.service import serve

app = typer.Typer(
    name="ipchecker",
    help="IP Checker CLI - run the service and inspect address resolution.",
    no_args_is_help=True,
)

app.command("serve")(serve)
app.command("resolve")(resolve)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
