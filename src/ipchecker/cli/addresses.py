"""Command that shows which address the service would display."""

from typing import Annotated

import typer

from ipchecker.cli._helpers import console, err_console
from ipchecker.client_ip import resolve_client_address


def resolve(
    peer: Annotated[str, typer.Option("--peer", help="Transport peer address")] = "",
    forwarded_for: Annotated[
        str | None, typer.Option("--forwarded-for", "-f", help="X-Forwarded-For header value")
    ] = None,
    trusted_hops: Annotated[
        int, typer.Option("--trusted-hops", min=0, help="Proxies appending to X-Forwarded-For")
    ] = 0,
):
    """Resolve a client address from a peer address and X-Forwarded-For value."""
    if not peer and not forwarded_for:
        err_console.print("[red]Error:[/red] Provide --peer, --forwarded-for, or both")
        raise typer.Exit(code=1)

    address = resolve_client_address(peer, forwarded_for, trusted_hops)
    console.print(address, markup=False, highlight=False)
