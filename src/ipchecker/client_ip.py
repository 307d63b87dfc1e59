from starlette.requests import Request


def resolve_client_address(peer: str, forwarded_for: str | None, trusted_hops: int = 0) -> str:
    """Resolve the address to display for a request.

    With ``trusted_hops`` at 0 the first X-Forwarded-For entry wins. With N trusted
    proxies in front of the service, the entry appended by the outermost one is used.
    The result is advisory only and must never drive access control.
    """
    if not forwarded_for:
        return peer or ""

    entries = forwarded_for.split(",")
    if 0 < trusted_hops <= len(entries):
        return entries[-trusted_hops].strip()
    return entries[0].strip()


def get_peer_address(request: Request) -> str:
    if request.client and request.client.host:
        return request.client.host
    return ""


def get_client_ip(request: Request, trusted_hops: int = 0) -> str:
    """Get client IP address, checking X-Forwarded-For for proxied requests."""
    # Proxies may add separate header lines instead of appending to one
    forwarded_for = ", ".join(request.headers.getlist("X-Forwarded-For")) or None
    return resolve_client_address(
        get_peer_address(request),
        forwarded_for,
        trusted_hops,
    )
