"""uvicorn server wiring for the IP Checker app."""

import logging

import uvicorn

from ipchecker.config import Settings, get_settings
from ipchecker.main import create_app

log = logging.getLogger(__name__)


class Server(uvicorn.Server):
    """uvicorn server that announces the active port once the socket is bound."""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        # uvicorn exits on bind failure, so started is only set after a successful bind
        if self.started:
            log.info(f"App running on port {self.config.port}")


def build_server(settings: Settings | None = None) -> Server:
    """Return a server handle for the app; call ``run()`` on it to start listening."""
    settings = settings or get_settings()
    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
    return Server(config)
