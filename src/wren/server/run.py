"""Serve a live wren App with pounce.

Pounce's ``run()`` takes an import string (e.g. ``"myapp:app"``), but
wren has a live ``App`` object, so ``pounce.Server`` is used directly
with the ASGI callable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wren.app import App


def run_server(app: App, host: str, port: int) -> None:
    """Start pounce with settings taken from ``app.config``.

    Debug mode runs a single reloading worker; otherwise ``config.workers``
    threads share the app (and with it the store and counter locks).
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = app.config
    server_config = ServerConfig(
        host=host,
        port=port,
        workers=1 if config.debug else config.workers,
        reload=config.debug,
        reload_dirs=config.reload_dirs,
        lifecycle_logging=config.lifecycle_logging,
        log_format=config.log_format,
        log_level=config.log_level,
    )
    Server(server_config, app).run()
