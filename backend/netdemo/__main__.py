"""
NetDemo — Command-Line Entry Point
====================================

Usage:
    python -m netdemo            # listens on SERVER_HOST:SERVER_PORT (0.0.0.0:8080)
    SERVER_PORT=9000 netdemo     # console script installed by pyproject.toml

If the port cannot be bound, uvicorn logs the OS error and exits the process
with status 1. There is no retry.
"""

import uvicorn

from netdemo.config import settings


def main() -> None:
    """Serve netdemo.main:app with uvicorn until interrupted."""
    uvicorn.run(
        "netdemo.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
