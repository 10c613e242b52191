"""
Development entry point.

Runs the API under uvicorn with the host/port from AppConfig.
"""

from __future__ import annotations

import uvicorn
from dotenv import load_dotenv

from config import AppConfig


def main() -> None:
    """Load .env, read config and serve the ASGI app."""
    load_dotenv()
    config = AppConfig.load_from_env()

    uvicorn.run(
        "server.asgi:app",
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        reload=config.env == "dev",
    )


if __name__ == "__main__":
    main()
