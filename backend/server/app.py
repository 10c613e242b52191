"""
FastAPI app factory.

Responsibilities:
- Create and configure FastAPI app
- Attach per-app dependencies (config, event log) to app.state
- Register routes
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from config import AppConfig
from observability.logger import EventLog

from server.routes import register_routes


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    This is the app factory pattern that allows:
    - Testing with different configurations
    - Environment-specific setup
    - ASGI server compatibility
    """
    if config is None:
        config = AppConfig.load_from_env()

    app = FastAPI(title="MP3 Frame Counter API")

    app.state.config = config
    app.state.event_log = EventLog(enabled=config.enable_json_logs)

    # Routes
    register_routes(app)

    return app
