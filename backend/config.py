"""
Application configuration.

Responsibilities:
- Load deployment-specific configuration
- Read environment variables
- Provide a typed, immutable config object

Non-responsibilities:
- No parsing logic
- No format constants
- No runtime mutation
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from constants import MAX_UPLOAD_BYTES_DEFAULT


@dataclass(frozen=True)
class AppConfig:
    """
    Immutable application configuration.

    Constructed once at process startup.
    Stored on app.state and read by the route handlers.
    """

    # ------------------------------------------------------------------
    # Environment
    # ------------------------------------------------------------------

    env: str = "dev"
    log_level: str = "INFO"

    # ------------------------------------------------------------------
    # Observability
    # ------------------------------------------------------------------

    enable_json_logs: bool = True

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------

    host: str = "0.0.0.0"
    port: int = 3000
    max_upload_bytes: int = MAX_UPLOAD_BYTES_DEFAULT

    # ------------------------------------------------------------------
    # Factory
    # ------------------------------------------------------------------

    @staticmethod
    def load_from_env() -> AppConfig:
        """
        Load configuration from environment variables.

        Raises:
            ValueError if PORT or MAX_UPLOAD_BYTES is not an integer.
        """
        return AppConfig(
            env=os.environ.get("ENV", "dev"),
            log_level=os.environ.get("LOG_LEVEL", "INFO"),

            enable_json_logs=os.environ.get("ENABLE_JSON_LOGS", "1") == "1",

            host=os.environ.get("HOST", "0.0.0.0"),
            port=int(os.environ.get("PORT", "3000")),
            max_upload_bytes=int(
                os.environ.get("MAX_UPLOAD_BYTES", str(MAX_UPLOAD_BYTES_DEFAULT))
            ),
        )
