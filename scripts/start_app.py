#!/usr/bin/env python3
"""Start the Lounge API with Logfire error tracking for startup errors."""

import sys
import logfire
import uvicorn

from lounge.config import Settings
from lounge.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)

    try:
        settings.assert_deployable()
        logfire.info(
            "Starting Lounge API",
            environment=settings.environment,
            schema_shape=settings.comments.schema_shape,
            max_comment_depth=settings.comments.max_depth,
        )

        # The schema probe runs in the app lifespan, before the first request
        uvicorn.run(
            "lounge.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
