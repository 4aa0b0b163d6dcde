"""Logfire setup for the API process.

Domain code logs through ``logfire`` directly (spans around service
operations, ``info``/``warn``/``error`` for outcomes). This module only
configures the SDK and instruments the framework and the database engine.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from lounge.config import Settings

# Route parameters worth attaching to request spans
_TRACED_PARAMS = ("post_id", "comment_id", "limit")


def _should_send(settings: Settings) -> bool:
    # Explicit setting wins, otherwise send only when a token is configured
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is imported.

    Without ``OBSERVABILITY__LOGFIRE_TOKEN`` everything stays on the local
    console. ``OBSERVABILITY__SEND_TO_LOGFIRE`` overrides that default.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name="lounge-api",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        max_comment_depth=settings.comments.max_depth,
        comment_schema_shape=settings.comments.schema_shape,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Keep route identifiers and validation errors; drop bodies and injected objects."""
    values = attributes.get("values") or {}
    mapped: dict[str, Any] = {
        "values": {k: str(values[k]) for k in _TRACED_PARAMS if k in values},
    }
    if attributes.get("errors"):
        mapped["errors"] = attributes["errors"]
    return mapped


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health checks.

    Headers are not captured since ``Authorization`` carries bearer tokens.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
        excluded_urls="/health",
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace statements issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
    logfire.info("SQLAlchemy instrumented", dialect=engine.dialect.name)
