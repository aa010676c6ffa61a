"""Logfire setup and instrumentation.

Application code logs and traces through logfire directly::

    logfire.info("Comment created", comment_id=str(comment.id))

    with logfire.span("cascade_service.delete_comment", comment_id=str(comment_id)):
        ...

This module configures the logfire client once per process and attaches
the FastAPI and SQLAlchemy integrations.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from tube.config import ObservabilitySettings, Settings

SERVICE_NAME = "tube-comments"
SERVICE_VERSION = "0.1.0"

# Polled by load balancers; tracing them only adds noise
UNTRACED_URLS = "/health"


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Decide whether telemetry leaves the process.

    An explicit ``send_to_logfire`` wins; otherwise data is sent only when
    a token is configured.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure the logfire client.

    Set OBSERVABILITY__LOGFIRE_TOKEN to ship traces to Logfire cloud. Without
    it, output stays on the console.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send_to_logfire(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
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
        git_sha=settings.git_sha,
    )


def _request_attributes(request, attributes: dict) -> dict:
    """Attach method, path and client address to request spans."""
    extra = {"path": request.url.path}
    if getattr(request, "method", None):
        extra["method"] = request.method
    if request.client:
        extra["client_host"] = request.client.host
    return {**attributes, **extra}


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the app.

    Headers are not captured: they carry access tokens.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls=UNTRACED_URLS,
        request_attributes_mapper=_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Tag SQL with the current trace context
    )
    logfire.info("SQLAlchemy instrumented")
