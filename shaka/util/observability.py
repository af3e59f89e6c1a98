"""Logfire setup for the comment thread tools.

Application code logs straight through logfire:

    logfire.info("Comment created", comment_id=comment.id, post_id=comment.post_id)

    with logfire.span("comment_service.toggle_like", comment_id=comment.id):
        ...
"""

import logfire

from shaka.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire.

    Telemetry is sent to Logfire cloud when ``OBSERVABILITY__SEND_TO_LOGFIRE``
    says so, or otherwise whenever ``OBSERVABILITY__LOGFIRE_TOKEN`` is set.
    Console output is disabled in the test environment.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = (
        observability.send_to_logfire
        if observability.send_to_logfire is not None
        else bool(observability.logfire_token)
    )

    if settings.environment == "test":
        console = False
    else:
        console = logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        )

    logfire.configure(
        service_name="shaka-comments",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        console=console,
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )
