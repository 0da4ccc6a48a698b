import logging

import structlog

SERVICE_NAME = "strategy-lens"


def resolve_level(level: str) -> int:
    """Level name -> logging constant; unknown names fall back to INFO."""
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(json_logs: bool = True, level: str = "INFO"):
    log_level = resolve_level(level)
    # uvicorn/fastapi go through stdlib logging; keep them at the same level
    logging.basicConfig(level=log_level)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if json_logs:
        # Tracebacks as a string field, one JSON line per event
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    structlog.contextvars.bind_contextvars(service=SERVICE_NAME)


logger = structlog.get_logger()
