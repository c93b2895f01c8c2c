import logging
import sys

import structlog
from structlog.types import Processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)  # type: ignore [no-any-return]


def configure_logging(
    log_level: str = "INFO",
    json_logs: bool = False,
) -> None:
    """
    Route structlog events through stdlib logging on stderr.

    Solvers only log strategy switches (Newton handing over to bisection,
    iteration caps, stalls), so stdout stays free for results.

    :param log_level: Logging level [DEBUG, INFO, WARNING, ERROR, CRITICAL]
    :param json_logs: One JSON object per event instead of console lines
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if json_logs:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Library default until an entrypoint configures from Settings.
configure_logging()
