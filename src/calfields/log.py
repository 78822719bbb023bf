"""Log output for the ``calfields`` command.

The library logs through ``logging.getLogger(__name__)`` and never installs
handlers. The command attaches one stderr handler to the ``calfields`` logger
whose formatter renders both those records and the command's own structlog
events, either as console lines or as JSON objects (``--log-json``).
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "calfields"

# Applied to stdlib records and structlog events alike.
_PRE_CHAIN = (
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
)


def _formatter(log_json: bool) -> logging.Formatter:
    steps: list = [structlog.stdlib.ProcessorFormatter.remove_processors_meta]
    if log_json:
        steps += [
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.processors.JSONRenderer(sort_keys=True),
        ]
    else:
        steps.append(structlog.dev.ConsoleRenderer(colors=False))
    return structlog.stdlib.ProcessorFormatter(foreign_pre_chain=list(_PRE_CHAIN), processors=steps)


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route ``calfields.*`` logging to stderr, DEBUG with ``verbose`` else WARNING."""
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter(log_json))

    pkg = logging.getLogger(PACKAGE_LOGGER)
    pkg.handlers[:] = [handler]
    pkg.setLevel(logging.DEBUG if verbose else logging.WARNING)
    pkg.propagate = False
