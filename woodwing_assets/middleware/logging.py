from typing import Any

from aws_lambda_powertools.logging import Logger

# Shared structured logger for the client, gateway and services
logger = Logger(service="woodwing-assets-client")


def log_operation(operation: str, message: str, mutating: bool, **context: Any) -> None:
    """Log a completed client operation.

    Operations that change server state log at info level, read-only ones at
    debug level. ``operation`` and ``context`` become structured keys.
    """
    extra = {"operation": operation, **context}
    if mutating:
        logger.info(message, extra=extra)
    else:
        logger.debug(message, extra=extra)
