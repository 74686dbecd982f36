"""Service layer logging utilities.

Provides structured logging functions for service operations, enabling
consistent log format and context across the ingredient and recipe services.

Usage:
    from recipe_tracker.services.logging_utils import get_service_logger, log_operation

    logger = get_service_logger(__name__)

    log_operation(
        logger,
        operation="save_ingredient_command",
        outcome="updated",
        recipe_id=1,
        ingredient_id=10,
    )
"""

import logging
from typing import Any

LOGGER_PREFIX = "recipe_tracker.services"


def get_service_logger(name: str) -> logging.Logger:
    """
    Get a logger configured for service operations.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        Logger instance with the 'recipe_tracker.services' prefix.

    Example:
        >>> logger = get_service_logger(__name__)
        >>> logger.name
        'recipe_tracker.services.ingredient_service'
    """
    if "." in name:
        name = name.split(".")[-1]
    return logging.getLogger(f"{LOGGER_PREFIX}.{name}")


def log_operation(
    logger: logging.Logger,
    operation: str,
    outcome: str,
    level: int = logging.INFO,
    **context: Any,
) -> None:
    """
    Log a service operation with structured context.

    The context is passed via the 'extra' parameter, so each key becomes
    an attribute on the LogRecord.

    Args:
        logger: Logger instance to use
        operation: Operation name (e.g., "save_ingredient_command")
        outcome: Outcome description (e.g., "appended", "recipe_not_found")
        level: Log level (default: INFO). Use DEBUG for verbose/frequent logs.
        **context: Additional context fields (entity IDs, error details, etc.)
    """
    extra = {
        "operation": operation,
        "outcome": outcome,
        **context,
    }
    logger.log(level, f"{operation}: {outcome}", extra=extra)
