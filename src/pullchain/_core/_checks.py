import logging
from collections.abc import Callable
from typing import Any

from .._errors import InvalidArgumentError

logger = logging.getLogger("pullchain")


def check_argument(condition: bool, msg: str, *args: object) -> None:  # noqa: FBT001
    """Log and raise `InvalidArgumentError` with **msg** % **args** unless **condition** holds."""
    if not condition:
        message = msg % args if args else msg
        logger.debug("rejected combinator argument: %s", message)
        raise InvalidArgumentError(message)


def require_callable(func: Callable[..., Any] | None, name: str) -> None:
    """Reject **func** unless it is callable, naming the argument **name**."""
    check_argument(callable(func), "'%s' must be a callable, got: %r", name, func)
