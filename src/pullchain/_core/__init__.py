from ._checks import check_argument, logger, require_callable
from ._config import Config, get_config
from ._main import CommonBase, Pipeable

__all__ = [
    "CommonBase",
    "Config",
    "Pipeable",
    "check_argument",
    "get_config",
    "logger",
    "require_callable",
]
