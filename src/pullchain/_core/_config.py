from collections.abc import Collection
from dataclasses import dataclass
from typing import Any

from ._format import iter_repr


@dataclass(slots=True)
class Config:
    """Process-wide display settings.

    Only affects how collections are rendered, never how sources are driven.

    Example:
    ```python
    >>> import pullchain as pc
    >>> cfg = pc.get_config()
    >>> cfg.repr_max_items = 3
    >>> pc.Seq(tuple(range(10)))
    Seq(0, 1, 2, ...)
    >>> cfg.repr_max_items = 20

    ```
    """

    repr_max_items: int = 20
    """How many elements a `Seq`/`Vec` repr shows before truncating."""

    def iter_repr(self, v: Collection[Any]) -> str:
        return iter_repr(v, self.repr_max_items)


_CONFIG = Config()


def get_config() -> Config:
    """Return the shared `Config` instance."""
    return _CONFIG
