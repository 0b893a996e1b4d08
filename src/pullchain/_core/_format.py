from collections.abc import Collection
from typing import Any


def iter_repr(v: Collection[Any], max_items: int = 20) -> str:
    """Join the reprs of the first **max_items** elements, marking truncation."""
    shown = ", ".join(repr(x) for x, _ in zip(v, range(max_items), strict=False))
    suffix = ", ..." if len(v) > max_items else ""
    return shown + suffix
