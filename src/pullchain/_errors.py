class InvalidArgumentError(ValueError):
    """Raised when a combinator is built with arguments it can never honour.

    Always raised at construction time, before any element is pulled.
    """


class ExhaustedError(StopIteration):
    """Raised by `next()` on a source that has no element left.

    Subclasses `StopIteration` so every source keeps behaving as a regular Python iterator.
    """
