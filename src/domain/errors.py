"""Domain error types."""


class InvalidInputError(ValueError):
    """Raised when records or selectors do not have the expected shape."""


__all__ = ["InvalidInputError"]
