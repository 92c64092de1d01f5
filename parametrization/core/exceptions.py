"""
Domain exceptions.

Lookups that find nothing are not errors: the service returns None and the
API layer decides whether that is a 404.
"""


class ParametrizationError(Exception):
    """Base class for parametrization service errors."""


class ConstraintViolation(ParametrizationError):
    """A save would break the uniqueness of a toggle key."""

    def __init__(self, key: str, message: str | None = None):
        self.key = key
        super().__init__(message or f"Parametrization key already exists: {key}")


class StoreUnavailable(ParametrizationError):
    """The record store or the cache backend cannot be reached."""

    def __init__(self, component: str, message: str | None = None):
        self.component = component
        super().__init__(message or f"{component} unavailable")
