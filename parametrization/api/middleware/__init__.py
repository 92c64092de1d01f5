"""Middleware package."""

from parametrization.api.middleware.request_context import RequestContextMiddleware

__all__ = ["RequestContextMiddleware"]
