"""
Request/response schemas.
"""

from .parametrization import ToggleRecord, ParametrizationCreate, ParametrizationUpdate

__all__ = ["ToggleRecord", "ParametrizationCreate", "ParametrizationUpdate"]
