"""
Business services.
"""

from .parametrization import ParametrizationService, RECORD_CACHE, COLLECTION_CACHE
from .seed import load_parametrization_data

__all__ = [
    "ParametrizationService",
    "RECORD_CACHE",
    "COLLECTION_CACHE",
    "load_parametrization_data",
]
