"""
Parametrization service: feature toggles with a read-through,
write-invalidate cache in front of a relational store.
"""

__version__ = "0.1.0"
