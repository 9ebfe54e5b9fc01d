"""
Validation error exposed at the package level.
"""

from .errors import ValidationError

__all__ = ["ValidationError"]
