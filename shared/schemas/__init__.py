"""
Shared data schemas

Field types used by the request models of every resource service.
"""

from .common import NonNegativeNumber, reject_null

__all__ = ["NonNegativeNumber", "reject_null"]
