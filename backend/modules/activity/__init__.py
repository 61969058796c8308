"""
Activity module.

Append-only audit trail of project mutations.

Public API:
- IActivityService: Interface for recording and querying activity
- Activity: A single audit entry
"""

from .interfaces import IActivityService
from .models import Activity

__all__ = [
    "IActivityService",
    "Activity",
]
