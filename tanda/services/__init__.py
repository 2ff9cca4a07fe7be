"""
Service modules for Tanda payment operations.
"""

from .c2b_service import C2BService

__all__ = [
    'C2BService',
]
