"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from catalog.core.enums import ErrorCode, Environment
"""

from catalog.core.enums.environment import Environment
from catalog.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
