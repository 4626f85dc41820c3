"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: Password hashing and JWT management

Usage:
======
    from taproom.shared.utils.security import SecurityUtils
"""

from taproom.shared.utils.security import SecurityUtils

__all__ = [
    "SecurityUtils",
]
