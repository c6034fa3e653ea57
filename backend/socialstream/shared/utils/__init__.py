"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: Password hashing

Usage:
======
    from socialstream.shared.utils.security import SecurityUtils
"""

from socialstream.shared.utils.security import SecurityUtils

__all__ = [
    "SecurityUtils",
]
