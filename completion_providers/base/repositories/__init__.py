"""
Repositories package for providers layer.

Exports:
- KeysRepository / KeyResolution: API key resolution
"""

from .keys import KeyResolution, KeysRepository

__all__ = [
    "KeysRepository",
    "KeyResolution",
]
