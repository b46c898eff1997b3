"""
CLI module for create-app.

Provides the main entry point that is installed as the ``create-app``
console script.
"""

from .commands import main

__all__ = ["main"]
