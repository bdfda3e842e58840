"""
CLI module for the civix generator.

This module provides the command-line entry point that is installed as the
``civix`` console script.
"""

from .commands import main

__all__ = ["main"]
