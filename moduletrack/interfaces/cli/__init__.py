"""
CLI Interface - Command-line tools for ModuleTrack.

Provides commands for:
- Listing, searching and sorting modules
- Creating, updating and deleting modules
- Catalogue statistics
"""

from .main import app, main

__all__ = ["app", "main"]
