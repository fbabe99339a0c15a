"""
MockAPI Adapter - HTTP access to the remote module store.

This is the ONLY place that talks to the modules REST API.
The modules domain depends on the ModuleRepository contract, not on this client.
"""

from .client import MockAPIClient

__all__ = ["MockAPIClient"]
