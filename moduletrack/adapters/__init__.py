"""
Adapters - External service integrations.

All external API calls are wrapped here to isolate domains from third-party changes.
"""

from .mockapi import MockAPIClient

__all__ = ["MockAPIClient"]
