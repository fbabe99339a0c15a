"""
ModuleTrack - Client for the training-module catalogue served by a remote REST API.

Example:
    >>> from moduletrack.adapters.mockapi import MockAPIClient
    >>> from moduletrack.domains.modules import ModuleService, ModuleStore
    >>> service = ModuleService(MockAPIClient(), ModuleStore())
    >>> state = await service.load()
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
