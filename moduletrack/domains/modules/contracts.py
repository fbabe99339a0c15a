"""
Module Contracts - Interfaces for the modules domain.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import Module, ModuleAction, ModuleCreate, ModuleState, ModuleUpdate


@runtime_checkable
class ModuleRepository(Protocol):
    """Contract for the remote store holding the canonical collection."""

    async def list_modules(self) -> list[Module]:
        """Fetch every module."""
        ...

    async def get_module(self, module_id: str) -> Module:
        """Fetch one module by ID."""
        ...

    async def create_module(self, data: ModuleCreate) -> Module:
        """Create a module and return the stored record."""
        ...

    async def update_module(self, module_id: str, data: ModuleUpdate) -> Module:
        """Update a module and return the stored record."""
        ...

    async def delete_module(self, module_id: str) -> None:
        """Delete a module."""
        ...


@runtime_checkable
class StateHolder(Protocol):
    """Contract for the object owning the current ModuleState."""

    def get_state(self) -> ModuleState:
        """Return the current snapshot."""
        ...

    def dispatch(self, action: ModuleAction) -> ModuleState:
        """Apply an action and return the new snapshot."""
        ...
