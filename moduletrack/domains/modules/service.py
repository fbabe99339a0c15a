"""
Module Service - Keeps the cached collection in step with the remote store.

Every operation is one remote call followed, on success, by one dispatch.
Failures leave the cached state as it was.
"""

from __future__ import annotations

import logging

from moduletrack.config.errors import FetchError, ModuleValidationError

from .contracts import ModuleRepository, StateHolder
from .models import (
    AddModule,
    DeleteModule,
    Module,
    ModuleCreate,
    ModuleState,
    ModuleUpdate,
    SetError,
    SetLoading,
    SetModules,
    UpdateModule,
)
from .validators import parse_duree, validate_create, validate_update

logger = logging.getLogger(__name__)

__all__ = ["ModuleService"]


class ModuleService:
    """
    CRUD operations on modules, mirrored into a state holder.

    Example:
        >>> service = ModuleService(MockAPIClient(), ModuleStore())
        >>> await service.load()
        >>> module = await service.create("Introduction à React", "12")
    """

    def __init__(self, repository: ModuleRepository, store: StateHolder) -> None:
        """
        Initialize service.

        Args:
            repository: Remote store client
            store: State holder receiving the resulting actions
        """
        self.repository = repository
        self.store = store

    async def load(self) -> ModuleState:
        """
        Fetch the full collection.

        A failure is recorded in ``state.error`` instead of being raised.
        """
        self.store.dispatch(SetLoading(value=True))
        try:
            modules = await self.repository.list_modules()
        except FetchError as e:
            logger.warning("Module list failed: %s", e.message)
            return self.store.dispatch(SetError(message=e.message))

        logger.info("Loaded %d modules", len(modules))
        return self.store.dispatch(SetModules(modules=tuple(modules)))

    async def fetch(self, module_id: str) -> Module:
        """Fetch one module and refresh its cached copy if present."""
        module = await self.repository.get_module(module_id)
        self.store.dispatch(UpdateModule(module=module))
        return module

    async def create(self, nom: str, duree: str | int | float) -> Module:
        """
        Validate form input, create the module, append it to the cache.

        Raises:
            ModuleValidationError: Input rejected; no remote call made
            FetchError: Remote call failed
        """
        errors = validate_create(nom, duree)
        if errors:
            raise ModuleValidationError(errors)

        data = ModuleCreate(nom=nom.strip(), duree=parse_duree(duree))
        module = await self.repository.create_module(data)
        self.store.dispatch(AddModule(module=module))
        logger.info("Created module %s (%s)", module.id, module.nom)
        return module

    async def update(
        self,
        module_id: str,
        nom: str | None = None,
        duree: str | int | float | None = None,
    ) -> Module:
        """
        Validate the given fields, update the module, replace the cached copy.

        Raises:
            ModuleValidationError: Input rejected; no remote call made
            FetchError: Remote call failed
        """
        errors = validate_update(nom, duree)
        if errors:
            raise ModuleValidationError(errors)

        data = ModuleUpdate(
            nom=nom.strip() if nom is not None else None,
            duree=parse_duree(duree) if duree is not None else None,
        )
        module = await self.repository.update_module(module_id, data)
        self.store.dispatch(UpdateModule(module=module))
        logger.info("Updated module %s", module.id)
        return module

    async def delete(self, module_id: str) -> None:
        """Delete the module remotely, then drop it from the cache."""
        await self.repository.delete_module(module_id)
        self.store.dispatch(DeleteModule(id=module_id))
        logger.info("Deleted module %s", module_id)
