"""
Module Reducer - Pure state transitions for the cached collection.

Every transition returns a new ModuleState; the input snapshot is never
mutated. Actions the reducer does not know return the state unchanged.
"""

from __future__ import annotations

from typing import Any

from .models import (
    AddModule,
    DeleteModule,
    ModuleState,
    SetError,
    SetLoading,
    SetModules,
    UpdateModule,
)

__all__ = ["INITIAL_STATE", "module_reducer"]

INITIAL_STATE = ModuleState()


def module_reducer(state: ModuleState, action: Any) -> ModuleState:
    """
    Compute the next state.

    Args:
        state: Current snapshot
        action: One of the ModuleAction variants

    Returns:
        The next snapshot, or ``state`` itself for no-ops and unknown actions
    """
    if isinstance(action, SetLoading):
        return state.model_copy(update={"loading": action.value})

    if isinstance(action, SetModules):
        return state.model_copy(
            update={"modules": tuple(action.modules), "loading": False, "error": None}
        )

    if isinstance(action, AddModule):
        return state.model_copy(update={"modules": (*state.modules, action.module)})

    if isinstance(action, UpdateModule):
        target = action.module
        if not any(m.id == target.id for m in state.modules):
            return state
        modules = tuple(target if m.id == target.id else m for m in state.modules)
        return state.model_copy(update={"modules": modules})

    if isinstance(action, DeleteModule):
        for index, module in enumerate(state.modules):
            if module.id == action.id:
                modules = state.modules[:index] + state.modules[index + 1 :]
                return state.model_copy(update={"modules": modules})
        return state

    if isinstance(action, SetError):
        return state.model_copy(update={"error": action.message, "loading": False})

    return state
