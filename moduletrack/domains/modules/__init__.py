"""
Modules Domain - Cached module collection and its synchronization rules.

This domain handles:
- State transitions (reducer + store)
- Filtered/sorted projections
- Form validation
- Statistics
- Remote synchronization (service)
"""

from .contracts import ModuleRepository, StateHolder
from .models import (
    AddModule,
    DeleteModule,
    Module,
    ModuleAction,
    ModuleCreate,
    ModuleState,
    ModuleStats,
    ModuleUpdate,
    SetError,
    SetLoading,
    SetModules,
    SortKey,
    SortOrder,
    UpdateModule,
)
from .reducer import INITIAL_STATE, module_reducer
from .service import ModuleService
from .stats import compute_stats
from .store import ModuleStore
from .validators import parse_duree, validate_create, validate_update
from .view import ModuleView, collation_key, filter_and_sort, next_sort

__all__ = [
    # Contracts
    "ModuleRepository",
    "StateHolder",
    # Models
    "Module",
    "ModuleCreate",
    "ModuleUpdate",
    "ModuleState",
    "ModuleStats",
    "SortKey",
    "SortOrder",
    # Actions
    "ModuleAction",
    "SetLoading",
    "SetModules",
    "AddModule",
    "UpdateModule",
    "DeleteModule",
    "SetError",
    # State
    "INITIAL_STATE",
    "module_reducer",
    "ModuleStore",
    # View
    "ModuleView",
    "collation_key",
    "filter_and_sort",
    "next_sort",
    # Validation
    "parse_duree",
    "validate_create",
    "validate_update",
    # Stats
    "compute_stats",
    # Service
    "ModuleService",
]
