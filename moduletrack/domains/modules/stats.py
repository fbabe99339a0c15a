"""
Module Stats - Aggregates shown alongside the module list.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .models import Module, ModuleStats

__all__ = ["compute_stats"]


def compute_stats(modules: Sequence[Module]) -> ModuleStats:
    """Count modules and summarize their durations (average rounded half-up)."""
    if not modules:
        return ModuleStats()

    total_hours = sum(m.duree for m in modules)
    if isinstance(total_hours, float):
        total_hours = round(total_hours, 2)
    return ModuleStats(
        total_modules=len(modules),
        total_hours=total_hours,
        average_hours=math.floor(total_hours / len(modules) + 0.5),
        longest_module=max(m.duree for m in modules),
    )
