"""
Module View - Filtered, sorted projection of the cached collection.

Features:
- Case-insensitive search on name and ID
- Sorting by name, duration or ID
- Deterministic collation (no dependency on the process locale)
"""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from .models import Module, SortKey, SortOrder

__all__ = [
    "ModuleView",
    "collation_key",
    "filter_and_sort",
    "filter_modules",
    "next_sort",
    "sort_modules",
]

SORT_LABELS = {
    SortKey.NOM: "Nom",
    SortKey.DUREE: "Durée",
    SortKey.ID: "ID",
}


def _strip_marks(text: str) -> str:
    """Decompose and drop combining marks ("é" -> "e")."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def collation_key(text: str, base_only: bool = True) -> tuple[str, ...]:
    """
    Build a sort key approximating French collation.

    Args:
        text: Value to compare
        base_only: Ignore accents and case entirely. When False, accents and
            then case break ties, lowercase first.

    Returns:
        Tuple usable as a ``sorted`` key
    """
    primary = _strip_marks(text).casefold()
    if base_only:
        return (primary,)

    decomposed = unicodedata.normalize("NFKD", text)
    return (primary, decomposed.casefold(), decomposed.swapcase())


def filter_modules(modules: Iterable[Module], search_term: str) -> list[Module]:
    """Keep modules whose name or ID contains the search term, ignoring case."""
    if not search_term.strip():
        return list(modules)

    needle = search_term.casefold()
    return [m for m in modules if needle in m.nom.casefold() or needle in m.id.casefold()]


def sort_modules(
    modules: Iterable[Module],
    sort_by: SortKey = SortKey.NOM,
    sort_order: SortOrder = SortOrder.ASC,
) -> list[Module]:
    """
    Return a sorted copy. Equal keys keep their input order in both directions.
    """
    return sorted(
        modules,
        key=_sort_key(SortKey(sort_by)),
        reverse=SortOrder(sort_order) == SortOrder.DESC,
    )


def _sort_key(sort_by: SortKey) -> Callable[[Module], Any]:
    if sort_by == SortKey.DUREE:
        return lambda m: m.duree
    if sort_by == SortKey.ID:
        return lambda m: collation_key(m.id, base_only=False)
    return lambda m: collation_key(m.nom)


def filter_and_sort(
    modules: Sequence[Module],
    search_term: str = "",
    sort_by: SortKey = SortKey.NOM,
    sort_order: SortOrder = SortOrder.ASC,
) -> list[Module]:
    """Filter then sort. ``modules`` is left untouched."""
    return sort_modules(filter_modules(modules, search_term), sort_by, sort_order)


def next_sort(
    current_by: SortKey,
    current_order: SortOrder,
    selected: SortKey,
) -> tuple[SortKey, SortOrder]:
    """Selecting the active key flips the order; a new key starts ascending."""
    if SortKey(selected) == SortKey(current_by):
        flipped = SortOrder.DESC if SortOrder(current_order) == SortOrder.ASC else SortOrder.ASC
        return SortKey(selected), flipped
    return SortKey(selected), SortOrder.ASC


class ModuleView:
    """
    Search and sort settings for a module list.

    Example:
        >>> view = ModuleView()
        >>> view.set_search("react")
        >>> view.select_sort(SortKey.DUREE)
        >>> rows = view.apply(store.get_state().modules)
    """

    def __init__(
        self,
        search_term: str = "",
        sort_by: SortKey = SortKey.NOM,
        sort_order: SortOrder = SortOrder.ASC,
    ) -> None:
        self.search_term = search_term
        self.sort_by = SortKey(sort_by)
        self.sort_order = SortOrder(sort_order)

    def set_search(self, term: str) -> None:
        self.search_term = term

    def clear_search(self) -> None:
        self.search_term = ""

    def select_sort(self, key: SortKey) -> None:
        """Toggle or switch the sort key."""
        self.sort_by, self.sort_order = next_sort(self.sort_by, self.sort_order, key)

    def apply(self, modules: Sequence[Module]) -> list[Module]:
        """Project ``modules`` through the current settings."""
        return filter_and_sort(modules, self.search_term, self.sort_by, self.sort_order)

    def sort_label(self) -> str:
        arrow = "↑" if self.sort_order == SortOrder.ASC else "↓"
        return f"{SORT_LABELS[self.sort_by]} {arrow}"
