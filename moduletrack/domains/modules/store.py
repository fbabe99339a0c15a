"""
Module Store - Holder for the current ModuleState.

The store is constructed explicitly and handed to whoever needs it; there is
no process-wide instance. Dispatch is synchronous, so interleaved callers
resolve as last-writer-wins.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable

from .models import ModuleAction, ModuleState
from .reducer import INITIAL_STATE, module_reducer

logger = logging.getLogger(__name__)

__all__ = ["ModuleStore", "Listener"]

Listener = Callable[[ModuleState], None]


class ModuleStore:
    """
    In-memory state holder running the module reducer.

    Example:
        >>> store = ModuleStore()
        >>> store.dispatch(SetLoading(value=True))
        >>> store.get_state().loading
        True
    """

    def __init__(self, initial_state: ModuleState | None = None) -> None:
        """
        Initialize store.

        Args:
            initial_state: Starting snapshot. Uses an empty collection if None.
        """
        self._state = initial_state or INITIAL_STATE
        self._listeners: list[Listener] = []

    def get_state(self) -> ModuleState:
        """Return the current snapshot."""
        return self._state

    def dispatch(self, action: ModuleAction) -> ModuleState:
        """Apply an action, notify subscribers on change, return the new snapshot."""
        previous = self._state
        self._state = module_reducer(previous, action)

        if self._state is previous:
            logger.debug("Action %s left state unchanged", getattr(action, "kind", action))
            return self._state

        logger.debug(
            "Action %s: %d modules, loading=%s, error=%s",
            getattr(action, "kind", action),
            len(self._state.modules),
            self._state.loading,
            self._state.error,
        )
        if self._state.modules is not previous.modules:
            self._warn_duplicates()

        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback invoked with every new snapshot.

        Returns:
            Function removing the subscription
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _warn_duplicates(self) -> None:
        """Log ids held more than once. The reducer does not reject them."""
        counts = Counter(m.id for m in self._state.modules)
        duplicates = sorted(module_id for module_id, n in counts.items() if n > 1)
        if duplicates:
            logger.warning("Duplicate module ids in cache: %s", ", ".join(duplicates))
