"""Named callback table: hook name -> unique id -> callback."""

from __future__ import annotations

from typing import Any, Callable, Hashable

HookFunc = Callable[..., Any]


class HookTable:
    """Register callbacks under a hook name and broadcast calls to them.

    A callback "handles" a broadcast by returning exactly True; call() reports
    whether any registered callback did.
    """

    def __init__(self):
        self._hooks: dict[str, dict[Hashable, HookFunc]] = {}

    def add(self, name: str, unique_id: Hashable, func: HookFunc) -> None:
        """Register func, replacing any callback with the same id."""
        self._hooks.setdefault(name, {})[unique_id] = func

    def remove(self, name: str, unique_id: Hashable) -> None:
        table = self._hooks.get(name)
        if not table:
            return
        table.pop(unique_id, None)
        if not table:
            del self._hooks[name]

    def get(self, name: str, unique_id: Hashable) -> HookFunc | None:
        table = self._hooks.get(name)
        if table is None:
            return None
        return table.get(unique_id)

    def call(self, name: str, *args: Any) -> bool:
        """Invoke every callback for name with args.

        Returns True if any callback returned True. Every callback runs even
        after one has handled the call. Callbacks may add or remove hooks while
        the broadcast is in progress; the set being called is fixed at entry.
        """
        table = self._hooks.get(name)
        if not table:
            return False

        handled = False
        for func in list(table.values()):
            if func(*args) is True:
                handled = True
        return handled
