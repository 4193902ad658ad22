"""Schema-keyed bag of observables.

// [LAW:one-source-of-truth] The schema passed at construction is the complete key set.
"""

from __future__ import annotations

from focus_forest.reactive.action import transaction
from focus_forest.reactive.observable import Observable, ReadOnly


class Store:
    def __init__(self, schema: dict[str, object], initial: dict[str, object] | None = None, *, name: str = "store"):
        self.name = name
        self._schema = dict(schema)
        self._observables: dict[str, Observable] = {}
        self._reaction_disposers: list = []
        initial = initial or {}
        for key, default in self._schema.items():
            self._observables[key] = Observable(initial.get(key, default), name=f"{name}:{key}")

    def __repr__(self) -> str:
        return f"Store({self.name}, keys={list(self._schema)})"

    def __contains__(self, key: str) -> bool:
        return key in self._observables

    def keys(self) -> list[str]:
        return list(self._schema)

    def defaults(self) -> dict[str, object]:
        return dict(self._schema)

    def observable(self, key: str) -> Observable:
        try:
            return self._observables[key]
        except KeyError:
            raise KeyError(f"{self.name} has no key {key!r}") from None

    def readonly(self, key: str) -> ReadOnly:
        return self.observable(key).readonly()

    def get(self, key: str):
        return self.observable(key).get()

    def set(self, key: str, value) -> None:
        self.observable(key).set(value)

    def update(self, values: dict[str, object]) -> None:
        """Write several keys as one settling point."""
        with transaction():
            for key, value in values.items():
                self.set(key, value)

    def snapshot(self) -> dict[str, object]:
        return {key: obs.get() for key, obs in self._observables.items()}

    def attach_reactions(self, disposers: list | None) -> None:
        self._dispose_reactions()
        self._reaction_disposers = list(disposers or [])

    def _dispose_reactions(self) -> None:
        for d in self._reaction_disposers:
            d.dispose()
        self._reaction_disposers.clear()

    def dispose(self) -> None:
        self._dispose_reactions()
