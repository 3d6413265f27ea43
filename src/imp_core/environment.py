"""Variable storage and scope resolution."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union

from .errors import ImpReferenceError, ImpTypeError
from .values import Value, to_python


@dataclass
class Scope:
    """Name → value bindings with an optional parent used for read resolution.

    A binding may hold another ``Scope``.  Reading a name whose binding is a
    nested scope with a parent resolves the name again against a merged view
    of the two (see :meth:`lookup`).  No statement creates nested scopes; they
    only appear when a caller binds one directly.
    """

    bindings: dict[str, Binding] = field(default_factory=dict)
    parent: Scope | None = None

    # -- Mutation -------------------------------------------------------

    def declare(self, name: str, value: Binding) -> None:
        """Bind *name*, overwriting any existing binding."""
        self.bindings[name] = value

    def assign(self, name: str, value: Binding) -> None:
        """Overwrite an existing binding; unknown names are an error."""
        if name not in self.bindings:
            raise ImpReferenceError(name)
        self.bindings[name] = value

    # -- Resolution -----------------------------------------------------

    def is_bound(self, name: str) -> bool:
        return name in self.bindings

    def lookup(self, name: str) -> Value:
        """Resolve *name* to a runtime value.

        While the binding found is a nested scope that has a parent, the name
        is looked up again in that scope's merged view.
        """
        scope = self
        while True:
            if name not in scope.bindings:
                raise ImpReferenceError(name)
            value = scope.bindings[name]
            if not isinstance(value, Scope):
                return value
            if value.parent is None:
                raise ImpTypeError(f"'{name}' is bound to a scope, not a value.")
            scope = value.merged_view()

    def merged_view(self) -> Scope:
        """Return a throwaway scope: parent bindings overridden by our own."""
        if self.parent is None:
            return Scope(dict(self.bindings))
        return Scope({**self.parent.bindings, **self.bindings}, self.parent)

    # -- Mapping conveniences -------------------------------------------

    def __contains__(self, name: object) -> bool:
        return name in self.bindings

    def __getitem__(self, name: str) -> Binding:
        return self.bindings[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.bindings)

    def __len__(self) -> int:
        return len(self.bindings)

    def to_python(self) -> dict[str, object]:
        """Plain ``dict`` snapshot; nested scopes become nested dicts."""
        out: dict[str, object] = {}
        for name, value in self.bindings.items():
            if isinstance(value, Scope):
                out[name] = value.to_python()
            else:
                out[name] = to_python(value)
        return out


Binding = Union[Value, Scope]
