"""
Namespace Binding Table

Per-unit bookkeeping for goog.require deduplication:
- NamespaceBindingTable: namespace -> the identifier its single goog.require was bound to
- SyntheticNameCounter: names for side-effect imports (googmodule_1_, googmodule_2_, ...)

Both are created fresh for every unit and dropped when the unit is done.
"""

from typing import Dict, Optional

from ..shared.nodes import Identifier
from ..shared.errors import GoogModuleImplementationError
from ..utils.config import MODULE_VAR_PREFIX, MODULE_VAR_SUFFIX, MODULE_VAR_COUNTER_START


class SyntheticNameCounter:
    """Strictly increasing, never reused within a unit."""

    def __init__(self, start: int = MODULE_VAR_COUNTER_START):
        self._next = start

    def next_name(self) -> str:
        name = f"{MODULE_VAR_PREFIX}{self._next}{MODULE_VAR_SUFFIX}"
        self._next += 1
        return name

    def next_identifier(self) -> Identifier:
        return Identifier(self.next_name())


class NamespaceBindingTable:
    """
    At most one binding per namespace.

    The first identifier bound to a namespace owns its goog.require call; every
    later import of the namespace aliases that identifier instead.
    """

    def __init__(self) -> None:
        self._bindings: Dict[str, Identifier] = {}

    def lookup(self, namespace: str) -> Optional[Identifier]:
        return self._bindings.get(namespace)

    def bind(self, namespace: str, identifier: Identifier) -> None:
        if namespace in self._bindings:
            raise GoogModuleImplementationError(
                f"namespace '{namespace}' is already bound to '{self._bindings[namespace].name}'"
            )
        self._bindings[namespace] = identifier

    def __contains__(self, namespace: str) -> bool:
        return namespace in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)
