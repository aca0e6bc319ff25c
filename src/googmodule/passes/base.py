"""
Base Pass System

A pass turns one SourceUnit into a new SourceUnit. Passes share a
TransformationContext, which owns the cross-unit state (host, manifest,
symbol table, diagnostics) and the print-time substitution hook chain.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, List, Optional, Set, Type, TYPE_CHECKING
import logging

from ..shared.nodes import ASTNode, NodeType, SourceUnit
from ..shared.errors import ErrorReporter, GoogModuleImplementationError

if TYPE_CHECKING:
    from ..analysis.binder import SymbolTable
    from ..analysis.module_system.host import ProcessorHost
    from ..analysis.module_system.manifest import ModulesManifest

logger = logging.getLogger(__name__)


class EmitHint(Enum):
    """What the printer is about to emit when it asks for a substitution"""
    EXPRESSION = "expression"


SubstitutionHook = Callable[[EmitHint, ASTNode], ASTNode]


def _no_substitution(hint: EmitHint, node: ASTNode) -> ASTNode:
    return node


class TransformationContext:
    """
    Context shared by the passes and the printer of one build.

    - host: namespace and module-id policy (ProcessorHost)
    - manifest: which file provides / references which namespace
    - symbol_table: binder results, queried at print time
    - reporter: diagnostics

    Substitution: a pass calls enable_substitution(kind) and wraps
    on_substitute_node, calling the previously installed hook first. The printer
    calls substitute() for every node it is about to emit.
    """

    def __init__(self, host: 'ProcessorHost', manifest: 'ModulesManifest',
                 symbol_table: 'SymbolTable', reporter: Optional[ErrorReporter] = None):
        self.host = host
        self.manifest = manifest
        self.symbol_table = symbol_table
        self.reporter: ErrorReporter = reporter if reporter is not None else ErrorReporter()
        self.on_substitute_node: SubstitutionHook = _no_substitution
        self._substitution_kinds: Set[NodeType] = set()

    def enable_substitution(self, kind: NodeType) -> None:
        self._substitution_kinds.add(kind)

    def is_substitution_enabled(self, node: ASTNode) -> bool:
        return node.node_type in self._substitution_kinds

    def substitute(self, hint: EmitHint, node: ASTNode) -> ASTNode:
        """Run the hook chain on node if substitution is enabled for its kind."""
        if not self.is_substitution_enabled(node):
            return node
        return self.on_substitute_node(hint, node)


class BasePass(ABC):
    """
    Base class for all passes.

    - Explicit dependencies via `requires`
    - install() runs once per context (hooks); run() once per unit
    - Units are never mutated: run() returns a new SourceUnit
    """
    requires: List[Type['BasePass']] = []

    def __init__(self, context: TransformationContext):
        self.context = context

    def install(self) -> None:
        """Register print-time hooks on the context. Default: none."""

    @abstractmethod
    def run(self, unit: SourceUnit) -> SourceUnit:
        raise NotImplementedError


class PassManager:
    """
    Pass manager with dependency resolution.

    - Passes run in dependency order (topological sort of `requires`)
    - Single TransformationContext shared across all passes
    """

    def __init__(self, context: TransformationContext):
        self.context = context
        self.passes: List[BasePass] = []
        self._installed = False

    def register_pass(self, pass_class: Type[BasePass]) -> BasePass:
        instance = pass_class(self.context)
        self.passes.append(instance)
        self._installed = False
        return instance

    def install_all(self) -> None:
        if self._installed:
            return
        self.passes = self._topological_sort()
        for p in self.passes:
            p.install()
        self._installed = True

    def run_all(self, unit: SourceUnit) -> SourceUnit:
        self.install_all()
        for p in self.passes:
            logger.debug(f"Running {type(p).__name__} on {unit.file_name}")
            unit = p.run(unit)
        return unit

    def _topological_sort(self) -> List[BasePass]:
        by_class = {type(p): p for p in self.passes}
        ordered: List[BasePass] = []
        visiting: Set[type] = set()
        done: Set[type] = set()

        def visit(cls: type) -> None:
            if cls in done:
                return
            if cls in visiting:
                raise GoogModuleImplementationError(f"Circular pass dependency involving {cls.__name__}")
            visiting.add(cls)
            for dep in cls.requires:
                if dep not in by_class:
                    raise GoogModuleImplementationError(
                        f"{cls.__name__} requires {dep.__name__}, which is not registered"
                    )
                visit(dep)
            visiting.discard(cls)
            done.add(cls)
            ordered.append(by_class[cls])

        for p in self.passes:
            visit(type(p))
        return ordered
