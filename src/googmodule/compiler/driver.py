"""
Compiler Driver

parse -> bind -> passes -> print, one unit at a time, sharing one host,
manifest, symbol table and reporter across every unit of a build.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from ..analysis.binder import SymbolTable
from ..analysis.module_system.host import ProcessorHost
from ..analysis.module_system.manifest import ModulesManifest
from ..backends.printer import JavaScriptPrinter
from ..frontend.parser import Parser
from ..passes.base import PassManager, TransformationContext
from ..passes.googmodule import GoogModulePass
from ..shared.errors import ErrorReporter, GoogModuleError
from ..shared.nodes import SourceUnit
from ..utils.io_utils import read_source_file

logger = logging.getLogger(__name__)


class CompilationResult:
    """Compilation result"""
    def __init__(
        self,
        output: Optional[str] = None,
        unit: Optional[SourceUnit] = None,
        success: bool = False,
        reporter: Optional[ErrorReporter] = None,
    ):
        self.output = output
        self.unit = unit
        self.success = success
        self.reporter = reporter

    def has_errors(self) -> bool:
        """True if compilation reported errors."""
        if self.reporter is not None and self.reporter.has_errors():
            return True
        return not self.success


class GoogModuleDriver:
    """
    Rewrites CommonJS units into goog.module units.

    Errors raised as GoogModuleError (syntax errors, unresolvable specifiers)
    are recorded on the reporter and yield an unsuccessful result; anything
    else propagates.
    """

    def __init__(self, host: ProcessorHost, manifest: Optional[ModulesManifest] = None,
                 reporter: Optional[ErrorReporter] = None):
        self.host = host
        self.manifest = manifest if manifest is not None else ModulesManifest()
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.symbol_table = SymbolTable()
        self.context = TransformationContext(host, self.manifest, self.symbol_table, self.reporter)
        self.parser = Parser()
        self.pass_manager = PassManager(self.context)
        self._register_passes()

    def _register_passes(self) -> None:
        self.pass_manager.register_pass(GoogModulePass)
        self.pass_manager.install_all()

    def compile(self, source: str, file_name: str) -> CompilationResult:
        """
        Rewrite one unit.

        file_name should be absolute, or relative to the host's root directory;
        it determines the unit's own namespace and module id.
        """
        self.reporter.add_source(file_name, source)
        try:
            unit = self.parser.parse(source, file_name)
            self.symbol_table.bind(unit)
            rewritten = self.pass_manager.run_all(unit)
            output = JavaScriptPrinter(self.context).print_unit(rewritten)
        except GoogModuleError as e:
            logger.debug(f"{file_name}: {e.message}")
            self.reporter.report_exception(e)
            return CompilationResult(success=False, reporter=self.reporter)
        return CompilationResult(output=output, unit=rewritten, success=True, reporter=self.reporter)

    def compile_file(self, path: Union[Path, str]) -> CompilationResult:
        file_name = os.path.abspath(str(path))
        return self.compile(read_source_file(file_name), file_name)
