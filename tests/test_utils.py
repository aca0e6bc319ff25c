"""
Test utilities for the googmodule test suite.

StubHost derives namespaces from '/'-separated paths without touching the
file system, so rewrite tests can use short relative file names like 'a/b.js'.
"""

import posixpath
import re
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from googmodule.analysis.module_system.host import ProcessorHost
from googmodule.analysis.module_system.manifest import ModulesManifest
from googmodule.compiler.driver import GoogModuleDriver


class StubHost(ProcessorHost):
    """
    'a/b.js' provides 'a.b'; './c' imported from it is 'a.c'; bare names map
    to themselves with '/' -> '.'.

    Records every path_to_module_name call as (context, import_path).
    """

    def __init__(self, es5_mode: bool = False, is_js_transpilation: bool = False,
                 convert_index_import_shorthand: bool = False,
                 index_shorthands: Optional[Dict[str, str]] = None):
        self.es5_mode = es5_mode
        self.is_js_transpilation = is_js_transpilation
        self.convert_index_import_shorthand = convert_index_import_shorthand
        self.index_shorthands = dict(index_shorthands or {})
        self.calls: List[Tuple[str, str]] = []

    def path_to_module_name(self, context: str, import_path: str) -> str:
        self.calls.append((context, import_path))
        path = re.sub(r"\.[tj]s$", "", import_path)
        if path.startswith("."):
            path = posixpath.normpath(posixpath.join(posixpath.dirname(context), path))
        return path.replace("/", ".")

    def file_name_to_module_id(self, file_name: str) -> str:
        return file_name

    def resolve_index_shorthand(self, file_name: str, imported: str) -> str:
        return self.index_shorthands.get(imported, imported)


class FailingHost(StubHost):
    """StubHost whose lookup of './bad' raises RuntimeError."""

    def path_to_module_name(self, context: str, import_path: str) -> str:
        if import_path == "./bad":
            raise RuntimeError("module lookup failed")
        return super().path_to_module_name(context, import_path)


def prologue(namespace: str = "a.b", module_id: str = "a/b.js", es5: bool = False,
             exports: bool = True) -> str:
    """Expected header text."""
    text = f"goog.module('{namespace}');\nvar module = module || {{ id: '{module_id}' }};\n"
    if es5:
        return text
    text += "module = module;\n"
    if exports:
        text += "exports = {};\n"
    return text


def rewrite_source(source: str, file_name: str = "a/b.js", host: Optional[ProcessorHost] = None,
                   manifest: Optional[ModulesManifest] = None) -> str:
    """Rewrite one unit and return its printed output; fails the test on errors."""
    driver = GoogModuleDriver(host if host is not None else StubHost(), manifest)
    result = driver.compile(source, file_name)
    assert result.success, result.reporter.format_all_errors(color=False)
    return result.output
