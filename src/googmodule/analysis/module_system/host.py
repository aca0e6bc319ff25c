"""
Processor hosts: the namespace policy the rewrite consumes.

ProcessorHost is the interface; FileSystemHost is the default, deriving
namespaces from paths relative to a root directory.
"""

import os
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from .path_resolver import PathResolver, resolve_index_shorthand
from ...utils.config import MODULE_NAME_EXTENSIONS_PATTERN
from ...utils.io_utils import to_posix


_MODULE_NAME_EXTENSIONS = re.compile(MODULE_NAME_EXTENSIONS_PATTERN)
_INVALID_LEADING_CHAR = re.compile(r"^[^a-zA-Z_$]")
_INVALID_CHARS = re.compile(r"[^a-zA-Z0-9._$]")


class ProcessorHost(ABC):
    """
    What the rewrite needs to know about the build.

    Flags:
    - es5_mode: skip `module = module;` and `exports = {};` in the prologue
    - is_js_transpilation: only rewrite `require('tslib')`
    - convert_index_import_shorthand: consult resolve_index_shorthand for specifiers
    """
    es5_mode: bool = False
    is_js_transpilation: bool = False
    convert_index_import_shorthand: bool = False

    @abstractmethod
    def path_to_module_name(self, context: str, import_path: str) -> str:
        """
        Namespace for `import_path` as imported from the file `context`.

        Called with context='' and import_path=<file name> for a unit's own namespace.
        """
        raise NotImplementedError

    @abstractmethod
    def file_name_to_module_id(self, file_name: str) -> str:
        """Value embedded in the `module.id` polyfill."""
        raise NotImplementedError

    def resolve_index_shorthand(self, file_name: str, imported: str) -> str:
        """Explicit form of a directory-index specifier. Default: unchanged."""
        return imported


class FileSystemHost(ProcessorHost):
    """
    Namespaces from paths under root_dir.

    path_to_module_name strips .ts/.d.ts/.js extensions, resolves ./ and ../
    against the importing file's directory, makes the result root-relative,
    maps path separators to '.' and replaces characters goog.module rejects
    with '_'.
    """

    def __init__(self, root_dir: Union[Path, str] = ".", es5_mode: bool = False,
                 is_js_transpilation: bool = False, convert_index_import_shorthand: bool = False,
                 resolver: Optional[PathResolver] = None):
        self.root_dir = os.path.abspath(str(root_dir))
        self.es5_mode = es5_mode
        self.is_js_transpilation = is_js_transpilation
        self.convert_index_import_shorthand = convert_index_import_shorthand
        self.resolver = resolver if resolver is not None else PathResolver()

    def path_to_module_name(self, context: str, import_path: str) -> str:
        file_name = _MODULE_NAME_EXTENSIONS.sub("", import_path)
        if file_name.startswith("."):
            file_name = os.path.join(os.path.dirname(context), file_name)
        if not os.path.isabs(file_name):
            file_name = os.path.join(self.root_dir, file_name)
        file_name = os.path.relpath(file_name, self.root_dir)

        module_name = re.sub(r"[/\\]", ".", file_name)
        module_name = _INVALID_LEADING_CHAR.sub("_", module_name)
        module_name = _INVALID_CHARS.sub("_", module_name)
        return module_name

    def file_name_to_module_id(self, file_name: str) -> str:
        return to_posix(os.path.relpath(os.path.abspath(file_name), self.root_dir))

    def resolve_index_shorthand(self, file_name: str, imported: str) -> str:
        return resolve_index_shorthand(self.resolver, file_name, imported)
