"""
Module Path Resolution

Resolves a require()/import specifier, as seen from a containing file, to a
file on disk the way Node and TypeScript do:

- ./foo, ../foo, /abs/foo -> foo.ts, foo.tsx, foo.d.ts, foo.js, foo.jsx,
  then foo/package.json (typings, types, main), then foo/index.*
- bare names -> node_modules/<name> in the containing directory and every parent

This class is stateless apart from its configuration and can be shared/reused.
"""

import json
import logging
import os
import re
from pathlib import Path
from typing import Optional, Sequence

from ...shared.errors import GoogModuleError
from ...utils.config import (
    RESOLVABLE_EXTENSIONS, PACKAGE_JSON_ENTRY_FIELDS, VENDORED_DEPENDENCY_DIR,
    INDEX_FILE_STEM, TS_EXTENSIONS_PATTERN, DEFAULT_FILE_ENCODING,
)

logger = logging.getLogger(__name__)

_TS_EXTENSIONS = re.compile(TS_EXTENSIONS_PATTERN)


class ModuleResolutionError(GoogModuleError):
    """Raised for malformed module requests (not for modules that simply do not exist)"""
    def __init__(self, message: str, specifier: str):
        super().__init__(message)
        self.specifier = specifier


class PathResolver:
    """
    Node/TypeScript style module resolution.

    resolve() returns the resolved file path, or None when nothing matches.
    """

    def __init__(self, extensions: Sequence[str] = RESOLVABLE_EXTENSIONS):
        self.extensions = tuple(extensions)

    def resolve(self, specifier: str, containing_file: str) -> Optional[str]:
        if not specifier or "\0" in specifier:
            raise ModuleResolutionError(f"malformed module request {specifier!r}", specifier)

        base_dir = Path(containing_file).parent
        if self._is_path_like(specifier):
            joined = specifier if os.path.isabs(specifier) else os.path.join(str(base_dir), specifier)
            candidate = Path(os.path.normpath(joined))
            resolved = self._load_as_file(candidate) or self._load_as_directory(candidate)
        else:
            resolved = self._load_from_vendored(specifier, base_dir)

        if resolved is None:
            logger.debug(f"PathResolver: {specifier!r} from {containing_file} did not resolve")
            return None
        result = os.path.normpath(str(resolved))
        logger.debug(f"PathResolver: {specifier!r} from {containing_file} -> {result}")
        return result

    @staticmethod
    def _is_path_like(specifier: str) -> bool:
        return (specifier in (".", "..") or specifier.startswith(("./", "../", "/"))
                or os.path.isabs(specifier))

    def _load_as_file(self, candidate: Path) -> Optional[Path]:
        name = candidate.name
        if not name:
            return None
        # './foo.js' may refer to foo.ts
        for js_ext, ts_exts in ((".js", (".ts", ".tsx", ".d.ts")), (".jsx", (".tsx",))):
            if name.endswith(js_ext) and len(name) > len(js_ext):
                stem = candidate.with_name(name[:-len(js_ext)])
                for ext in ts_exts:
                    typed = stem.with_name(stem.name + ext)
                    if typed.is_file():
                        return typed
        if candidate.is_file() and name.endswith(self.extensions):
            return candidate
        for ext in self.extensions:
            with_ext = candidate.with_name(name + ext)
            if with_ext.is_file():
                return with_ext
        return None

    def _load_as_directory(self, candidate: Path) -> Optional[Path]:
        if not candidate.is_dir():
            return None
        package_json = candidate / "package.json"
        if package_json.is_file():
            entry = self._package_entry(package_json)
            if entry:
                target = candidate / entry
                found = self._load_as_file(target) or self._load_index(target)
                if found is not None:
                    return found
        return self._load_index(candidate)

    def _load_index(self, directory: Path) -> Optional[Path]:
        if not directory.is_dir():
            return None
        return self._load_as_file(directory / INDEX_FILE_STEM)

    @staticmethod
    def _package_entry(package_json: Path) -> Optional[str]:
        try:
            data = json.loads(package_json.read_text(encoding=DEFAULT_FILE_ENCODING))
        except ValueError as e:
            logger.warning(f"PathResolver: ignoring unreadable {package_json}: {e}")
            return None
        if not isinstance(data, dict):
            return None
        for field in PACKAGE_JSON_ENTRY_FIELDS:
            value = data.get(field)
            if isinstance(value, str) and value:
                return value
        return None

    def _load_from_vendored(self, specifier: str, start_dir: Path) -> Optional[Path]:
        directory = start_dir.resolve()
        while True:
            if directory.name != VENDORED_DEPENDENCY_DIR:
                candidate = directory / VENDORED_DEPENDENCY_DIR / specifier
                found = self._load_as_file(candidate) or self._load_as_directory(candidate)
                if found is not None:
                    return found
            if directory.parent == directory:
                return None
            directory = directory.parent


def resolve_index_shorthand(resolver: PathResolver, file_name: str, imported: str) -> str:
    """
    Rewrite `require('pkg')` to `require('./pkg/index')` when it points at an index file.

    Only applied when the resolved file's last path segment differs from the
    requested one and the target is not a vendored dependency. Unresolvable
    specifiers are returned unchanged.
    """
    resolved = resolver.resolve(imported, file_name)
    if resolved is None:
        return imported
    requested_module = _TS_EXTENSIONS.sub("", imported)
    resolved_module = _TS_EXTENSIONS.sub("", resolved).replace(os.sep, "/")
    if VENDORED_DEPENDENCY_DIR in resolved_module:
        return imported
    if requested_module[requested_module.rfind("/"):] == resolved_module[resolved_module.rfind("/"):]:
        return imported
    relative = os.path.relpath(resolved_module, os.path.dirname(file_name) or ".")
    rewritten = "./" + relative.replace(os.sep, "/")
    logger.debug(f"Index shorthand in {file_name}: {imported!r} -> {rewritten!r}")
    return rewritten
