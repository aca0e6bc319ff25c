"""
Modules manifest: which file provides which namespace, and which namespaces
each file references. Accumulated across every unit of a build.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from ...utils.io_utils import write_output_file

logger = logging.getLogger(__name__)


class ModulesManifest:
    """
    Insertion-ordered, de-duplicated record of provided and referenced namespaces.

    add_module(file, ns) is called once per unit; add_referenced_module(file, ns)
    once per distinct namespace the unit requires.
    """

    def __init__(self) -> None:
        self._module_to_file_name: Dict[str, str] = {}
        self._referenced_modules: Dict[str, List[str]] = {}

    def add_module(self, file_name: str, module: str) -> None:
        logger.debug(f"Manifest: {file_name} provides {module}")
        self._module_to_file_name[module] = file_name
        self._referenced_modules[file_name] = []

    def add_referenced_module(self, file_name: str, resolved_module: str) -> None:
        referenced = self._referenced_modules.setdefault(file_name, [])
        if resolved_module not in referenced:
            logger.debug(f"Manifest: {file_name} references {resolved_module}")
            referenced.append(resolved_module)

    @property
    def modules(self) -> List[str]:
        return list(self._module_to_file_name)

    @property
    def file_names(self) -> List[str]:
        return list(self._referenced_modules)

    def get_file_name_from_module(self, module: str) -> Optional[str]:
        return self._module_to_file_name.get(module)

    def get_referenced_modules(self, file_name: str) -> List[str]:
        return list(self._referenced_modules.get(file_name, []))

    def to_dict(self) -> Dict[str, Dict]:
        return {
            "modules": dict(self._module_to_file_name),
            "referencedModules": {f: list(m) for f, m in self._referenced_modules.items()},
        }

    def write_json(self, path: Union[Path, str]) -> Path:
        return write_output_file(path, json.dumps(self.to_dict(), indent=2) + "\n")
