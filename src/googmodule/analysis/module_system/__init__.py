"""
Module system: specifier resolution, namespace policy, build manifest.
"""

from .path_resolver import PathResolver, ModuleResolutionError, resolve_index_shorthand
from .host import ProcessorHost, FileSystemHost
from .manifest import ModulesManifest

__all__ = [
    'PathResolver',
    'ModuleResolutionError',
    'resolve_index_shorthand',
    'ProcessorHost',
    'FileSystemHost',
    'ModulesManifest',
]
