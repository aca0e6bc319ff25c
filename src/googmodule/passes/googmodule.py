"""
goog.module conversion pass

Rewrites one CommonJS unit into a Closure goog.module:
- registers the unit's namespace in the manifest
- rewrites require / module.exports / export-star statements (StatementRewriter)
- inserts the prologue after any leading placeholders
- installs the `.default` print-time substitution

In JS transpilation mode only `require('tslib')` is rewritten and no prologue
is added; the unit is still registered.
"""

import logging

from ..shared.nodes import SourceUnit
from ..shared.factory import update_source_unit
from .base import BasePass
from .default_substitution import install_default_substitution
from .prologue import build_prologue, insert_prologue
from .statement_classifier import has_exports_assignment
from .statement_rewriter import StatementRewriter, rewrite_tslib_require

logger = logging.getLogger(__name__)


class GoogModulePass(BasePass):
    requires = []

    def install(self) -> None:
        install_default_substitution(self.context)

    def run(self, unit: SourceUnit) -> SourceUnit:
        host = self.context.host
        manifest = self.context.manifest

        module_name = host.path_to_module_name("", unit.file_name)
        manifest.add_module(unit.file_name, module_name)

        if host.is_js_transpilation:
            logger.debug(f"{unit.file_name}: JS transpilation, rewriting tslib require only")
            return update_source_unit(unit, [rewrite_tslib_require(s) for s in unit.statements])

        rewriter = StatementRewriter(host, manifest, unit.file_name)
        statements = rewriter.rewrite(unit.statements)
        header = build_prologue(
            module_name,
            host.file_name_to_module_id(unit.file_name),
            host.es5_mode,
            has_exports_assignment(unit.statements),
        )
        logger.debug(f"{unit.file_name}: goog.module('{module_name}'), "
                     f"{len(rewriter.bindings)} namespace(s) required")
        return update_source_unit(unit, insert_prologue(statements, header))
