"""
Configuration constants to replace magic strings throughout googmodule
"""

# Namespace-URL specifiers: require('goog:some.namespace')
GOOG_NAMESPACE_PREFIX = "goog:"

# CommonJS shapes recognized by the rewrite
REQUIRE_FUNCTION = "require"
EXPORTS_IDENTIFIER = "exports"
MODULE_IDENTIFIER = "module"
DEFAULT_EXPORT_PROPERTY = "default"
USE_STRICT_DIRECTIVE = "use strict"
ES_MODULE_PROPERTY = "__esModule"

# TypeScript's export-star helpers (tslib importHelpers and inline emit)
EXPORT_STAR_HELPERS = ("__exportStar", "__export")

# Helper library rewritten in JS transpilation mode
TSLIB_MODULE = "tslib"

# Synthetic binding names: googmodule_1_, googmodule_2_, ...
MODULE_VAR_PREFIX = "googmodule_"
MODULE_VAR_SUFFIX = "_"
MODULE_VAR_COUNTER_START = 1

# Module resolution constants
TS_EXTENSIONS_PATTERN = r"(\.ts|\.d\.ts|\.js|\.jsx|\.tsx)$"
MODULE_NAME_EXTENSIONS_PATTERN = r"(\.d)?\.[tj]sx?$"
RESOLVABLE_EXTENSIONS = (".ts", ".tsx", ".d.ts", ".js", ".jsx")
PACKAGE_JSON_ENTRY_FIELDS = ("typings", "types", "main")
VENDORED_DEPENDENCY_DIR = "node_modules"
INDEX_FILE_STEM = "index"

# Printer constants
INDENT = "    "
NEWLINE = "\n"

# File encoding constants
DEFAULT_FILE_ENCODING = "utf-8"
