"""CLI entry point: run `googmodule file.js ...` or `python -m googmodule file.js ...`."""

import logging
import os
import sys
from pathlib import Path


def main(argv=None) -> int:
    import argparse
    from .analysis.module_system.host import FileSystemHost
    from .analysis.module_system.manifest import ModulesManifest
    from .compiler.driver import GoogModuleDriver
    from .utils.io_utils import write_output_file

    parser = argparse.ArgumentParser(
        prog="googmodule",
        description="Rewrite TypeScript CommonJS output into Closure goog.module files.",
    )
    parser.add_argument("files", type=Path, nargs="+", metavar="FILE", help="CommonJS .js files")
    parser.add_argument("--root-dir", type=Path, default=Path("."),
                        help="Directory namespaces are derived relative to (default: .)")
    parser.add_argument("-o", "--out-dir", type=Path, default=None,
                        help="Write outputs here, mirroring paths under --root-dir (default: stdout)")
    parser.add_argument("--manifest", type=Path, default=None, help="Write the modules manifest as JSON")
    parser.add_argument("--es5", action="store_true", help="Omit `module = module;` and `exports = {};`")
    parser.add_argument("--js-transpilation", action="store_true",
                        help="Only rewrite require('tslib'); no prologue")
    parser.add_argument("--convert-index-import-shorthand", action="store_true",
                        help="Resolve directory imports to their index file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )

    root_dir = args.root_dir.resolve()
    host = FileSystemHost(
        root_dir,
        es5_mode=args.es5,
        is_js_transpilation=args.js_transpilation,
        convert_index_import_shorthand=args.convert_index_import_shorthand,
    )
    manifest = ModulesManifest()
    driver = GoogModuleDriver(host, manifest)

    status = 0
    for file in args.files:
        path = file.resolve()
        if not path.is_file():
            sys.stderr.write(f"googmodule: error: not a file: {path}\n")
            status = 1
            continue
        relative = os.path.relpath(path, root_dir)
        if args.out_dir is not None and relative.split(os.sep)[0] == os.pardir:
            sys.stderr.write(f"googmodule: error: {path} is outside --root-dir {root_dir}; not written\n")
            status = 1
            continue
        result = driver.compile_file(path)
        if not result.success:
            status = 1
            continue
        if args.out_dir is None:
            sys.stdout.write(result.output)
        else:
            write_output_file(args.out_dir / relative, result.output)

    if driver.reporter.errors:
        driver.reporter.print_errors()
    if args.manifest is not None:
        manifest.write_json(args.manifest)
    return status


if __name__ == "__main__":
    sys.exit(main())
