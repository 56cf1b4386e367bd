#!/usr/bin/env python3
"""jsxcheck/cli.py — command-line entry point.

Usage examples
--------------
    # Check a file and a directory with the default configuration
    jsxcheck src/App.jsx src/components

    # Allow array literals, skip <div>/<span>/... elements
    jsxcheck --allow-arrays --ignore-dom-components src

    # Machine-readable output
    jsxcheck --format json src > report.json

    # Use a Preact-style pragma
    jsxcheck --pragma h src

Configuration is read from ``--config FILE`` or, when absent, from
``.jsxcheckrc.json`` in the current directory.  Command-line options
override the file.

Exit codes
----------
    0   No error-severity diagnostics.
    1   One or more diagnostics with severity ERROR were emitted.
    2   Infrastructure failure (bad configuration, unreadable file, ...).

The module doubles as ``python -m jsxcheck`` via ``jsxcheck/__main__.py``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterator, Optional, Sequence

from jsxcheck import __version__
from jsxcheck.ast_helper import JS_SUFFIXES, read_source
from jsxcheck.checkers import (
    CheckerRunner,
    CheckerRunResults,
    NoAllocationInPropsChecker,
    SuppressionManager,
    default_registry,
)
from jsxcheck.config import (
    LintConfig,
    Settings,
    find_default_config,
    is_valid_pragma,
    load_config,
)
from jsxcheck.errors import ConfigError, JsxCheckError, ScopeError, SourceError
from jsxcheck.reporter import FORMATS, Reporter

_log = logging.getLogger("jsxcheck")

# Exit codes ----------------------------------------------------------------

EXIT_OK: int = 0
EXIT_ERROR: int = 1
EXIT_INFRA: int = 2

_SKIPPED_DIRS = frozenset({"node_modules", ".git"})


# ===========================================================================
# Utility helpers
# ===========================================================================

def _configure_logging(verbosity: int) -> None:
    """Set up the ``jsxcheck`` logger.

    Parameters
    ----------
    verbosity:
        0 → WARNING, 1 → INFO, 2+ → DEBUG.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s [%(levelname)-5.5s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root = logging.getLogger("jsxcheck")
    for old in list(root.handlers):
        root.removeHandler(old)
    root.setLevel(level)
    root.addHandler(handler)


def iter_source_files(paths: Sequence[str]) -> Iterator[Path]:
    """Expand *paths* into files; directories are searched recursively.

    Raises ``SourceError`` for a path that does not exist.
    """
    for raw in paths:
        p = Path(raw)
        if p.is_dir():
            for child in sorted(p.rglob("*")):
                if _SKIPPED_DIRS.intersection(child.relative_to(p).parts):
                    continue
                if child.is_file() and child.suffix in JS_SUFFIXES:
                    yield child
        elif p.exists():
            yield p
        else:
            raise SourceError(raw, "no such file or directory")


def _build_config(args: argparse.Namespace) -> LintConfig:
    """Load the configuration file and apply command-line overrides."""
    if args.config:
        config = load_config(args.config)
    else:
        found = find_default_config()
        config = load_config(found) if found else LintConfig()

    overrides = {}
    if args.allow_arrays:
        overrides["allowArrays"] = True
    if args.allow_objects:
        overrides["allowObjects"] = True
    if args.ignore_dom_components:
        overrides["ignoreDOMComponents"] = True
    if overrides:
        config = config.with_rule_options(NoAllocationInPropsChecker.name, **overrides)

    if args.pragma is not None:
        if not is_valid_pragma(args.pragma):
            raise ConfigError(
                f"React pragma {args.pragma!r} is not a valid identifier",
                key="--pragma",
            )
        config = config.with_settings(Settings(pragma=args.pragma))
    return config


def _list_checkers() -> int:
    for cls in default_registry().get_all():
        print(f"{cls.name:<28} {cls.description}")
    return EXIT_OK


def _run(args: argparse.Namespace) -> int:
    config = _build_config(args)

    suppressions = SuppressionManager()
    for rule_id in args.suppress:
        suppressions.add_global_suppression(rule_id)

    runner = CheckerRunner(suppressions=suppressions, config=config)
    reporter = Reporter(
        fmt=args.format,
        stream=sys.stdout,
        color=False if args.no_color else None,
    )

    results = CheckerRunResults()
    for path in iter_source_files(args.paths):
        source = read_source(path)
        reporter.remember_source(source.path, source.text.decode("utf-8"))
        results.merge(runner.run(source))

    _log.info("%s", results.summary())
    reporter.report(results)
    return EXIT_ERROR if results.error_count else EXIT_OK


# ===========================================================================
# Argument parser
# ===========================================================================

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsxcheck",
        description=(
            "Report array and object literals passed as JSX props, "
            "directly or through a local const."
        ),
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="Files or directories to check.",
    )
    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        default=None,
        help="JSON configuration file (default: ./.jsxcheckrc.json if present).",
    )
    parser.add_argument(
        "--allow-arrays",
        action="store_true",
        help="Allow array literals as prop values.",
    )
    parser.add_argument(
        "--allow-objects",
        action="store_true",
        help="Allow object literals as prop values.",
    )
    parser.add_argument(
        "--ignore-dom-components",
        action="store_true",
        help="Do not check props of built-in elements such as <div>.",
    )
    parser.add_argument(
        "--pragma",
        metavar="NAME",
        default=None,
        help="Element factory namespace (default: React).",
    )
    parser.add_argument(
        "--suppress",
        metavar="RULE",
        action="append",
        default=[],
        help="Suppress all diagnostics of RULE (repeatable; '*' for all).",
    )
    parser.add_argument(
        "-f", "--format",
        choices=FORMATS,
        default="text",
        help="Output format (default: text).",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable coloured output.",
    )
    parser.add_argument(
        "--list-checkers",
        action="store_true",
        help="List available checkers and exit.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug).",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


# ===========================================================================
# Main entry point
# ===========================================================================

def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the jsxcheck CLI.

    Parameters
    ----------
    argv:
        Command-line arguments.  ``None`` → ``sys.argv[1:]``.

    Returns
    -------
    int
        Exit code (see module docstring for semantics).
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    if args.list_checkers:
        return _list_checkers()

    if not args.paths:
        parser.print_usage(sys.stderr)
        _log.error("no input paths given")
        return EXIT_INFRA

    try:
        return _run(args)
    except ConfigError as exc:
        _log.error("Configuration error: %s", exc)
        return EXIT_INFRA
    except SourceError as exc:
        _log.error("%s", exc)
        return EXIT_INFRA
    except ScopeError as exc:
        _log.error("Internal scope-tracking failure: %s", exc, exc_info=True)
        return EXIT_INFRA
    except JsxCheckError as exc:
        _log.error("%s", exc)
        return EXIT_INFRA
    except KeyboardInterrupt:
        _log.info("Interrupted by user.")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
