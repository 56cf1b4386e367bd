"""
jsxcheck/checkers.py
════════════════════

Checker framework and the ``no-allocation-in-props`` rule.

Architecture
────────────

  ┌─────────────────────────────────────────────────────────┐
  │                   CheckerRunner                         │
  │  ┌──────────────────────────────┐                       │
  │  │ NoAllocationInPropsChecker   │  (one per file)       │
  │  └──────────────┬───────────────┘                       │
  │                 │                                       │
  │  ┌──────────────▼────────────────────────────────────┐  │
  │  │              Evidence Collection                  │  │
  │  │  tracker (AllocationTracker) │ scope │ allocation │  │
  │  └──────────────────────────┬────────────────────────┘  │
  │                             │                           │
  │  ┌──────────────────────────▼────────────────────────┐  │
  │  │           SuppressionManager                      │  │
  │  │  // jsxcheck-disable…  │  global (--suppress)     │  │
  │  └──────────────────────────┬────────────────────────┘  │
  │                             │                           │
  │  ┌──────────────────────────▼────────────────────────┐  │
  │  │        Diagnostic Formatter (JSON / gcc / text)   │  │
  │  └───────────────────────────────────────────────────┘  │
  └─────────────────────────────────────────────────────────┘

Each Checker follows a four-phase lifecycle:

  1. **configure()**        — pick up options and severity from the context
  2. **collect_evidence()** — walk the tree, gather violation sites
  3. **diagnose()**         — turn sites into Diagnostics
  4. **report()**           — return Diagnostics (filtered by suppressions)

Every file gets a fresh checker instance, so per-file state (the scope
registry in particular) is never shared between files.
"""

from __future__ import annotations

import json
import logging
import time
from abc import ABC, abstractmethod
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import (
    Any,
    ClassVar,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Set,
    Tuple,
    Type,
    Union,
)

from jsxcheck.allocation import ViolationKind
from jsxcheck.ast_helper import Node, SourceFile, first_error_node, parse_source, read_source
from jsxcheck.config import LintConfig, RuleOptions, Settings
from jsxcheck.directives import Directive, DirectiveKind, iter_directives
from jsxcheck.errors import ScopeError
from jsxcheck.jsx_util import ElementCapabilities, ReactCapabilities
from jsxcheck.tracker import AllocationTracker

logger = logging.getLogger(__name__)


# ═════════════════════════════════════════════════════════════════════════
#  PART 1 — DIAGNOSTIC MODEL
# ═════════════════════════════════════════════════════════════════════════

class DiagnosticSeverity(Enum):
    """Severity levels, as configured per rule."""
    ERROR = "error"
    WARNING = "warning"

    @classmethod
    def from_level(cls, level: Optional[str], default: DiagnosticSeverity) -> DiagnosticSeverity:
        if level is None:
            return default
        return cls(level)


@dataclass(frozen=True)
class SourceLocation:
    """A span in source code; lines and columns are 1-based."""
    file: str = ""
    line: int = 0
    column: int = 0
    end_line: int = 0
    end_column: int = 0

    def __str__(self) -> str:
        if self.column:
            return f"{self.file}:{self.line}:{self.column}"
        return f"{self.file}:{self.line}"

    @property
    def position(self) -> Tuple[int, int]:
        return (self.line, self.column)


@dataclass(frozen=True)
class Diagnostic:
    """
    A single diagnostic finding.

    Attributes
    ----------
    rule_id    : Rule that produced it (e.g., "no-allocation-in-props")
    message    : Human-readable description
    severity   : DiagnosticSeverity
    location   : Anchor node span
    message_id : Stable message key within the rule (e.g., "array")
    fatal      : True for parse failures; never suppressible
    """
    rule_id: str
    message: str
    severity: DiagnosticSeverity
    location: SourceLocation
    message_id: str = ""
    fatal: bool = False

    def to_json(self) -> Dict[str, Any]:
        """Serialize to an ESLint-like message object."""
        result: Dict[str, Any] = {
            "file": self.location.file,
            "ruleId": self.rule_id,
            "severity": self.severity.value,
            "message": self.message,
            "line": self.location.line,
            "column": self.location.column,
            "endLine": self.location.end_line,
            "endColumn": self.location.end_column,
        }
        if self.message_id:
            result["messageId"] = self.message_id
        if self.fatal:
            result["fatal"] = True
        return result

    def to_json_str(self) -> str:
        """Single-line JSON string."""
        return json.dumps(self.to_json())

    def to_gcc_format(self) -> str:
        """GCC-style diagnostic string: file:line:col: severity: message."""
        sev = self.severity.value
        return f"{self.location}: {sev}: {self.message} [{self.rule_id}]"


def _node_location(source: SourceFile, node: Node) -> SourceLocation:
    line, column, end_line, end_column = source.location(node)
    return SourceLocation(
        file=source.path,
        line=line,
        column=column,
        end_line=end_line,
        end_column=end_column,
    )


# ═════════════════════════════════════════════════════════════════════════
#  PART 2 — SUPPRESSION MANAGER
# ═════════════════════════════════════════════════════════════════════════

class SuppressionManager:
    """
    Manages diagnostic suppressions from multiple sources.

    Sources:
      1. Line comments:    ``// jsxcheck-disable-line``,
                           ``// jsxcheck-disable-next-line``
      2. Region comments:  ``/* jsxcheck-disable */`` … ``/* jsxcheck-enable */``
      3. Global suppressions (command-line or config)

    Usage
    -----
    >>> sm = SuppressionManager()
    >>> sm.load_inline_suppressions(source)
    >>> sm.add_global_suppression("no-allocation-in-props")
    >>> if not sm.is_suppressed(diagnostic):
    ...     emit(diagnostic)
    """

    def __init__(self) -> None:
        # {(file, line)} → set of rule ids suppressed at that line ("*" = all)
        self._inline: Dict[Tuple[str, int], Set[str]] = defaultdict(set)
        # file → region directives in source order
        self._regions: Dict[str, List[Directive]] = defaultdict(list)
        # globally suppressed rule ids
        self._global: Set[str] = set()

    def load_inline_suppressions(self, source: SourceFile) -> None:
        """Scan the comments of *source* for directives."""
        file = source.path
        self._regions.pop(file, None)
        for key in [k for k in self._inline if k[0] == file]:
            del self._inline[key]

        for directive in iter_directives(source):
            rules = set(directive.rules) or {"*"}
            if directive.kind is DirectiveKind.DISABLE_LINE:
                self._inline[(file, directive.line)].update(rules)
            elif directive.kind is DirectiveKind.DISABLE_NEXT_LINE:
                self._inline[(file, directive.end_line + 1)].update(rules)
            else:
                self._regions[file].append(directive)
        logger.debug(
            "%s: %d line suppressions, %d region directives",
            file,
            sum(1 for k in self._inline if k[0] == file),
            len(self._regions.get(file, [])),
        )

    def add_global_suppression(self, rule_id: str) -> None:
        """Globally suppress ``rule_id``."""
        self._global.add(rule_id)

    def _region_disabled(self, file: str, rule_id: str, position: Tuple[int, int]) -> bool:
        disabled = False
        for directive in self._regions.get(file, []):
            if (directive.line, directive.column) > position:
                break
            if directive.applies_to(rule_id):
                disabled = directive.kind is DirectiveKind.DISABLE
        return disabled

    def is_suppressed(self, diag: Diagnostic) -> bool:
        """Check whether a diagnostic should be suppressed."""
        if diag.fatal:
            return False
        rid = diag.rule_id

        # Global
        if rid in self._global or "*" in self._global:
            return True

        loc = diag.location
        ids = self._inline.get((loc.file, loc.line), set())
        if rid in ids or "*" in ids:
            return True

        return self._region_disabled(loc.file, rid, loc.position)

    def filter_diagnostics(
        self, diagnostics: Iterable[Diagnostic]
    ) -> List[Diagnostic]:
        """Return only non-suppressed diagnostics."""
        return [d for d in diagnostics if not self.is_suppressed(d)]


# ═════════════════════════════════════════════════════════════════════════
#  PART 3 — CHECKER BASE CLASS
# ═════════════════════════════════════════════════════════════════════════

class Checker(ABC):
    """
    Abstract base class for all checkers.

    Lifecycle
    ─────────
      1. ``configure(ctx)``        — receive context, read options
      2. ``collect_evidence(ctx)``  — walk the tree
      3. ``diagnose(ctx)``          — correlate evidence into diagnostics
      4. ``report(ctx)``            — yield final diagnostics

    Subclass Contract
    ─────────────────
      - Override ``name``, ``description``, ``messages``
      - Implement ``collect_evidence()`` and ``diagnose()``
      - Override ``resolve_options()`` to validate rule options
    """

    # ── Metadata (override in subclasses) ────────────────────────────

    name: ClassVar[str] = "base-checker"
    description: ClassVar[str] = ""
    messages: ClassVar[Mapping[str, str]] = {}  # message_id → text
    default_severity: ClassVar[DiagnosticSeverity] = DiagnosticSeverity.ERROR

    def __init__(self) -> None:
        self._diagnostics: List[Diagnostic] = []
        self._severity: DiagnosticSeverity = self.default_severity
        self._options: Any = None

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return list(self._diagnostics)

    @classmethod
    def resolve_options(cls, raw: Optional[Mapping[str, Any]]) -> Any:
        """
        Validate raw options from the configuration.

        Called once per run, before any file is analysed; raise
        ``ConfigError`` on invalid input.
        """
        return dict(raw or {})

    def configure(self, ctx: CheckerContext) -> None:
        """
        Called before evidence collection.

        Default implementation picks up the resolved options and the
        configured severity.
        """
        self._options = ctx.get_option(self.name)
        self._severity = ctx.severity_for(self.name, self.default_severity)

    @abstractmethod
    def collect_evidence(self, ctx: CheckerContext) -> None:
        """Walk the syntax tree and gather violation sites."""
        ...

    @abstractmethod
    def diagnose(self, ctx: CheckerContext) -> None:
        """
        Correlate evidence into Diagnostic objects.

        Append diagnostics to ``self._diagnostics``.
        """
        ...

    def report(self, ctx: CheckerContext) -> List[Diagnostic]:
        """
        Return final diagnostics, filtered by suppressions.

        Normally you don't need to override this.
        """
        return ctx.suppressions.filter_diagnostics(self._diagnostics)

    def _emit(self, ctx: CheckerContext, node: Node, message_id: str) -> None:
        """Helper to create and store a diagnostic anchored at *node*."""
        self._diagnostics.append(Diagnostic(
            rule_id=self.name,
            message=self.messages[message_id],
            severity=self._severity,
            location=_node_location(ctx.source, node),
            message_id=message_id,
        ))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} '{self.name}'>"


@dataclass
class CheckerContext:
    """
    Shared context passed to every checker for one file.

    Attributes
    ----------
    source       : parsed SourceFile
    capabilities : element-construction predicates for this file
    suppressions : SuppressionManager
    options      : resolved options keyed by checker name
    severities   : configured severity keyed by checker name
    settings     : shared Settings
    stats        : mutable dict for timing / counting statistics
    """
    source: SourceFile
    capabilities: ElementCapabilities
    suppressions: SuppressionManager = field(default_factory=SuppressionManager)
    options: Dict[str, Any] = field(default_factory=dict)
    severities: Dict[str, DiagnosticSeverity] = field(default_factory=dict)
    settings: Settings = field(default_factory=Settings)
    stats: Dict[str, Any] = field(default_factory=dict)

    def get_option(self, key: str, default: Any = None) -> Any:
        return self.options.get(key, default)

    def severity_for(self, name: str, default: DiagnosticSeverity) -> DiagnosticSeverity:
        return self.severities.get(name, default)


# ═════════════════════════════════════════════════════════════════════════
#  PART 4 — CHECKER REGISTRY
# ═════════════════════════════════════════════════════════════════════════

class CheckerRegistry:
    """
    Registry of available checkers with discovery and filtering.

    Usage
    -----
    >>> registry = CheckerRegistry()
    >>> registry.register(NoAllocationInPropsChecker)
    >>> checkers = registry.get_enabled()
    """

    def __init__(self) -> None:
        self._checkers: Dict[str, Type[Checker]] = {}
        self._disabled: Set[str] = set()

    def register(self, checker_cls: Type[Checker]) -> None:
        """Register a checker class."""
        self._checkers[checker_cls.name] = checker_cls

    def unregister(self, name: str) -> None:
        """Remove a checker by name."""
        self._checkers.pop(name, None)

    def disable(self, name: str) -> None:
        """Disable a registered checker."""
        self._disabled.add(name)

    def enable(self, name: str) -> None:
        """Re-enable a disabled checker."""
        self._disabled.discard(name)

    def get_all(self) -> List[Type[Checker]]:
        """Return all registered checker classes."""
        return list(self._checkers.values())

    def get_enabled(self) -> List[Type[Checker]]:
        """Return only enabled checker classes."""
        return [
            cls for name, cls in self._checkers.items()
            if name not in self._disabled
        ]

    def get_by_name(self, name: str) -> Optional[Type[Checker]]:
        return self._checkers.get(name)

    @property
    def names(self) -> List[str]:
        return sorted(self._checkers.keys())


# ═════════════════════════════════════════════════════════════════════════
#  PART 5 — PRODUCTION CHECKERS
# ═════════════════════════════════════════════════════════════════════════

class NoAllocationInPropsChecker(Checker):
    """
    Disallow array and object literals as props values.

    Detects literals passed directly:

        <Foo bar={[1, 2, 3]} />
        React.createElement(Foo, { bar: { foo: 1 } })

    and through a ``const`` declared in an enclosing block:

        const style = { color: "red" };
        return <Foo style={style} />;

    Options: ``allowArrays``, ``allowObjects``, ``ignoreDOMComponents``.
    """

    name: ClassVar[str] = "no-allocation-in-props"
    description: ClassVar[str] = "Disallow array and object literals as props values."
    messages: ClassVar[Mapping[str, str]] = {
        kind.message_id: kind.message for kind in ViolationKind
    }

    def __init__(self) -> None:
        super().__init__()
        self._violations: List[Tuple[Node, ViolationKind]] = []
        self._seen: Set[Tuple[int, int, str]] = set()

    @classmethod
    def resolve_options(cls, raw: Optional[Mapping[str, Any]]) -> RuleOptions:
        return RuleOptions.from_mapping(raw, key=f"rules.{cls.name}")

    @property
    def options(self) -> RuleOptions:
        return self._options or RuleOptions()

    def report_violation(self, node: Node, kind: ViolationKind) -> None:
        """Record one violation at *node*; repeated reports for a node are dropped."""
        key = (node.start_byte, node.end_byte, node.type)
        if key in self._seen:
            return
        self._seen.add(key)
        self._violations.append((node, kind))

    def collect_evidence(self, ctx: CheckerContext) -> None:
        tracker = AllocationTracker(
            options=self.options,
            capabilities=ctx.capabilities,
            report=self.report_violation,
        )
        tracker.walk(ctx.source.root)
        ctx.stats[f"{self.name}_blocks"] = len(tracker.registry)

    def diagnose(self, ctx: CheckerContext) -> None:
        for node, kind in self._violations:
            self._emit(ctx, node, kind.message_id)


# ═════════════════════════════════════════════════════════════════════════
#  PART 6 — CHECKER RUNNER
# ═════════════════════════════════════════════════════════════════════════

# Default registry with all built-in checkers
_DEFAULT_REGISTRY = CheckerRegistry()
_DEFAULT_REGISTRY.register(NoAllocationInPropsChecker)

PARSE_ERROR_ID = "parse-error"
INTERNAL_ERROR_ID = "checker-internal-error"


def default_registry() -> CheckerRegistry:
    return _DEFAULT_REGISTRY


@dataclass
class CheckerRunResults:
    """
    Aggregate results from running a suite of checkers.

    Attributes
    ----------
    diagnostics            : All diagnostics from all checkers
    diagnostics_by_checker : Diagnostics grouped by checker name
    stats                  : Timing and counting statistics
    checker_names          : Names of checkers that were run
    files                  : Paths of the files that were analysed
    """
    diagnostics: List[Diagnostic] = field(default_factory=list)
    diagnostics_by_checker: Dict[str, List[Diagnostic]] = field(
        default_factory=lambda: defaultdict(list)
    )
    stats: Dict[str, Any] = field(default_factory=dict)
    checker_names: List[str] = field(default_factory=list)
    files: List[str] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(
            1 for d in self.diagnostics
            if d.severity == DiagnosticSeverity.ERROR
        )

    @property
    def warning_count(self) -> int:
        return sum(
            1 for d in self.diagnostics
            if d.severity == DiagnosticSeverity.WARNING
        )

    @property
    def total_count(self) -> int:
        return len(self.diagnostics)

    def by_severity(self, severity: DiagnosticSeverity) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity == severity]

    def by_file(self, file: str) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.location.file == file]

    def by_rule(self, rule_id: str) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.rule_id == rule_id]

    def merge(self, other: CheckerRunResults) -> None:
        """Fold the results of another run into this one."""
        self.diagnostics.extend(other.diagnostics)
        for name, diags in other.diagnostics_by_checker.items():
            self.diagnostics_by_checker[name].extend(diags)
        for key, val in other.stats.items():
            # Accumulate times and counts
            self.stats[key] = self.stats.get(key, 0) + val
        for name in other.checker_names:
            if name not in self.checker_names:
                self.checker_names.append(name)
        self.files.extend(other.files)

    def to_json_lines(self) -> str:
        """Format all diagnostics as JSON lines."""
        return "\n".join(d.to_json_str() for d in self.diagnostics)

    def to_gcc_format(self) -> str:
        """Format all diagnostics in GCC-style."""
        return "\n".join(d.to_gcc_format() for d in self.diagnostics)

    def summary(self) -> str:
        """Human-readable summary."""
        lines = [
            f"Checker run complete: {self.total_count} diagnostics "
            f"({self.error_count} errors, {self.warning_count} warnings) "
            f"in {len(self.files)} files",
        ]
        for name in self.checker_names:
            count = len(self.diagnostics_by_checker.get(name, []))
            elapsed = self.stats.get(f"{name}_elapsed_ms", 0)
            lines.append(f"  {name}: {count} findings ({elapsed:.1f}ms)")
        return "\n".join(lines)


class CheckerRunner:
    """
    Runs a suite of checkers against parsed source files.

    Usage
    -----
    >>> runner = CheckerRunner()
    >>> results = runner.run(parse_source("<Foo bar={[]} />"))
    >>> print(results.summary())

    >>> # With a configuration and several files:
    >>> runner = CheckerRunner(config=load_config(".jsxcheckrc.json"))
    >>> results = runner.run_paths(["src/App.jsx", "src/List.jsx"])

    Parameters for constructor
    ─────────────────────────
    registry    : CheckerRegistry — source of checker classes
    suppressions: SuppressionManager — pre-loaded suppression rules
    config      : LintConfig — rule levels, rule options and settings

    Rule options are validated here, so a bad configuration fails with
    ``ConfigError`` before any file is read.
    """

    def __init__(
        self,
        registry: Optional[CheckerRegistry] = None,
        suppressions: Optional[SuppressionManager] = None,
        config: Optional[LintConfig] = None,
    ) -> None:
        self.registry = registry or _DEFAULT_REGISTRY
        self.suppressions = suppressions or SuppressionManager()
        self.config = config or LintConfig()
        self._options: Dict[str, Any] = {}
        self._severities: Dict[str, DiagnosticSeverity] = {}
        for cls in self.registry.get_all():
            rule = self.config.rule(cls.name)
            self._options[cls.name] = cls.resolve_options(rule.options if rule else None)
            if rule is not None and rule.enabled:
                self._severities[cls.name] = DiagnosticSeverity.from_level(
                    rule.level, cls.default_severity
                )

    def _selected(self, checkers: Optional[Sequence[str]]) -> List[Type[Checker]]:
        if checkers is not None:
            selected: List[Type[Checker]] = []
            for name in checkers:
                cls = self.registry.get_by_name(name)
                if cls is None:
                    logger.warning("Unknown checker %r ignored", name)
                else:
                    selected.append(cls)
            return selected
        enabled = []
        for cls in self.registry.get_enabled():
            rule = self.config.rule(cls.name)
            if rule is not None and not rule.enabled:
                logger.debug("Checker %s is off in configuration", cls.name)
                continue
            enabled.append(cls)
        return enabled

    def _parse_failure(self, source: SourceFile) -> Diagnostic:
        node = first_error_node(source.root) or source.root
        location = _node_location(source, node)
        what = "missing token" if node.is_missing else "unexpected token"
        return Diagnostic(
            rule_id=PARSE_ERROR_ID,
            message=f"Parsing error: {what}",
            severity=DiagnosticSeverity.ERROR,
            location=location,
            fatal=True,
        )

    def run(
        self,
        source: SourceFile,
        checkers: Optional[Sequence[str]] = None,
    ) -> CheckerRunResults:
        """
        Run checkers against a single parsed file.

        Parameters
        ----------
        source   : SourceFile
        checkers : list of checker names to run (None = all enabled)

        Returns
        -------
        CheckerRunResults
        """
        results = CheckerRunResults(files=[source.path])

        if source.has_error:
            diag = self._parse_failure(source)
            logger.info("%s: %s", diag.location, diag.message)
            results.diagnostics.append(diag)
            return results

        self.suppressions.load_inline_suppressions(source)

        ctx = CheckerContext(
            source=source,
            capabilities=ReactCapabilities.for_source(source, self.config.settings),
            suppressions=self.suppressions,
            options=self._options,
            severities=self._severities,
            settings=self.config.settings,
        )

        for cls in self._selected(checkers):
            checker = cls()
            checker_name = cls.name
            results.checker_names.append(checker_name)

            t0 = time.monotonic()
            try:
                checker.configure(ctx)
                checker.collect_evidence(ctx)
                checker.diagnose(ctx)
                diags = checker.report(ctx)
            except ScopeError:
                logger.error("%s: scope tracking failed in %s", source.path, checker_name)
                raise
            except Exception as exc:
                # Graceful degradation: report the failure, don't crash
                logger.exception("%s: checker %s failed", source.path, checker_name)
                diags = [Diagnostic(
                    rule_id=INTERNAL_ERROR_ID,
                    message=f"Checker '{checker_name}' failed: {exc}",
                    severity=DiagnosticSeverity.ERROR,
                    location=SourceLocation(file=source.path),
                )]
            elapsed_ms = (time.monotonic() - t0) * 1000.0

            results.diagnostics.extend(diags)
            results.diagnostics_by_checker[checker_name] = diags
            results.stats[f"{checker_name}_elapsed_ms"] = elapsed_ms

        results.stats.update(ctx.stats)
        return results

    def run_paths(
        self,
        paths: Iterable[Union[str, Path]],
        checkers: Optional[Sequence[str]] = None,
    ) -> CheckerRunResults:
        """
        Read, parse and check each file in *paths*.

        Raises ``SourceError`` for files that cannot be read.
        """
        combined = CheckerRunResults()
        for path in paths:
            source = read_source(path)
            combined.merge(self.run(source, checkers=checkers))
        return combined


# ═════════════════════════════════════════════════════════════════════════
#  PART 7 — CONVENIENCE ENTRY POINT
# ═════════════════════════════════════════════════════════════════════════

def lint_text(
    text: str,
    path: str = "<input>",
    options: Optional[Mapping[str, Any]] = None,
    settings: Optional[Settings] = None,
) -> List[Diagnostic]:
    """
    Check a source string with ``no-allocation-in-props``.

    Parameters
    ----------
    text     : JavaScript/JSX source
    path     : display path for diagnostics
    options  : rule options (``{"allowArrays": True}``)
    settings : shared settings (pragma)

    Returns
    -------
    Diagnostics in source order
    """
    config = LintConfig(settings=settings or Settings())
    if options:
        config = config.with_rule_options(NoAllocationInPropsChecker.name, **options)
    runner = CheckerRunner(config=config)
    return runner.run(parse_source(text, path)).diagnostics


# ═════════════════════════════════════════════════════════════════════════
#  PART 8 — PUBLIC API
# ═════════════════════════════════════════════════════════════════════════

__all__ = [
    # Diagnostic model
    "Diagnostic",
    "DiagnosticSeverity",
    "SourceLocation",
    # Suppression
    "SuppressionManager",
    # Checker framework
    "Checker",
    "CheckerContext",
    "CheckerRegistry",
    "default_registry",
    # Production checkers
    "NoAllocationInPropsChecker",
    # Runner
    "CheckerRunner",
    "CheckerRunResults",
    "PARSE_ERROR_ID",
    "INTERNAL_ERROR_ID",
    # Entry point
    "lint_text",
]
