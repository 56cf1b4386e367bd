"""
jsxcheck — flags array and object literals passed as JSX props.

    from jsxcheck import lint_text

    for diag in lint_text("<Foo bar={[1, 2, 3]} />", "App.jsx"):
        print(diag.to_gcc_format())

Modules
-------
    allocation   Allocation Classifier
    scope        Scope Registry
    tracker      Binding Recorder and Usage Resolver
    checkers     checker framework, the rule, the runner
    directives   inline suppression comments
    reporter     text / json / gcc output
    config       configuration model
    cli          command line
"""

__version__ = "0.3.0"

from jsxcheck.allocation import ViolationKind, classify
from jsxcheck.checkers import (
    CheckerRunner,
    CheckerRunResults,
    Diagnostic,
    DiagnosticSeverity,
    NoAllocationInPropsChecker,
    lint_text,
)
from jsxcheck.config import LintConfig, RuleOptions, Settings, load_config
from jsxcheck.errors import ConfigError, JsxCheckError, ScopeError, SourceError

__all__ = [
    "__version__",
    "ViolationKind",
    "classify",
    "CheckerRunner",
    "CheckerRunResults",
    "Diagnostic",
    "DiagnosticSeverity",
    "NoAllocationInPropsChecker",
    "lint_text",
    "LintConfig",
    "RuleOptions",
    "Settings",
    "load_config",
    "ConfigError",
    "JsxCheckError",
    "ScopeError",
    "SourceError",
]
