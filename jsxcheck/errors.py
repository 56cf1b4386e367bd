# jsxcheck/errors.py
"""
jsxcheck Error Types

Error Hierarchy:
────────────────
┌──────────────────────────────────────────────────────────────────┐
│  JsxCheckError (base)                                            │
│  ├── ConfigError   - invalid configuration file / rule options   │
│  ├── SourceError   - a source file cannot be read or decoded     │
│  └── ScopeError    - scope tracking integrity violated (fatal)   │
└──────────────────────────────────────────────────────────────────┘

``ConfigError`` and ``SourceError`` are user-facing: the CLI logs them
and exits with the infrastructure exit code.  ``ScopeError`` signals an
integration defect (a block entered twice, a lookup through a block that
was never entered) and always propagates out of the checker runner.

"No violation found" is never an exception; it is an ordinary ``None``
result from the classifier and the scope lookup.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "JsxCheckError",
    "ConfigError",
    "SourceError",
    "ScopeError",
]


class JsxCheckError(Exception):
    """Base class for all jsxcheck errors."""


class ConfigError(JsxCheckError):
    """
    Invalid configuration.

    Attributes
    ----------
    key    : dotted path of the offending entry (e.g. ``rules.no-allocation-in-props``)
    source : file the configuration was read from, if any
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        source: Optional[str] = None,
    ) -> None:
        self.key = key
        self.source = source
        parts = []
        if source:
            parts.append(source)
        if key:
            parts.append(key)
        prefix = ": ".join(parts)
        super().__init__(f"{prefix}: {message}" if prefix else message)


class SourceError(JsxCheckError):
    """A source file could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ScopeError(JsxCheckError):
    """Scope registry misuse; fatal to the traversal of the current file."""

    def __init__(self, message: str, block_id: Optional[int] = None) -> None:
        self.block_id = block_id
        if block_id is not None:
            message = f"{message} (block at offset {block_id})"
        super().__init__(message)
