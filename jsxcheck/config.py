#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
jsxcheck/config.py
══════════════════

Configuration model for jsxcheck.

A configuration file is JSON, shaped like an ESLint config::

    {
        "rules": {
            "no-allocation-in-props": ["error", {"allowArrays": true}]
        },
        "settings": {
            "react": {"pragma": "React"}
        }
    }

Each rule entry is either a bare level (``"off"``, ``"warn"``,
``"error"`` or ``0``/``1``/``2``) or a ``[level, options]`` pair.  Rule
options are validated by the rule itself (see ``RuleOptions``); this
module only validates the surrounding shape.

Everything here is resolved once, before any file is traversed, into
immutable records.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, ClassVar, Dict, Mapping, Optional, Union

from jsxcheck.errors import ConfigError

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_CONFIG_NAME",
    "DEFAULT_PRAGMA",
    "RuleLevel",
    "RuleConfig",
    "RuleOptions",
    "Settings",
    "LintConfig",
    "load_config",
    "find_default_config",
    "parse_level",
    "is_valid_pragma",
]

DEFAULT_CONFIG_NAME = ".jsxcheckrc.json"
DEFAULT_PRAGMA = "React"

_PRAGMA_RE = re.compile(r"^[a-zA-Z_$][a-zA-Z0-9_$]*$")

# Level names accepted in "rules" entries.  None means the rule is off.
RuleLevel = Optional[str]

_LEVELS: Dict[Union[str, int], RuleLevel] = {
    "off": None,
    0: None,
    "warn": "warning",
    1: "warning",
    "error": "error",
    2: "error",
}


def is_valid_pragma(name: str) -> bool:
    """True if *name* can be used as a JSX pragma identifier."""
    return bool(_PRAGMA_RE.match(name))


def parse_level(raw: Any, key: str = "") -> RuleLevel:
    """Translate an ESLint-style severity into ``None``/``"warning"``/``"error"``."""
    # bool is an int subclass; reject it explicitly
    if isinstance(raw, bool) or not isinstance(raw, (str, int)) or raw not in _LEVELS:
        raise ConfigError(
            f"invalid rule level {raw!r}; expected one of "
            "'off', 'warn', 'error', 0, 1, 2",
            key=key or None,
        )
    return _LEVELS[raw]


# ═════════════════════════════════════════════════════════════════════════
#  RULE OPTIONS
# ═════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class RuleOptions:
    """
    Options for ``no-allocation-in-props``.

    Attributes
    ----------
    allow_arrays          : array literals are allowed as prop values
    allow_objects         : object literals are allowed as prop values
    ignore_dom_components : skip host elements (``<div>``, ``createElement("div", ...)``)
    """
    allow_arrays: bool = False
    allow_objects: bool = False
    ignore_dom_components: bool = False

    # camelCase option name → attribute name
    KEYS: ClassVar[Dict[str, str]] = {
        "allowArrays": "allow_arrays",
        "allowObjects": "allow_objects",
        "ignoreDOMComponents": "ignore_dom_components",
    }

    @classmethod
    def from_mapping(
        cls, raw: Optional[Mapping[str, Any]], key: str = ""
    ) -> RuleOptions:
        """
        Validate a user-supplied options object.

        The accepted schema is an object of booleans with no additional
        properties; anything else raises ``ConfigError``.
        """
        if raw is None:
            return cls()
        if isinstance(raw, RuleOptions):
            return raw
        if not isinstance(raw, Mapping):
            raise ConfigError(
                f"options must be an object, got {type(raw).__name__}",
                key=key or None,
            )
        values: Dict[str, bool] = {}
        for name, value in raw.items():
            attr = cls.KEYS.get(name)
            if attr is None:
                raise ConfigError(
                    f"unknown option {name!r}; expected one of "
                    + ", ".join(sorted(cls.KEYS)),
                    key=key or None,
                )
            if not isinstance(value, bool):
                raise ConfigError(
                    f"option {name!r} must be a boolean, got {value!r}",
                    key=key or None,
                )
            values[attr] = value
        return cls(**values)

    def to_mapping(self) -> Dict[str, bool]:
        return {name: getattr(self, attr) for name, attr in self.KEYS.items()}


# ═════════════════════════════════════════════════════════════════════════
#  SHARED SETTINGS
# ═════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Settings:
    """Settings shared by all rules (``settings.react`` in the config file)."""
    pragma: str = DEFAULT_PRAGMA

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, Any]]) -> Settings:
        if not raw:
            return cls()
        if not isinstance(raw, Mapping):
            raise ConfigError("settings must be an object", key="settings")
        react = raw.get("react") or {}
        if not isinstance(react, Mapping):
            raise ConfigError("must be an object", key="settings.react")
        pragma = react.get("pragma", DEFAULT_PRAGMA)
        if not isinstance(pragma, str) or not is_valid_pragma(pragma):
            raise ConfigError(
                f"React pragma {pragma!r} is not a valid identifier",
                key="settings.react.pragma",
            )
        return cls(pragma=pragma)


# ═════════════════════════════════════════════════════════════════════════
#  WHOLE CONFIGURATION
# ═════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class RuleConfig:
    """Resolved entry of the ``rules`` table."""
    level: RuleLevel = "error"
    options: Mapping[str, Any] = field(default_factory=dict)

    @property
    def enabled(self) -> bool:
        return self.level is not None


@dataclass(frozen=True)
class LintConfig:
    """
    A fully parsed configuration.

    Rules absent from ``rules`` run with their default severity and
    default options.
    """
    rules: Mapping[str, RuleConfig] = field(default_factory=dict)
    settings: Settings = field(default_factory=Settings)
    source: Optional[str] = None

    @classmethod
    def from_dict(
        cls, raw: Mapping[str, Any], source: Optional[str] = None
    ) -> LintConfig:
        if not isinstance(raw, Mapping):
            raise ConfigError("configuration must be a JSON object", source=source)
        unknown = set(raw) - {"rules", "settings"}
        if unknown:
            raise ConfigError(
                "unknown top-level keys: " + ", ".join(sorted(unknown)),
                source=source,
            )

        rules: Dict[str, RuleConfig] = {}
        raw_rules = raw.get("rules") or {}
        if not isinstance(raw_rules, Mapping):
            raise ConfigError("must be an object", key="rules", source=source)
        for name, entry in raw_rules.items():
            key = f"rules.{name}"
            try:
                rules[name] = _parse_rule_entry(entry, key)
            except ConfigError as exc:
                raise ConfigError(str(exc), source=source) from exc

        try:
            settings = Settings.from_mapping(raw.get("settings"))
        except ConfigError as exc:
            raise ConfigError(str(exc), source=source) from exc

        return cls(rules=rules, settings=settings, source=source)

    def rule(self, name: str) -> Optional[RuleConfig]:
        return self.rules.get(name)

    def with_rule_options(self, name: str, **overrides: Any) -> LintConfig:
        """Return a copy whose options for *name* are updated with *overrides*."""
        current = self.rules.get(name) or RuleConfig()
        merged = dict(current.options)
        merged.update(overrides)
        rules = dict(self.rules)
        rules[name] = replace(current, options=merged)
        return replace(self, rules=rules)

    def with_settings(self, settings: Settings) -> LintConfig:
        return replace(self, settings=settings)


def _parse_rule_entry(entry: Any, key: str) -> RuleConfig:
    if isinstance(entry, (list, tuple)):
        if not entry or len(entry) > 2:
            raise ConfigError(
                "expected [level] or [level, options]", key=key
            )
        level = parse_level(entry[0], key)
        options = entry[1] if len(entry) == 2 else {}
        if not isinstance(options, Mapping):
            raise ConfigError("rule options must be an object", key=key)
        return RuleConfig(level=level, options=dict(options))
    return RuleConfig(level=parse_level(entry, key))


def load_config(path: Union[str, Path]) -> LintConfig:
    """Read and validate a JSON configuration file."""
    p = Path(path)
    logger.info("Loading configuration: %s", p)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read configuration: {exc.strerror}", source=str(p)) from exc
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(
            f"invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}",
            source=str(p),
        ) from exc
    return LintConfig.from_dict(raw, source=str(p))


def find_default_config(start: Union[str, Path, None] = None) -> Optional[Path]:
    """Return ``.jsxcheckrc.json`` in *start* (default: cwd) if it exists."""
    base = Path(start) if start is not None else Path.cwd()
    candidate = base / DEFAULT_CONFIG_NAME
    return candidate if candidate.is_file() else None

