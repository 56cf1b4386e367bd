#!/usr/bin/env python3
"""
jsxcheck/reporter.py
════════════════════

Renders diagnostics produced by a ``CheckerRunner``.

Output formats
──────────────
  • text : Rust-style rendering with the offending source line and carets
           (coloured with termcolor when the stream is a terminal)
  • json : a single JSON array of ESLint-like message objects
  • gcc  : ``file:line:col: severity: message [rule]`` one-liners

Usage
─────
    from jsxcheck.reporter import Reporter

    rep = Reporter(fmt="text", stream=sys.stdout)
    rep.report(results)
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, TextIO

from termcolor import colored

from jsxcheck.checkers import CheckerRunResults, Diagnostic, DiagnosticSeverity

__all__ = [
    "FORMATS",
    "Reporter",
    "ReporterStats",
]

FORMATS = ("text", "json", "gcc")

_SEVERITY_COLORS: Dict[DiagnosticSeverity, str] = {
    DiagnosticSeverity.ERROR: "red",
    DiagnosticSeverity.WARNING: "yellow",
}


# ═════════════════════════════════════════════════════════════════════════
#  STATISTICS
# ═════════════════════════════════════════════════════════════════════════

@dataclass
class ReporterStats:
    """Aggregate counts per severity."""
    error: int = 0
    warning: int = 0

    def record(self, severity: DiagnosticSeverity) -> None:
        attr = severity.value
        setattr(self, attr, getattr(self, attr) + 1)

    @property
    def total(self) -> int:
        return self.error + self.warning

    def summary_line(self) -> str:
        parts: List[str] = []
        if self.error:
            parts.append(f"{self.error} error{'s' if self.error != 1 else ''}")
        if self.warning:
            parts.append(f"{self.warning} warning{'s' if self.warning != 1 else ''}")
        if not parts:
            return "no problems found"
        return ", ".join(parts) + f" ({self.total} problem{'s' if self.total != 1 else ''})"


# ═════════════════════════════════════════════════════════════════════════
#  TEXT RENDERER
# ═════════════════════════════════════════════════════════════════════════

class _TextRenderer:
    """
    Rust-style view::

        error[no-allocation-in-props]: Props should not use array allocations
          --> src/App.jsx:3:6
         3 | <Foo bar={[1, 2, 3]} />
           |      ^^^^^^^^^^^^^^^
    """

    def __init__(self, stream: TextIO, color: bool) -> None:
        self._stream = stream
        self._color = color
        self._lines: Dict[str, List[str]] = {}

    def _paint(self, text: str, color: Optional[str] = None, attrs: Optional[List[str]] = None) -> str:
        if not self._color:
            return text
        return colored(text, color, attrs=attrs, force_color=True)

    def remember(self, path: str, text: str) -> None:
        self._lines[path] = text.splitlines()

    def _source_line(self, path: str, number: int) -> Optional[str]:
        if path not in self._lines:
            try:
                with open(path, "r", encoding="utf-8", errors="replace") as fh:
                    self._lines[path] = fh.read().splitlines()
            except OSError:
                self._lines[path] = []
        lines = self._lines[path]
        if 1 <= number <= len(lines):
            return lines[number - 1]
        return None

    def render(self, diag: Diagnostic) -> None:
        color = _SEVERITY_COLORS[diag.severity]
        out: List[str] = []

        # ── header: severity[rule]: message ──────────────────────────
        head = self._paint(f"{diag.severity.value}[{diag.rule_id}]", color, ["bold"])
        out.append(f"{head}: {self._paint(diag.message, attrs=['bold'])}")

        loc = diag.location
        arrow = self._paint("-->", "blue", ["bold"])
        out.append(f"  {arrow} {loc}")

        # ── source line with carets ──────────────────────────────────
        src = self._source_line(loc.file, loc.line) if loc.line else None
        if src is not None:
            gutter = str(loc.line)
            pipe = self._paint("|", "blue", ["bold"])
            out.append(f" {self._paint(gutter, 'blue', ['bold'])} {pipe} {src}")
            if loc.end_line == loc.line:
                width = max(loc.end_column - loc.column, 1)
            else:
                width = max(len(src) - loc.column + 1, 1)
            pad = " " * max(loc.column - 1, 0)
            marker = self._paint("^" * width, color, ["bold"])
            out.append(f" {' ' * len(gutter)} {pipe} {pad}{marker}")

        out.append("")
        self._stream.write("\n".join(out) + "\n")


# ═════════════════════════════════════════════════════════════════════════
#  REPORTER
# ═════════════════════════════════════════════════════════════════════════

class Reporter:
    """
    Writes diagnostics in one of ``FORMATS``.

    Parameters
    ----------
    fmt    : "text", "json" or "gcc"
    stream : output stream (default stdout)
    color  : colourise text output; ``None`` means "if the stream is a TTY"
    """

    def __init__(
        self,
        fmt: str = "text",
        stream: Optional[TextIO] = None,
        color: Optional[bool] = None,
    ) -> None:
        if fmt not in FORMATS:
            raise ValueError(f"unknown output format {fmt!r}")
        self.fmt = fmt
        self.stream = stream or sys.stdout
        if color is None:
            color = hasattr(self.stream, "isatty") and self.stream.isatty()
        self.color = color
        self.stats = ReporterStats()
        self._text = _TextRenderer(self.stream, color)

    def remember_source(self, path: str, text: str) -> None:
        """Supply source text for *path* so the text view need not reread it."""
        self._text.remember(path, text)

    def report(self, results: CheckerRunResults) -> None:
        self.write(results.diagnostics)

    def write(self, diagnostics: Iterable[Diagnostic]) -> None:
        diags = sorted(
            diagnostics,
            key=lambda d: (d.location.file, d.location.line, d.location.column),
        )
        for diag in diags:
            self.stats.record(diag.severity)

        if self.fmt == "json":
            json.dump([d.to_json() for d in diags], self.stream, indent=2)
            self.stream.write("\n")
        elif self.fmt == "gcc":
            for diag in diags:
                self.stream.write(diag.to_gcc_format() + "\n")
        else:
            for diag in diags:
                self._text.render(diag)
            self._write_summary()
        self.stream.flush()

    def _write_summary(self) -> None:
        line = self.stats.summary_line()
        if self.color:
            if self.stats.error:
                line = colored(line, "red", attrs=["bold"], force_color=True)
            elif self.stats.warning:
                line = colored(line, "yellow", attrs=["bold"], force_color=True)
            else:
                line = colored(line, "green", attrs=["bold"], force_color=True)
        self.stream.write(line + "\n")
