from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, TextIO

from lark import Token


class C:
    """ANSI color/style escape codes."""
    RESET = "\x1b[0m"
    BOLD  = "\x1b[1m"
    DIM   = "\x1b[2m"
    RED   = "\x1b[31m"
    YELLOW = "\x1b[33m"
    CYAN  = "\x1b[36m"
    GRAY  = "\x1b[90m"


@dataclass
class Span:
    line: int
    col: int
    end_line: int
    end_col: int


@dataclass
class Diagnostic:
    kind: str
    code: str
    message: str
    span: Optional[Span] = None


def span_of(t: Any) -> Optional[Span]:
    """Source span of a lark Tree (via meta) or Token, if known."""
    m = getattr(t, "meta", None)
    if m is not None and not getattr(m, "empty", True):
        return Span(m.line, m.column, m.end_line, m.end_column)
    if isinstance(t, Token):
        line = getattr(t, "line", None)
        col = getattr(t, "column", None)
        end_line = getattr(t, "end_line", None)
        end_col = getattr(t, "end_column", None)
        if line is not None and col is not None:
            return Span(line, col, end_line or line, end_col or col)
    return None


def _display_path(filename: str) -> str:
    """Show paths below the cwd as ./relative, everything else by basename."""
    try:
        rel_path = Path(filename).resolve().relative_to(Path.cwd())
        return f"./{rel_path}"
    except (ValueError, OSError):
        return Path(filename).name


class Reporter:
    """Collects diagnostics for one script and renders them."""

    def __init__(self, source: Optional[str] = None, filename: str = "<input>") -> None:
        self.source = source
        self.filename = filename
        self.items: List[Diagnostic] = []

    def error(self, code: str, msg: str, span: Optional[Span]):
        self.items.append(Diagnostic("error", code, msg, span))

    def warn(self, code: str, msg: str, span: Optional[Span]):
        self.items.append(Diagnostic("warning", code, msg, span))

    @property
    def has_errors(self) -> bool:
        return any(d.kind == "error" for d in self.items)

    @property
    def has_warnings(self) -> bool:
        return any(d.kind == "warning" for d in self.items)

    @property
    def codes(self) -> List[str]:
        return [d.code for d in self.items]

    def exit_code(self) -> int:
        """0 = clean, 1 = warnings only, 2 = errors."""
        if self.has_errors:
            return 2
        if self.has_warnings:
            return 1
        return 0

    def _line_text(self, span: Span) -> str:
        if not self.source:
            return ""
        lines = self.source.splitlines()
        idx = span.line - 1
        return lines[idx] if 0 <= idx < len(lines) else ""

    def _header(self, d: Diagnostic, use_color: bool) -> str:
        filename = _display_path(self.filename) if self.filename != "<input>" else self.filename
        loc = f"{filename}:{d.span.line}:{d.span.col}" if d.span else filename

        # Ensure message ends with period
        message = d.message if d.message.endswith('.') else f"{d.message}."

        if not use_color:
            return f"{loc}: {d.kind} [{d.code}]: {message}"
        color = C.RED if d.kind == "error" else C.YELLOW
        kind = f"{C.BOLD}{color}{d.kind}{C.RESET}"
        return f"{C.CYAN}{loc}{C.RESET}: {kind} [{C.DIM}{d.code}{C.RESET}]: {message}"

    def format(self, use_color: bool = True, use_unicode: bool = True) -> str:
        """Render all diagnostics.

        use_color   → ANSI colorize location/kind/guide/markers
        use_unicode → use ╭ / │ / ╰ guides and a ┯ marker instead of ASCII
        """
        out: List[str] = []

        for d in self.items:
            head = self._header(d, use_color)
            if not d.span:
                out.append(head)
                continue

            line_text = self._line_text(d.span)
            # 1-based columns; ensure at least one column
            start = max(1, d.span.col)

            if not use_unicode:
                out.append(head)
                out.append(f"  | {line_text}")
                out.append(f"  ` {' ' * (start - 1)}^")
                continue

            gray = (lambda s: f"{C.GRAY}{s}{C.RESET}") if use_color else (lambda s: s)
            marker = " " * (start - 1) + "┯"
            if use_color:
                color = C.RED if d.kind == "error" else C.YELLOW
                marker = f"{color}{marker}{C.RESET}"

            out.append(f"{gray('  ╭──┤ ')}{head}")
            out.append(f"{gray('  │')}  {line_text}")
            out.append(f"{gray('  │')}  {marker}")
            out.append(f"{gray('  ╰' + '─' * start)}{gray('╯')}")

        return "\n".join(out)

    def print(self, stream: Optional[TextIO] = None, use_color: Optional[bool] = None,
              use_unicode: Optional[bool] = None) -> None:
        """Print diagnostics to `stream` (default: sys.stderr).

        Color is auto-enabled for TTY unless NO_COLOR or TERM=dumb.
        Unicode guides are auto-enabled for TTY unless NO_UNICODE or TERM=dumb.
        """
        import os, sys
        stream = stream or sys.stderr

        is_tty = getattr(stream, "isatty", lambda: False)()
        dumb = os.getenv("TERM") == "dumb"

        if use_color is None:
            use_color = bool(is_tty and os.getenv("NO_COLOR") is None and not dumb)

        if use_unicode is None:
            use_unicode = bool(is_tty and os.getenv("NO_UNICODE") is None and not dumb)

        text = self.format(use_color=use_color, use_unicode=use_unicode)
        if text:
            print(text, file=stream)
