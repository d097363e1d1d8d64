"""PowerShell expression building for BurntToast cmdlets.

Values placed into an argument table are either bare tokens (for example a
nested ``$(New-BTHeader ...)`` expression) or double-quoted literals produced
by :func:`quote_and_sanitize`. Raw text must go through the quoting helpers
exactly once; sanitizing already escaped text doubles its quotes again.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Sequence

ArgumentTable = Sequence[tuple[str, Any]]

_CONTROL_CHARS = re.compile(r"[\r\n\t]+")


def sanitize(text: Any) -> str | None:
    """Make text safe to embed inside a double-quoted PowerShell literal."""
    if text is None:
        return None
    if not isinstance(text, str):
        return ""
    cleaned = _CONTROL_CHARS.sub("", text).rstrip()
    return cleaned.replace('"', '""')


def quote_and_sanitize(text: Any) -> str | None:
    """Sanitize text and wrap it in double quotes, keeping ``None`` as ``None``."""
    sanitized = sanitize(text)
    if sanitized is None:
        return None
    return f'"{sanitized}"'


def join_multiline_text(text: str | Iterable[str | None] | None) -> str | None:
    """Quote a single string, or comma-join a list of strings into a text block."""
    if text is None or isinstance(text, str):
        return quote_and_sanitize(text)
    lines = [quoted for quoted in (quote_and_sanitize(line) for line in text) if quoted is not None]
    if not lines:
        return None
    return ",".join(lines)


def format_arguments(arguments: ArgumentTable) -> str:
    """Render present arguments as ``-Name Value`` fragments in table order."""
    fragments: list[str] = []
    for name, value in arguments:
        if value is None:
            continue
        token = value if isinstance(value, str) else ""
        fragments.append(f"-{name} {token}" if token else f"-{name}")
    return " ".join(fragments)


def build_invocation(object_type: str, arguments: ArgumentTable) -> str:
    """Build a ``$(New-<object_type> ...)`` sub-expression."""
    return f"$(New-{object_type} {format_arguments(arguments)})"


def build_command(cmdlet: str, arguments: ArgumentTable) -> str:
    """Build a plain cmdlet call such as ``Remove-BTNotification -Group "x"``."""
    rendered = format_arguments(arguments)
    if not rendered:
        return cmdlet
    return f"{cmdlet} {rendered}"


__all__ = [
    "ArgumentTable",
    "build_command",
    "build_invocation",
    "format_arguments",
    "join_multiline_text",
    "quote_and_sanitize",
    "sanitize",
]
