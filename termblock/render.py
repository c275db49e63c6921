"""HTML adapter that maps classifications to CSS classes."""

from __future__ import annotations

import html
from collections.abc import Iterable

from .types import Line, LineKind, Token, TokenCategory

STYLE_CLASSES: dict[TokenCategory, str] = {
    TokenCategory.DOLLAR_PROMPT: "tb-prompt",
    TokenCategory.COMMAND: "tb-command",
    TokenCategory.FLAG: "tb-flag",
    TokenCategory.QUOTED_STRING: "tb-string",
    TokenCategory.URL: "tb-url",
    TokenCategory.PIPE_OR_REDIRECT: "tb-pipe",
    TokenCategory.PATH: "tb-path",
    TokenCategory.ENV_VAR_NAME: "tb-env-name",
    TokenCategory.ENV_VAR_VALUE: "tb-env-value",
    TokenCategory.PLAIN: "tb-plain",
}

LINE_CLASSES: dict[LineKind, str] = {
    LineKind.COMMENT: "tb-comment",
    LineKind.ENV_ASSIGNMENT: "tb-env",
    LineKind.COMMAND: "tb-command-line",
    LineKind.OUTPUT: "tb-output",
}

# Keeps blank lines at full height.
_BLANK = "&nbsp;"


def _span(token: Token) -> str:
    return f'<span class="{STYLE_CLASSES[token.category]}">{html.escape(token.text)}</span>'


def render_line(line: Line) -> str:
    indent = html.escape(line.raw[: len(line.raw) - len(line.raw.lstrip())])
    if line.kind is LineKind.COMMAND:
        body = indent + " ".join(_span(token) for token in line.tokens)
    elif line.kind is LineKind.ENV_ASSIGNMENT:
        name, value = line.tokens
        body = f'{indent}{_span(name)}<span class="tb-equals">=</span>{_span(value)}'
    else:
        body = html.escape(line.raw)
    return f'<div class="{LINE_CLASSES[line.kind]}">{body or _BLANK}</div>'


def render_html(lines: Iterable[Line]) -> str:
    """Render classified lines as a ``<pre><code>`` terminal block."""
    rows = "\n".join(render_line(line) for line in lines)
    return f'<pre class="tb-terminal"><code>{rows}</code></pre>'


__all__ = ["LINE_CLASSES", "STYLE_CLASSES", "render_html", "render_line"]
