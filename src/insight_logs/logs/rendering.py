"""Log store – one-way placeholder rendering.

``{name}`` tokens whose name is a context key are replaced by a
``<span data-prop="name">value</span>`` marker and the key is dropped from
the context.  Substitution happens in a single left-to-right pass, so values
that themselves contain ``{...}`` are never rendered again.
"""
from __future__ import annotations

import re
from typing import Any, Mapping

_PLACEHOLDER = re.compile(r"\{([^{}]+)\}")


def render_span(key: str, value: Any) -> str:
    return f'<span data-prop="{key}">{value}</span>'


def render_message(message: str, context: Mapping[str, Any]) -> tuple[str, dict[str, Any]]:
    """Return ``(rendered_message, residual_context)``.

    Tokens without a matching context key are left as-is.  *context* is not
    mutated.
    """
    keys = {str(k): k for k in context}
    consumed: set[Any] = set()

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in keys:
            return match.group(0)
        key = keys[name]
        consumed.add(key)
        return render_span(name, context[key])

    rendered = _PLACEHOLDER.sub(_replace, message)
    residual = {k: v for k, v in context.items() if k not in consumed}
    return rendered, residual


__all__ = ["render_message", "render_span"]
