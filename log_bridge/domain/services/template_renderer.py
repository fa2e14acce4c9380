"""
Domain Service: Template Renderer

Renders message templates such as "User {UserId} logged in from {Ip}"
against a property mapping.
"""

import re
from typing import Any, List, Mapping, Optional


# {{ and }} are escapes; {Name}, {@Name}, {Name,10}, {Name,-10}, {Name:.2f} are placeholders.
# A positive alignment right-aligns to that width, a negative one left-aligns.
_TOKEN = re.compile(r"\{\{|\}\}|\{([@$]?)([^{}:,]+)(?:,\s*(-?\d+)\s*)?(?::([^{}]*))?\}")


def placeholder_names(template: Optional[str]) -> List[str]:
    """Placeholder names in order of appearance, duplicates included."""
    if not template:
        return []
    return [m.group(2).strip() for m in _TOKEN.finditer(template) if m.group(2)]


def _format_value(value: Any, spec: Optional[str]) -> str:
    if value is None:
        return ""
    if spec:
        try:
            return format(value, spec)
        except (ValueError, TypeError):
            return str(value)
    return str(value)


def _align(text: str, alignment: Optional[str]) -> str:
    if not alignment:
        return text
    width = int(alignment)
    return text.ljust(-width) if width < 0 else text.rjust(width)


def render_template(template: Optional[str], properties: Mapping[str, Any]) -> str:
    """
    Substitute placeholders with property values.

    Placeholders without a matching property are left as written.

    Args:
        template: Message template, may be None
        properties: Values keyed by placeholder name

    Returns:
        Rendered human-readable message
    """
    if not template:
        return ""

    def substitute(match: "re.Match") -> str:
        token = match.group(0)
        if token == "{{":
            return "{"
        if token == "}}":
            return "}"
        name = match.group(2).strip()
        if name not in properties:
            return token
        return _align(_format_value(properties[name], match.group(4)), match.group(3))

    return _TOKEN.sub(substitute, template)
