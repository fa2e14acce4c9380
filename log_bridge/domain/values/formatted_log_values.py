"""
Value: FormattedLogValues

Structured state built from a message template and positional arguments,
as produced by the front-end convenience methods.
"""

from typing import Any, Tuple

from ..services.state_inspector import ORIGINAL_FORMAT_KEY
from ..services.template_renderer import placeholder_names, render_template


class FormattedLogValues(tuple):
    """
    Tuple of (name, value) pairs ending with the reserved original-format pair.

    Placeholders are bound to arguments by position. Arguments beyond the
    last placeholder are ignored; placeholders beyond the last argument
    stay unbound.

    Example:
        >>> values = FormattedLogValues("User {UserId} logged in", 42)
        >>> list(values)
        [('UserId', 42), ('{OriginalFormat}', 'User {UserId} logged in')]
        >>> str(values)
        'User 42 logged in'
    """

    def __new__(cls, template: str, *args: Any):
        names = placeholder_names(template)
        pairs: Tuple[Tuple[str, Any], ...] = tuple(zip(names, args))
        instance = super().__new__(cls, pairs + ((ORIGINAL_FORMAT_KEY, template),))
        instance.template = template
        instance.args = args
        return instance

    def __getnewargs__(self):
        return (self.template,) + self.args

    def __str__(self) -> str:
        values = {}
        for key, value in self[:-1]:
            values.setdefault(key, value)
        return render_template(self.template, values)

    def __repr__(self) -> str:
        return f"FormattedLogValues({self.template!r}, {list(self[:-1])!r})"
