"""
Domain Service: State Inspector

Extracts the message template and structured properties from the
arbitrary state object handed to a front-end log call.

A state is either structured (an ordered sequence of key/value pairs)
or anything else. Only structured states carry properties.
"""

from collections.abc import Mapping
from typing import Any, List, Optional, Tuple

from ..interfaces import Formatter


ORIGINAL_FORMAT_KEY = "{OriginalFormat}"

Pairs = List[Tuple[str, Any]]


def as_key_value_pairs(state: Any) -> Optional[Pairs]:
    """
    Return the state's key/value pairs, or None if it is not structured.

    A mapping with string keys is structured. So is a list or tuple whose
    every element is a 2-tuple with a string key. Other iterables are left unconsumed.
    """
    if isinstance(state, Mapping):
        pairs = list(state.items())
        if not all(isinstance(key, str) for key, _ in pairs):
            return None
        return pairs
    if isinstance(state, (list, tuple)):
        for item in state:
            if not (isinstance(item, tuple) and len(item) == 2 and isinstance(item[0], str)):
                return None
        return list(state)
    return None


def full_type_name(state_type: type) -> str:
    """Qualified name of a type; builtins keep their bare name."""
    module = getattr(state_type, "__module__", None)
    name = getattr(state_type, "__qualname__", None) or getattr(state_type, "__name__", repr(state_type))
    if not module or module == "builtins":
        return name
    return f"{module}.{name}"


def stringify(value: Any) -> str:
    return "" if value is None else str(value)


def extract_template_and_properties(
    state: Any,
    exception: Optional[BaseException] = None,
    formatter: Optional[Formatter] = None,
    state_type: type = object,
) -> Tuple[str, Pairs]:
    """
    Extract the message template and properties from a log call's state.

    One pass over the pairs finds the first reserved-key pair for the
    template and collects every other pair as a property, in order.

    Args:
        state: Arbitrary log state
        exception: Exception passed to the formatter, if any
        formatter: Optional callable(state, exception) -> str
        state_type: Declared type of the state, named when the state is None

    Returns:
        Tuple of (message template, property pairs)
    """
    pairs = as_key_value_pairs(state)
    template: Optional[str] = None
    properties: Pairs = []

    if pairs is not None:
        for key, value in pairs:
            if key == ORIGINAL_FORMAT_KEY:
                if template is None:
                    template = stringify(value)
                continue
            properties.append((key, value))

    if template is None:
        if formatter is not None:
            template = formatter(state, exception)
        elif state is None:
            template = full_type_name(state_type)
        else:
            template = str(state)

    return template, properties
