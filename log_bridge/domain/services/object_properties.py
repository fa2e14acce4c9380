"""
Domain Service: Object Properties

Derives a flat property mapping from an arbitrary scope state object.
"""

import dataclasses
from numbers import Number
from typing import Any, Dict

from pydantic import BaseModel

from .state_inspector import ORIGINAL_FORMAT_KEY, as_key_value_pairs


def extract_object_properties(state: Any) -> Dict[str, Any]:
    """
    Extract properties from a scope state.

    Scalars (None, str, bytes, numbers, bool) carry no properties.
    Key/value pairs, pydantic models, dataclasses and plain objects
    contribute their fields. None values are dropped and later keys
    overwrite earlier ones.

    Args:
        state: Arbitrary object passed to begin_scope

    Returns:
        Property mapping, possibly empty
    """
    if state is None or isinstance(state, (str, bytes, bytearray, Number)):
        return {}

    pairs = as_key_value_pairs(state)
    if pairs is not None:
        items = [(k, v) for k, v in pairs if k != ORIGINAL_FORMAT_KEY]
    elif isinstance(state, BaseModel):
        items = list(state.model_dump().items())
    elif dataclasses.is_dataclass(state) and not isinstance(state, type):
        items = [(f.name, getattr(state, f.name)) for f in dataclasses.fields(state)]
    elif hasattr(state, "__dict__") and not isinstance(state, type):
        items = [
            (name, value) for name, value in vars(state).items()
            if not name.startswith("_") and not callable(value)
        ]
    else:
        return {}

    properties: Dict[str, Any] = {}
    for key, value in items:
        if value is None:
            continue
        properties[key] = value
    return properties
