"""
Domain Services

Pure translation logic with no logging-backend dependencies.
"""

from .level_translator import LEVEL_TABLE, translate_level, is_none_level
from .state_inspector import (
    ORIGINAL_FORMAT_KEY,
    as_key_value_pairs,
    extract_template_and_properties,
    full_type_name,
)
from .template_renderer import render_template, placeholder_names
from .object_properties import extract_object_properties

__all__ = [
    "LEVEL_TABLE",
    "translate_level",
    "is_none_level",
    "ORIGINAL_FORMAT_KEY",
    "as_key_value_pairs",
    "extract_template_and_properties",
    "full_type_name",
    "render_template",
    "placeholder_names",
    "extract_object_properties",
]
