"""
Ready-made leaf rules.

These rules inspect a named property of the entity directly. Entities may be
mappings (read by key) or objects (read by attribute).
"""

from .format import StringFormatRule
from .required import ObjectPropertyRequiredRule, StringPropertyRequiredRule

__all__ = [
    "ObjectPropertyRequiredRule",
    "StringFormatRule",
    "StringPropertyRequiredRule",
]
