"""
D&H Request XML Builders.

Modules:
    base_builder: Field encoding, ordered sections and wrappers
    request_builder: Per-operation bodies, login header and envelope
"""

from .base_builder import (
    encode_field,
    append_if_present,
    wrap_fragment,
    find_missing_required,
)
from .request_builder import RequestBuilder

__all__ = [
    "encode_field",
    "append_if_present",
    "wrap_fragment",
    "find_missing_required",
    "RequestBuilder",
]
