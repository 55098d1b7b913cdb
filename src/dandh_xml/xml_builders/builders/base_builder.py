"""
Base building blocks for D&H request XML generation.

This module provides the two primitives every request section is built from:
- encode_field: one named value rendered as a newline-prefixed element
- append_if_present / wrap_fragment: ordered sections and their containers

Fragments are plain strings. Nothing here escapes values; the D&H endpoint
expects simple text and callers are trusted to pass it.
"""

from typing import Any, Iterable, List, Mapping, Optional


def encode_field(name: str, value: Any, max_length: Optional[int] = None) -> str:
    """
    Encode a single field as an XML element.

    Args:
        name: Element name (e.g. 'PONUM')
        value: Field value; rendered with str(), None becomes empty text
        max_length: Optional size limit. Longer values are cut, never rejected.

    Returns:
        Fragment of the form '\\n<NAME>value</NAME>'

    Example:
        >>> encode_field('SHIPTOSTATE', 'Pennsylvania', 2)
        '\\n<SHIPTOSTATE>Pe</SHIPTOSTATE>'
    """
    text = '' if value is None else str(value)
    if max_length is not None:
        text = text[:max_length]
    return f"\n<{name}>{text}</{name}>"


def append_if_present(field_specs: Iterable, source: Mapping[str, Any], fragment: str = "") -> str:
    """
    Append every field from field_specs that source contains.

    Order comes from field_specs, never from source. Missing keys are
    skipped without a placeholder, required or not.

    Args:
        field_specs: Ordered FieldSpec entries (name, max_length, ...)
        source: Caller supplied field map
        fragment: Fragment to append to

    Returns:
        The extended fragment
    """
    parts = [fragment]
    for spec in field_specs:
        if spec.name in source:
            parts.append(encode_field(spec.name, source[spec.name], spec.max_length))
    return ''.join(parts)


def wrap_fragment(wrapper_name: str, fragment: str) -> str:
    """Indent fragment one level (tab after each newline) and wrap it in <wrapper_name>."""
    indented = fragment.replace("\n", "\n\t")
    return f"\n<{wrapper_name}>{indented}\n</{wrapper_name}>"


def find_missing_required(field_specs: Iterable, source: Mapping[str, Any]) -> List[str]:
    """Return names of required fields absent from source, in table order."""
    return [spec.name for spec in field_specs if spec.required and spec.name not in source]
