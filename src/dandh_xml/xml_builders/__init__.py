"""
XML builders for D&H requests.

Templates hold the fixed structure, builders hold the field logic.
"""

from .builders import RequestBuilder

__all__ = ["RequestBuilder"]
