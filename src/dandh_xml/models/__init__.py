"""
Data models for D&H requests: account credentials and order field tables.
"""

from .credentials import Credentials
from .order_fields import (
    FieldSpec,
    ORDER_HEADER_FIELDS,
    DROP_SHIP_FIELDS,
    ORDER_REMARKS_FIELDS,
    END_USER_DATA_FIELDS,
    ORDER_ITEM_FIELDS,
    END_USER_DATA_KEY,
    ORDER_ITEMS_KEY,
)

__all__ = [
    'Credentials',
    'FieldSpec',
    'ORDER_HEADER_FIELDS',
    'DROP_SHIP_FIELDS',
    'ORDER_REMARKS_FIELDS',
    'END_USER_DATA_FIELDS',
    'ORDER_ITEM_FIELDS',
    'END_USER_DATA_KEY',
    'ORDER_ITEMS_KEY',
]
