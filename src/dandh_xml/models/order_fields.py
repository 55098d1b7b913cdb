#!/usr/bin/env python3
"""
D&H Order Field Tables

Static, ordered field definitions for the order entry request. The order of
each table is the order the D&H XML dispatcher expects on the wire, so the
builders always iterate these tables and never the caller's dict.

Size limits come from the D&H XML API documentation (DH-IS-WEB-XML_US).
Values longer than the limit are truncated by the encoder.

Usage:
    from dandh_xml.models.order_fields import ORDER_HEADER_FIELDS

    for spec in ORDER_HEADER_FIELDS:
        print(spec.name, spec.max_length, spec.required)
"""

from typing import NamedTuple, Optional, Tuple


class FieldSpec(NamedTuple):
    """One element of a request section."""

    name: str
    max_length: Optional[int] = None
    # Documentation only unless the client runs in strict mode
    required: bool = False
    drop_ship_only: bool = False


# ============================================================================
# Order Header
# ============================================================================

# Emitted before the drop ship block.
# SHIPCARRIER: 'Pickup', 'UPS', 'FedEx'
# SHIPSERVICE: 'Pickup', 'Ground', '2nd Day Air', 'Next Day Air', 'Red Sat Del'
# ONLYBRANCH: 'Harrisburg', 'California', 'Chicago', 'Atlanta'
# PARTSHIPALLOW / BACKORDERALLOW: 'Y' or 'N'
ORDER_HEADER_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec('PONUM', 30, required=True),
    FieldSpec('SHIPCARRIER', required=True),
    FieldSpec('SHIPSERVICE', required=True),
    FieldSpec('ONLYBRANCH'),
    FieldSpec('PARTSHIPALLOW'),
    FieldSpec('BACKORDERALLOW'),
)

# Ship-to address, drop ship authorized accounts only. DROPSHIPPW precedes
# these and comes from the client credentials, not from the order.
DROP_SHIP_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec('SHIPTOADDRESS', 30, required=True, drop_ship_only=True),
    FieldSpec('SHIPTOADDRESS2', 30, drop_ship_only=True),
    FieldSpec('SHIPTONAME', 25, required=True, drop_ship_only=True),
    FieldSpec('SHIPTOATTN', 30, drop_ship_only=True),
    FieldSpec('SHIPTOCITY', 18, required=True, drop_ship_only=True),
    FieldSpec('SHIPTOSTATE', 2, required=True, drop_ship_only=True),
    FieldSpec('SHIPTOZIP', 10, required=True, drop_ship_only=True),
)

# Any text here places the order "On Hold" for sales rep review.
ORDER_REMARKS_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec('REMARKS', 58),
)


# ============================================================================
# End User Data
# ============================================================================

END_USER_DATA_FIELDS: Tuple[FieldSpec, ...] = tuple(FieldSpec(name) for name in (
    'ORGANIZATION',
    'ATTENTION',
    'ADDRESS',
    'ADDRESS2',
    'CITY',
    'STATE',
    'ZIP',
    'PONUM',
    'DEPARTMENT',
    'PHONE',
    'FAX',
    'EMAIL',
    'AUTHQUOTENUM',
    'MCN',
    'CCOIDNUM',
    'SERIALNUM',
    'ESDEMAIL',
    'RESELLEREMAIL',
    'CUSTACCTNO',
    'DATEOFSALE',
    'MODELNO',
    'SKU',
    'DOMAIN',
    'ADMINEMAIL',
    'UPDATETYPE',
    'SUPPORTSTARTDATE',
))


# ============================================================================
# Order Items
# ============================================================================

# BRANCH overrides the header level ONLYBRANCH. PRICE is honoured for
# select customers only.
ORDER_ITEM_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec('PARTNUM', required=True),
    FieldSpec('QTY', required=True),
    FieldSpec('BRANCH'),
    FieldSpec('PRICE'),
)

END_USER_DATA_KEY = 'ENDUSERDATA'
ORDER_ITEMS_KEY = 'items'
