"""
D&H XML Request Templates.

This module contains the fixed parts of every D&H request as Python constants.
Templates follow the hybrid architecture pattern: structure in templates, logic in builders.
"""

DEFAULT_ENDPOINT_URL = "https://www.dandh.com/dhXML/xmlDispatch"

# Operation types sent in <REQUEST>
PRICE_AVAILABILITY = "price-availability"
ORDER_STATUS = "orderStatus"
ORDER_ENTRY = "orderEntry"

# Request header, shared by all operations
REQUEST_HEADER_TEMPLATE = (
    "\n<REQUEST>{request_type}</REQUEST>"
    "\n<LOGIN><USERID>{usercode}</USERID><PASSWORD>{password}</PASSWORD></LOGIN>"
)

# Outer envelope; {content} is header + operation body
XML_FORM_POST_TEMPLATE = "<XMLFORMPOST>{content}\n</XMLFORMPOST>"

# Order status lookup body
STATUS_REQUEST_TEMPLATE = "\n<STATUSREQUEST><{ref_type}>{ref}</{ref_type}></STATUSREQUEST>"

# Valid order status lookup modes
ORDER_REF_TYPES = ("ORDERNUM", "PONUM", "INVOICE")

__all__ = [
    "DEFAULT_ENDPOINT_URL",
    "PRICE_AVAILABILITY",
    "ORDER_STATUS",
    "ORDER_ENTRY",
    "REQUEST_HEADER_TEMPLATE",
    "XML_FORM_POST_TEMPLATE",
    "STATUS_REQUEST_TEMPLATE",
    "ORDER_REF_TYPES",
]
