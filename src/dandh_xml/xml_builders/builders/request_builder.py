"""
Request Builder using Hybrid Architecture.

This builder follows the hybrid approach:
- Templates (fixed XML structure) from templates/ module
- Builders (field selection, ordering, truncation) in this module

Every method returns a new fragment string and nothing is stored on the
builder between calls, so one instance can serve any number of requests.
"""

from typing import Any, List, Mapping, Optional, Sequence, Union

from ..templates import (
    REQUEST_HEADER_TEMPLATE,
    XML_FORM_POST_TEMPLATE,
    STATUS_REQUEST_TEMPLATE,
    ORDER_REF_TYPES,
)
from .base_builder import append_if_present, encode_field, find_missing_required, wrap_fragment
from ...models.order_fields import (
    ORDER_HEADER_FIELDS,
    DROP_SHIP_FIELDS,
    ORDER_REMARKS_FIELDS,
    END_USER_DATA_FIELDS,
    ORDER_ITEM_FIELDS,
    END_USER_DATA_KEY,
    ORDER_ITEMS_KEY,
)


class RequestBuilder:
    """
    Build D&H XML request documents.

    The only configuration is the drop ship password. When it is set, the
    DROPSHIPPW element and the SHIPTO* address block are part of every order
    header; when it is not, they are never emitted, whatever the order holds.
    """

    def __init__(self, dropship_password: Optional[str] = None):
        self._dropship_password = dropship_password or None

    @property
    def dropship_enabled(self) -> bool:
        return self._dropship_password is not None

    # ------------------------------------------------------------------
    # Operation bodies
    # ------------------------------------------------------------------

    def build_price_availability(self, part_numbers: Union[Any, Sequence[Any]]) -> str:
        """
        Build the price and availability body.

        Args:
            part_numbers: One D&H item number, or a list/tuple of them. Each
                becomes its own <PARTNUM> element, in the order given. Any
                other value (str, int, ...) is a single item number.

        Returns:
            Body fragment, e.g. '\\n<PARTNUM>ABC1</PARTNUM>'
        """
        if not isinstance(part_numbers, (list, tuple)):
            part_numbers = [part_numbers]
        return ''.join(encode_field('PARTNUM', part_number) for part_number in part_numbers)

    def build_order_status(self, ref: str, ref_type: str = 'ORDERNUM') -> str:
        """
        Build the order status body for one lookup.

        Args:
            ref: Order number, PO number or invoice number
            ref_type: 'ORDERNUM' (default), 'PONUM' or 'INVOICE'

        Raises:
            ValueError: If ref_type is not a supported lookup mode
        """
        if ref_type not in ORDER_REF_TYPES:
            raise ValueError(
                f"Unsupported order reference type: {ref_type}. "
                f"Supported types: {', '.join(ORDER_REF_TYPES)}"
            )
        return STATUS_REQUEST_TEMPLATE.format(ref_type=ref_type, ref=ref)

    def build_order_entry(self, order_info: Mapping[str, Any]) -> str:
        """
        Build the order entry body: <ORDERHEADER> followed by <ORDERITEMS>.

        Args:
            order_info: Header fields keyed by element name, plus optional
                'ENDUSERDATA' (dict) and 'items' (list of dicts), e.g.:
                {
                    'PONUM': 'PO123',
                    'SHIPCARRIER': 'UPS',
                    'SHIPSERVICE': 'Ground',
                    'items': [{'PARTNUM': 'ABC1', 'QTY': 5}]
                }

        Returns:
            Body fragment. Absent fields are left out; nothing is validated.
        """
        return self.build_order_header(order_info) + self.build_order_items(order_info)

    # ------------------------------------------------------------------
    # Order entry sections
    # ------------------------------------------------------------------

    def build_order_header(self, order_info: Mapping[str, Any]) -> str:
        """Build the <ORDERHEADER> section."""
        header = append_if_present(ORDER_HEADER_FIELDS, order_info)

        if self.dropship_enabled:
            header += encode_field('DROPSHIPPW', self._dropship_password)
            header = append_if_present(DROP_SHIP_FIELDS, order_info, header)

        header = append_if_present(ORDER_REMARKS_FIELDS, order_info, header)

        end_user_data = order_info.get(END_USER_DATA_KEY)
        if end_user_data:
            header += self.build_end_user_data(end_user_data)

        return wrap_fragment('ORDERHEADER', header)

    def build_end_user_data(self, end_user_data: Mapping[str, Any]) -> str:
        """Build the <ENDUSERDATA> section nested in the order header."""
        return wrap_fragment('ENDUSERDATA', append_if_present(END_USER_DATA_FIELDS, end_user_data))

    def build_order_items(self, order_info: Mapping[str, Any]) -> str:
        """
        Build the <ORDERITEMS> section.

        Returns an empty string, not an empty wrapper, when the order has no items.
        """
        items = order_info.get(ORDER_ITEMS_KEY)
        if not items:
            return ''

        items_xml = ''.join(
            wrap_fragment('ITEM', append_if_present(ORDER_ITEM_FIELDS, item))
            for item in items
        )
        return wrap_fragment('ORDERITEMS', items_xml)

    def missing_required_fields(self, order_info: Mapping[str, Any]) -> List[str]:
        """
        List required order fields the caller left out.

        Drop ship fields count only in drop ship mode. Item fields are reported
        as 'items[<index>].<NAME>'.
        """
        missing = find_missing_required(ORDER_HEADER_FIELDS, order_info)
        if self.dropship_enabled:
            missing += find_missing_required(DROP_SHIP_FIELDS, order_info)

        for index, item in enumerate(order_info.get(ORDER_ITEMS_KEY) or []):
            missing += [
                f"{ORDER_ITEMS_KEY}[{index}].{name}"
                for name in find_missing_required(ORDER_ITEM_FIELDS, item)
            ]
        return missing

    # ------------------------------------------------------------------
    # Header and envelope
    # ------------------------------------------------------------------

    @staticmethod
    def build_request_header(request_type: str, usercode: str, password: str) -> str:
        """Build the <REQUEST> and <LOGIN> elements shared by every operation."""
        return REQUEST_HEADER_TEMPLATE.format(
            request_type=request_type,
            usercode=usercode,
            password=password,
        )

    @staticmethod
    def wrap_request(content: str) -> str:
        """Wrap header + body in the outer <XMLFORMPOST> element."""
        return XML_FORM_POST_TEMPLATE.format(content=content)

    def assemble(self, request_type: str, body: str, usercode: str, password: str) -> str:
        """
        Assemble a complete request document.

        Example:
            >>> builder = RequestBuilder()
            >>> body = builder.build_price_availability('ABC1')
            >>> print(builder.assemble('price-availability', body, 'user', 'secret'))
            <XMLFORMPOST>
            <REQUEST>price-availability</REQUEST>
            <LOGIN><USERID>user</USERID><PASSWORD>secret</PASSWORD></LOGIN>
            <PARTNUM>ABC1</PARTNUM>
            </XMLFORMPOST>
        """
        header = self.build_request_header(request_type, usercode, password)
        return self.wrap_request(header + body)
