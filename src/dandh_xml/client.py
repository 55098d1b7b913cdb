"""
D&H distributor API client.

Ties the request builder, a transport and the response parser together and
exposes one method per D&H operation:
- price_availability: real-time price and stock for one or more items
- order_status (and the by-order/by-PO/by-invoice shortcuts)
- send_order: order entry

Every method returns {'error': True, 'message': ...} for a rejected request
or {'error': False, 'data': <parsed response root>} otherwise. Transport
failures and unparseable responses raise.
"""

import logging
import re
from typing import Any, Dict, Mapping, Optional, Sequence, Union

from .config import load_settings
from .exceptions import MissingFieldsError
from .models.credentials import Credentials
from .response import parse_response
from .transport import HttpTransport, Transport, get_transport
from .xml_builders.builders.request_builder import RequestBuilder
from .xml_builders.templates import ORDER_ENTRY, ORDER_STATUS, PRICE_AVAILABILITY

logger = logging.getLogger(__name__)

_SECRET_ELEMENTS = re.compile(r"<(PASSWORD|DROPSHIPPW)>.*?</\1>", re.DOTALL)


def _mask_secrets(xml_document: str) -> str:
    return _SECRET_ELEMENTS.sub(r"<\1>***</\1>", xml_document)


class DandhClient:
    """
    Client for the D&H XML dispatcher.

    Example:
        client = DandhClient("myuser", "mypassword")
        result = client.price_availability("ABC1")
        if result['error']:
            print(result['message'])
        else:
            print(result['data'].findtext('ITEM/UNITPRICE'))

    Credentials and builder are fixed at construction; no request state is
    kept on the instance, so one client can be shared.
    """

    def __init__(
        self,
        usercode: str,
        password: str,
        dropship_password: Optional[str] = None,
        transport: Optional[Transport] = None,
        strict: bool = False,
    ):
        """
        Initialize client.

        Args:
            usercode: D&H user code
            password: D&H account password
            dropship_password: Drop ship password; enables drop ship mode
            transport: Object with send(xml) -> str. Defaults to a raw HTTP POST
                to the production dispatcher.
            strict: Reject orders missing required fields instead of sending
                them for the server to reject
        """
        self.credentials = Credentials(
            usercode=usercode,
            password=password,
            dropship_password=dropship_password or None,
        )
        self.transport = transport if transport is not None else HttpTransport()
        self.strict = strict
        self.builder = RequestBuilder(self.credentials.dropship_password)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, transport: Optional[Transport] = None) -> "DandhClient":
        """Build a client from DANDH_* environment variables (see config.load_settings)."""
        settings = load_settings(environ)
        if transport is None:
            transport = get_transport(
                settings["submission_mode"],
                endpoint_url=settings["endpoint_url"],
                timeout=settings["timeout"],
            )
        return cls(
            settings["usercode"],
            settings["password"],
            dropship_password=settings["dropship_password"],
            transport=transport,
            strict=settings["strict"],
        )

    @property
    def dropship_enabled(self) -> bool:
        return self.credentials.dropship_enabled

    # ------------------------------------------------------------------
    # Get data requests
    # ------------------------------------------------------------------

    def price_availability(self, part_numbers: Union[Any, Sequence[Any]]) -> Dict[str, Any]:
        """Price and availability for one D&H item number or several."""
        body = self.builder.build_price_availability(part_numbers)
        return self._execute(PRICE_AVAILABILITY, body)

    def order_status(self, ref: str, ref_type: str = 'ORDERNUM') -> Dict[str, Any]:
        """
        Status of a previously submitted order.

        Args:
            ref: Reference value
            ref_type: 'ORDERNUM', 'PONUM' or 'INVOICE'
        """
        body = self.builder.build_order_status(ref, ref_type)
        return self._execute(ORDER_STATUS, body)

    def order_status_by_order_number(self, order_num: str) -> Dict[str, Any]:
        return self.order_status(order_num, 'ORDERNUM')

    def order_status_by_po(self, po_num: str) -> Dict[str, Any]:
        return self.order_status(po_num, 'PONUM')

    def order_status_by_invoice(self, invoice_num: str) -> Dict[str, Any]:
        return self.order_status(invoice_num, 'INVOICE')

    # ------------------------------------------------------------------
    # Send data requests
    # ------------------------------------------------------------------

    def send_order(self, order_info: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Submit an order.

        For drop ship accounts the SHIPTO* fields ship the order to that
        address; otherwise D&H uses the address on file and SHIPTO* fields
        are dropped.

        Raises:
            MissingFieldsError: Strict mode only, when required fields are absent
        """
        if self.strict:
            missing = self.builder.missing_required_fields(order_info)
            if missing:
                raise MissingFieldsError(missing)

        body = self.builder.build_order_entry(order_info)
        return self._execute(ORDER_ENTRY, body)

    def _execute(self, request_type: str, body: str) -> Dict[str, Any]:
        xml_document = self.builder.assemble(
            request_type, body, self.credentials.usercode, self.credentials.password
        )

        logger.info("Sending D&H %s request (user %s)", request_type, self.credentials.usercode)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("D&H request document:\n%s", _mask_secrets(xml_document))

        raw_response = self.transport.send(xml_document)
        result = parse_response(raw_response)

        logger.info(
            "D&H %s request %s", request_type, "failed" if result['error'] else "succeeded"
        )
        return result
