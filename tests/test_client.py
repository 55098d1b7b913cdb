"""Tests for the D&H client end to end, with a recording transport."""

import sys
import os
import logging
import xml.etree.ElementTree as ET
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest
from dandh_xml import DandhClient
from dandh_xml.exceptions import (
    ConfigurationError,
    MalformedResponseError,
    MissingFieldsError,
    TransportError,
)
from dandh_xml.transport import FormPostTransport, HttpTransport

SUCCESS = '<XMLRESPONSE><STATUS>success</STATUS><ORDERNUM>555</ORDERNUM></XMLRESPONSE>'
FAILURE = '<XMLRESPONSE><STATUS>failure</STATUS><MESSAGE>Invalid PO</MESSAGE></XMLRESPONSE>'


class RecordingTransport:
    """Stores sent documents and answers with a canned response."""

    def __init__(self, response=SUCCESS, error=None):
        self.response = response
        self.error = error
        self.sent = []

    def send(self, xml_document):
        self.sent.append(xml_document)
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last(self):
        return ET.fromstring(self.sent[-1])


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def client(transport):
    return DandhClient('user1', 'secret', transport=transport)


class TestOperations:
    """Verify each operation's document and result."""

    def test_price_availability(self, client, transport):
        result = client.price_availability('ABC1')
        assert result['error'] is False
        root = transport.last
        assert root.findtext('REQUEST') == 'price-availability'
        assert root.findtext('LOGIN/USERID') == 'user1'
        assert root.findtext('LOGIN/PASSWORD') == 'secret'
        assert [e.text for e in root.findall('PARTNUM')] == ['ABC1']

    def test_price_availability_numeric_part_number(self, client, transport):
        client.price_availability(12345)
        assert [e.text for e in transport.last.findall('PARTNUM')] == ['12345']

    @pytest.mark.parametrize('method, ref_type', [
        ('order_status_by_order_number', 'ORDERNUM'),
        ('order_status_by_po', 'PONUM'),
        ('order_status_by_invoice', 'INVOICE'),
    ])
    def test_order_status_shortcuts(self, client, transport, method, ref_type):
        result = getattr(client, method)('REF1')
        assert result['data'].findtext('ORDERNUM') == '555'
        root = transport.last
        assert root.findtext('REQUEST') == 'orderStatus'
        lookup = root.find('STATUSREQUEST')
        assert [child.tag for child in lookup] == [ref_type]
        assert lookup.findtext(ref_type) == 'REF1'

    def test_invoice_lookup_exact_text(self, client, transport):
        client.order_status_by_invoice('INV42')
        assert '<STATUSREQUEST><INVOICE>INV42</INVOICE></STATUSREQUEST>' in transport.sent[-1]

    def test_send_order(self, client, transport):
        client.send_order({
            'PONUM': 'PO123',
            'SHIPCARRIER': 'UPS',
            'SHIPSERVICE': 'Ground',
            'items': [{'PARTNUM': 'ABC1', 'QTY': '5'}],
        })
        sent = transport.sent[-1]
        assert (
            '<ORDERHEADER>\n\t<PONUM>PO123</PONUM>\n\t<SHIPCARRIER>UPS</SHIPCARRIER>'
            '\n\t<SHIPSERVICE>Ground</SHIPSERVICE>\n</ORDERHEADER>'
        ) in sent
        assert (
            '<ORDERITEMS>\n\t<ITEM>\n\t\t<PARTNUM>ABC1</PARTNUM>\n\t\t<QTY>5</QTY>\n\t</ITEM>\n</ORDERITEMS>'
        ) in sent
        assert sent.index('ORDERHEADER') < sent.index('ORDERITEMS')
        assert 'DROPSHIPPW' not in sent
        assert 'ENDUSERDATA' not in sent
        assert transport.last.findtext('REQUEST') == 'orderEntry'

    def test_drop_ship_client(self, transport):
        client = DandhClient('user1', 'secret', dropship_password='dspw', transport=transport)
        assert client.dropship_enabled
        client.send_order({'PONUM': 'PO1', 'SHIPTOCITY': 'Harrisburg'})
        header = transport.last.find('ORDERHEADER')
        assert header.findtext('DROPSHIPPW') == 'dspw'
        assert header.findtext('SHIPTOCITY') == 'Harrisburg'

    def test_empty_dropship_password_disables_drop_ship(self, transport):
        client = DandhClient('user1', 'secret', dropship_password='', transport=transport)
        client.send_order({'PONUM': 'PO1', 'SHIPTOCITY': 'Harrisburg'})
        assert 'SHIPTOCITY' not in transport.sent[-1]

    def test_remote_failure_is_result(self, transport):
        transport.response = FAILURE
        client = DandhClient('user1', 'secret', transport=transport)
        assert client.send_order({'PONUM': 'dup'}) == {'error': True, 'message': 'Invalid PO'}

    def test_calls_do_not_share_state(self, client, transport):
        client.send_order({'PONUM': 'PO1', 'items': [{'PARTNUM': 'A', 'QTY': 1}]})
        client.price_availability('B')
        second = transport.last
        assert second.find('ORDERHEADER') is None
        assert second.findtext('REQUEST') == 'price-availability'


class TestErrors:
    """Verify error propagation."""

    def test_transport_error_propagates(self):
        error = TransportError('boom')
        client = DandhClient('u', 'p', transport=RecordingTransport(error=error))
        with pytest.raises(TransportError) as exc_info:
            client.price_availability('A')
        assert exc_info.value is error

    def test_malformed_response_raises(self):
        client = DandhClient('u', 'p', transport=RecordingTransport(response='<html>oops'))
        with pytest.raises(MalformedResponseError):
            client.order_status('1')

    def test_unknown_lookup_mode(self, client, transport):
        with pytest.raises(ValueError):
            client.order_status('1', 'SERIAL')
        assert transport.sent == []

    def test_strict_mode_rejects_before_sending(self, transport):
        client = DandhClient('u', 'p', transport=transport, strict=True)
        with pytest.raises(MissingFieldsError) as exc_info:
            client.send_order({'PONUM': 'PO1', 'items': [{'PARTNUM': 'A'}]})
        assert exc_info.value.missing == ['SHIPCARRIER', 'SHIPSERVICE', 'items[0].QTY']
        assert transport.sent == []

    def test_strict_mode_sends_complete_order(self, transport):
        client = DandhClient('u', 'p', transport=transport, strict=True)
        order = {'PONUM': 'P', 'SHIPCARRIER': 'UPS', 'SHIPSERVICE': 'Ground', 'items': [{'PARTNUM': 'A', 'QTY': 1}]}
        assert client.send_order(order)['error'] is False


class TestLogging:
    """Verify passwords stay out of the logs."""

    def test_passwords_masked(self, transport, caplog):
        client = DandhClient('user1', 'topsecret', dropship_password='dropsecret', transport=transport)
        with caplog.at_level(logging.DEBUG, logger='dandh_xml'):
            client.send_order({'PONUM': 'PO1'})
        assert 'orderEntry' in caplog.text
        assert '<PASSWORD>***</PASSWORD>' in caplog.text
        assert 'topsecret' not in caplog.text
        assert 'dropsecret' not in caplog.text

    def test_credentials_repr_hides_passwords(self):
        client = DandhClient('user1', 'topsecret', dropship_password='dropsecret')
        assert 'topsecret' not in repr(client.credentials)
        assert 'dropsecret' not in repr(client.credentials)


class TestFromEnv:
    """Verify environment based construction."""

    def test_defaults(self):
        client = DandhClient.from_env({'DANDH_USERCODE': 'u', 'DANDH_PASSWORD': 'p'})
        assert isinstance(client.transport, HttpTransport)
        assert client.transport.endpoint_url == 'https://www.dandh.com/dhXML/xmlDispatch'
        assert client.transport.timeout == 30
        assert client.strict is False
        assert client.dropship_enabled is False

    def test_all_settings(self):
        client = DandhClient.from_env({
            'DANDH_USERCODE': 'u',
            'DANDH_PASSWORD': 'p',
            'DANDH_DROPSHIP_PASSWORD': 'd',
            'DANDH_ENDPOINT_URL': 'https://test.example.com/xml',
            'DANDH_TIMEOUT': '5',
            'DANDH_SUBMISSION_MODE': 'Form',
            'DANDH_STRICT': 'yes',
        })
        assert isinstance(client.transport, FormPostTransport)
        assert client.transport.endpoint_url == 'https://test.example.com/xml'
        assert client.transport.timeout == 5.0
        assert client.strict is True
        assert client.dropship_enabled is True

    def test_injected_transport(self, transport):
        client = DandhClient.from_env({'DANDH_USERCODE': 'u', 'DANDH_PASSWORD': 'p'}, transport=transport)
        assert client.transport is transport

    @pytest.mark.parametrize('env', [
        {'DANDH_USERCODE': 'u'},
        {'DANDH_USERCODE': 'u', 'DANDH_PASSWORD': 'p', 'DANDH_TIMEOUT': 'soon'},
        {'DANDH_USERCODE': 'u', 'DANDH_PASSWORD': 'p', 'DANDH_TIMEOUT': '0'},
        {'DANDH_USERCODE': 'u', 'DANDH_PASSWORD': 'p', 'DANDH_SUBMISSION_MODE': 'soap'},
    ])
    def test_invalid_settings(self, env):
        with pytest.raises(ConfigurationError):
            DandhClient.from_env(env)
