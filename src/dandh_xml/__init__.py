"""
Client for the D&H distributor XML API.

Builds XML request documents for price/availability, order status and order
entry, sends them to the D&H dispatcher and turns the responses into
{'error': ..., 'message'/'data': ...} results.
"""

from .client import DandhClient
from .exceptions import (
    DandhError,
    TransportError,
    MalformedResponseError,
    ConfigurationError,
    MissingFieldsError,
)
from .models import Credentials, FieldSpec
from .response import parse_response, element_to_dict
from .transport import HttpTransport, FormPostTransport, get_transport
from .xml_builders import RequestBuilder

__all__ = [
    'DandhClient',
    'Credentials',
    'FieldSpec',
    'RequestBuilder',
    'parse_response',
    'element_to_dict',
    'HttpTransport',
    'FormPostTransport',
    'get_transport',
    'DandhError',
    'TransportError',
    'MalformedResponseError',
    'ConfigurationError',
    'MissingFieldsError',
]
