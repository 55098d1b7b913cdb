"""
HTTP transports for the D&H XML dispatcher.

D&H accepts a document three ways: raw HTTP POST, HTML form POST with the
document in the "xmlDoc" field, or wrapped in a SOAP envelope. The first two
are provided here. Anything with a send(xml) method returning the body
(str or bytes) can stand in.
"""

import logging
from typing import Optional, Protocol, Union

import httpx

from .exceptions import TransportError
from .xml_builders.templates import DEFAULT_ENDPOINT_URL

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class Transport(Protocol):
    """Anything that can deliver a request document and return the response body."""

    def send(self, xml_document: str) -> Union[str, bytes]:
        ...


class HttpTransport:
    """
    POST the document as the raw request body with Content-Type: text/xml.

    A caller supplied httpx.Client is reused and left open; otherwise a
    client is opened for each request and closed afterwards.
    """

    def __init__(
        self,
        endpoint_url: str = DEFAULT_ENDPOINT_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.Client] = None,
    ):
        self.endpoint_url = endpoint_url
        self.timeout = timeout
        self._client = client

    def send(self, xml_document: str) -> Union[str, bytes]:
        """
        Deliver xml_document and return the response body.

        The body is decoded only when the Content-Type header names a charset.
        Otherwise the raw bytes are returned so the XML parser honours the
        document's own encoding declaration.

        Raises:
            TransportError: On network errors, timeouts and non-2xx responses
        """
        try:
            if self._client is not None:
                response = self._post(self._client, xml_document)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    response = self._post(client, xml_document)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise TransportError(f"Request to {self.endpoint_url} timed out ({self.timeout}s)") from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise TransportError(
                f"D&H returned HTTP {status}: {e.response.text[:200]}", status_code=status
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {self.endpoint_url} failed: {e}") from e

        logger.debug("D&H responded HTTP %s (%d bytes)", response.status_code, len(response.content))
        if response.charset_encoding:
            return response.text
        return response.content

    def _post(self, client: httpx.Client, xml_document: str) -> httpx.Response:
        return client.post(
            self.endpoint_url,
            content=xml_document.encode('utf-8'),
            headers={"Content-Type": "text/xml"},
        )


class FormPostTransport(HttpTransport):
    """POST the document as the "xmlDoc" field of an HTML form."""

    FORM_FIELD = "xmlDoc"

    def _post(self, client: httpx.Client, xml_document: str) -> httpx.Response:
        return client.post(self.endpoint_url, data={self.FORM_FIELD: xml_document})


TRANSPORTS = {
    "post": HttpTransport,
    "form": FormPostTransport,
}


def get_transport(mode: str, **kwargs) -> HttpTransport:
    """
    Get a transport for the given submission mode.

    Args:
        mode: 'post' or 'form' (case-insensitive)
        **kwargs: Passed to the transport constructor

    Raises:
        ValueError: If mode is not supported
    """
    transport_class = TRANSPORTS.get((mode or "").strip().lower())
    if not transport_class:
        supported = ", ".join(TRANSPORTS.keys())
        raise ValueError(
            f"Unsupported submission mode: {mode}. "
            f"Supported modes: {supported}"
        )
    return transport_class(**kwargs)
