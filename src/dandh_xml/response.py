"""
Response parsing for the D&H XML dispatcher.

All D&H responses report failure the same way:
    <STATUS>failure</STATUS>
    <MESSAGE>{ FAILURE MESSAGE }</MESSAGE>
Anything else is handed back to the caller as the parsed document.
"""

import logging
from typing import Any, Dict, Union
import xml.etree.ElementTree as ET

from .exceptions import MalformedResponseError

logger = logging.getLogger(__name__)

# Longest excerpt of an unparseable body kept on the exception
MAX_BODY_EXCERPT = 500


def parse_response(raw_xml: Union[str, bytes]) -> Dict[str, Any]:
    """
    Parse a raw D&H response into a normalized result.

    Only a top-level STATUS whose text is exactly 'failure' is an error. The
    text is compared as sent, surrounding whitespace included. 'success', any
    other value, or no STATUS at all yields the parsed document.

    Args:
        raw_xml: Response body

    Returns:
        {'error': True, 'message': str} or
        {'error': False, 'data': xml.etree.ElementTree.Element}

    Raises:
        MalformedResponseError: If the body is empty or not well-formed XML
    """
    try:
        root = ET.fromstring(raw_xml)
    except ET.ParseError as e:
        if isinstance(raw_xml, bytes):
            raw_xml = raw_xml.decode('utf-8', errors='replace')
        raise MalformedResponseError(
            f"Response is not valid XML: {e}", body=(raw_xml or '')[:MAX_BODY_EXCERPT]
        ) from e

    status = root.findtext('STATUS')

    if status == 'failure':
        message = root.findtext('MESSAGE') or ''
        logger.warning("D&H request failed: %s", message)
        return {'error': True, 'message': message}

    if status != 'success':
        logger.warning("Unrecognized STATUS %r in D&H response, treating as success", status)

    return {'error': False, 'data': root}


def element_to_dict(element: ET.Element) -> Any:
    """
    Convert a parsed response element to plain Python values.

    Leaf elements become their text. Repeated child tags become lists, e.g.
    several <ITEM> elements under one parent.
    """
    children = list(element)
    if not children:
        return (element.text or '').strip()

    result: Dict[str, Any] = {}
    for child in children:
        value = element_to_dict(child)
        if child.tag in result:
            if not isinstance(result[child.tag], list):
                result[child.tag] = [result[child.tag]]
            result[child.tag].append(value)
        else:
            result[child.tag] = value
    return result
