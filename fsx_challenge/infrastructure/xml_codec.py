"""
Infrastructure layer: FSXChallenge XML encoding and decoding.

Element names are the Pascal-cased field aliases of the domain models,
emitted in model field order. Stations are repeated ``Station`` elements
directly under the root, with no wrapping container.
"""
import logging
from typing import Any, Dict, List, Union

from lxml import etree
from pydantic import ValidationError

from fsx_challenge.domain.models import Challenge

logger = logging.getLogger(__name__)


ROOT_TAG = "FSXChallenge"
STATION_TAG = "Station"


class ChallengeEncodingError(Exception):
    """Raised when a challenge cannot be rendered as XML."""
    pass


class ChallengeDecodingError(Exception):
    """Raised when an XML document is not a valid FSXChallenge."""
    pass


def _text(value: Any) -> str:
    if isinstance(value, float):
        return repr(value)
    return str(value)


def _append_fields(parent: etree._Element, fields: Dict[str, Any]) -> None:
    for tag, value in fields.items():
        if isinstance(value, list):
            for item in value:
                _append_fields(etree.SubElement(parent, tag), item)
        else:
            etree.SubElement(parent, tag).text = _text(value)


def encode_challenge(challenge: Challenge, pretty_print: bool = False) -> str:
    """
    Serialize a challenge to an FSXChallenge XML document.

    Args:
        challenge: Challenge to encode
        pretty_print: Indent nested elements

    Returns:
        XML document as a string (no XML declaration)

    Raises:
        ChallengeEncodingError: If the challenge holds values XML cannot carry
    """
    try:
        root = etree.Element(ROOT_TAG)
        _append_fields(root, challenge.model_dump(mode="json", by_alias=True))
        return etree.tostring(root, encoding="unicode", pretty_print=pretty_print)
    except (ValueError, TypeError, etree.LxmlError) as e:
        logger.error(f"Failed to encode challenge {challenge.name!r}: {e}")
        raise ChallengeEncodingError(str(e)) from e


def _station_fields(element: etree._Element) -> Dict[str, str]:
    return {
        child.tag: child.text or ""
        for child in element
        if isinstance(child.tag, str)
    }


def decode_challenge(document: Union[str, bytes]) -> Challenge:
    """
    Parse an FSXChallenge XML document.

    Args:
        document: XML text or bytes

    Returns:
        Challenge instance

    Raises:
        ChallengeDecodingError: If the document is malformed or incomplete
    """
    if isinstance(document, str):
        document = document.encode("utf-8")

    try:
        root = etree.fromstring(document)
    except etree.XMLSyntaxError as e:
        raise ChallengeDecodingError(f"Malformed XML: {e}") from e

    if root.tag != ROOT_TAG:
        raise ChallengeDecodingError(f"Expected <{ROOT_TAG}> root element, got <{root.tag}>")

    data: Dict[str, Any] = {}
    stations: List[Dict[str, str]] = []
    for child in root:
        # Skip comments and processing instructions
        if not isinstance(child.tag, str):
            continue
        if child.tag == STATION_TAG:
            stations.append(_station_fields(child))
        else:
            data[child.tag] = child.text or ""
    data[STATION_TAG] = stations

    try:
        return Challenge.model_validate(data)
    except ValidationError as e:
        raise ChallengeDecodingError(f"Invalid challenge document: {e}") from e


__all__ = [
    "ChallengeDecodingError",
    "ChallengeEncodingError",
    "decode_challenge",
    "encode_challenge",
]
