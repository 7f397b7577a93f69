"""
Version Detection
=================

Classifies an AAMVA payload by the version number in its file header.

The header is ``ANSI `` + issuer identification number (6 digits) +
AAMVA version (2 digits) + jurisdiction version (2 digits, not present in
version 1) + number of entries (2 digits). Detection does not parse that
grammar: it takes the first 8-digit run that follows a non-digit, and the
last two digits of the run are the version.
"""

import logging
import re
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from .field_tables import SUPPORTED_VERSIONS

logger = logging.getLogger(__name__)

# Non-digit, 6-digit IIN, 2-digit version. First match wins.
_VERSION_PATTERN = re.compile(r'[^0-9][0-9]{6}([0-9]{2})')

_HEADER_PATTERN = re.compile(
    r'(ANSI ?|AAMVA)([0-9]{6})([0-9]{2})([0-9]{2})([0-9]{2})?'
)


def detect_version(text: str) -> Optional[int]:
    """
    Detect the AAMVA version of a payload.

    Args:
        text: Decoded barcode payload

    Returns:
        Version number 1-9, or None when no version marker is found or the
        number is not a supported version

    Examples:
        >>> detect_version("@\\n\\x1e\\rANSI 636000090002DL00410278")
        9
        >>> detect_version("no header here") is None
        True
    """
    match = _VERSION_PATTERN.search(text)
    if match is None:
        return None

    version = int(match.group(1))
    if version not in SUPPORTED_VERSIONS:
        logger.warning(f"Unsupported AAMVA version {version:02d}, using base field table")
        return None
    return version


@dataclass(frozen=True)
class DocumentHeader:
    """File header fields of an AAMVA payload."""
    file_type: str
    issuer_id: str
    version: int
    jurisdiction_version: Optional[int]
    entries: Optional[int]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def parse_header(text: str) -> Optional[DocumentHeader]:
    """
    Read the file header of a payload (best effort, nothing is validated).

    Version 1 headers have no jurisdiction version, so the two digits after
    the version are the number of entries.

    Args:
        text: Decoded barcode payload

    Returns:
        DocumentHeader, or None if no ``ANSI``/``AAMVA`` file type is found
    """
    match = _HEADER_PATTERN.search(text)
    if match is None:
        return None

    file_type, issuer_id, version, fourth, fifth = match.groups()
    version_number = int(version)

    if version_number == 1:
        jurisdiction_version = None
        entries = int(fourth)
    else:
        jurisdiction_version = int(fourth)
        entries = int(fifth) if fifth is not None else None

    return DocumentHeader(
        file_type=file_type.strip(),
        issuer_id=issuer_id,
        version=version_number,
        jurisdiction_version=jurisdiction_version,
        entries=entries,
    )
