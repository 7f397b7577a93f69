"""
AAMVA Decoder Parser Module
===========================

Field extraction, typed coercion and record assembly.
"""

from .extractor import FieldExtractor
from .coercion import (
    FieldCoercer,
    parse_number,
    parse_boolean,
    parse_date,
    parse_height,
    parse_feet_inches,
    format_postal_code,
    split_name,
)
from .decoder import LicenseDecoder, decode, decode_many, get_decoder

__all__ = [
    "FieldExtractor",
    "FieldCoercer",
    "parse_number",
    "parse_boolean",
    "parse_date",
    "parse_height",
    "parse_feet_inches",
    "format_postal_code",
    "split_name",
    "LicenseDecoder",
    "decode",
    "decode_many",
    "get_decoder",
]
