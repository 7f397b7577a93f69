"""
AAMVA Decoder
=============

Decodes the text payload of AAMVA driver license / ID card barcodes
(PDF417, already read to text) into a typed record.

Package Structure:
    aamva_decoder/
    ├── core/           # Element catalog, code definitions, field tables, version detection
    ├── parser/         # Field extraction, typed coercion, record assembly
    ├── models/         # LicenseRecord
    ├── config.py       # Settings with environment overrides
    └── cli.py          # aamva-decode command line

Quick Start:
    from aamva_decoder import decode

    record = decode(payload)
    print(record.first_name, record.last_name)
    print(record.birth_date, record.is_minor())
    print(record.version)

Version: 1.0.0
"""

__version__ = "1.0.0"

from .core import (
    Element,
    EyeColor,
    HairColor,
    Gender,
    IssuingCountry,
    Truncation,
    NameSuffix,
    WeightRange,
    Weight,
    DocumentHeader,
    detect_version,
    parse_header,
    profile_for,
)
from .exceptions import DecoderError, FieldFormatError, ConfigurationError
from .models import LicenseRecord
from .parser import LicenseDecoder, decode, decode_many

__all__ = [
    "__version__",
    # Decoding
    "LicenseDecoder",
    "LicenseRecord",
    "decode",
    "decode_many",
    "detect_version",
    "parse_header",
    "profile_for",
    # Definitions
    "Element",
    "EyeColor",
    "HairColor",
    "Gender",
    "IssuingCountry",
    "Truncation",
    "NameSuffix",
    "WeightRange",
    "Weight",
    "DocumentHeader",
    # Errors
    "DecoderError",
    "FieldFormatError",
    "ConfigurationError",
]
