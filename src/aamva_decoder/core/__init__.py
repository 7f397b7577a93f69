"""
AAMVA Decoder Core Module
=========================

Element catalog, code definitions, unit conversions, per-version field
tables and version detection. Everything here is static data or a pure
function.
"""

from .elements import Element, WireKeywords
from .definitions import (
    EyeColor,
    HairColor,
    Gender,
    IssuingCountry,
    Truncation,
    NameSuffix,
    WeightRange,
    Weight,
)
from .units import centimeters_to_inches, kilograms_to_pounds
from .field_tables import (
    BASE_FIELDS,
    VERSION_DELTAS,
    SUPPORTED_VERSIONS,
    US_DATE_FORMAT,
    CANADA_DATE_FORMAT,
    HeightStrategy,
    VersionProfile,
    build_field_table,
    profile_for,
)
from .version import DocumentHeader, detect_version, parse_header

__all__ = [
    # Elements
    "Element",
    "WireKeywords",
    # Definitions
    "EyeColor",
    "HairColor",
    "Gender",
    "IssuingCountry",
    "Truncation",
    "NameSuffix",
    "WeightRange",
    "Weight",
    # Units
    "centimeters_to_inches",
    "kilograms_to_pounds",
    # Field tables
    "BASE_FIELDS",
    "VERSION_DELTAS",
    "SUPPORTED_VERSIONS",
    "US_DATE_FORMAT",
    "CANADA_DATE_FORMAT",
    "HeightStrategy",
    "VersionProfile",
    "build_field_table",
    "profile_for",
    # Version
    "DocumentHeader",
    "detect_version",
    "parse_header",
]
