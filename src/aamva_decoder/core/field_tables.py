"""
Version Field Tables
====================

Maps each semantic element to its 3-character element code, per AAMVA
version.

Every version is described declaratively: the base table (codes as
published in the latest standard) plus an ordered list of deltas, and two
format policies (date formats and height parsing). All tables are built
once at import time and handed out as read-only mappings.

Usage:
    from aamva_decoder.core.field_tables import profile_for

    profile = profile_for(1)
    profile.fields[Element.LAST_NAME]   # 'DAB'
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Union

from .definitions import IssuingCountry
from .elements import Element

# strptime patterns for the two date layouts in use
US_DATE_FORMAT = '%m%d%Y'        # MMddyyyy
CANADA_DATE_FORMAT = '%Y%m%d'    # yyyyMMdd

SUPPORTED_VERSIONS = tuple(range(1, 10))


class HeightStrategy(str, Enum):
    """How the height element is read."""
    STANDARD = 'standard'          # inches, or centimeters when marked "cm"
    FEET_INCHES = 'feet_inches'    # hundreds digit is feet, remainder inches


# =============================================================================
# BASE TABLE
# =============================================================================

BASE_FIELDS: Mapping[Element, str] = MappingProxyType({
    Element.JURISDICTION_VEHICLE_CLASS: 'DCA',
    Element.JURISDICTION_RESTRICTION_CODE: 'DCB',
    Element.JURISDICTION_ENDORSEMENT_CODE: 'DCD',
    Element.EXPIRATION_DATE: 'DBA',
    Element.ISSUE_DATE: 'DBD',
    Element.FIRST_NAME: 'DAC',
    Element.MIDDLE_NAME: 'DAD',
    Element.LAST_NAME: 'DCS',
    Element.BIRTH_DATE: 'DBB',
    Element.GENDER: 'DBC',
    Element.EYE_COLOR: 'DAY',
    Element.HEIGHT: 'DAU',
    Element.STREET_ADDRESS: 'DAG',
    Element.STREET_ADDRESS_TWO: 'DAH',
    Element.CITY: 'DAI',
    Element.STATE: 'DAJ',
    Element.POSTAL_CODE: 'DAK',
    Element.DRIVER_LICENSE_NUMBER: 'DAQ',
    Element.UNIQUE_DOCUMENT_ID: 'DCF',
    Element.COUNTRY: 'DCG',
    Element.LAST_NAME_TRUNCATION: 'DDE',
    Element.FIRST_NAME_TRUNCATION: 'DDF',
    Element.MIDDLE_NAME_TRUNCATION: 'DDG',
    Element.HAIR_COLOR: 'DAZ',
    Element.PLACE_OF_BIRTH: 'DCI',
    Element.AUDIT_INFORMATION: 'DCJ',
    Element.INVENTORY_CONTROL_NUMBER: 'DCK',
    Element.LAST_NAME_ALIAS: 'DBN',
    Element.GIVEN_NAME_ALIAS: 'DBG',
    Element.SUFFIX_ALIAS: 'DBS',
    Element.SUFFIX: 'DCU',
    Element.WEIGHT_RANGE: 'DCE',
    Element.RACE: 'DCL',
    Element.STANDARD_VEHICLE_CODE: 'DCM',
    Element.STANDARD_ENDORSEMENT_CODE: 'DCN',
    Element.STANDARD_RESTRICTION_CODE: 'DCO',
    Element.JURISDICTION_VEHICLE_CLASS_DESCRIPTION: 'DCP',
    Element.JURISDICTION_ENDORSEMENT_CODE_DESCRIPTION: 'DCQ',
    Element.JURISDICTION_RESTRICTION_CODE_DESCRIPTION: 'DCR',
    Element.COMPLIANCE_TYPE: 'DDA',
    Element.REVISION_DATE: 'DDB',
    Element.HAZMAT_EXPIRATION_DATE: 'DDC',
    Element.WEIGHT_POUNDS: 'DAW',
    Element.WEIGHT_KILOGRAMS: 'DAX',
    Element.IS_TEMPORARY_DOCUMENT: 'DDD',
    Element.IS_ORGAN_DONOR: 'DDK',
    Element.IS_VETERAN: 'DDL',
    Element.FEDERAL_VEHICLE_CODE: 'DCH',
    Element.DRIVER_LICENSE_NAME: 'DAA',
    Element.GIVEN_NAME: 'DCT',
})


# =============================================================================
# VERSION DELTAS
# =============================================================================

@dataclass(frozen=True)
class Delete:
    """The version does not carry this element."""
    element: Element


@dataclass(frozen=True)
class Set:
    """The version uses its own code for this element."""
    element: Element
    code: str


Delta = Union[Delete, Set]

_TRUNCATIONS: List[Delta] = [
    Delete(Element.LAST_NAME_TRUNCATION),
    Delete(Element.FIRST_NAME_TRUNCATION),
    Delete(Element.MIDDLE_NAME_TRUNCATION),
]

# Elements introduced by the 2009 revision or later
_SINCE_2009: List[Delta] = [
    Delete(Element.COMPLIANCE_TYPE),
    Delete(Element.REVISION_DATE),
    Delete(Element.HAZMAT_EXPIRATION_DATE),
    Delete(Element.WEIGHT_POUNDS),
    Delete(Element.WEIGHT_KILOGRAMS),
    Delete(Element.IS_TEMPORARY_DOCUMENT),
    Delete(Element.IS_ORGAN_DONOR),
    Delete(Element.IS_VETERAN),
]

_COMBINED_NAMES: List[Delta] = [
    Delete(Element.DRIVER_LICENSE_NAME),
    Delete(Element.GIVEN_NAME),
]

VERSION_DELTAS: Dict[int, Sequence[Delta]] = {
    # Published 2000
    1: (
        Delete(Element.JURISDICTION_VEHICLE_CLASS),
        Delete(Element.JURISDICTION_RESTRICTION_CODE),
        Delete(Element.JURISDICTION_ENDORSEMENT_CODE),
        Set(Element.LAST_NAME, 'DAB'),
        Set(Element.UNIQUE_DOCUMENT_ID, 'DBJ'),
        Delete(Element.COUNTRY),
        *_TRUNCATIONS,
        Delete(Element.PLACE_OF_BIRTH),
        Delete(Element.AUDIT_INFORMATION),
        Delete(Element.INVENTORY_CONTROL_NUMBER),
        Set(Element.LAST_NAME_ALIAS, 'DBO'),
        Set(Element.GIVEN_NAME_ALIAS, 'DBP'),
        Set(Element.SUFFIX_ALIAS, 'DBR'),
        Set(Element.SUFFIX, 'DAE'),
        Set(Element.HEIGHT_CENTIMETERS, 'DAV'),
        Delete(Element.WEIGHT_RANGE),
        Delete(Element.RACE),
        Set(Element.STANDARD_VEHICLE_CODE, 'PAA'),
        Set(Element.STANDARD_ENDORSEMENT_CODE, 'PAF'),
        Set(Element.STANDARD_RESTRICTION_CODE, 'PAE'),
        Delete(Element.JURISDICTION_VEHICLE_CLASS_DESCRIPTION),
        Delete(Element.JURISDICTION_ENDORSEMENT_CODE_DESCRIPTION),
        Delete(Element.JURISDICTION_RESTRICTION_CODE_DESCRIPTION),
        Delete(Element.COMPLIANCE_TYPE),
        Delete(Element.REVISION_DATE),
        Delete(Element.HAZMAT_EXPIRATION_DATE),
        Delete(Element.IS_TEMPORARY_DOCUMENT),
        Set(Element.IS_ORGAN_DONOR, 'DBH'),
        Delete(Element.IS_VETERAN),
    ),
    # Published 09-2003
    2: (
        Delete(Element.FIRST_NAME),
        Delete(Element.MIDDLE_NAME),
        *_TRUNCATIONS,
        Delete(Element.LAST_NAME_ALIAS),
        Delete(Element.GIVEN_NAME_ALIAS),
        Delete(Element.SUFFIX_ALIAS),
        *_SINCE_2009,
        Delete(Element.DRIVER_LICENSE_NAME),
    ),
    # Published 03-2005
    3: (
        Delete(Element.FIRST_NAME),
        Delete(Element.MIDDLE_NAME),
        *_TRUNCATIONS,
        *_SINCE_2009,
        Delete(Element.DRIVER_LICENSE_NAME),
    ),
    # Published 07-2009
    4: (
        Delete(Element.IS_ORGAN_DONOR),
        Delete(Element.IS_VETERAN),
        *_COMBINED_NAMES,
    ),
    # Published 07-2010
    5: (
        Delete(Element.IS_ORGAN_DONOR),
        Delete(Element.IS_VETERAN),
        Delete(Element.FEDERAL_VEHICLE_CODE),
        *_COMBINED_NAMES,
    ),
    # Published 07-2011
    6: (
        Delete(Element.IS_VETERAN),
        Delete(Element.FEDERAL_VEHICLE_CODE),
        *_COMBINED_NAMES,
    ),
    # Published 06-2012
    7: (Delete(Element.FEDERAL_VEHICLE_CODE), *_COMBINED_NAMES),
    # Published 08-2013
    8: (Delete(Element.FEDERAL_VEHICLE_CODE), *_COMBINED_NAMES),
    # Published 2016
    9: (Delete(Element.FEDERAL_VEHICLE_CODE), *_COMBINED_NAMES),
}


def build_field_table(deltas: Sequence[Delta] = ()) -> Mapping[Element, str]:
    """
    Apply deltas, in order, to a copy of the base table.

    Args:
        deltas: Ordered Delete/Set operations

    Returns:
        Read-only Element -> code mapping
    """
    fields = dict(BASE_FIELDS)
    for delta in deltas:
        if isinstance(delta, Delete):
            fields.pop(delta.element, None)
        elif isinstance(delta, Set):
            fields[delta.element] = delta.code
        else:
            raise TypeError(f"Unsupported field table delta: {delta!r}")
    return MappingProxyType(fields)


# =============================================================================
# VERSION PROFILES
# =============================================================================

@dataclass(frozen=True)
class VersionProfile:
    """Field table and format policies for one AAMVA version."""
    version: Optional[int]
    fields: Mapping[Element, str]
    us_date_format: str = US_DATE_FORMAT
    canada_date_format: str = CANADA_DATE_FORMAT
    height_strategy: HeightStrategy = HeightStrategy.STANDARD

    def code_for(self, element: Element) -> Optional[str]:
        return self.fields.get(element)

    def date_format(self, country: Optional[IssuingCountry]) -> str:
        """strptime pattern for dates issued by ``country`` (US layout when unknown)."""
        if country is IssuingCountry.CANADA:
            return self.canada_date_format
        return self.us_date_format


# Policy overrides per version; anything not listed keeps the defaults
_POLICY_OVERRIDES: Dict[int, Dict[str, object]] = {
    1: {
        'us_date_format': CANADA_DATE_FORMAT,
        'height_strategy': HeightStrategy.FEET_INCHES,
    },
    2: {
        'canada_date_format': US_DATE_FORMAT,
    },
}


def _build_profiles() -> Dict[Optional[int], VersionProfile]:
    profiles: Dict[Optional[int], VersionProfile] = {
        None: VersionProfile(version=None, fields=BASE_FIELDS),
    }
    for version in SUPPORTED_VERSIONS:
        profiles[version] = VersionProfile(
            version=version,
            fields=build_field_table(VERSION_DELTAS[version]),
            **_POLICY_OVERRIDES.get(version, {}),
        )
    return profiles


_PROFILES: Mapping[Optional[int], VersionProfile] = MappingProxyType(_build_profiles())


def profile_for(version: Optional[int]) -> VersionProfile:
    """
    Get the profile for a version.

    Unrecognised versions (``None`` or outside 1-9) get the base profile:
    the base field table with default format policies.
    """
    return _PROFILES.get(version, _PROFILES[None])
