"""
AAMVA Data Elements
===================

The closed catalog of semantic data elements the decoder can produce,
plus the reserved characters that frame an AAMVA payload on the wire.

Element codes (the 3-character tags such as ``DAQ``) are NOT defined here:
they change between versions and live in ``field_tables``.
"""

from enum import Enum
from typing import FrozenSet


class Element(str, Enum):
    """Semantic data element carried by a driver license payload."""

    # Names
    FIRST_NAME = 'first_name'
    MIDDLE_NAME = 'middle_name'
    LAST_NAME = 'last_name'
    GIVEN_NAME = 'given_name'
    DRIVER_LICENSE_NAME = 'driver_license_name'
    SUFFIX = 'suffix'
    LAST_NAME_ALIAS = 'last_name_alias'
    GIVEN_NAME_ALIAS = 'given_name_alias'
    SUFFIX_ALIAS = 'suffix_alias'
    FIRST_NAME_TRUNCATION = 'first_name_truncation'
    MIDDLE_NAME_TRUNCATION = 'middle_name_truncation'
    LAST_NAME_TRUNCATION = 'last_name_truncation'

    # Dates
    EXPIRATION_DATE = 'expiration_date'
    ISSUE_DATE = 'issue_date'
    BIRTH_DATE = 'birth_date'
    HAZMAT_EXPIRATION_DATE = 'hazmat_expiration_date'
    REVISION_DATE = 'revision_date'

    # Physical description
    GENDER = 'gender'
    EYE_COLOR = 'eye_color'
    HAIR_COLOR = 'hair_color'
    HEIGHT = 'height'
    HEIGHT_CENTIMETERS = 'height_centimeters'
    WEIGHT_POUNDS = 'weight_pounds'
    WEIGHT_KILOGRAMS = 'weight_kilograms'
    WEIGHT_RANGE = 'weight_range'
    RACE = 'race'
    PLACE_OF_BIRTH = 'place_of_birth'

    # Address
    STREET_ADDRESS = 'street_address'
    STREET_ADDRESS_TWO = 'street_address_two'
    CITY = 'city'
    STATE = 'state'
    POSTAL_CODE = 'postal_code'
    COUNTRY = 'country'

    # Document
    DRIVER_LICENSE_NUMBER = 'driver_license_number'
    UNIQUE_DOCUMENT_ID = 'unique_document_id'
    AUDIT_INFORMATION = 'audit_information'
    INVENTORY_CONTROL_NUMBER = 'inventory_control_number'
    COMPLIANCE_TYPE = 'compliance_type'
    IS_TEMPORARY_DOCUMENT = 'is_temporary_document'
    IS_ORGAN_DONOR = 'is_organ_donor'
    IS_VETERAN = 'is_veteran'

    # Vehicle classes, endorsements and restrictions
    FEDERAL_VEHICLE_CODE = 'federal_vehicle_code'
    STANDARD_VEHICLE_CODE = 'standard_vehicle_code'
    STANDARD_ENDORSEMENT_CODE = 'standard_endorsement_code'
    STANDARD_RESTRICTION_CODE = 'standard_restriction_code'
    JURISDICTION_VEHICLE_CLASS = 'jurisdiction_vehicle_class'
    JURISDICTION_RESTRICTION_CODE = 'jurisdiction_restriction_code'
    JURISDICTION_ENDORSEMENT_CODE = 'jurisdiction_endorsement_code'
    JURISDICTION_VEHICLE_CLASS_DESCRIPTION = 'jurisdiction_vehicle_class_description'
    JURISDICTION_RESTRICTION_CODE_DESCRIPTION = 'jurisdiction_restriction_code_description'
    JURISDICTION_ENDORSEMENT_CODE_DESCRIPTION = 'jurisdiction_endorsement_code_description'


class WireKeywords:
    """Reserved characters framing an AAMVA payload (AAMVA DL/ID standard, Annex D)."""

    COMPLIANCE_INDICATOR: str = '@'
    DATA_ELEMENT_SEPARATOR: str = '\n'
    RECORD_SEPARATOR: str = '\x1e'
    SEGMENT_TERMINATOR: str = '\r'
    GROUP_SEPARATOR: str = '\x1d'
    FILE_TYPE: str = 'ANSI '
    LEGACY_FILE_TYPE: str = 'AAMVA'

    # Any of these ends the value of a data element
    TERMINATORS: FrozenSet[str] = frozenset('\n\r\x1e\x1d')
