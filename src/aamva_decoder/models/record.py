"""
Decoded License Record
======================

The typed result of decoding one payload. Every field is optional:
``None`` means the element was absent, unsupported by the payload's
version, or malformed.
"""

from dataclasses import dataclass, field, fields
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from ..core.definitions import (
    EyeColor,
    Gender,
    HairColor,
    IssuingCountry,
    NameSuffix,
    Truncation,
    Weight,
)
from ..core.version import DocumentHeader

MINOR_AGE = 18

DateLike = Union[date, datetime]


def _as_date(now: Optional[DateLike]) -> date:
    if now is None:
        return date.today()
    if isinstance(now, datetime):
        return now.date()
    return now


def age_on(birth_date: date, today: date) -> int:
    """Whole years between ``birth_date`` and ``today``."""
    years = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        years -= 1
    return years


@dataclass
class LicenseRecord:
    """Decoded driver license / identification card."""

    # Names
    first_name: Optional[str] = None
    middle_names: List[str] = field(default_factory=list)
    last_name: Optional[str] = None
    suffix: Optional[NameSuffix] = None
    given_name_alias: Optional[str] = None
    last_name_alias: Optional[str] = None
    suffix_alias: Optional[str] = None
    first_name_truncation: Optional[Truncation] = None
    middle_name_truncation: Optional[Truncation] = None
    last_name_truncation: Optional[Truncation] = None

    # Dates
    expiration_date: Optional[date] = None
    issue_date: Optional[date] = None
    birth_date: Optional[date] = None
    hazmat_expiration_date: Optional[date] = None
    revision_date: Optional[date] = None

    # Physical description
    race: Optional[str] = None
    gender: Optional[Gender] = None
    eye_color: Optional[EyeColor] = None
    hair_color: Optional[HairColor] = None
    height: Optional[float] = None
    weight: Optional[Weight] = None
    place_of_birth: Optional[str] = None

    # Address
    street_address: Optional[str] = None
    street_address_two: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[IssuingCountry] = None

    # Document
    license_number: Optional[str] = None
    document_id: Optional[str] = None
    audit_information: Optional[str] = None
    inventory_control_number: Optional[str] = None
    compliance_type: Optional[str] = None
    is_organ_donor: Optional[bool] = None
    is_veteran: Optional[bool] = None
    is_temporary_document: Optional[bool] = None

    # Vehicle classes, endorsements and restrictions
    federal_vehicle_code: Optional[str] = None
    standard_vehicle_code: Optional[str] = None
    standard_restriction_code: Optional[str] = None
    standard_endorsement_code: Optional[str] = None
    jurisdiction_vehicle_class: Optional[str] = None
    jurisdiction_restriction_code: Optional[str] = None
    jurisdiction_endorsement_code: Optional[str] = None
    jurisdiction_vehicle_class_description: Optional[str] = None
    jurisdiction_restriction_code_description: Optional[str] = None
    jurisdiction_endorsement_code_description: Optional[str] = None

    # Payload
    version: Optional[int] = None
    header: Optional[DocumentHeader] = None
    raw_payload: Optional[str] = None
    unresolved_codes: Dict[str, str] = field(default_factory=dict)

    # -------------------------------------------------------------------------
    # Derived predicates
    # -------------------------------------------------------------------------

    def is_expired(self, now: Optional[DateLike] = None) -> bool:
        """True once the expiration date has passed. No expiration date: False."""
        if self.expiration_date is None:
            return False
        return _as_date(now) > self.expiration_date

    def is_issued(self, now: Optional[DateLike] = None) -> bool:
        """True from the issue date on. No issue date: False."""
        if self.issue_date is None:
            return False
        return _as_date(now) >= self.issue_date

    def is_minor(self, now: Optional[DateLike] = None, age: int = MINOR_AGE) -> bool:
        """True if the holder is younger than ``age`` whole years. No birth date: False."""
        if self.birth_date is None:
            return False
        return age_on(self.birth_date, _as_date(now)) < age

    @property
    def has_license_number(self) -> bool:
        """Whether enough data is present to identify the license."""
        return self.license_number is not None

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serialisable view: dates as ISO strings, enums by name."""
        result: Dict[str, Any] = {}
        for f in fields(self):
            result[f.name] = _serialize(getattr(self, f.name))
        return result


def _serialize(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, (Weight, DocumentHeader)):
        return value.to_dict()
    if isinstance(value, list):
        return [_serialize(item) for item in value]
    if isinstance(value, dict):
        return {key: _serialize(item) for key, item in value.items()}
    return value
