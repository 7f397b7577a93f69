"""
AAMVA Record Decoder
====================

Assembles a ``LicenseRecord`` from a decoded PDF417 payload.

Flow:
    payload -> detect_version -> profile_for(version) -> FieldExtractor
            -> FieldCoercer (per element) -> LicenseRecord

Decoding never fails on data: an absent element, a malformed value or an
unrecognised version all produce ``None`` for the affected fields only.

Usage:
    from aamva_decoder import decode

    record = decode(payload)
    print(record.first_name, record.birth_date, record.version)
"""

import logging
from typing import Callable, Iterable, Iterator, Optional, TypeVar

from ..config import DecoderConfig
from ..core.definitions import NameSuffix, Truncation, EyeColor, HairColor, Gender
from ..core.elements import Element
from ..core.field_tables import profile_for
from ..core.version import detect_version, parse_header
from ..exceptions import FieldFormatError
from ..models.record import LicenseRecord
from .coercion import FieldCoercer
from .extractor import FieldExtractor

logger = logging.getLogger(__name__)

T = TypeVar('T')


class LicenseDecoder:
    """
    Decodes AAMVA driver license payloads.

    The decoder holds only configuration; every ``decode`` call works on
    its own extractor and record, so one instance can be shared freely.
    """

    def __init__(self, config: Optional[DecoderConfig] = None):
        """
        Initialize decoder.

        Args:
            config: Decoding policy; defaults (with environment overrides)
                when omitted

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config or DecoderConfig()
        self.default_country = self.config.issuing_country

    def decode(self, payload: str) -> LicenseRecord:
        """
        Decode one payload.

        Args:
            payload: Barcode text (header and subfiles, framing characters kept)

        Returns:
            LicenseRecord with every field that could be decoded, the
            detected version and the original payload

        Raises:
            TypeError: If payload is not a string
        """
        if not isinstance(payload, str):
            raise TypeError(f"Expected str payload, got {type(payload).__name__}")

        version = detect_version(payload)
        profile = profile_for(version)
        logger.debug(f"Decoding payload as version {version if version else 'base'}")

        extractor = FieldExtractor(payload, profile.fields)
        coerce = FieldCoercer(extractor, profile, self.default_country)

        first_name, middle_names, last_name = coerce.names()

        record = LicenseRecord(
            first_name=first_name,
            middle_names=middle_names,
            last_name=last_name,
            suffix=coerce.category(Element.SUFFIX, NameSuffix),
            given_name_alias=coerce.string(Element.GIVEN_NAME_ALIAS),
            last_name_alias=coerce.string(Element.LAST_NAME_ALIAS),
            suffix_alias=coerce.string(Element.SUFFIX_ALIAS),
            first_name_truncation=coerce.category(Element.FIRST_NAME_TRUNCATION, Truncation),
            middle_name_truncation=coerce.category(Element.MIDDLE_NAME_TRUNCATION, Truncation),
            last_name_truncation=coerce.category(Element.LAST_NAME_TRUNCATION, Truncation),

            expiration_date=_safe(coerce.date, Element.EXPIRATION_DATE),
            issue_date=_safe(coerce.date, Element.ISSUE_DATE),
            birth_date=_safe(coerce.date, Element.BIRTH_DATE),
            hazmat_expiration_date=_safe(coerce.date, Element.HAZMAT_EXPIRATION_DATE),
            revision_date=_safe(coerce.date, Element.REVISION_DATE),

            race=coerce.string(Element.RACE),
            gender=coerce.category(Element.GENDER, Gender),
            eye_color=coerce.category(Element.EYE_COLOR, EyeColor),
            hair_color=coerce.category(Element.HAIR_COLOR, HairColor),
            height=_safe(coerce.height),
            weight=coerce.weight(),
            place_of_birth=coerce.string(Element.PLACE_OF_BIRTH),

            street_address=coerce.string(Element.STREET_ADDRESS),
            street_address_two=coerce.string(Element.STREET_ADDRESS_TWO),
            city=coerce.string(Element.CITY),
            state=coerce.string(Element.STATE),
            postal_code=coerce.postal_code(),
            country=coerce.country(),

            license_number=coerce.string(Element.DRIVER_LICENSE_NUMBER),
            document_id=coerce.string(Element.UNIQUE_DOCUMENT_ID),
            audit_information=coerce.string(Element.AUDIT_INFORMATION),
            inventory_control_number=coerce.string(Element.INVENTORY_CONTROL_NUMBER),
            compliance_type=coerce.string(Element.COMPLIANCE_TYPE),
            is_organ_donor=coerce.boolean(Element.IS_ORGAN_DONOR),
            is_veteran=coerce.boolean(Element.IS_VETERAN),
            is_temporary_document=coerce.boolean(Element.IS_TEMPORARY_DOCUMENT),

            federal_vehicle_code=coerce.string(Element.FEDERAL_VEHICLE_CODE),
            standard_vehicle_code=coerce.string(Element.STANDARD_VEHICLE_CODE),
            standard_restriction_code=coerce.string(Element.STANDARD_RESTRICTION_CODE),
            standard_endorsement_code=coerce.string(Element.STANDARD_ENDORSEMENT_CODE),
            jurisdiction_vehicle_class=coerce.string(Element.JURISDICTION_VEHICLE_CLASS),
            jurisdiction_restriction_code=coerce.string(Element.JURISDICTION_RESTRICTION_CODE),
            jurisdiction_endorsement_code=coerce.string(Element.JURISDICTION_ENDORSEMENT_CODE),
            jurisdiction_vehicle_class_description=coerce.string(
                Element.JURISDICTION_VEHICLE_CLASS_DESCRIPTION
            ),
            jurisdiction_restriction_code_description=coerce.string(
                Element.JURISDICTION_RESTRICTION_CODE_DESCRIPTION
            ),
            jurisdiction_endorsement_code_description=coerce.string(
                Element.JURISDICTION_ENDORSEMENT_CODE_DESCRIPTION
            ),

            version=version,
            header=parse_header(payload),
            raw_payload=payload,
        )
        record.unresolved_codes = dict(coerce.unresolved_codes)
        return record

    def decode_many(self, payloads: Iterable[str]) -> Iterator[LicenseRecord]:
        """Decode payloads in order."""
        for payload in payloads:
            yield self.decode(payload)


def _safe(coercion: Callable[..., T], *args) -> Optional[T]:
    """Run one field coercion, turning a malformed value into None."""
    try:
        return coercion(*args)
    except FieldFormatError as e:
        logger.debug(f"Dropping field: {e}")
        return None


# Module-level decoder instance for simple usage
_default_decoder: Optional[LicenseDecoder] = None


def get_decoder() -> LicenseDecoder:
    """Get the default decoder instance."""
    global _default_decoder
    if _default_decoder is None:
        _default_decoder = LicenseDecoder()
    return _default_decoder


def decode(payload: str) -> LicenseRecord:
    """
    Decode one payload with the default decoder.

    Convenience function; see ``LicenseDecoder.decode``.
    """
    return get_decoder().decode(payload)


def decode_many(payloads: Iterable[str]) -> Iterator[LicenseRecord]:
    """Decode several payloads with the default decoder."""
    return get_decoder().decode_many(payloads)
