"""
Typed Coercion
==============

Turns raw element values into typed values under the rules of the
payload's version.

Every coercion maps an absent raw value (``None``) to ``None``. A value
that is present but cannot be parsed raises ``FieldFormatError``; it is up
to the caller (the record assembler) to drop that single field.

The pure rules (``parse_*``, ``format_postal_code``, ``split_name``) are
module-level functions; ``FieldCoercer`` binds them to one payload's
extractor and version profile.
"""

import logging
import math
import re
from datetime import date, datetime
from typing import Callable, Dict, List, Optional, Tuple, Type, TypeVar

from ..core.definitions import IssuingCountry, Weight, WeightRange
from ..core.elements import Element
from ..core.field_tables import HeightStrategy, VersionProfile
from ..core.units import centimeters_to_inches, kilograms_to_pounds
from ..exceptions import FieldFormatError
from .extractor import FieldExtractor

logger = logging.getLogger(__name__)

E = TypeVar('E')

_NUMBER_PATTERN = re.compile(r'^\s*[0-9]+(?:\.[0-9]+)?\s*$')
_LEADING_NUMBER_PATTERN = re.compile(r'^\s*([0-9]+(?:\.[0-9]+)?)')

POSTAL_CODE_BASE_LENGTH = 5
POSTAL_CODE_EMPTY_EXTENSION = '0000'


# =============================================================================
# PURE RULES
# =============================================================================

def _finite(value: float, raw: str, element: Optional[Element]) -> float:
    if not math.isfinite(value):
        raise FieldFormatError(element, raw, "value out of range")
    return value


def _convert(convert: Callable[[float], float], value: float, raw: str,
             element: Optional[Element]) -> float:
    """Apply a unit conversion; an overflowing result is a malformed value."""
    try:
        return convert(value)
    except OverflowError as e:
        raise FieldFormatError(element, raw, "value out of range") from e


def parse_number(raw: str, element: Optional[Element] = None) -> float:
    """Parse a finite decimal number, raising FieldFormatError on anything else."""
    if not _NUMBER_PATTERN.match(raw):
        raise FieldFormatError(element, raw, "not a decimal number")
    return _finite(float(raw), raw, element)


def parse_boolean(raw: str) -> bool:
    """``"1"`` is true, any other value is false."""
    return raw == '1'


def parse_date(raw: str, date_format: str, element: Optional[Element] = None) -> date:
    """
    Parse a date in the given strptime format.

    Raises:
        FieldFormatError: If the value does not match the format
    """
    try:
        return datetime.strptime(raw, date_format).date()
    except ValueError as e:
        raise FieldFormatError(element, raw, f"does not match {date_format}") from e


def format_postal_code(raw: str) -> Optional[str]:
    """
    Normalise a postal code to ``12345`` or ``12345-6789``.

    Examples:
        >>> format_postal_code("123450000")
        '12345'
        >>> format_postal_code("123456789")
        '12345-6789'
        >>> format_postal_code("1234") is None
        True
    """
    if len(raw) < POSTAL_CODE_BASE_LENGTH:
        return None

    base = raw[:POSTAL_CODE_BASE_LENGTH]
    extension = raw[POSTAL_CODE_BASE_LENGTH:].strip()
    if not extension or extension == POSTAL_CODE_EMPTY_EXTENSION:
        return base
    return f"{base}-{extension}"


def split_name(raw: str) -> List[str]:
    """Split a comma separated name field into trimmed, non-empty tokens."""
    return [token.strip() for token in raw.split(',') if token.strip()]


def parse_height(raw: str, element: Optional[Element] = None) -> float:
    """
    Height in inches from an inches value, or a centimeters value marked "cm".

    Examples:
        >>> parse_height("070 IN")
        70.0
        >>> parse_height("173cm")
        68.0
    """
    match = _LEADING_NUMBER_PATTERN.match(raw)
    if match is None:
        raise FieldFormatError(element, raw, "no numeric height")

    value = _finite(float(match.group(1)), raw, element)
    if 'cm' in raw.lower():
        return _convert(centimeters_to_inches, value, raw, element)
    return value


def parse_feet_inches(raw: str, element: Optional[Element] = None) -> float:
    """
    Height in inches from the version 1 feet/inches encoding.

    The hundreds part is feet and the remainder inches, e.g. ``510`` is
    5 ft 10 in.
    """
    digits = raw.strip()
    if not digits.isdigit():
        raise FieldFormatError(element, raw, "not a feet/inches integer")

    try:
        feet, inches = divmod(int(digits), 100)
        return float(feet * 12 + inches)
    except (ValueError, OverflowError) as e:
        # int() refuses very long digit strings, float() very large ints
        raise FieldFormatError(element, raw, "value out of range") from e


# =============================================================================
# BOUND COERCER
# =============================================================================

class FieldCoercer:
    """
    Coerces the elements of one payload.

    Categorical codes that are present but not recognised resolve to
    ``None``; the raw code is kept in ``unresolved_codes`` for diagnostics.
    """

    def __init__(
        self,
        extractor: FieldExtractor,
        profile: VersionProfile,
        default_country: IssuingCountry = IssuingCountry.UNITED_STATES,
    ):
        self.extractor = extractor
        self.profile = profile
        self.default_country = default_country
        self.unresolved_codes: Dict[str, str] = {}
        self._country: Optional[IssuingCountry] = None
        self._country_resolved = False

    def string(self, element: Element) -> Optional[str]:
        return self.extractor.extract(element)

    def number(self, element: Element) -> Optional[float]:
        raw = self.extractor.extract(element)
        if raw is None:
            return None
        return parse_number(raw, element)

    def boolean(self, element: Element) -> Optional[bool]:
        raw = self.extractor.extract(element)
        if raw is None:
            return None
        return parse_boolean(raw)

    def category(self, element: Element, enum_cls: Type[E]) -> Optional[E]:
        raw = self.extractor.extract(element)
        if raw is None:
            return None

        member = enum_cls.of(raw)
        if member is None:
            logger.debug(f"Unrecognised {element.name} code {raw!r}")
            self.unresolved_codes[element.value] = raw
        return member

    def country(self) -> Optional[IssuingCountry]:
        if not self._country_resolved:
            self._country = self.category(Element.COUNTRY, IssuingCountry)
            self._country_resolved = True
        return self._country

    def date(self, element: Element) -> Optional[date]:
        """Parse a date with the layout of the issuing country for this version."""
        raw = self.extractor.extract(element)
        if raw is None:
            return None

        country = self.country() or self.default_country
        return parse_date(raw, self.profile.date_format(country), element)

    def postal_code(self) -> Optional[str]:
        raw = self.extractor.extract(Element.POSTAL_CODE)
        if raw is None:
            return None
        return format_postal_code(raw)

    def names(self) -> Tuple[Optional[str], List[str], Optional[str]]:
        """
        Resolve (first name, middle names, last name).

        Each part falls back from its dedicated element to the combined
        given name element, then to the combined driver license name. The
        first comma token of a combined field is the first name and the
        remaining tokens are middle names. The last name falls back to the
        last token of the driver license name.
        """
        given = self._name_tokens(Element.GIVEN_NAME)
        full = self._name_tokens(Element.DRIVER_LICENSE_NAME)

        first_name = self.extractor.extract(Element.FIRST_NAME)
        if first_name is None:
            first_name = next((tokens[0] for tokens in (given, full) if tokens), None)

        middle_raw = self.extractor.extract(Element.MIDDLE_NAME)
        if middle_raw is not None:
            middle_names = split_name(middle_raw)
        else:
            middle_names = next((tokens[1:] for tokens in (given, full) if tokens), [])

        last_name = self.extractor.extract(Element.LAST_NAME)
        if last_name is None and full:
            last_name = full[-1]

        return first_name, middle_names, last_name

    def _name_tokens(self, element: Element) -> List[str]:
        raw = self.extractor.extract(element)
        return split_name(raw) if raw is not None else []

    def height(self) -> Optional[float]:
        """Height in inches, read with the version's height strategy."""
        if self.profile.height_strategy is HeightStrategy.FEET_INCHES:
            return self._feet_inches_height()

        raw = self.extractor.extract(Element.HEIGHT)
        if raw is None:
            return None
        return parse_height(raw, Element.HEIGHT)

    def _feet_inches_height(self) -> Optional[float]:
        inches = self._optional_number(Element.HEIGHT_CENTIMETERS, centimeters_to_inches)
        if inches is not None:
            return inches

        raw = self.extractor.extract(Element.HEIGHT)
        if raw is None:
            return None
        return parse_feet_inches(raw, Element.HEIGHT)

    def weight(self) -> Optional[Weight]:
        """
        Weight from pounds, else kilograms, else the weight range bucket.

        The first source that yields a value wins; a malformed source is
        skipped like an absent one.
        """
        pounds = self._optional_number(Element.WEIGHT_POUNDS)
        if pounds is not None:
            return Weight(pounds=pounds)

        pounds = self._optional_number(Element.WEIGHT_KILOGRAMS, kilograms_to_pounds)
        if pounds is not None:
            return Weight(pounds=pounds)

        weight_range = self.category(Element.WEIGHT_RANGE, WeightRange)
        if weight_range is not None:
            return Weight(range=weight_range)
        return None

    def _optional_number(
        self,
        element: Element,
        convert: Optional[Callable[[float], float]] = None,
    ) -> Optional[float]:
        """Number (optionally unit converted), or None when absent or malformed."""
        raw = self.extractor.extract(element)
        if raw is None:
            return None
        try:
            value = parse_number(raw, element)
            if convert is not None:
                value = _convert(convert, value, raw, element)
            return value
        except FieldFormatError as e:
            logger.debug(f"Skipping malformed source: {e}")
            return None
