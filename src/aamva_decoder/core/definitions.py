"""
AAMVA Code Definitions
======================

Closed lookup tables for the categorical elements of a driver license.

Every enumeration stores the raw AAMVA code as its value and exposes
``of(raw)``, which returns the matching member or ``None`` when the code
is not recognised. Lookups are independent of the document version.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Type, TypeVar

E = TypeVar('E', bound=Enum)


def _resolve(enum_cls: Type[E], raw: Optional[str]) -> Optional[E]:
    """Resolve a raw code against an enumeration, ``None`` if unrecognised."""
    if raw is None:
        return None
    try:
        return enum_cls(raw.strip().upper())
    except ValueError:
        return None


class EyeColor(str, Enum):
    """AAMVA D20 eye color codes."""
    BLACK = 'BLK'
    BLUE = 'BLU'
    BROWN = 'BRO'
    GRAY = 'GRY'
    GREEN = 'GRN'
    HAZEL = 'HAZ'
    MAROON = 'MAR'
    PINK = 'PNK'
    DICHROMATIC = 'DIC'
    UNKNOWN = 'UNK'

    @classmethod
    def of(cls, raw: Optional[str]) -> Optional['EyeColor']:
        return _resolve(cls, raw)


class HairColor(str, Enum):
    """AAMVA D20 hair color codes."""
    BALD = 'BAL'
    BLACK = 'BLK'
    BLOND = 'BLN'
    BROWN = 'BRO'
    GREY = 'GRY'
    RED = 'RED'
    SANDY = 'SDY'
    WHITE = 'WHI'
    UNKNOWN = 'UNK'

    @classmethod
    def of(cls, raw: Optional[str]) -> Optional['HairColor']:
        return _resolve(cls, raw)


class Gender(str, Enum):
    """Physical description: sex."""
    MALE = '1'
    FEMALE = '2'
    NOT_SPECIFIED = '9'

    @classmethod
    def of(cls, raw: Optional[str]) -> Optional['Gender']:
        return _resolve(cls, raw)


class IssuingCountry(str, Enum):
    """Country identification of the issuing jurisdiction."""
    UNITED_STATES = 'USA'
    CANADA = 'CAN'

    @classmethod
    def of(cls, raw: Optional[str]) -> Optional['IssuingCountry']:
        return _resolve(cls, raw)


class Truncation(str, Enum):
    """Whether a name element was truncated to fit the card."""
    TRUNCATED = 'T'
    NONE = 'N'
    UNKNOWN = 'U'

    @classmethod
    def of(cls, raw: Optional[str]) -> Optional['Truncation']:
        return _resolve(cls, raw)


# Roman numerals are accepted as aliases of the ordinal suffixes
_ROMAN_SUFFIXES: Dict[str, str] = {
    'I': '1ST', 'II': '2ND', 'III': '3RD', 'IV': '4TH', 'V': '5TH',
    'VI': '6TH', 'VII': '7TH', 'VIII': '8TH', 'IX': '9TH',
}


class NameSuffix(str, Enum):
    """Name suffix (JR, SR, generational ordinals)."""
    JUNIOR = 'JR'
    SENIOR = 'SR'
    FIRST = '1ST'
    SECOND = '2ND'
    THIRD = '3RD'
    FOURTH = '4TH'
    FIFTH = '5TH'
    SIXTH = '6TH'
    SEVENTH = '7TH'
    EIGHTH = '8TH'
    NINTH = '9TH'

    @classmethod
    def of(cls, raw: Optional[str]) -> Optional['NameSuffix']:
        if raw is None:
            return None
        code = raw.strip().upper().rstrip('.')
        return _resolve(cls, _ROMAN_SUFFIXES.get(code, code))


# (min, max) bounds per bucket; ``None`` means unbounded
_WEIGHT_RANGE_POUNDS: Dict[str, Tuple[int, Optional[int]]] = {
    '0': (0, 70), '1': (71, 100), '2': (101, 130), '3': (131, 160),
    '4': (161, 190), '5': (191, 220), '6': (221, 250), '7': (251, 280),
    '8': (281, 320), '9': (321, None),
}

_WEIGHT_RANGE_KILOGRAMS: Dict[str, Tuple[int, Optional[int]]] = {
    '0': (0, 31), '1': (32, 45), '2': (46, 59), '3': (60, 70),
    '4': (71, 86), '5': (87, 100), '6': (101, 113), '7': (114, 127),
    '8': (128, 145), '9': (146, None),
}


class WeightRange(str, Enum):
    """AAMVA weight range buckets (D20 data dictionary)."""
    RANGE_0 = '0'
    RANGE_1 = '1'
    RANGE_2 = '2'
    RANGE_3 = '3'
    RANGE_4 = '4'
    RANGE_5 = '5'
    RANGE_6 = '6'
    RANGE_7 = '7'
    RANGE_8 = '8'
    RANGE_9 = '9'

    @property
    def pounds(self) -> Tuple[int, Optional[int]]:
        return _WEIGHT_RANGE_POUNDS[self.value]

    @property
    def kilograms(self) -> Tuple[int, Optional[int]]:
        return _WEIGHT_RANGE_KILOGRAMS[self.value]

    @classmethod
    def of(cls, raw: Optional[str]) -> Optional['WeightRange']:
        return _resolve(cls, raw)


@dataclass
class Weight:
    """
    Weight of the license holder.

    The decoder fills exactly one of the two attributes: ``pounds`` when
    the document carries a pounds or kilograms value, ``range`` otherwise.
    """
    pounds: Optional[float] = None
    range: Optional[WeightRange] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'pounds': self.pounds,
            'range': self.range.name if self.range is not None else None,
        }
