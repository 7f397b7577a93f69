"""
Tests for the categorical code lookups.

Run with: pytest tests/test_definitions.py -v
"""

import pytest

from aamva_decoder.core.definitions import (
    EyeColor,
    Gender,
    HairColor,
    IssuingCountry,
    NameSuffix,
    Truncation,
    Weight,
    WeightRange,
)


class TestCodeLookup:
    """Tests for the ``of`` lookups."""

    @pytest.mark.parametrize("enum_cls,raw,expected", [
        (EyeColor, 'BRO', EyeColor.BROWN),
        (EyeColor, 'haz', EyeColor.HAZEL),
        (HairColor, 'SDY', HairColor.SANDY),
        (Gender, '9', Gender.NOT_SPECIFIED),
        (IssuingCountry, ' CAN ', IssuingCountry.CANADA),
        (Truncation, 'T', Truncation.TRUNCATED),
        (WeightRange, '9', WeightRange.RANGE_9),
    ])
    def test_known_codes(self, enum_cls, raw, expected):
        assert enum_cls.of(raw) is expected

    @pytest.mark.parametrize("enum_cls", [
        EyeColor, HairColor, Gender, IssuingCountry, Truncation, NameSuffix, WeightRange,
    ])
    def test_unknown_and_missing_codes(self, enum_cls):
        assert enum_cls.of('???') is None
        assert enum_cls.of(None) is None

    @pytest.mark.parametrize("raw,expected", [
        ('JR', NameSuffix.JUNIOR),
        ('jr.', NameSuffix.JUNIOR),
        ('SR', NameSuffix.SENIOR),
        ('3RD', NameSuffix.THIRD),
        ('III', NameSuffix.THIRD),
        ('IV', NameSuffix.FOURTH),
        ('IX', NameSuffix.NINTH),
    ])
    def test_name_suffix(self, raw, expected):
        assert NameSuffix.of(raw) is expected


class TestWeightRange:
    """Tests for weight range bounds."""

    def test_bounds(self):
        assert WeightRange.RANGE_0.pounds == (0, 70)
        assert WeightRange.RANGE_5.kilograms == (87, 100)

    def test_open_upper_bound(self):
        assert WeightRange.RANGE_9.pounds == (321, None)

    def test_weight_to_dict(self):
        assert Weight(pounds=150.0).to_dict() == {'pounds': 150.0, 'range': None}
