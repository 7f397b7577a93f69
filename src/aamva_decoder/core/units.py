"""Unit conversions for physical description elements."""

import math

CENTIMETERS_TO_INCHES = 0.393701
KILOGRAMS_TO_POUNDS = 2.20462


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


def centimeters_to_inches(centimeters: float) -> float:
    """
    Convert centimeters to whole inches (round half up).

    Examples:
        >>> centimeters_to_inches(173)
        68.0
    """
    return _round_half_up(centimeters * CENTIMETERS_TO_INCHES)


def kilograms_to_pounds(kilograms: float) -> float:
    """
    Convert kilograms to whole pounds (round half up).

    Examples:
        >>> kilograms_to_pounds(80)
        176.0
    """
    return _round_half_up(kilograms * KILOGRAMS_TO_POUNDS)
