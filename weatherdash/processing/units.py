"""Metric/imperial conversion and display formatting.

Stored readings are always metric. Conversion runs one way, from the stored
value to the display value, so a converted value is never fed back in.
"""

import math

KPH_TO_MPH = 0.621371


def convert_temperature(celsius: float, to_imperial: bool) -> float:
    if to_imperial:
        return celsius * 9 / 5 + 32
    return celsius


def convert_speed(kph: float, to_imperial: bool) -> float:
    if to_imperial:
        return kph * KPH_TO_MPH
    return kph


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +infinity."""
    return math.floor(value + 0.5)


def format_temperature(celsius: float, to_imperial: bool) -> str:
    value = round_half_up(convert_temperature(celsius, to_imperial))
    return f"{value}°{'F' if to_imperial else 'C'}"


def format_speed(kph: float, to_imperial: bool) -> str:
    value = round_half_up(convert_speed(kph, to_imperial))
    return f"{value} {'mph' if to_imperial else 'km/h'}"
