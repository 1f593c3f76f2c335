#!/usr/bin/env python3
"""
Color filters that keep undesirable colors out of a palette.

A filter is any object with an ``is_allowed(color) -> bool`` method. A color is
admitted only when every filter in the chain allows it.
"""

from dataclasses import dataclass
from typing import Iterable, Protocol

from color_model import RGB, HSL, rgb_to_hsl


# =============================================================================
# Constants
# =============================================================================

MAX_LUMINANCE_FOR_BLACK = 0.05
MIN_LUMINANCE_FOR_WHITE = 0.95
MIN_HUE_FOR_RED_BAND = 10.0 / 360.0
MAX_HUE_FOR_RED_BAND = 37.0 / 360.0
MAX_SATURATION_FOR_RED_BAND = 0.82


# =============================================================================
# Filter Protocol
# =============================================================================

class ColorFilter(Protocol):
    """Decides whether a color may take part in a palette."""

    def is_allowed(self, color: RGB) -> bool:
        ...


def is_allowed_by(filters: Iterable[ColorFilter], color: RGB) -> bool:
    """Return True when no filter in the chain rejects the color."""
    return all(f.is_allowed(color) for f in filters)


# =============================================================================
# Default Filter
# =============================================================================

@dataclass(frozen=True)
class FilterSettings:
    """Thresholds used by DefaultFilter. Luminance and hue bounds are inclusive."""
    max_luminance_for_black: float = MAX_LUMINANCE_FOR_BLACK
    min_luminance_for_white: float = MIN_LUMINANCE_FOR_WHITE
    min_hue_for_red_band: float = MIN_HUE_FOR_RED_BAND
    max_hue_for_red_band: float = MAX_HUE_FOR_RED_BAND
    max_saturation_for_red_band: float = MAX_SATURATION_FOR_RED_BAND


@dataclass(frozen=True)
class DefaultFilter:
    """
    Rejects near-black, near-white and a band of desaturated reds.

    The red band (hue 10-37 degrees, saturation <= 0.82) covers skin tones and
    sensor casts that dominate photos without reading as a distinct color.
    """
    settings: FilterSettings = FilterSettings()

    def is_allowed(self, color: RGB) -> bool:
        hsl = rgb_to_hsl(color)
        return not (self.is_white(hsl) or self.is_black(hsl) or self.is_near_red_band(hsl))

    def is_white(self, hsl: HSL) -> bool:
        return hsl.luminance >= self.settings.min_luminance_for_white

    def is_black(self, hsl: HSL) -> bool:
        return hsl.luminance <= self.settings.max_luminance_for_black

    def is_near_red_band(self, hsl: HSL) -> bool:
        s = self.settings
        return (s.min_hue_for_red_band <= hsl.hue <= s.max_hue_for_red_band
                and hsl.saturation <= s.max_saturation_for_red_band)
