#!/usr/bin/env python3
"""
RGB and HSL color values with the conversions used by every palette stage.

All channels are floats in [0, 1]. Hue is stored as a fraction of a full turn
(degrees / 360).
"""

from dataclasses import dataclass


# =============================================================================
# Value Types
# =============================================================================

@dataclass(frozen=True)
class RGB:
    """An opaque color. Equality and hashing use the exact channel values."""
    red: float
    green: float
    blue: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        """Format as #rrggbb, rounding each channel to 8 bits."""
        return '#' + ''.join(f'{_to_byte(c):02x}' for c in self.as_tuple())

    @classmethod
    def from_bytes(cls, red: int, green: int, blue: int) -> 'RGB':
        """Build from 8-bit channel values (0-255)."""
        return cls(red / 255.0, green / 255.0, blue / 255.0)

    @classmethod
    def from_hex(cls, value: str) -> 'RGB':
        """Parse #rrggbb (leading # optional)."""
        value = value.strip().lstrip('#')
        if len(value) != 6:
            raise ValueError(f"Expected a 6 digit hex color, got {value!r}")
        return cls.from_bytes(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


@dataclass(frozen=True)
class RGBA:
    """A color with an alpha component, used for text overlays."""
    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @property
    def rgb(self) -> RGB:
        return RGB(self.red, self.green, self.blue)

    @property
    def is_opaque(self) -> bool:
        return self.alpha == 1.0

    def with_alpha(self, alpha: float) -> 'RGBA':
        return RGBA(self.red, self.green, self.blue, alpha)

    def to_hex(self) -> str:
        """Format as #rrggbbaa."""
        return self.rgb.to_hex() + f'{_to_byte(self.alpha):02x}'

    @classmethod
    def from_rgb(cls, rgb: RGB, alpha: float = 1.0) -> 'RGBA':
        return cls(rgb.red, rgb.green, rgb.blue, alpha)


@dataclass(frozen=True)
class HSL:
    """Hue, saturation and luminance, each in [0, 1]."""
    hue: float
    saturation: float
    luminance: float


def _to_byte(channel: float) -> int:
    return int(round(min(max(channel, 0.0), 1.0) * 255))


# =============================================================================
# Conversion
# =============================================================================

def rgb_to_hsl(rgb: RGB) -> HSL:
    """Convert RGB to HSL using the min/max channel decomposition."""
    r, g, b = rgb.red, rgb.green, rgb.blue
    min_val = min(r, g, b)
    max_val = max(r, g, b)
    delta = max_val - min_val

    luminance = (max_val + min_val) / 2

    saturation = 0.0
    if max_val != min_val:
        if luminance < 0.5:
            saturation = delta / (max_val + min_val)
        else:
            saturation = delta / (2.0 - max_val - min_val)

    # Achromatic colors have no defined hue
    if delta == 0:
        return HSL(hue=0.0, saturation=saturation, luminance=luminance)

    if max_val == r:
        hue = (g - b) / delta
    elif max_val == g:
        hue = 2.0 + (b - r) / delta
    else:
        hue = 4.0 + (r - g) / delta

    hue *= 60
    if hue < 0:
        hue += 360
    hue /= 360

    return HSL(hue=hue, saturation=saturation, luminance=luminance)


def _hue_to_channel(temp1: float, temp2: float, hue: float) -> float:
    if hue < 0:
        hue += 1
    elif hue > 1:
        hue -= 1

    if hue * 6 < 1:
        return temp2 + (temp1 - temp2) * 6 * hue
    if hue * 2 < 1:
        return temp1
    if hue * 3 < 2:
        return temp2 + (temp1 - temp2) * (2.0 / 3.0 - hue) * 6
    return temp2


def hsl_to_rgb(hsl: HSL) -> RGB:
    """Convert HSL back to RGB with the two temporary value formula."""
    h, s, l = hsl.hue, hsl.saturation, hsl.luminance

    if s == 0:
        return RGB(l, l, l)

    if l < 0.5:
        temp1 = l * (1.0 + s)
    else:
        temp1 = l + s - l * s
    temp2 = 2 * l - temp1

    return RGB(
        _hue_to_channel(temp1, temp2, h + 1.0 / 3.0),
        _hue_to_channel(temp1, temp2, h),
        _hue_to_channel(temp1, temp2, h - 1.0 / 3.0),
    )


# =============================================================================
# Common Colors
# =============================================================================

BLACK = RGB(0.0, 0.0, 0.0)
WHITE = RGB(1.0, 1.0, 1.0)
RED = RGB(1.0, 0.0, 0.0)
GREEN = RGB(0.0, 1.0, 0.0)
BLUE = RGB(0.0, 0.0, 1.0)
