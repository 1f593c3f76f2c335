#!/usr/bin/env python3
"""
Palette entries: a color, how often it appeared, and the text colors that read on it.
"""

from dataclasses import dataclass, field
from typing import Optional

from color_model import RGB, RGBA, HSL, rgb_to_hsl
from text_contrast import TextContrastSettings, DEFAULT_TEXT_CONTRAST, contrasting_text_color


@dataclass(frozen=True)
class ColorInformation:
    """
    A color and its population (relative pixel count).

    The HSL value is computed once on construction. Two instances are equal
    when both the color and the population match.
    """
    rgb: RGB
    population: int
    hsl: HSL = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'hsl', rgb_to_hsl(self.rgb))


@dataclass(frozen=True)
class Sample:
    """A quantized palette color with title and body text overlay colors."""
    info: ColorInformation
    title_text_color: Optional[RGBA] = field(default=None, compare=False)
    body_text_color: Optional[RGBA] = field(default=None, compare=False)

    @classmethod
    def create(cls, rgb: RGB, population: int,
               text_contrast: TextContrastSettings = DEFAULT_TEXT_CONTRAST) -> 'Sample':
        """Build a sample and solve its text colors."""
        return cls.from_info(ColorInformation(rgb, population), text_contrast)

    @classmethod
    def from_info(cls, info: ColorInformation,
                  text_contrast: TextContrastSettings = DEFAULT_TEXT_CONTRAST) -> 'Sample':
        background = RGBA.from_rgb(info.rgb)
        return cls(
            info=info,
            title_text_color=contrasting_text_color(
                background, text_contrast.title_min_contrast, text_contrast),
            body_text_color=contrasting_text_color(
                background, text_contrast.body_min_contrast, text_contrast),
        )

    @property
    def rgb(self) -> RGB:
        return self.info.rgb

    @property
    def hsl(self) -> HSL:
        return self.info.hsl

    @property
    def population(self) -> int:
        return self.info.population

    def to_dict(self) -> dict:
        """Plain representation used for JSON reports."""
        return {
            'hex': self.rgb.to_hex(),
            'rgb': list(self.rgb.as_tuple()),
            'population': self.population,
            'title_text': self.title_text_color.to_hex() if self.title_text_color else None,
            'body_text': self.body_text_color.to_hex() if self.body_text_color else None,
        }
