#!/usr/bin/env python3
"""
Assign palette samples to the six named variations.

The default map makes one greedy pass in a fixed order (vibrant, light vibrant,
dark vibrant, muted, light muted, dark muted). A sample claimed by one variation
is removed from the pool before the next is evaluated.
"""

import logging
from typing import Optional, Protocol, Sequence

from color_model import HSL, hsl_to_rgb
from color_variation import ColorVariation, VariationProfiles
from samples import Sample
from text_contrast import TextContrastSettings, DEFAULT_TEXT_CONTRAST

logger = logging.getLogger(__name__)

VARIATION_NAMES = (
    'vibrant', 'light_vibrant', 'dark_vibrant',
    'muted', 'light_muted', 'dark_muted',
)


class VariationMap(Protocol):
    """Holds the sample (or None) chosen for each named variation."""
    vibrant_sample: Optional[Sample]
    muted_sample: Optional[Sample]
    light_vibrant_sample: Optional[Sample]
    light_muted_sample: Optional[Sample]
    dark_vibrant_sample: Optional[Sample]
    dark_muted_sample: Optional[Sample]

    def map(self, samples: Optional[Sequence[Sample]]) -> None:
        ...


class DefaultVariationMap:
    """
    Greedy, exclusive assignment of samples to the six profiles.

    After assignment, a missing vibrant sample is synthesized from the dark
    vibrant one (and vice versa) by keeping hue and saturation and forcing the
    luminance.
    """

    def __init__(self, profiles: VariationProfiles = VariationProfiles(),
                 text_contrast: TextContrastSettings = DEFAULT_TEXT_CONTRAST):
        self.profiles = profiles
        self.text_contrast = text_contrast
        self.vibrant_sample: Optional[Sample] = None
        self.muted_sample: Optional[Sample] = None
        self.light_vibrant_sample: Optional[Sample] = None
        self.light_muted_sample: Optional[Sample] = None
        self.dark_vibrant_sample: Optional[Sample] = None
        self.dark_muted_sample: Optional[Sample] = None

    def map(self, samples: Optional[Sequence[Sample]]) -> None:
        self.map_color_variations(samples)
        self.generate_missing_color_variations()

    def map_color_variations(self, samples: Optional[Sequence[Sample]]) -> None:
        if not samples:
            return

        pool = list(samples)
        for name in VARIATION_NAMES:
            variation: ColorVariation = getattr(self.profiles, name)
            match = variation.locate_best_match(pool)
            if match is None:
                logger.debug("No sample qualifies as %s", name)
                continue
            setattr(self, f'{name}_sample', match)
            pool.remove(match)
            logger.debug("Assigned %s to %s", match.rgb.to_hex(), name)

    def generate_missing_color_variations(self) -> None:
        if self.vibrant_sample is None and self.dark_vibrant_sample is not None:
            self.vibrant_sample = self._with_luminance(
                self.dark_vibrant_sample, self.profiles.synthesized_vibrant_luminance)
            logger.debug("Synthesized vibrant from dark vibrant")

        if self.dark_vibrant_sample is None and self.vibrant_sample is not None:
            self.dark_vibrant_sample = self._with_luminance(
                self.vibrant_sample, self.profiles.synthesized_dark_vibrant_luminance)
            logger.debug("Synthesized dark vibrant from vibrant")

    def _with_luminance(self, sample: Sample, luminance: float) -> Sample:
        hsl = HSL(hue=sample.hsl.hue, saturation=sample.hsl.saturation, luminance=luminance)
        return Sample.create(hsl_to_rgb(hsl), 0, self.text_contrast)

    def as_dict(self) -> dict[str, Optional[Sample]]:
        return {name: getattr(self, f'{name}_sample') for name in VARIATION_NAMES}
