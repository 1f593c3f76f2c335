#!/usr/bin/env python3
"""
Variation profiles: target regions in luminance/saturation space.

Each profile rates how well a Sample fits it. Luminance matters most (weight 6),
then saturation (weight 3), with population share as a tie-breaker (weight 1).
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from samples import Sample


# =============================================================================
# Rating Math
# =============================================================================

SATURATION_WEIGHT = 3.0
LUMINANCE_WEIGHT = 6.0
POPULATION_WEIGHT = 1.0


def weighted_mean(*weighted_values: tuple[float, float]) -> float:
    """Mean of (value, weight) pairs; 0.0 when the weights sum to zero."""
    value_sum = 0.0
    weight_sum = 0.0
    for value, weight in weighted_values:
        value_sum += value * weight
        weight_sum += weight
    if weight_sum == 0:
        return 0.0
    return value_sum / weight_sum


def inverted_difference(value: float, target: float) -> float:
    """1.0 when value equals target, 0.0 when they are a full unit apart."""
    return 1.0 - abs(value - target)


def total_population(samples: Sequence[Sample]) -> int:
    return sum(s.population for s in samples)


# =============================================================================
# ColorVariation
# =============================================================================

@dataclass(frozen=True)
class ColorVariation:
    """A named target region; min/max bounds are inclusive."""
    target_luminance: float
    min_luminance: float
    max_luminance: float
    target_saturation: float
    min_saturation: float
    max_saturation: float

    def is_luminance_within_range(self, luminance: float) -> bool:
        return self.min_luminance <= luminance <= self.max_luminance

    def is_saturation_within_range(self, saturation: float) -> bool:
        return self.min_saturation <= saturation <= self.max_saturation

    def match_rating(self, sample: Sample, population_total: int) -> Optional[float]:
        """
        Rate sample against this variation.

        Returns:
            A rating in [0, 1] (1.0 is a perfect match), or None when the sample's
            luminance or saturation falls outside the allowed range.
        """
        hsl = sample.hsl
        if not (self.is_luminance_within_range(hsl.luminance)
                and self.is_saturation_within_range(hsl.saturation)):
            return None

        saturation_score = inverted_difference(hsl.saturation, self.target_saturation)
        luminance_score = inverted_difference(hsl.luminance, self.target_luminance)
        population_share = sample.population / population_total if population_total else 0.0

        return weighted_mean(
            (saturation_score, SATURATION_WEIGHT),
            (luminance_score, LUMINANCE_WEIGHT),
            (population_share, POPULATION_WEIGHT),
        )

    def locate_best_match(self, samples: Sequence[Sample]) -> Optional[Sample]:
        """Highest rated qualifying sample; the first one wins on an exact tie."""
        population_total = total_population(samples)
        best = None
        best_rating = None
        for sample in samples:
            rating = self.match_rating(sample, population_total)
            if rating is None:
                continue
            if best_rating is None or rating > best_rating:
                best, best_rating = sample, rating
        return best


# =============================================================================
# Presets
# =============================================================================

VIBRANT = ColorVariation(target_luminance=0.5, min_luminance=0.3, max_luminance=0.7,
                         target_saturation=1.0, min_saturation=0.35, max_saturation=1.0)
MUTED = ColorVariation(target_luminance=0.5, min_luminance=0.3, max_luminance=0.7,
                       target_saturation=0.3, min_saturation=0.0, max_saturation=0.4)
LIGHT_VIBRANT = ColorVariation(target_luminance=0.74, min_luminance=0.55, max_luminance=1.0,
                               target_saturation=1.0, min_saturation=0.35, max_saturation=1.0)
LIGHT_MUTED = ColorVariation(target_luminance=0.74, min_luminance=0.55, max_luminance=1.0,
                             target_saturation=0.3, min_saturation=0.0, max_saturation=0.4)
DARK_VIBRANT = ColorVariation(target_luminance=0.26, min_luminance=0.0, max_luminance=0.45,
                              target_saturation=1.0, min_saturation=0.35, max_saturation=1.0)
DARK_MUTED = ColorVariation(target_luminance=0.26, min_luminance=0.0, max_luminance=0.45,
                            target_saturation=0.3, min_saturation=0.0, max_saturation=0.4)

SYNTHESIZED_VIBRANT_LUMINANCE = 0.5
SYNTHESIZED_DARK_VIBRANT_LUMINANCE = 0.26


@dataclass(frozen=True)
class VariationProfiles:
    """The six profiles a variation map assigns, plus fallback luminances."""
    vibrant: ColorVariation = VIBRANT
    muted: ColorVariation = MUTED
    light_vibrant: ColorVariation = LIGHT_VIBRANT
    light_muted: ColorVariation = LIGHT_MUTED
    dark_vibrant: ColorVariation = DARK_VIBRANT
    dark_muted: ColorVariation = DARK_MUTED
    synthesized_vibrant_luminance: float = SYNTHESIZED_VIBRANT_LUMINANCE
    synthesized_dark_vibrant_luminance: float = SYNTHESIZED_DARK_VIBRANT_LUMINANCE
