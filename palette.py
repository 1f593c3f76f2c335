#!/usr/bin/env python3
"""
Palette: sample an image, quantize its colors, classify the result.

Usage:
    palette = Palette.from_image('photo.jpg')
    palette.vibrant_color(default=RGB(0, 0, 0))
    for sample in palette.samples:
        print(sample.rgb.to_hex(), sample.population)
"""

from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass
import logging
from typing import Callable, Iterable, Mapping, Optional

from color_filters import ColorFilter, DefaultFilter
from color_model import RGB
from color_variation import VariationProfiles
from pixels import DEFAULT_MAX_SAMPLE_DIMENSION, ImageSource, sample_image
from quantizer import PaletteSize, Quantizer
from samples import Sample
from text_contrast import TextContrastSettings, DEFAULT_TEXT_CONTRAST
from variation_map import DefaultVariationMap, VariationMap, VARIATION_NAMES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaletteSettings:
    """Knobs for a palette build."""
    palette_size: PaletteSize = PaletteSize.DEFAULT
    max_sample_dimension: int = DEFAULT_MAX_SAMPLE_DIMENSION
    text_contrast: TextContrastSettings = DEFAULT_TEXT_CONTRAST
    profiles: VariationProfiles = VariationProfiles()


DEFAULT_SETTINGS = PaletteSettings()


class Palette:
    """
    The quantized samples of an image plus their six named variations.

    Args:
        samples: Quantized samples in box emission order
        variation_map: A map that has already been run over samples
    """

    def __init__(self, samples: list[Sample], variation_map: VariationMap):
        self.samples = samples
        self.variation_map = variation_map

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_color_counts(cls, color_counts: Mapping[RGB, int],
                          settings: PaletteSettings = DEFAULT_SETTINGS,
                          filters: Optional[Iterable[ColorFilter]] = None,
                          variation_map: Optional[VariationMap] = None) -> 'Palette':
        """
        Build a palette from a {color: population} mapping.

        Args:
            color_counts: Counted colors, e.g. from pixels.count_pixel_colors
            settings: Palette size, text contrast and variation profiles
            filters: Filter chain; None means [DefaultFilter()], () disables filtering
            variation_map: Map to populate; a fresh DefaultVariationMap when None
        """
        if filters is None:
            filters = (DefaultFilter(),)
        if variation_map is None:
            variation_map = DefaultVariationMap(settings.profiles, settings.text_contrast)

        quantizer = Quantizer(filters, settings.palette_size, settings.text_contrast)
        samples = quantizer.samples_from_counts(color_counts)
        variation_map.map(samples)

        logger.debug("Built palette with %d samples", len(samples))
        return cls(samples, variation_map)

    @classmethod
    def from_image(cls, source: ImageSource,
                   settings: PaletteSettings = DEFAULT_SETTINGS,
                   filters: Optional[Iterable[ColorFilter]] = None,
                   variation_map: Optional[VariationMap] = None) -> 'Palette':
        """
        Build a palette from an image path or a PIL image.

        Raises:
            FileNotFoundError: If image file doesn't exist
            ValueError: If file is not a valid image or exceeds size limits
        """
        color_counts = sample_image(source, settings.max_sample_dimension)
        return cls.from_color_counts(color_counts, settings, filters, variation_map)

    # =========================================================================
    # Named variations
    # =========================================================================

    @property
    def vibrant_sample(self) -> Optional[Sample]:
        return self.variation_map.vibrant_sample

    @property
    def muted_sample(self) -> Optional[Sample]:
        return self.variation_map.muted_sample

    @property
    def light_vibrant_sample(self) -> Optional[Sample]:
        return self.variation_map.light_vibrant_sample

    @property
    def light_muted_sample(self) -> Optional[Sample]:
        return self.variation_map.light_muted_sample

    @property
    def dark_vibrant_sample(self) -> Optional[Sample]:
        return self.variation_map.dark_vibrant_sample

    @property
    def dark_muted_sample(self) -> Optional[Sample]:
        return self.variation_map.dark_muted_sample

    @staticmethod
    def _sample_color_with_default(sample: Optional[Sample], default: RGB) -> RGB:
        return sample.rgb if sample is not None else default

    def vibrant_color(self, default: RGB) -> RGB:
        return self._sample_color_with_default(self.vibrant_sample, default)

    def muted_color(self, default: RGB) -> RGB:
        return self._sample_color_with_default(self.muted_sample, default)

    def light_vibrant_color(self, default: RGB) -> RGB:
        return self._sample_color_with_default(self.light_vibrant_sample, default)

    def light_muted_color(self, default: RGB) -> RGB:
        return self._sample_color_with_default(self.light_muted_sample, default)

    def dark_vibrant_color(self, default: RGB) -> RGB:
        return self._sample_color_with_default(self.dark_vibrant_sample, default)

    def dark_muted_color(self, default: RGB) -> RGB:
        return self._sample_color_with_default(self.dark_muted_sample, default)

    def named_samples(self) -> dict[str, Optional[Sample]]:
        """All six variations keyed by name (vibrant, light_vibrant, ...)."""
        return {name: getattr(self, f'{name}_sample') for name in VARIATION_NAMES}

    def to_dict(self) -> dict:
        """Plain representation used for JSON reports."""
        return {
            'variations': {
                name: sample.to_dict() if sample is not None else None
                for name, sample in self.named_samples().items()
            },
            'samples': [sample.to_dict() for sample in self.samples],
        }


# =============================================================================
# Background execution
# =============================================================================

def palette_async(source: ImageSource,
                  callback: Optional[Callable[[Palette], None]] = None,
                  executor: Optional[Executor] = None,
                  settings: PaletteSettings = DEFAULT_SETTINGS,
                  filters: Optional[Iterable[ColorFilter]] = None,
                  callback_executor: Optional[Executor] = None) -> Future:
    """
    Build a palette on a worker thread.

    Each call builds its own Quantizer and DefaultVariationMap, so concurrent
    calls share no mutable state.

    Args:
        source: Image path or PIL image
        callback: Called with the finished palette; runs on the worker thread
            unless callback_executor is given
        executor: Executor to submit to; a single-use ThreadPoolExecutor when None
        settings: Palette settings
        filters: Filter chain, as for Palette.from_color_counts
        callback_executor: Executor the callback is submitted to, e.g. one bound
            to the caller's thread

    Returns:
        Future resolving to the Palette (or raising the build error)
    """
    filter_chain = tuple(filters) if filters is not None else None

    def build() -> Palette:
        palette = Palette.from_image(source, settings, filter_chain)
        if callback is not None:
            if callback_executor is not None:
                callback_executor.submit(callback, palette)
            else:
                callback(palette)
        return palette

    if executor is not None:
        return executor.submit(build)

    own_executor = ThreadPoolExecutor(max_workers=1)
    try:
        return own_executor.submit(build)
    finally:
        # Returns immediately; the worker exits once build() finishes
        own_executor.shutdown(wait=False)
