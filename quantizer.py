#!/usr/bin/env python3
"""
Median-cut quantization of counted colors into a bounded list of Samples.

Pipeline: filter counted colors -> ColorInformation -> split the largest box
until the palette size is reached (or nothing can split) -> average each box.
"""

from enum import Enum
import logging
from typing import Iterable, Mapping, Optional, Sequence

from color_filters import ColorFilter, is_allowed_by
from color_model import RGB
from color_space_box import ColorSpaceBox
from samples import ColorInformation, Sample
from text_contrast import TextContrastSettings, DEFAULT_TEXT_CONTRAST

logger = logging.getLogger(__name__)


class PaletteSize(Enum):
    """Maximum number of colors in a palette."""
    MICRO = 2
    SMALL = 8
    DEFAULT = 16
    LARGE = 24

    @property
    def max_colors(self) -> int:
        return self.value


class Quantizer:
    """
    Reduces a {color: population} mapping to at most palette_size Samples.

    Args:
        filters: Filter chain; a color is dropped if any filter rejects it
        palette_size: Target number of samples
        text_contrast: Settings used to solve each sample's text colors
    """

    def __init__(self, filters: Iterable[ColorFilter] = (),
                 palette_size: PaletteSize = PaletteSize.DEFAULT,
                 text_contrast: TextContrastSettings = DEFAULT_TEXT_CONTRAST):
        self.filters = tuple(filters)
        self.palette_size = palette_size
        self.text_contrast = text_contrast

    def should_ignore(self, color: RGB) -> bool:
        """True when any filter rejects the color."""
        return not is_allowed_by(self.filters, color)

    def sample_colors(self, color_counts: Mapping[RGB, int]) -> list[ColorInformation]:
        """
        Convert admitted colors into ColorInformation, ordered by (red, green, blue).

        Raises:
            ValueError: If a population is negative
        """
        infos = []
        for color in sorted(color_counts, key=RGB.as_tuple):
            population = int(color_counts[color])
            if population < 0:
                raise ValueError(f"Negative population {population} for {color}")
            if self.should_ignore(color):
                continue
            infos.append(ColorInformation(color, population))

        logger.debug("Admitted %d of %d distinct colors", len(infos), len(color_counts))
        return infos

    def quantize(self, infos: Sequence[ColorInformation],
                 palette_size: Optional[PaletteSize] = None) -> list[Sample]:
        """
        Median-cut infos down to at most palette_size samples.

        Returns fewer samples than requested when the largest box cannot split.
        """
        max_colors = (palette_size or self.palette_size).max_colors
        if len(infos) <= max_colors:
            return [Sample.from_info(info, self.text_contrast) for info in infos]

        boxes = [ColorSpaceBox(infos)]
        while len(boxes) < max_colors:
            new_box = boxes[0].split()
            if new_box is None:
                logger.debug("Largest box cannot split; stopping at %d boxes", len(boxes))
                break
            boxes.append(new_box)
            # Stable sort: equal volumes keep discovery order
            boxes.sort(key=lambda box: box.volume, reverse=True)

        logger.debug("Quantized %d colors into %d boxes", len(infos), len(boxes))
        return [box.average_color(self.text_contrast) for box in boxes]

    def samples_from_counts(self, color_counts: Mapping[RGB, int]) -> list[Sample]:
        """Filter and quantize a counted color mapping in one step."""
        return self.quantize(self.sample_colors(color_counts))
