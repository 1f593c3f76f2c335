#!/usr/bin/env python3
"""
Median-cut color boxes.

A ColorSpaceBox owns a set of colors and the RGB bounds that enclose them. It
can split itself in two along its longest axis and collapse to one averaged
Sample. Bounds and member order are restored after every mutation, so a box
never exposes a stale state.
"""

from enum import Enum
from typing import Optional, Sequence

import numpy as np

from color_model import RGB
from samples import ColorInformation, Sample
from text_contrast import TextContrastSettings, DEFAULT_TEXT_CONTRAST


class Dimension(Enum):
    """An RGB axis; the value is the channel column index."""
    RED = 0
    GREEN = 1
    BLUE = 2


class ColorSpaceBox:
    """
    A box in RGB space enclosing a list of ColorInformation members.

    Members are always sorted ascending along the box's longest dimension.
    """

    def __init__(self, samples: Sequence[ColorInformation]):
        self._samples = list(samples)
        self._fill_and_sort()

    # -------------------------------------------------------------------------
    # Derived quantities
    # -------------------------------------------------------------------------

    @property
    def samples(self) -> tuple:
        return tuple(self._samples)

    @property
    def min_values(self) -> np.ndarray:
        return self._mins.copy()

    @property
    def max_values(self) -> np.ndarray:
        return self._maxs.copy()

    @property
    def longest_dimension(self) -> Dimension:
        """
        The axis with the widest span.

        Blue wins whenever it is at least as long as both others (so a three-way
        tie is blue). Otherwise red beats green on a tie. The chosen axis always
        has the widest span.
        """
        red, green, blue = (float(x) for x in self._maxs - self._mins)
        if blue >= red and blue >= green:
            return Dimension.BLUE
        if red >= green:
            return Dimension.RED
        return Dimension.GREEN

    @property
    def volume(self) -> float:
        """Product of (span + 1) per axis: 1 for a single color, 8 for the full cube."""
        return float(np.prod(self._maxs - self._mins + 1.0))

    @property
    def can_split(self) -> bool:
        return len(self._samples) > 1

    @property
    def middle_dimension_value(self) -> float:
        axis = self.longest_dimension.value
        return float((self._mins[axis] + self._maxs[axis]) / 2)

    @property
    def sample_split_index(self) -> Optional[int]:
        """Index of the first member at or above the midpoint of the longest axis."""
        if not self._samples:
            return None
        values = self._channels[:, self.longest_dimension.value]
        above = np.flatnonzero(values >= self.middle_dimension_value)
        if above.size == 0:
            return None
        return int(above[0])

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def average_color(self, text_contrast: TextContrastSettings = DEFAULT_TEXT_CONTRAST) -> Sample:
        """
        Population weighted mean of the members as a single Sample.

        The sample's population is the sum of member populations. A box whose
        members all have zero population is averaged unweighted.
        """
        populations = np.array([s.population for s in self._samples], dtype=np.float64)
        total = int(sum(s.population for s in self._samples))
        if total > 0:
            mean = (populations @ self._channels) / populations.sum()
        else:
            mean = self._channels.mean(axis=0)
        return Sample.create(RGB(float(mean[0]), float(mean[1]), float(mean[2])), total, text_contrast)

    def split(self) -> Optional['ColorSpaceBox']:
        """
        Move the members at or above the midpoint of the longest axis to a new box.

        Both boxes recompute their bounds and order afterwards. Returns None when
        the box holds fewer than two members or no usable split index exists.
        """
        if not self.can_split:
            return None

        new_box = None
        index = self.sample_split_index
        # index 0 would move every member and leave this box empty
        if index:
            new_box = ColorSpaceBox(self._samples[index:])
            del self._samples[index:]
        self._fill_and_sort()
        return new_box

    def _fill_and_sort(self) -> None:
        self._channels = np.array([s.rgb.as_tuple() for s in self._samples],
                                  dtype=np.float64).reshape(-1, 3)
        if self._samples:
            self._mins = self._channels.min(axis=0)
            self._maxs = self._channels.max(axis=0)
        else:
            self._mins = np.zeros(3)
            self._maxs = np.zeros(3)

        order = np.argsort(self._channels[:, self.longest_dimension.value], kind='stable')
        self._samples = [self._samples[i] for i in order]
        self._channels = self._channels[order]

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, ColorSpaceBox):
            return NotImplemented
        return self._samples == other._samples

    __hash__ = None

    def __lt__(self, other: 'ColorSpaceBox') -> bool:
        return self.volume < other.volume

    def __gt__(self, other: 'ColorSpaceBox') -> bool:
        return self.volume > other.volume

    def __len__(self) -> int:
        return len(self._samples)

    def __repr__(self) -> str:
        return f"ColorSpaceBox(members={len(self._samples)}, volume={self.volume:.3f})"
