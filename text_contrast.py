#!/usr/bin/env python3
"""
Readable text colors for a background swatch.

For a given opaque background, find the least opaque black or white overlay
that still reaches a minimum contrast ratio. Contrast is measured on HSL
luminance: (L1 + 0.05) / (L2 + 0.05) with L1 the lighter color.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from color_model import RGBA, rgb_to_hsl


# =============================================================================
# Constants
# =============================================================================

TITLE_TEXT_MIN_CONTRAST = 3.0
BODY_TEXT_MIN_CONTRAST = 3.5
MAX_ALPHA_SEARCH_ITERATIONS = 10
ALPHA_SEARCH_PRECISION = 0.03921569  # ten 8-bit alpha steps

WHITE_TEXT = RGBA(1.0, 1.0, 1.0, 1.0)
BLACK_TEXT = RGBA(0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class TextContrastSettings:
    """Contrast targets and alpha search limits for text overlays."""
    title_min_contrast: float = TITLE_TEXT_MIN_CONTRAST
    body_min_contrast: float = BODY_TEXT_MIN_CONTRAST
    max_search_iterations: int = MAX_ALPHA_SEARCH_ITERATIONS
    search_precision: float = ALPHA_SEARCH_PRECISION


DEFAULT_TEXT_CONTRAST = TextContrastSettings()


# =============================================================================
# Compositing and Contrast
# =============================================================================

def _require_opaque(background: RGBA) -> None:
    if not background.is_opaque:
        raise ValueError(
            f"Background must be fully opaque to measure contrast (alpha={background.alpha})"
        )


def composite_over(foreground: RGBA, background: RGBA) -> RGBA:
    """Alpha-composite foreground over an opaque background."""
    _require_opaque(background)
    fa = foreground.alpha
    ba = background.alpha
    out_alpha = fa + ba * (1.0 - fa)

    def blend(fc: float, bc: float) -> float:
        return (fc * fa + bc * ba * (1.0 - fa)) / out_alpha

    return RGBA(
        blend(foreground.red, background.red),
        blend(foreground.green, background.green),
        blend(foreground.blue, background.blue),
        out_alpha,
    )


def contrast_ratio(foreground: RGBA, background: RGBA) -> float:
    """
    Contrast ratio between a foreground and an opaque background.

    A translucent foreground is composited over the background first. The result
    is always >= 1.0 (21.0 for white on black).

    Raises:
        ValueError: If the background is translucent
    """
    _require_opaque(background)
    if not foreground.is_opaque:
        foreground = composite_over(foreground, background)

    foreground_luminance = rgb_to_hsl(foreground.rgb).luminance + 0.05
    background_luminance = rgb_to_hsl(background.rgb).luminance + 0.05
    return (max(foreground_luminance, background_luminance)
            / min(foreground_luminance, background_luminance))


def minimum_contrasting_alpha(foreground: RGBA, background: RGBA, min_contrast: float,
                              settings: TextContrastSettings = DEFAULT_TEXT_CONTRAST) -> Optional[float]:
    """
    Binary search the smallest alpha at which foreground still reaches min_contrast.

    Returns the upper bound of the final search interval, so the alpha always
    passes. Returns None when even the fully opaque foreground falls short.
    """
    if contrast_ratio(foreground.with_alpha(1.0), background) < min_contrast:
        return None

    low, high = 0.0, 1.0
    for _ in range(settings.max_search_iterations):
        if high - low <= settings.search_precision:
            break
        test_alpha = (low + high) / 2.0
        if contrast_ratio(foreground.with_alpha(test_alpha), background) < min_contrast:
            low = test_alpha
        else:
            high = test_alpha

    return high


# =============================================================================
# Text Color Choice
# =============================================================================

class TextColorOutcome(Enum):
    LIGHT_ONLY = 'light_only'
    DARK_ONLY = 'dark_only'
    BOTH = 'both'
    NEITHER = 'neither'


@dataclass(frozen=True)
class TextColorChoice:
    """Minimum alphas found for white (light) and black (dark) text."""
    light_alpha: Optional[float]
    dark_alpha: Optional[float]

    @property
    def outcome(self) -> TextColorOutcome:
        if self.light_alpha is not None and self.dark_alpha is not None:
            return TextColorOutcome.BOTH
        if self.light_alpha is not None:
            return TextColorOutcome.LIGHT_ONLY
        if self.dark_alpha is not None:
            return TextColorOutcome.DARK_ONLY
        return TextColorOutcome.NEITHER

    @property
    def color(self) -> Optional[RGBA]:
        """The winning overlay; on equal alphas black wins."""
        outcome = self.outcome
        if outcome is TextColorOutcome.BOTH:
            if self.light_alpha < self.dark_alpha:
                return WHITE_TEXT.with_alpha(self.light_alpha)
            return BLACK_TEXT.with_alpha(self.dark_alpha)
        if outcome is TextColorOutcome.LIGHT_ONLY:
            return WHITE_TEXT.with_alpha(self.light_alpha)
        if outcome is TextColorOutcome.DARK_ONLY:
            return BLACK_TEXT.with_alpha(self.dark_alpha)
        return None


def choose_text_color(background: RGBA, min_contrast: float,
                      settings: TextContrastSettings = DEFAULT_TEXT_CONTRAST) -> TextColorChoice:
    return TextColorChoice(
        light_alpha=minimum_contrasting_alpha(WHITE_TEXT, background, min_contrast, settings),
        dark_alpha=minimum_contrasting_alpha(BLACK_TEXT, background, min_contrast, settings),
    )


def contrasting_text_color(background: RGBA, min_contrast: float,
                           settings: TextContrastSettings = DEFAULT_TEXT_CONTRAST) -> Optional[RGBA]:
    """
    White or black text at the lowest alpha meeting min_contrast on background.

    Returns None when neither color can reach the ratio; callers supply their
    own fallback.
    """
    return choose_text_color(background, min_contrast, settings).color
