import numpy as np
import pytest

from color_model import BLACK, BLUE, RED, RGB, WHITE
from color_space_box import ColorSpaceBox, Dimension
from samples import ColorInformation


def make_box(*colors, population=1):
    return ColorSpaceBox([ColorInformation(color, population) for color in colors])


def assert_sorted_along_longest(box):
    axis = box.longest_dimension.value
    values = [info.rgb.as_tuple()[axis] for info in box.samples]
    assert values == sorted(values)


def assert_volume_matches_bounds(box):
    spans = box.max_values - box.min_values + 1.0
    assert box.volume == pytest.approx(spans[0] * spans[1] * spans[2])


def test_black_white_box():
    box = make_box(BLACK, WHITE)
    assert box.volume == 8.0
    assert box.can_split
    assert box.middle_dimension_value == 0.5
    assert box.sample_split_index == 1


def test_single_color_box():
    box = make_box(RGB(0.2, 0.3, 0.4))
    assert box.volume == 1.0
    assert not box.can_split
    assert box.split() is None
    assert len(box) == 1


def test_longest_dimension():
    assert make_box(BLACK, RED).longest_dimension is Dimension.RED
    assert make_box(BLACK, RGB(0.1, 0.9, 0.3)).longest_dimension is Dimension.GREEN
    assert make_box(BLACK, BLUE).longest_dimension is Dimension.BLUE


def test_longest_dimension_ties():
    assert make_box(BLACK, WHITE).longest_dimension is Dimension.BLUE
    assert make_box(BLACK, RGB(0.5, 0.0, 0.5)).longest_dimension is Dimension.BLUE
    assert make_box(BLACK, RGB(0.0, 0.5, 0.5)).longest_dimension is Dimension.BLUE
    assert make_box(BLACK, RGB(0.5, 0.5, 0.0)).longest_dimension is Dimension.RED


def test_red_green_tie_splits_distinct_colors():
    box = make_box(*(RGB(r, g, 0.5) for r in (0.0, 1.0) for g in (0.0, 1.0)))
    assert box.longest_dimension is Dimension.RED
    assert box.sample_split_index == 2

    new_box = box.split()
    assert new_box is not None
    assert len(box) == 2
    assert len(new_box) == 2


def test_split_moves_upper_members_to_new_box():
    box = make_box(BLACK, WHITE)
    new_box = box.split()
    assert len(box) == 1
    assert len(new_box) == 1
    assert box.samples[0].rgb == BLACK
    assert new_box.samples[0].rgb == WHITE
    assert box.volume == 1.0
    assert new_box.volume == 1.0


def test_split_of_identical_colors_is_a_no_op():
    box = ColorSpaceBox([ColorInformation(RED, 3), ColorInformation(RED, 4)])
    assert box.can_split
    assert box.split() is None
    assert len(box) == 2


def test_many_colors_stay_sorted_after_splits():
    rng = np.random.default_rng(7)
    colors = [RGB(*map(float, row)) for row in rng.random((60, 3))]
    boxes = [make_box(*colors)]
    total = len(colors)

    for _ in range(12):
        boxes.sort(key=lambda b: b.volume, reverse=True)
        before = len(boxes[0])
        new_box = boxes[0].split()
        assert new_box is not None
        assert len(boxes[0]) + len(new_box) == before
        boxes.append(new_box)
        for box in boxes:
            assert_sorted_along_longest(box)
            assert_volume_matches_bounds(box)

    assert sum(len(b) for b in boxes) == total


def test_average_color_is_population_weighted():
    equal = make_box(BLACK, RGB(0.8, 0.4, 0.2), population=5)
    assert equal.average_color().rgb.as_tuple() == pytest.approx((0.4, 0.2, 0.1))
    assert equal.average_color().population == 10

    weighted = ColorSpaceBox([ColorInformation(BLACK, 2), ColorInformation(RGB(0.9, 0.9, 0.9), 1)])
    assert weighted.average_color().rgb.as_tuple() == pytest.approx((0.3, 0.3, 0.3))
    assert weighted.average_color().population == 3


def test_average_color_with_zero_population():
    box = make_box(BLACK, WHITE, population=0)
    sample = box.average_color()
    assert sample.rgb.as_tuple() == pytest.approx((0.5, 0.5, 0.5))
    assert sample.population == 0


def test_box_ordering_and_equality():
    big = make_box(BLACK, WHITE)
    small = make_box(BLACK, RED)
    assert big > small
    assert small < big
    assert make_box(BLACK, RED) == make_box(RED, BLACK)
    assert make_box(BLACK, RED) != make_box(BLACK, BLUE)
