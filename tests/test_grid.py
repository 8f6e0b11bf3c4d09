"""Tests for blocky.grid."""

from __future__ import annotations

import uuid
from collections import Counter

import pytest

from blocky.grid import Cell, create_image_data, is_mirrored, rows, split_width
from blocky.prng import XorShift128


class TestSplitWidth:
    @pytest.mark.parametrize(
        ("width", "expected"),
        [(1, (1, 0)), (2, (1, 1)), (7, (4, 3)), (8, (4, 4))],
    )
    def test_split(self, width: int, expected: tuple) -> None:
        assert split_width(width) == expected


class TestCreateImageData:
    @pytest.mark.parametrize("size", [1, 2, 7, 8])
    def test_rows_are_mirrored(self, size: int) -> None:
        for seed in ("alpha", "beta", "gamma", ""):
            cells = create_image_data(XorShift128.from_seed(seed), size)
            assert len(cells) == size * size
            assert is_mirrored(cells, size)

    @pytest.mark.parametrize("size", [1, 2, 7, 8])
    def test_draw_count(self, size: int) -> None:
        used = XorShift128.from_seed("count")
        reference = XorShift128.from_seed("count")
        create_image_data(used, size)
        reference.draws(size * split_width(size)[0])
        assert used.state == reference.state

    def test_values_are_cells(self) -> None:
        cells = create_image_data(XorShift128.from_seed("cells"), 16)
        assert all(isinstance(cell, Cell) for cell in cells)
        assert set(cells) <= {Cell.BACKGROUND, Cell.FOREGROUND, Cell.SPOT}

    def test_all_categories_appear_in_large_grid(self) -> None:
        cells = create_image_data(XorShift128.from_seed("large"), 40)
        assert set(cells) == {Cell.BACKGROUND, Cell.FOREGROUND, Cell.SPOT}

    def test_zero_state_is_all_background(self) -> None:
        assert create_image_data(XorShift128.from_seed(""), 3) == [Cell.BACKGROUND] * 9

    def test_left_half_follows_draw_order(self) -> None:
        rng = XorShift128.from_seed("order")
        expected = [int(v * 2.3) for v in XorShift128.from_seed("order").draws(4)]
        cells = create_image_data(rng, 3)
        assert [cells[0], cells[1], cells[3], cells[4]] == expected

    def test_odd_width_has_center_column(self) -> None:
        cells = create_image_data(XorShift128.from_seed("center"), 5)
        for row in rows(cells, 5):
            assert list(row[:2]) == list(reversed(row[3:]))

    def test_non_square_rejected(self) -> None:
        with pytest.raises(ValueError):
            create_image_data(XorShift128(), 4, 5)


class TestIsMirrored:
    def test_detects_asymmetry(self) -> None:
        assert not is_mirrored([Cell.FOREGROUND, Cell.BACKGROUND], 2)
        assert is_mirrored([Cell.SPOT, Cell.SPOT], 2)


class TestCellDistribution:
    def test_split_matches_spread(self) -> None:
        counts: Counter = Counter()
        for i in range(400):
            rng = XorShift128.from_seed(str(uuid.uuid5(uuid.NAMESPACE_URL, f"cells/{i}")))
            data_width, _ = split_width(7)
            cells = create_image_data(rng, 7)
            for row in rows(cells, 7):
                counts.update(row[:data_width])
        total = sum(counts.values())
        # 1/2.3 each for background and foreground, the remaining 0.3/2.3 for spot
        assert 0.40 < counts[Cell.BACKGROUND] / total < 0.47
        assert 0.40 < counts[Cell.FOREGROUND] / total < 0.47
        assert 0.10 < counts[Cell.SPOT] / total < 0.16
