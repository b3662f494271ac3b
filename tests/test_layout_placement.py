from __future__ import annotations

import math
import string

import pytest

from textpng.processors import (
    LayoutResult,
    build_layout,
    compute_text_height,
    line_height,
    place_lines,
    wrap_text_lines,
)


class TestHeights:
    @pytest.mark.parametrize("n", [1, 2, 5, 17])
    @pytest.mark.parametrize("font_size", [8, 11, 72])
    def test_height_formula(self, n, font_size):
        assert math.isclose(compute_text_height(n, font_size), n * 1.5 * font_size - 0.5 * font_size)

    def test_single_line_height_equals_font_size(self):
        assert compute_text_height(1, 11) == 11

    def test_zero_lines(self):
        assert compute_text_height(0, 11) == 0.0

    def test_line_height_ratio(self):
        assert line_height(12) == 18


class TestSurfaceSize:
    def _layout(self, n: int, font_size: float = 11) -> LayoutResult:
        return LayoutResult(
            lines=["x"] * n,
            font_size=font_size,
            line_height=line_height(font_size),
            text_height=compute_text_height(n, font_size),
        )

    def test_logical_size_includes_padding(self):
        assert self._layout(1).logical_size() == (600.0, 13.0)

    def test_device_scale_multiplies_pixels(self):
        assert self._layout(1).surface_size(2.0) == (1200, 26)

    def test_fractional_height_rounds_up(self):
        # 2 行 11px：27.5 + 2 = 29.5 -> 30
        assert self._layout(2).surface_size(1.0) == (600, 30)


class TestBuildLayout:
    def test_scenario_a_single_line(self, measure):
        layout = build_layout("hello world", 11, measure)
        assert layout.lines == ["hello world"]
        assert layout.text_height == 11

    def test_blank_document_is_empty(self, measure):
        layout = build_layout("\n\n\n", 11, measure)
        assert layout.is_empty
        assert layout.text_height == 0.0


class TestHorizontalPlacement:
    def test_left_uses_padding(self, measure):
        placed = place_lines(["hello world"], "left", 11, measure)
        assert placed[0].runs[0].x == 1
        assert placed[0].y == 1

    def test_right_and_center(self, measure):
        # "hello" 宽 30
        right = place_lines(["hello"], "right", 11, measure)[0].runs[0]
        center = place_lines(["hello"], "center", 11, measure)[0].runs[0]
        assert right.x == 600 - 30 - 1
        assert center.x == (600 - 30) / 2

    def test_left_right_symmetry(self, measure):
        line = "symmetry check"
        left = place_lines([line], "left", 11, measure)[0].runs[0].x
        right = place_lines([line], "right", 11, measure)[0].runs[0].x
        assert math.isclose(left + right, 600 - measure(line) - 2 * 1)

    def test_vertical_positions_follow_line_height(self, measure):
        placed = place_lines(["a", "b", "c"], "left", 10, measure)
        assert [p.y for p in placed] == [1, 16, 31]


class TestJustify:
    def test_scenario_b_alphabet(self, measure):
        # fixed_width=62, padding=1 -> max_width=60，每行最多 10 个字符
        fixed_width, padding = 62, 1
        max_width = fixed_width - 2 * padding
        text = " ".join(string.ascii_lowercase)
        lines = wrap_text_lines([text], measure, max_width)
        assert len(lines) > 1

        placed = place_lines(lines, "justify", 11, measure, fixed_width=fixed_width, padding=padding)
        for line in placed[:-1]:
            assert line.justified
            assert line.runs[0].x == padding
            last = line.runs[-1]
            assert math.isclose(last.x + last.width, padding + max_width, abs_tol=1e-9)

        final = placed[-1]
        assert not final.justified
        assert len(final.runs) == 1
        assert final.runs[0].x == padding

    def test_inter_word_spacing_is_uniform_within_line(self, measure):
        placed = place_lines(["ab c def", "tail"], "justify", 11, measure)
        runs = placed[0].runs
        gaps = [runs[i + 1].x - (runs[i].x + runs[i].width) for i in range(len(runs) - 1)]
        # maxWidth=598，词宽合计 36 -> 两个空隙各 281
        assert all(math.isclose(g, (598 - 36) / 2) for g in gaps)

    def test_single_word_line_is_left_aligned(self, measure):
        placed = place_lines(["alone", "a b"], "justify", 11, measure)
        assert not placed[0].justified
        assert placed[0].runs[0].x == 1
        assert placed[0].runs[0].text == "alone"

    def test_last_line_not_stretched(self, measure):
        placed = place_lines(["a b", "c d"], "justify", 11, measure)
        assert placed[0].justified
        assert not placed[1].justified
        assert placed[1].runs[0].text == "c d"
        assert placed[1].runs[0].x == 1

    def test_justify_collapses_whitespace_runs(self, measure):
        placed = place_lines(["a   b", "end"], "justify", 11, measure)
        assert [r.text for r in placed[0].runs] == ["a", "b"]
