from __future__ import annotations

import math

from textpng.processors import render_lines
from textpng.style import TextStyle


class TestRenderLines:
    def test_sets_font_and_fill_before_drawing(self, fake_surface):
        style = TextStyle(bold=True, italic=True, font_size=12, color="#112233")
        fake_surface.resize(600, 14)
        render_lines(["hello"], style, fake_surface)
        names = [c[0] for c in fake_surface.calls]
        assert names.index("set_font") < names.index("draw_text")
        assert names.index("set_fill") < names.index("draw_text")
        assert ("set_font", "italic bold 12px system-ui, -apple-system, sans-serif") in fake_surface.calls
        assert ("set_fill", "#112233") in fake_surface.calls

    def test_underline_under_whole_line(self, fake_surface):
        style = TextStyle(underline=True, font_size=10, align="center")
        fake_surface.resize(600, 12)
        render_lines(["hello"], style, fake_surface)
        strokes = fake_surface.named("stroke_line")
        assert len(strokes) == 1
        _, x0, y0, x1, y1, color, width = strokes[0]
        assert x0 == (600 - 30) / 2
        assert x1 - x0 == 30
        # 行顶 y=1，下划线位于 1 + 10 + 2
        assert y0 == y1 == 13
        assert color == style.color
        assert width == 1

    def test_underline_per_word_when_justified(self, fake_surface):
        style = TextStyle(underline=True, font_size=10, align="justify")
        fake_surface.resize(600, 30)
        render_lines(["ab cd ef", "last"], style, fake_surface)
        strokes = fake_surface.named("stroke_line")
        texts = fake_surface.named("draw_text")
        # 第一行 3 个词各一条，最后一行整行一条
        assert len(strokes) == 4
        assert [t[1] for t in texts] == ["ab", "cd", "ef", "last"]
        for stroke in strokes[:3]:
            assert math.isclose(stroke[3] - stroke[1], 12)
            assert stroke[2] == 13
        # 最后一行位于第 2 行：y = 1 + 15，下划线 y = 16 + 12
        assert strokes[3][2] == 28
        assert strokes[3][1] == 1

    def test_no_strokes_without_underline(self, fake_surface):
        fake_surface.resize(600, 12)
        render_lines(["a b c"], TextStyle(font_size=10), fake_surface)
        assert fake_surface.named("stroke_line") == []

    def test_returns_placement(self, fake_surface):
        fake_surface.resize(600, 40)
        placed = render_lines(["one two", "three"], TextStyle(align="right", font_size=10), fake_surface)
        assert [p.runs[0].x for p in placed] == [600 - 42 - 1, 600 - 30 - 1]
