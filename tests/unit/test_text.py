"""Unit tests for grid parsing and reporting."""

import pytest

from tiltsim.core.errors import InvalidGrid, ParseError
from tiltsim.core.grid import Cell
from tiltsim.io.text import REFERENCE_GRID, load_grid, parse_grid, render_grid, report


class TestParse:
    """Tests for parse_grid."""

    def test_glyphs(self):
        grid = parse_grid(".#O\n")
        assert grid.rows() == ((Cell.EMPTY, Cell.FIXED, Cell.ROUND),)

    def test_reference_shape(self):
        grid = parse_grid(REFERENCE_GRID)
        assert grid.shape == (10, 10)
        assert grid.count_round() == 18

    def test_trailing_blank_lines_ignored(self):
        assert parse_grid("O.\n.#\n\n\n") == parse_grid("O.\n.#")

    def test_unknown_glyph(self):
        with pytest.raises(ParseError) as excinfo:
            parse_grid("O..\n.x.\n")
        err = excinfo.value
        assert (err.char, err.row, err.col) == ("x", 1, 1)
        assert "row 1, column 1" in str(err)

    def test_form_feed_is_not_a_row_break(self):
        with pytest.raises(ParseError) as excinfo:
            parse_grid("O.\x0c.O\n")
        assert (excinfo.value.char, excinfo.value.row, excinfo.value.col) == ("\x0c", 0, 2)

    @pytest.mark.parametrize("sep", ["\v", "\x1c", "\u2028"])
    def test_unicode_line_breaks_rejected(self, sep):
        with pytest.raises(ParseError):
            parse_grid(f"O.{sep}.O\n")

    def test_crlf_line_endings(self):
        assert parse_grid("O.\r\n.#\r\n") == parse_grid("O.\n.#\n")

    def test_ragged_rows(self):
        with pytest.raises(InvalidGrid):
            parse_grid("O..\n.#\n")

    @pytest.mark.parametrize("text", ["", "\n", "\n\n  \n"])
    def test_empty_input(self, text):
        with pytest.raises(InvalidGrid):
            parse_grid(text)

    def test_load_grid(self, tmp_path):
        path = tmp_path / "grid.txt"
        path.write_text(REFERENCE_GRID, encoding="utf-8")
        assert load_grid(path) == parse_grid(REFERENCE_GRID)


class TestRender:
    """Tests for render_grid and report."""

    def test_render_reference(self):
        assert render_grid(parse_grid(REFERENCE_GRID)) == REFERENCE_GRID

    def test_str_matches_render(self, reference_grid):
        assert str(reference_grid) == render_grid(reference_grid)
        assert reference_grid.render() == REFERENCE_GRID

    def test_round_trip(self, random_grid):
        for _ in range(20):
            g = random_grid(n_rows=5, n_cols=9)
            assert parse_grid(render_grid(g)) == g

    def test_report_scalar(self):
        assert report("north load", 136) == "north load: 136"

    def test_report_grid(self):
        grid = parse_grid("O#\n..\n")
        assert report("state", grid) == "state:\nO#\n..\n"
