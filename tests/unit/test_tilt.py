"""Unit tests for the tilt engine."""

import pytest

from tiltsim.analysis import is_settled, round_segments
from tiltsim.core.grid import Cell, Direction
from tiltsim.core.tilt import TiltEngine, as_direction, east, north, south, tilt, west
from tiltsim.io import parse_grid


def line(text):
    """One-row grid from glyphs."""
    return parse_grid(text)


class TestSingleLine:
    """Compaction along one row."""

    def test_west_packs_to_edge(self):
        assert west(line("..O.O")) == line("OO...")

    def test_east_packs_to_edge(self):
        assert east(line("O.O..")) == line("...OO")

    def test_fixed_blocks(self):
        assert west(line("#..O#.O.O")) == line("#O..#OO..")

    def test_fixed_blocks_east(self):
        assert east(line("O.#O..O.")) == line(".O#...OO")

    def test_no_round_unchanged(self):
        g = line(".#..#.")
        for d in Direction:
            assert tilt(g, d) == g

    def test_full_run_stays(self):
        assert west(line("OOO#.")) == line("OOO#.")

    def test_boundary_is_obstacle(self):
        assert east(line("OOO")) == line("OOO")

    def test_single_cell(self):
        g = line("O")
        for d in Direction:
            assert tilt(g, d) == g


class TestColumns:
    """Compaction along columns."""

    def test_north(self):
        g = parse_grid(".\nO\n#\n.\nO\n")
        assert north(g) == parse_grid("O\n.\n#\nO\n.\n")

    def test_south(self):
        g = parse_grid("O\n.\n#\nO\n.\n")
        assert south(g) == parse_grid(".\nO\n#\n.\nO\n")

    def test_columns_independent(self):
        g = parse_grid("..\nO.\n.O\n")
        assert north(g) == parse_grid("OO\n..\n..\n")
        assert south(g) == parse_grid("..\n..\nOO\n")


class TestReferenceTilt:
    """North tilt of the reference grid."""

    def test_north_tilt(self, reference_grid):
        expected = parse_grid(
            "OOOO.#.O..\n"
            "OO..#....#\n"
            "OO..O##..O\n"
            "O..#.OO...\n"
            "........#.\n"
            "..#....#.#\n"
            "..O..#.O.O\n"
            "..O.......\n"
            "#....###..\n"
            "#....#....\n"
        )
        assert north(reference_grid) == expected

    def test_input_untouched(self, reference_grid):
        before = parse_grid(str(reference_grid))
        north(reference_grid)
        assert reference_grid == before


class TestProperties:
    """Properties that hold for every grid and direction."""

    @pytest.mark.parametrize("direction", list(Direction))
    def test_conservation(self, random_grid, direction):
        for _ in range(20):
            g = random_grid()
            assert tilt(g, direction).count_round() == g.count_round()

    @pytest.mark.parametrize("direction", list(Direction))
    def test_fixed_cells_never_move(self, random_grid, direction):
        for _ in range(20):
            g = random_grid()
            assert tilt(g, direction).positions(Cell.FIXED) == g.positions(Cell.FIXED)

    @pytest.mark.parametrize("direction", list(Direction))
    def test_idempotent(self, random_grid, direction):
        for _ in range(20):
            once = tilt(random_grid(), direction)
            assert tilt(once, direction) == once

    @pytest.mark.parametrize("direction", list(Direction))
    def test_settled_after_tilt(self, random_grid, direction):
        for _ in range(20):
            assert is_settled(tilt(random_grid(n_rows=7, n_cols=11), direction), direction)

    def test_segment_counts_preserved(self, random_grid):
        """Each fixed-bounded row segment keeps its number of round objects."""
        for _ in range(20):
            g = random_grid()
            out = west(g)
            for r in range(g.n_rows):
                before = [(s.start, s.stop, s.n_round) for s in round_segments(list(g.row(r)))]
                after = [(s.start, s.stop, s.n_round) for s in round_segments(list(out.row(r)))]
                assert before == after


class TestDirectionCoercion:
    """Tests for direction arguments."""

    def test_letters(self):
        assert as_direction("n") is Direction.NORTH
        assert as_direction("E") is Direction.EAST

    def test_enum_passthrough(self):
        assert as_direction(Direction.SOUTH) is Direction.SOUTH

    def test_unknown_direction(self):
        with pytest.raises(ValueError):
            tilt(line("O."), "up")


class TestTiltEngine:
    """Tests for the counting TiltEngine wrapper."""

    def test_counts_tilts(self):
        engine = TiltEngine()
        g = line(".O")
        g = engine.tilt(g, "W")
        g = engine.tilt(g, "E")
        assert engine.n_tilts == 2
        assert g == line(".O")

    def test_reset_statistics(self):
        engine = TiltEngine()
        engine.tilt(line("O"), "N")
        engine.reset_statistics()
        assert engine.n_tilts == 0
