"""Tests for the Pattern and PatternLibrary classes."""

import pytest
from lifeterm.core.engine import TransitionEngine
from lifeterm.core.grid import Grid
from lifeterm.core.patterns import DEFAULT_SEED, Pattern, PatternLibrary


class TestPattern:
    """Test cases for the Pattern class."""

    def test_initialization(self):
        """Test pattern initialization."""
        cells = [(0, 0), (1, 0), (2, 0)]
        pattern = Pattern("Blinker", cells, "Period-2 oscillator")

        assert pattern.name == "Blinker"
        assert pattern.cells == cells
        assert pattern.description == "Period-2 oscillator"

    def test_get_bounding_box(self):
        """Test bounding box calculation."""
        assert Pattern("Empty", []).get_bounding_box() == (0, 0, 0, 0)
        assert Pattern("Single", [(5, 3)]).get_bounding_box() == (5, 3, 5, 3)
        assert Pattern("Multi", [(1, 2), (3, 1), (2, 4)]).get_bounding_box() == (1, 1, 3, 4)

    def test_get_size(self):
        """Test pattern size calculation."""
        assert Pattern("Single", [(0, 0)]).get_size() == (1, 1)
        assert Pattern("Line", [(0, 0), (1, 0), (2, 0)]).get_size() == (3, 1)
        assert Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)]).get_size() == (2, 2)

    def test_normalize(self):
        """Test pattern normalization."""
        pattern = Pattern("Test", [(5, 3), (6, 4), (7, 3)], "desc")
        normalized = pattern.normalize()

        assert normalized.cells == [(0, 0), (1, 1), (2, 0)]
        assert normalized.name == "Test"
        assert normalized.description == "desc"
        assert pattern.cells == [(5, 3), (6, 4), (7, 3)]

    def test_normalize_empty(self):
        """Test normalizing an empty pattern."""
        assert Pattern("Empty", []).normalize().cells == []

    def test_translate(self):
        """Test shifting a pattern."""
        pattern = Pattern("Line", [(0, 0), (1, 0)])
        assert pattern.translate(5, 3) == [(5, 3), (6, 3)]

    def test_cells_within_clips(self):
        """Test cells outside the grid are dropped."""
        pattern = Pattern("Line", [(0, 0), (1, 0), (2, 0), (3, 0)])
        assert pattern.cells_within(3, 3) == [(0, 0), (1, 0), (2, 0)]
        assert pattern.cells_within(3, 3, offset_x=1, offset_y=2) == [(1, 2), (2, 2)]
        assert pattern.cells_within(3, 3, offset_y=3) == []

    def test_to_grid(self):
        """Test placing a pattern on a fresh grid."""
        grid = Pattern("Blinker", [(0, 0), (1, 0), (2, 0)]).to_grid(10, 10, offset_x=5, offset_y=3)

        assert grid.shape == (10, 10)
        assert grid.live_cells() == [(5, 3), (6, 3), (7, 3)]


class TestPatternLibrary:
    """Test cases for the PatternLibrary class."""

    def test_builtin_patterns(self):
        """Test that built-in patterns are loaded."""
        library = PatternLibrary()
        patterns = library.list_patterns()

        for name in ["Block", "Blinker", "Glider", "Pulsar", "Lightweight Spaceship", "R-pentomino", "Acorn"]:
            assert name in patterns

    def test_get_pattern(self):
        """Test retrieving patterns."""
        library = PatternLibrary()

        glider = library.get_pattern("Glider")
        assert glider is not None
        assert len(glider.cells) == 5
        assert library.get_pattern("NonExistent") is None

    def test_add_pattern(self):
        """Test adding a custom pattern."""
        library = PatternLibrary()
        library.add_pattern(Pattern("Custom", [(0, 0), (1, 1)]))

        assert "Custom" in library.list_patterns()
        assert library.get_patterns_by_category()["Custom"] == ["Custom"]

    def test_add_pattern_replaces_same_name(self):
        """Test adding a pattern under an existing name replaces it."""
        library = PatternLibrary()
        count = len(library.list_patterns())
        library.add_pattern(Pattern("Glider", [(0, 0)]))

        assert len(library.list_patterns()) == count
        assert library.get_pattern("Glider").cells == [(0, 0)]

    def test_get_patterns_by_category(self):
        """Test pattern categorization."""
        categories = PatternLibrary().get_patterns_by_category()

        assert "Blinker" in categories["Oscillators"]
        assert "Glider" in categories["Spaceships"]
        assert "Block" in categories["Still Life"]
        assert "Custom" not in categories

    def test_pulsar_shape(self):
        """Test the pulsar is symmetric with 48 cells in a 13x13 box."""
        pulsar = PatternLibrary().get_pattern("Pulsar")
        cells = set(pulsar.cells)

        assert len(cells) == 48
        assert pulsar.get_size() == (13, 13)
        assert cells == {(12 - x, y) for x, y in cells}
        assert cells == {(x, 12 - y) for x, y in cells}

    @pytest.mark.parametrize("name,period", [("Blinker", 2), ("Toad", 2), ("Beacon", 2), ("Pulsar", 3)])
    def test_oscillator_periods(self, name, period):
        """Test built-in oscillators return to their start."""
        engine = TransitionEngine()
        start = PatternLibrary().get_pattern(name).to_grid(20, 20, 3, 3)

        grid = start
        for _ in range(period):
            grid = engine.advance(grid)
        assert grid == start

    @pytest.mark.parametrize("name", ["Block", "Beehive", "Loaf"])
    def test_still_lifes(self, name):
        """Test built-in still lifes do not change."""
        start = PatternLibrary().get_pattern(name).to_grid(8, 8, 2, 2)
        assert TransitionEngine().advance(start) == start

    def test_compose(self):
        """Test combining patterns with offsets."""
        library = PatternLibrary()
        cells = library.compose([("Block", 0, 0), ("Block", 1, 1)])

        # The overlapping cell (1, 1) is listed once
        assert cells == [(0, 0), (0, 1), (1, 0), (1, 1), (1, 2), (2, 1), (2, 2)]

    def test_compose_unknown(self):
        """Test composing an unknown pattern fails."""
        with pytest.raises(KeyError):
            PatternLibrary().compose([("Nope", 0, 0)])

    def test_default_seed(self):
        """Test the default board: blinker, glider and pulsar."""
        cells = set(PatternLibrary().compose(DEFAULT_SEED))

        assert len(cells) == 3 + 5 + 48
        assert {(0, 1), (1, 1), (2, 1)} <= cells
        assert {(6, 0), (6, 1), (6, 2), (5, 2), (4, 1)} <= cells
        assert {(5, 13), (17, 21), (7, 11), (15, 23)} <= cells
        assert Grid(50, 25, cells).population == 56
