"""
Unit tests for mine generation and adjacency counting.
"""
import random

import pytest

from minesweeper import ConfigurationError, adjacent_mine_count, generate_mines, neighbors


# ============================================================================
# Mine Generator Tests
# ============================================================================

class TestGenerateMines:
    """Test random mine placement."""

    def test_exact_count_in_bounds(self, rng: random.Random) -> None:
        """Layout should have exactly the requested in-bounds mines."""
        mines = generate_mines(30, 16, 99, rng=rng)
        assert len(mines) == 99
        for row, col in mines:
            assert 0 <= row < 16
            assert 0 <= col < 30

    def test_avoid_is_never_a_mine(self) -> None:
        """The avoided tile should stay mine-free on every seed."""
        for seed in range(200):
            mines = generate_mines(3, 3, 7, avoid=(1, 1), rng=random.Random(seed))
            assert (1, 1) not in mines
            assert len(mines) == 7

    def test_densest_board_leaves_avoid_safe(self, rng: random.Random) -> None:
        """With one safe tile, that tile must be the avoided one."""
        mines = generate_mines(2, 2, 3, avoid=(0, 1), rng=rng)
        assert mines == {(0, 0), (1, 0), (1, 1)}

    def test_same_seed_same_layout(self) -> None:
        """Seeded sources should reproduce layouts."""
        first = generate_mines(8, 8, 10, rng=random.Random(7))
        second = generate_mines(8, 8, 10, rng=random.Random(7))
        assert first == second

    def test_zero_mines(self, rng: random.Random) -> None:
        assert generate_mines(4, 4, 0, rng=rng) == frozenset()

    def test_layout_is_frozen(self, rng: random.Random) -> None:
        """Mine sets cannot be mutated after creation."""
        assert isinstance(generate_mines(4, 4, 3, rng=rng), frozenset)

    def test_too_many_mines_fails_fast(self) -> None:
        """A full board should raise instead of looping."""
        with pytest.raises(ConfigurationError, match="Too many mines"):
            generate_mines(3, 3, 9)

    def test_keep_clear_tiles_never_mined(self) -> None:
        """Cleared tiles are skipped by every draw."""
        for seed in range(30):
            mines = generate_mines(
                3, 3, 7, avoid=(0, 0), rng=random.Random(seed), keep_clear={(2, 2)}
            )
            assert mines.isdisjoint({(0, 0), (2, 2)})
            assert len(mines) == 7

    def test_keep_clear_too_large_fails_fast(self) -> None:
        """No room left after clearing tiles should raise instead of looping."""
        with pytest.raises(ConfigurationError, match="Cannot place"):
            generate_mines(3, 3, 7, avoid=(0, 0), keep_clear={(1, 1), (2, 2)})

    def test_rows_follow_height(self, rng: random.Random) -> None:
        """Row indices are bounded by height, columns by width."""
        mines = generate_mines(1, 5, 4, rng=rng)
        assert all(col == 0 for _, col in mines)


# ============================================================================
# Adjacency Tests
# ============================================================================

class TestNeighbors:
    """Test neighbor enumeration."""

    def test_center_has_eight(self) -> None:
        assert len(neighbors((1, 1), 3, 3)) == 8

    def test_corner_has_three(self) -> None:
        assert sorted(neighbors((0, 0), 3, 3)) == [(0, 1), (1, 0), (1, 1)]

    def test_edge_has_five(self) -> None:
        assert len(neighbors((0, 1), 3, 3)) == 5

    def test_single_tile_board(self) -> None:
        assert neighbors((0, 0), 1, 1) == []


class TestAdjacentMineCount:
    """Test mine counting around a tile."""

    def test_no_mines(self) -> None:
        assert adjacent_mine_count((1, 1), frozenset()) == 0

    def test_surrounded(self) -> None:
        """A tile ringed by mines should count eight."""
        mines = {(r, c) for r in range(3) for c in range(3)} - {(1, 1)}
        assert adjacent_mine_count((1, 1), mines) == 8

    def test_tile_itself_not_counted(self) -> None:
        """A mine on the tile itself is not a neighbor."""
        assert adjacent_mine_count((1, 1), {(1, 1)}) == 0

    def test_corner_counts_only_real_neighbors(self) -> None:
        """Off-board positions never contribute."""
        assert adjacent_mine_count((0, 0), {(0, 1), (1, 1), (2, 2)}) == 2
