"""
Unit tests for the Grid model: access, neighbors, role mutation, reset and clone.
"""

import random

import numpy as np
import pytest

from gridfinder.config import DEFAULT_HEAVY_WEIGHT
from gridfinder.grid import Grid


class TestConstruction:
    """Test sizing and node access."""

    def test_dimensions(self):
        grid = Grid(3, 4)
        assert grid.rows == 3
        assert grid.cols == 4
        assert grid.cell_count == 12
        assert len(list(grid)) == 12

    @pytest.mark.parametrize("rows, cols", [(0, 5), (5, 0), (-1, 3)])
    def test_invalid_dimensions_raise(self, rows, cols):
        with pytest.raises(ValueError):
            Grid(rows, cols)

    def test_get_node_in_bounds(self):
        grid = Grid(3, 3)
        node = grid.get_node(2, 1)
        assert node.position == (2, 1)

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (3, 0), (0, 3)])
    def test_get_node_out_of_bounds(self, row, col):
        assert Grid(3, 3).get_node(row, col) is None

    def test_resize_drops_state(self, open_grid):
        open_grid.toggle_wall(2, 2)
        open_grid.resize(4, 6)
        assert (open_grid.rows, open_grid.cols) == (4, 6)
        assert open_grid.start_node is None
        assert open_grid.end_node is None
        assert not any(node.is_wall for node in open_grid)


class TestNeighbors:
    """Test get_neighbors ordering and filtering."""

    def test_fixed_direction_order(self):
        """Up, right, down, left."""
        grid = Grid(3, 3)
        neighbors = grid.get_neighbors(grid.get_node(1, 1))
        assert [n.position for n in neighbors] == [(0, 1), (1, 2), (2, 1), (1, 0)]

    def test_corner_has_two_neighbors(self):
        grid = Grid(3, 3)
        neighbors = grid.get_neighbors(grid.get_node(0, 0))
        assert [n.position for n in neighbors] == [(0, 1), (1, 0)]

    def test_walls_excluded(self):
        grid = Grid(3, 3)
        grid.set_wall(0, 1, True)
        grid.set_wall(1, 0, True)
        neighbors = grid.get_neighbors(grid.get_node(1, 1))
        assert [n.position for n in neighbors] == [(1, 2), (2, 1)]

    def test_never_walls_or_out_of_bounds(self, rng):
        """Property check over a random maze."""
        grid = Grid(12, 12)
        grid.generate_random_maze(0.4, rng=rng)
        for node in grid:
            neighbors = grid.get_neighbors(node)
            assert len(neighbors) <= 4
            for neighbor in neighbors:
                assert not neighbor.is_wall
                assert grid.in_bounds(neighbor.row, neighbor.col)
                assert abs(neighbor.row - node.row) + abs(neighbor.col - node.col) == 1


class TestRoles:
    """Test start/end invariants."""

    def test_set_start_moves_flag(self):
        grid = Grid(3, 3)
        grid.set_start_node(0, 0)
        grid.set_start_node(1, 1)
        assert grid.get_node(0, 0).is_start is False
        assert grid.start_node is grid.get_node(1, 1)
        assert sum(node.is_start for node in grid) == 1

    def test_set_end_moves_flag(self):
        grid = Grid(3, 3)
        grid.set_end_node(0, 0)
        grid.set_end_node(2, 2)
        assert grid.get_node(0, 0).is_end is False
        assert grid.end_node is grid.get_node(2, 2)
        assert sum(node.is_end for node in grid) == 1

    def test_start_clears_wall_and_weight(self):
        grid = Grid(3, 3)
        grid.set_weight(1, 1, 7)
        grid.set_start_node(1, 1)
        node = grid.get_node(1, 1)
        assert node.weight == 1 and not node.is_weighted

        grid.set_wall(2, 2, True)
        grid.set_end_node(2, 2)
        assert grid.get_node(2, 2).is_wall is False

    def test_end_on_start_cell_leaves_end_only(self):
        """Scenario C: start then end on the same cell."""
        grid = Grid(4, 4)
        grid.set_start_node(2, 2)
        grid.set_end_node(2, 2)
        node = grid.get_node(2, 2)
        assert node.is_end is True
        assert node.is_start is False
        assert grid.start_node is None
        assert grid.end_node is node

    def test_start_on_end_cell_leaves_start_only(self):
        grid = Grid(4, 4)
        grid.set_end_node(1, 1)
        grid.set_start_node(1, 1)
        node = grid.get_node(1, 1)
        assert node.is_start and not node.is_end
        assert grid.end_node is None

    def test_out_of_bounds_is_noop(self):
        grid = Grid(3, 3)
        grid.set_start_node(0, 0)
        grid.set_start_node(5, 5)
        grid.set_end_node(-1, 0)
        assert grid.start_node.position == (0, 0)
        assert grid.end_node is None

    def test_default_start_end(self):
        grid = Grid(8, 12)
        grid.set_default_start_end()
        assert grid.start_node.position == (2, 3)
        assert grid.end_node.position == (6, 9)

    def test_random_start_end_distinct_and_open(self):
        grid = Grid(4, 4)
        for row in range(4):
            grid.set_wall(row, 1, True)
        assert grid.set_random_start_end(random.Random(3)) is True
        assert grid.start_node != grid.end_node
        assert not grid.start_node.is_wall
        assert not grid.end_node.is_wall


class TestWallsAndWeights:
    """Test wall and weight mutation."""

    def test_toggle_wall(self):
        grid = Grid(3, 3)
        grid.toggle_wall(1, 1)
        assert grid.get_node(1, 1).is_wall
        grid.toggle_wall(1, 1)
        assert not grid.get_node(1, 1).is_wall

    def test_walls_refused_on_start_and_end(self, open_grid):
        open_grid.toggle_wall(0, 0)
        open_grid.set_wall(4, 4, True)
        assert not open_grid.start_node.is_wall
        assert not open_grid.end_node.is_wall

    def test_weight_refused_on_start_and_end(self, open_grid):
        open_grid.set_weight(0, 0, 5)
        open_grid.set_weight(4, 4, 5)
        assert open_grid.start_node.weight == 1
        assert open_grid.end_node.weight == 1

    def test_weight_replaces_wall(self):
        grid = Grid(3, 3)
        grid.set_wall(1, 1, True)
        grid.set_weight(1, 1, 4)
        node = grid.get_node(1, 1)
        assert not node.is_wall
        assert node.is_weighted and node.weight == 4

    def test_wall_drops_weight(self):
        grid = Grid(3, 3)
        grid.set_weight(1, 1, 4)
        grid.set_wall(1, 1, True)
        node = grid.get_node(1, 1)
        assert node.weight == 1 and not node.is_weighted

    @pytest.mark.parametrize("weight", [0, -3, 1.5])
    def test_invalid_weight_raises(self, weight):
        with pytest.raises(ValueError):
            Grid(3, 3).set_weight(1, 1, weight)

    def test_weight_defaults_to_heavy(self):
        grid = Grid(3, 3)
        grid.set_weight(1, 1)
        node = grid.get_node(1, 1)
        assert node.weight == DEFAULT_HEAVY_WEIGHT
        assert node.is_weighted

    def test_clear_walls_keeps_roles_and_weights(self, open_grid):
        open_grid.set_wall(1, 1, True)
        open_grid.set_weight(2, 2, 6)
        open_grid.clear_walls()
        assert not any(node.is_wall for node in open_grid)
        assert open_grid.get_node(2, 2).weight == 6
        assert open_grid.start_node.is_start

    def test_clear_weights(self):
        grid = Grid(3, 3)
        grid.set_weight(0, 1, 3)
        grid.clear_weights()
        assert all(node.weight == 1 and not node.is_weighted for node in grid)

    def test_random_weights_skip_special_cells(self, open_grid, rng):
        open_grid.set_wall(2, 2, True)
        placed = open_grid.generate_random_weights(1.0, rng=rng)
        assert placed == 22
        assert open_grid.start_node.weight == 1
        assert open_grid.end_node.weight == 1
        assert open_grid.get_node(2, 2).weight == 1
        for node in open_grid:
            if node.is_weighted:
                assert 2 <= node.weight <= 10


class TestReset:
    """Test reset_path and reset_grid."""

    def test_reset_path_keeps_roles(self, open_grid):
        open_grid.set_wall(1, 1, True)
        open_grid.set_weight(2, 2, 3)
        node = open_grid.get_node(3, 3)
        node.is_visited = True
        node.distance = 5
        node.previous = (3, 2)

        open_grid.reset_path()
        first = open_grid.render()
        open_grid.reset_path()

        assert open_grid.render() == first
        assert node.is_visited is False
        assert node.previous is None
        assert open_grid.get_node(1, 1).is_wall
        assert open_grid.get_node(2, 2).weight == 3
        assert open_grid.start_node.is_start and open_grid.end_node.is_end

    def test_reset_grid_clears_everything(self, open_grid):
        open_grid.set_wall(1, 1, True)
        open_grid.set_weight(2, 2, 3)
        open_grid.reset_grid()
        assert open_grid.start_node is None
        assert open_grid.end_node is None
        for node in open_grid:
            assert not (node.is_start or node.is_end or node.is_wall or node.is_weighted)
            assert node.weight == 1


class TestClone:
    """Test deep-copy isolation."""

    def test_clone_points_into_own_nodes(self, open_grid):
        copy = open_grid.clone()
        assert copy.start_node is copy.get_node(0, 0)
        assert copy.end_node is copy.get_node(4, 4)
        assert copy.start_node is not open_grid.start_node

    def test_source_mutation_does_not_leak(self, open_grid):
        copy = open_grid.clone()
        open_grid.set_wall(2, 2, True)
        open_grid.set_weight(1, 1, 8)
        open_grid.set_start_node(3, 3)
        assert not copy.get_node(2, 2).is_wall
        assert copy.get_node(1, 1).weight == 1
        assert copy.start_node.position == (0, 0)

    def test_clone_mutation_does_not_leak(self, open_grid):
        copy = open_grid.clone()
        copy.set_wall(2, 2, True)
        copy.reset_grid()
        assert open_grid.start_node.position == (0, 0)
        assert not open_grid.get_node(2, 2).is_wall

    def test_clone_preserves_terrain_and_flags(self, open_grid):
        open_grid.set_wall(1, 2, True)
        open_grid.set_weight(3, 1, 4)
        open_grid.get_node(2, 2).is_visited = True
        copy = open_grid.clone()
        assert copy.render() == open_grid.render()
        assert copy.get_node(3, 1).weight == 4
        assert copy.get_node(2, 2).is_visited


class TestLayoutAndSnapshots:
    """Test ASCII layouts and numpy exports."""

    def test_from_layout_roundtrip(self):
        lines = ["S.#", ".5.", "#.E"]
        grid = Grid.from_layout(lines)
        assert grid.start_node.position == (0, 0)
        assert grid.end_node.position == (2, 2)
        assert grid.get_node(1, 1).weight == 5
        assert grid.render().splitlines() == lines

    @pytest.mark.parametrize("lines", [[], ["S.", "."], ["S?E"]])
    def test_bad_layout_raises(self, lines):
        with pytest.raises(ValueError):
            Grid.from_layout(lines)

    def test_to_array_codes(self):
        grid = Grid.from_layout(["S#", ".E"])
        expected = np.array([[2, 1], [0, 3]], dtype=np.int8)
        np.testing.assert_array_equal(grid.to_array(), expected)

    def test_wall_mask_and_weights(self):
        grid = Grid.from_layout(["S#", "3E"])
        np.testing.assert_array_equal(grid.wall_mask(), [[False, True], [False, False]])
        np.testing.assert_array_equal(grid.weight_matrix(), [[1, 1], [3, 1]])
