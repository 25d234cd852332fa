"""Unit tests for circle and group constraints."""

import pytest

from suko.core.constraints import CircleConstraint, ConstraintModel, GroupConstraint
from suko.core.grid import SukoGrid
from suko.core.layout import CIRCLE_CELLS

from conftest import EXAMPLE_CIRCLES, EXAMPLE_SOLUTION


def block_sums(grid):
    return [sum(grid[i] for i in cells) for cells in CIRCLE_CELLS.values()]


class TestCircleConstraint:
    """Tests for the four circle sums."""

    def test_matches_block_sums(self):
        """Test against explicit 2x2 block arithmetic."""
        grid = SukoGrid.from_string(EXAMPLE_SOLUTION)
        assert block_sums(grid) == list(EXAMPLE_CIRCLES)
        assert CircleConstraint(*EXAMPLE_CIRCLES).evaluate(grid)

    def test_rejects_wrong_sum(self):
        """Test that any single wrong circle fails."""
        grid = SukoGrid.from_string(EXAMPLE_SOLUTION)
        for i in range(4):
            sums = list(EXAMPLE_CIRCLES)
            sums[i] += 1
            assert not CircleConstraint(*sums).evaluate(grid)

    @pytest.mark.parametrize("cell", range(9))
    def test_single_cell_change(self, cell):
        """Test that changing one cell breaks exactly the circles around it."""
        values = [int(c) for c in EXAMPLE_SOLUTION]
        circles = CircleConstraint(*EXAMPLE_CIRCLES)
        values[cell] += 1

        expected = [name for name, cells in CIRCLE_CELLS.items() if cell in cells]
        assert circles.failures(values) == expected
        assert not circles.evaluate(values)

    def test_center_in_every_circle(self):
        """Test that the center cell affects all four circles."""
        values = [int(c) for c in EXAMPLE_SOLUTION]
        values[4] = 0
        assert len(CircleConstraint(*EXAMPLE_CIRCLES).failures(values)) == 4

    def test_negative_sum(self):
        """Test that circle sums must be non-negative."""
        with pytest.raises(ValueError, match="bottom-left"):
            CircleConstraint(28, 16, -1, 12)
        assert CircleConstraint(0, 0, 0, 0).top_left == 0

    def test_accepts_plain_sequence(self):
        """Test evaluation on a plain tuple."""
        assert CircleConstraint(*EXAMPLE_CIRCLES).evaluate((8, 7, 3, 9, 4, 2, 6, 5, 1))


class TestGroupConstraint:
    """Tests for color groups."""

    def test_two_cells(self):
        """Test the smallest group."""
        grid = SukoGrid.from_string(EXAMPLE_SOLUTION)
        assert GroupConstraint(11, (6, 7)).evaluate(grid)
        assert not GroupConstraint(12, (6, 7)).evaluate(grid)

    def test_nine_cells(self):
        """Test a group covering the whole grid."""
        grid = SukoGrid.from_string(EXAMPLE_SOLUTION)
        assert GroupConstraint(45, tuple(range(9))).evaluate(grid)
        assert not GroupConstraint(44, tuple(range(9))).evaluate(grid)

    def test_from_one_indexed(self):
        """Test conversion from puzzle numbering."""
        group = GroupConstraint.from_one_indexed(13, [2, 3, 6, 9])
        assert group.cells == (1, 2, 5, 8)
        assert group.evaluate(SukoGrid.from_string(EXAMPLE_SOLUTION))

    def test_count_limits_members(self):
        """Test that only the first `count` cells are summed."""
        grid = SukoGrid.from_string(EXAMPLE_SOLUTION)
        group = GroupConstraint(15, (0, 1, 2), count=2)
        assert group.members == (0, 1)
        assert group.evaluate(grid)
        assert not GroupConstraint(15, (0, 1, 2)).evaluate(grid)

    def test_empty_group_is_vacuous(self):
        """Test that a group without members always holds."""
        grid = SukoGrid.from_string(EXAMPLE_SOLUTION)
        assert GroupConstraint(0, ()).evaluate(grid)
        assert GroupConstraint(7, (0, 1), count=0).evaluate(grid)

    def test_cell_out_of_range(self):
        """Test that indices outside the grid are rejected."""
        with pytest.raises(ValueError):
            GroupConstraint(10, (0, 9))
        with pytest.raises(ValueError):
            GroupConstraint(10, (-1, 3))

    def test_bad_count_and_sum(self):
        """Test other invariants."""
        with pytest.raises(ValueError):
            GroupConstraint(10, (0, 1), count=3)
        with pytest.raises(ValueError):
            GroupConstraint(-1, (0, 1))
        with pytest.raises(ValueError):
            GroupConstraint(10, tuple(range(9)) + (0,))


class TestConstraintModel:
    """Tests for the combined model."""

    def test_example_solution(self, example_model):
        """Test that the published solution satisfies every clue."""
        grid = SukoGrid.from_string(EXAMPLE_SOLUTION)
        assert example_model.evaluate(grid)
        assert example_model.failures(grid) == []

    def test_group_failure(self, example_model):
        """Test a grid that matches the circles but not the colors."""
        grid = SukoGrid.from_string("783941652")
        assert example_model.circles.evaluate(grid)
        assert not example_model.evaluate(grid)
        assert example_model.failures(grid) == ["group a", "group b"]

    def test_matrix_only_ignores_groups(self):
        """Test that group content has no effect in matrix-only mode."""
        grid = SukoGrid.from_string("783941652")
        circles = CircleConstraint(*EXAMPLE_CIRCLES)
        for groups in [(), (GroupConstraint(3, (0, 1)),), (GroupConstraint(45, tuple(range(9))),)]:
            model = ConstraintModel(circles, groups, matrix_only=True)
            assert model.evaluate(grid)
            assert model.failures(grid) == []

    def test_matrix_only_still_checks_circles(self):
        """Test that matrix-only mode keeps the circle check."""
        model = ConstraintModel(CircleConstraint(1, 1, 1, 1), matrix_only=True)
        assert not model.evaluate(SukoGrid.from_string(EXAMPLE_SOLUTION))

    def test_no_groups(self):
        """Test a model with circles only."""
        model = ConstraintModel(CircleConstraint(*EXAMPLE_CIRCLES))
        assert model.groups == ()
        assert model.evaluate(SukoGrid.from_string("963852741"))

    def test_too_many_groups(self):
        """Test the group limit."""
        group = GroupConstraint(3, (0, 1))
        with pytest.raises(ValueError):
            ConstraintModel(CircleConstraint(*EXAMPLE_CIRCLES), (group,) * 4)

    def test_groups_stored_as_tuple(self):
        """Test that a list of groups is frozen into a tuple."""
        model = ConstraintModel(CircleConstraint(*EXAMPLE_CIRCLES), [GroupConstraint(3, (0, 1))])
        assert isinstance(model.groups, tuple)

    def test_describe(self, example_model):
        """Test the clue dump shows squares 1-indexed."""
        text = example_model.describe()
        assert "(28)  (16)" in text
        assert "(24)  (12)" in text
        assert "Color a values: sum= 13, squares=  2  3  6  9" in text
        assert "Color c values: sum= 11, squares=  7  8" in text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
