"""
Unit tests for configuration validators.
"""

import pytest

from gridfinder.config import VALID_SKEWS, validate_density, validate_dimensions


class TestValidators:
    """Test the configuration validation helpers."""

    def test_valid_dimensions_pass(self):
        validate_dimensions(1, 1)
        validate_dimensions(50, 80)

    @pytest.mark.parametrize("rows, cols", [(0, 1), (1, 0), (2.5, 3), ("4", 4)])
    def test_invalid_dimensions_raise(self, rows, cols):
        with pytest.raises(ValueError):
            validate_dimensions(rows, cols)

    @pytest.mark.parametrize("density", [0.0, 0.35, 1.0])
    def test_valid_density_passes(self, density):
        validate_density(density)

    @pytest.mark.parametrize("density", [-0.01, 1.01])
    def test_invalid_density_raises(self, density):
        with pytest.raises(ValueError):
            validate_density(density)

    def test_balanced_skew_is_valid(self):
        assert None in VALID_SKEWS
