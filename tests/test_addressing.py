"""
Tests for cell addressing helpers.
"""

import pytest

from xlmatch.addressing import cell_address, column_letter, row_range


class TestAddressing:
    def test_column_letter(self):
        assert column_letter(0) == "A"
        assert column_letter(25) == "Z"
        assert column_letter(26) == "AA"

    def test_cell_address_is_one_based(self):
        assert cell_address(1, 2) == "B3"
        assert cell_address(0, 0) == "A1"

    def test_row_range(self):
        assert row_range(0) == "A1:AA1"
        assert row_range(9) == "A10:AA10"

    def test_negative_indices_rejected(self):
        with pytest.raises(ValueError, match="must not be negative"):
            column_letter(-1)
        with pytest.raises(ValueError, match="must not be negative"):
            cell_address(0, -1)
