"""
Tests for exceptions
"""

import pytest

from hexcell.core.exceptions import (
    FailedConversionError,
    HexCellError,
    IncompatibleIndexesError,
    InvalidIndexError,
    InvalidStringError,
)


class TestExceptions:
    """Test exception hierarchy"""

    @pytest.mark.parametrize(
        "error",
        [
            InvalidIndexError(0x1),
            InvalidStringError("x"),
            FailedConversionError(),
            IncompatibleIndexesError("a", "b"),
        ],
    )
    def test_inherits_base(self, error):
        """Test every error is a HexCellError"""
        with pytest.raises(HexCellError):
            raise error

    def test_value_errors(self):
        """Test input validation errors are also ValueErrors"""
        assert issubclass(InvalidIndexError, ValueError)
        assert issubclass(InvalidStringError, ValueError)
        assert not issubclass(FailedConversionError, ValueError)

    def test_invalid_index(self):
        """Test InvalidIndexError keeps the value and shows it in hex"""
        error = InvalidIndexError(0x850DAB63FFFFFFE)
        assert error.value == 0x850DAB63FFFFFFE
        assert str(error) == "Invalid H3 index: 0x850dab63ffffffe"

    def test_invalid_string(self):
        error = InvalidStringError("invalid string")
        assert error.value == "invalid string"
        assert str(error) == "Invalid H3 index string: 'invalid string'"

    def test_failed_conversion(self):
        assert str(FailedConversionError()) == "Failed to convert to an H3 index"

    def test_incompatible_indexes(self):
        """Test both operands are kept"""
        error = IncompatibleIndexesError("left", "right")
        assert error.left == "left"
        assert error.right == "right"
        assert str(error) == "Incompatible H3 indexes: 'left' and 'right'"
