"""Unit tests for clipfrag.core.errors module."""

import pytest

from clipfrag.core.errors import (
    ClipboardError,
    ClipfragError,
    ConfigError,
    DecodeError,
    FragmentStallError,
    InputError,
)


class TestClipfragError:
    """Tests for ClipfragError base class."""

    def test_accepts_message(self):
        """ClipfragError can be created with a message."""
        err = ClipfragError("Something went wrong")
        assert err.message == "Something went wrong"

    def test_str_representation(self):
        """String representation is the message."""
        assert str(ClipfragError("Test error message")) == "Test error message"

    @pytest.mark.parametrize(
        "cls", [ConfigError, InputError, ClipboardError]
    )
    def test_subclasses_caught_as_base(self, cls):
        """Every clipfrag error can be caught as ClipfragError."""
        with pytest.raises(ClipfragError) as exc_info:
            raise cls("problem")
        assert exc_info.value.message == "problem"


class TestDecodeError:
    """Tests for DecodeError."""

    def test_lists_tried_encodings(self):
        err = DecodeError(("UTF-8", "Shift_JIS"))
        assert err.encodings == ("UTF-8", "Shift_JIS")
        assert err.message == "Input could not be decoded as any of: UTF-8, Shift_JIS"


class TestFragmentStallError:
    """Tests for FragmentStallError."""

    def test_reports_one_based_line(self):
        """The message numbers lines from 1; the attribute keeps the index."""
        err = FragmentStallError(4, 12_000, 10_240)
        assert err.index == 4
        assert err.units == 12_000
        assert err.max_units == 10_240
        assert err.message.startswith("Line 5 needs 12000 units but the budget is 10240")

    def test_is_clipfrag_error(self):
        assert issubclass(FragmentStallError, ClipfragError)
