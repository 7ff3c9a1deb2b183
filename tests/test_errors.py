"""Tests for the error hierarchy."""

import pytest

from ntcodec.errors import (
    NTDuplicateKeyError,
    NTError,
    NTIndentationError,
    NTSerializeError,
    NTSyntaxError,
    create_indentation_error,
    create_syntax_error,
)


class TestErrorFormatting:
    def test_line_and_column(self):
        error = NTSyntaxError("Expected ':'", line=3, column=5)
        assert str(error) == "Line 3, column 5: Expected ':'"
        assert error.lineno == 2
        assert error.colno == 4

    def test_line_only(self):
        error = NTSyntaxError("Unexpected line after string", line=2)
        assert str(error) == "Line 2: Unexpected line after string"
        assert error.colno is None

    def test_message_only(self):
        error = NTError("Something failed")
        assert str(error) == "Something failed"
        assert error.lineno is None

    def test_serialize_error_shows_culprit(self):
        error = NTSerializeError(message="Invalid value", culprit=1.5)
        assert str(error) == "Invalid value\n  Culprit: 1.5"


class TestHierarchy:
    @pytest.mark.parametrize(
        "error_cls, code",
        [
            (NTSyntaxError, "SYNTAX_ERROR"),
            (NTIndentationError, "INDENTATION_ERROR"),
            (NTDuplicateKeyError, "DUPLICATE_KEY"),
        ],
    )
    def test_parse_errors_are_syntax_errors(self, error_cls, code):
        error = error_cls("msg", line=1, column=1)
        assert isinstance(error, NTSyntaxError)
        assert isinstance(error, NTError)
        assert error.code == code

    def test_serialize_error_is_not_syntax_error(self):
        assert not isinstance(NTSerializeError("msg"), NTSyntaxError)

    def test_errors_can_be_raised(self):
        with pytest.raises(NTError) as exc_info:
            raise create_syntax_error("Bad", line=4, column=2)
        assert exc_info.value.args == ("Bad",)

    def test_factories(self):
        assert type(create_syntax_error("x", line=1)) is NTSyntaxError
        assert type(create_indentation_error("x", line=1, column=1)) is NTIndentationError
