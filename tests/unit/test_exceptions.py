"""Tests for structgen.exceptions module."""

import pytest

from structgen.exceptions import (
    ComparisonError,
    ConfigError,
    IncompatibleComparisonTypesError,
    InvalidComparisonTypeError,
    MetadataError,
    MissingComparisonArgumentError,
    SchemaLoadError,
    StructgenError,
    TemplateError,
)


class TestExceptionHierarchy:
    """Tests for exception hierarchy."""

    def test_exception_hierarchy(self):
        """All exceptions inherit from StructgenError."""
        assert issubclass(ComparisonError, StructgenError)
        assert issubclass(InvalidComparisonTypeError, ComparisonError)
        assert issubclass(IncompatibleComparisonTypesError, ComparisonError)
        assert issubclass(MissingComparisonArgumentError, ComparisonError)
        assert issubclass(MetadataError, StructgenError)
        assert issubclass(SchemaLoadError, StructgenError)
        assert issubclass(TemplateError, StructgenError)
        assert issubclass(ConfigError, StructgenError)

    def test_comparison_error_messages(self):
        """Comparison errors carry their default messages."""
        assert str(InvalidComparisonTypeError()) == "invalid type for comparison"
        assert str(IncompatibleComparisonTypesError()) == "incompatible types for comparison"
        assert str(MissingComparisonArgumentError()) == "missing argument for comparison"

    def test_exceptions_can_be_raised_and_caught(self):
        """All exceptions can be raised and caught as StructgenError."""
        with pytest.raises(StructgenError):
            raise MetadataError("Unknown index")

        with pytest.raises(StructgenError):
            raise InvalidComparisonTypeError()
