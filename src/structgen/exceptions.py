"""Exception classes for structgen."""

__all__ = [
    "StructgenError",
    "ComparisonError",
    "InvalidComparisonTypeError",
    "IncompatibleComparisonTypesError",
    "MissingComparisonArgumentError",
    "MetadataError",
    "SchemaLoadError",
    "TemplateError",
    "ConfigError",
]


class StructgenError(Exception):
    """Base exception for structgen."""


class ComparisonError(StructgenError):
    """Base error raised by the template comparison helpers."""


class InvalidComparisonTypeError(ComparisonError):
    """Value kind cannot be compared by the requested operation."""

    def __init__(self, message: str = "invalid type for comparison"):
        super().__init__(message)


class IncompatibleComparisonTypesError(ComparisonError):
    """Compared values have different kinds."""

    def __init__(self, message: str = "incompatible types for comparison"):
        super().__init__(message)


class MissingComparisonArgumentError(ComparisonError):
    """Equality comparison called without any candidate."""

    def __init__(self, message: str = "missing argument for comparison"):
        super().__init__(message)


class MetadataError(StructgenError):
    """Table metadata is inconsistent (e.g. a column names an unknown index)."""


class SchemaLoadError(StructgenError):
    """Error loading schema definition files."""


class TemplateError(StructgenError):
    """Error rendering a code template."""


class ConfigError(StructgenError):
    """Error in configuration."""
