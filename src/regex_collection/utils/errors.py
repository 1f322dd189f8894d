"""Typed exceptions for catalog definition, lookup and configuration."""


class CatalogError(ValueError):
    """Base class for pattern catalog errors."""


class PatternDefinitionError(CatalogError):
    """Raised when a rule pattern fails to compile or a category is registered twice."""


class UnknownCategoryError(CatalogError):
    """Raised when looking up a category that is not part of the catalog."""


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or parsed."""
