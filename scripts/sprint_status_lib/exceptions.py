"""
Custom exceptions for Sprint Status Reporter.

Centralizes exception definitions to avoid circular imports.
"""


class SprintReporterError(Exception):
    """Base exception for fatal report errors"""
    pass


class ConfigurationError(SprintReporterError):
    """Required configuration value is missing"""
    pass


class CacheReadError(SprintReporterError):
    """Cached sprint snapshot exists but cannot be decoded"""

    def __init__(self, message: str, path=None):
        super().__init__(message)
        self.path = path


class DataIntegrityError(SprintReporterError):
    """Issue record is missing a field the report relies on"""
    pass


class InvalidSprintKeyError(SprintReporterError):
    """Sprint name cannot be used as a cache file name"""
    pass
