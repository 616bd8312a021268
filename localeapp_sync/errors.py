"""
Exception hierarchy for Localeapp Sync.

Every fatal failure of the pipeline is raised as a LocaleappError subclass.
Only the command line entry point catches them.
"""


class LocaleappError(Exception):
    """Base exception for all pipeline failures."""


class MissingDependencyError(LocaleappError):
    """Raised when the localeapp gem is not installed or not recognized."""


class InvalidCredentialError(LocaleappError):
    """Raised when localeapp rejects the project API key."""


class UnsupportedFormatError(LocaleappError):
    """Raised when the requested output format is not supported."""


class TaskConfigError(LocaleappError):
    """Raised for missing or invalid task configuration."""


class LocaleappFetchError(LocaleappError):
    """Raised when ``localeapp pull`` fails or leaves an unreadable log."""


class LocaleDocumentError(LocaleappError):
    """Raised when a pulled locale file does not match its locale code."""


class LocaleappFilesystemError(LocaleappError):
    """Raised when a working directory or locale file operation fails."""
