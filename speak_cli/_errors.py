"""Errors raised by the generator.

Lookups fail with ``LookupError`` subclasses so callers can catch either
the specific kind or the builtin.
"""


class UnknownLibraryError(LookupError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"{key} is not a valid library")


class UnknownMoodError(LookupError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"{key} is not a valid mood")


class DataFileError(ValueError):
    """A data file exists but cannot be parsed or fails validation."""
