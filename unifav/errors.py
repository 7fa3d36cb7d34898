"""Exception taxonomy shared by the search and favorites modules."""


class UniFavError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(UniFavError):
    """The caller supplied no usable input; raised before any I/O."""


class NoWebPageError(ValidationError):
    """A university has no web page, so it cannot become a favorite."""

    def __init__(self, name: str):
        super().__init__(f'"{name}" does not have a valid web page')
        self.name = name


class CorruptStateError(UniFavError):
    """The persisted favorites blob exists but cannot be deserialized."""
